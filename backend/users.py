# backend/users.py
# Credential store: username -> password hash
import sqlite3

from . import db
from .errors import DuplicateUsername
from .models import User


def create_user(username, password_hash):
    try:
        user_id, _ = db.execute_db(
            "INSERT INTO users (username, password_hash) VALUES (?, ?)",
            (username, password_hash)
        )
    except sqlite3.IntegrityError:
        raise DuplicateUsername(f"username {username!r} already exists")
    return User(user_id, username, password_hash)


def get_by_username(username):
    row = db.query_db(
        "SELECT id, username, password_hash FROM users WHERE username=?",
        (username,), one=True
    )
    return User.from_row(row) if row else None

