# backend/auth.py
"""
Auth service and the /auth blueprint.

Tokens are flask_jwt_extended access tokens: the subject is the user id
(as a string) and the username travels as an extra claim. Expiry comes from
JWT_ACCESS_TOKEN_EXPIRES (7 days); there is no revocation list.
"""
import logging

import jwt as pyjwt
from flask import Blueprint, jsonify, request
from flask_jwt_extended import create_access_token, decode_token, get_jwt, get_jwt_identity
from flask_jwt_extended.exceptions import JWTExtendedException
from werkzeug.security import check_password_hash, generate_password_hash

from . import users
from .errors import InvalidCredentials, InvalidToken, MissingAuth, ValidationError, error_response

logger = logging.getLogger("finance-backend")

auth_bp = Blueprint("auth", __name__)


def issue_token(user):
    return create_access_token(identity=str(user.id), additional_claims={"username": user.username})


def signup(username, password):
    # hash first so a duplicate never touches the stored credential
    user = users.create_user(username, generate_password_hash(password))
    logger.info(f"New user created: {user.username} (id={user.id})")
    return user, issue_token(user)


def login(username, password):
    user = users.get_by_username(username)
    if not user or not check_password_hash(user.password_hash, password):
        logger.warning(f"Failed login for {username!r}")
        raise InvalidCredentials("Invalid credentials")
    return user, issue_token(user)


def verify(token):
    """Return (user_id, username) embedded in a token or raise InvalidToken."""
    if not token:
        raise MissingAuth("Missing token")
    try:
        claims = decode_token(token)
        return int(claims["sub"]), claims["username"]
    except (pyjwt.PyJWTError, JWTExtendedException, KeyError, ValueError) as e:
        raise InvalidToken(f"Invalid token: {e}")


def current_identity():
    """(user_id, username) for the request already checked by @jwt_required."""
    return int(get_jwt_identity()), get_jwt().get("username")


def read_credentials():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise ValidationError("JSON object body required")
    username = data.get("username")
    password = data.get("password")
    if not username or not password:
        raise ValidationError("username and password required")
    if not isinstance(username, str) or not isinstance(password, str):
        raise ValidationError("username and password must be strings")
    return username, password


# ---------------- JWT callbacks ----------------
def register_jwt_callbacks(jwt_manager):
    @jwt_manager.unauthorized_loader
    def missing_token(reason):
        return error_response(MissingAuth(reason))

    @jwt_manager.invalid_token_loader
    def invalid_token(reason):
        return error_response(InvalidToken(reason))

    @jwt_manager.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return error_response(InvalidToken("Token has expired"))


# ---------------- Routes ----------------
@auth_bp.route('/signup', methods=['POST'])
def signup_route():
    username, password = read_credentials()
    user, token = signup(username, password)
    return jsonify({"user": user.to_dict(), "token": token}), 201


@auth_bp.route('/login', methods=['POST'])
def login_route():
    username, password = read_credentials()
    user, token = login(username, password)
    logger.info(f"User logged in: {user.username}")
    return jsonify({"user": user.to_dict(), "token": token})
