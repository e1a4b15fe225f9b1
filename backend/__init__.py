"""Personal finance tracker backend (Flask + SQLite)."""
from .app import create_app

__all__ = ["create_app"]
