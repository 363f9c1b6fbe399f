"""Database package."""

from .db import configure_engine, get_session, init_db
from .kv import KeyValueStore
from .models import KeyValueRecord

__all__ = ["configure_engine", "get_session", "init_db", "KeyValueStore", "KeyValueRecord"]
