"""Core app configuration and database."""

from parksys.core.config import get_settings, settings
from parksys.core.database import Database, get_db

__all__ = ["Database", "get_settings", "settings", "get_db"]
