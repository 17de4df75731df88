"""Database adapters.

Usage:
    from dumpstage.database import Redis, RedisConfig
"""

from dumpstage.database.base import Database
from dumpstage.database.redis import Redis, RedisConfig

__all__ = [
    "Database",
    "Redis",
    "RedisConfig",
]
