"""dumpstage - Database dump staging for backup pipelines.

This package provides the pieces a backup run needs to turn a live data
store into a file ready for upload:
- database: Adapters (Redis) that dump and stage a data store
- compressor: gzip/bzip2/xz/custom compression of staged files
- utilities: Shell command runner and filesystem access
- config: Typed settings, .env loading and defaults merging
- logger: Logging with session tracking and JSON support
- exceptions: Exception classes with structured error info
"""

__version__ = "1.0.0"

from dumpstage.logger import (
    Logger,
    StructuredLogger,
    get_logger,
    create_logger,
)

from dumpstage.exceptions import (
    DumpstageError,
    ConfigurationError,
    UtilityError,
    DatabaseError,
    CommandError,
    NotFoundError,
)

from dumpstage.config import (
    EnvLoader,
    StagingSettings,
    merge_defaults,
)

from dumpstage.compressor import (
    Compressor,
    Gzip,
    Bzip2,
    Xz,
    Custom,
    create_compressor,
)

from dumpstage.model import Model

from dumpstage.database import (
    Database,
    Redis,
    RedisConfig,
)

__all__ = [
    "__version__",
    # Logger
    "Logger",
    "StructuredLogger",
    "get_logger",
    "create_logger",
    # Exceptions
    "DumpstageError",
    "ConfigurationError",
    "UtilityError",
    "DatabaseError",
    "CommandError",
    "NotFoundError",
    # Config
    "EnvLoader",
    "StagingSettings",
    "merge_defaults",
    # Compressors
    "Compressor",
    "Gzip",
    "Bzip2",
    "Xz",
    "Custom",
    "create_compressor",
    # Model and adapters
    "Model",
    "Database",
    "Redis",
    "RedisConfig",
]
