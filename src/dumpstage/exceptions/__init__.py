"""Common exceptions for dumpstage.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery

Usage:
    from dumpstage.exceptions import (
        DumpstageError,
        ConfigurationError,
        CommandError,
        NotFoundError,
    )
"""

from dumpstage.exceptions.base import (
    CommandError,
    ConfigurationError,
    DatabaseError,
    DumpstageError,
    NotFoundError,
    UtilityError,
)

__all__ = [
    # Base exceptions
    "DumpstageError",
    "ConfigurationError",
    "UtilityError",
    # Database errors
    "DatabaseError",
    "CommandError",
    "NotFoundError",
]
