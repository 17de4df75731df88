"""Base exception classes for dumpstage.

All dumpstage exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery
"""

from typing import Any, Dict, Optional


class DumpstageError(Exception):
    """Base exception for all dumpstage errors.

    Attributes:
        code: Machine-readable error code (e.g., "REDIS_COMMAND_ERROR")
        message: Human-readable error message
        details: Optional additional context for debugging/recovery
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(DumpstageError):
    """Configuration problems, including use of deprecated settings.

    Deprecations are reported by logging an instance of this class as a
    warning; the replacement setting is applied and the run continues.
    """

    def __init__(
        self, message: str, code: str = "CONFIGURATION_ERROR", details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(code=code, message=message, details=details)


class UtilityError(DumpstageError):
    """Raised when an external utility cannot be found or exits non-zero."""

    pass


class DatabaseError(DumpstageError):
    """Base for errors raised while dumping and staging a database."""

    pass


class CommandError(DatabaseError):
    """The store accepted a command but did not answer with success.

    The message always carries the command that was issued and the
    response that came back.
    """

    def __init__(self, command: str, response: str, code: str = "REDIS_COMMAND_ERROR"):
        self.command = command
        self.response = response
        super().__init__(
            code=code,
            message=(
                "Could not invoke the Redis SAVE command.\n"
                f"Command was: {command}\n"
                f"Response was: {response}"
            ),
            details={"command": command, "response": response},
        )


class NotFoundError(DatabaseError):
    """The expected dump file does not exist when staging begins."""

    def __init__(self, path: Optional[str], code: str = "REDIS_DUMP_NOT_FOUND"):
        self.path = path
        super().__init__(
            code=code,
            message=f"Redis database dump not found\nFile path was {path}",
            details={"path": path},
        )
