"""
Logger interface for dumpstage.

Adapters, compressors, the shell runner and the entry point only log
through these four levels, so any object providing them (a test double
included) can be injected.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Levels a backup run logs at.

    Keyword arguments are structured context (``command=...``,
    ``target=...``) that implementations render next to the message.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Commands about to be executed."""

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Lifecycle events and compressor selection."""

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Deprecated settings, generated ids, stderr of successful commands."""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Failures that end the run."""
