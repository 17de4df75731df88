"""Collaborator protocols used by database adapters and compressors.

Adapters receive these as constructor arguments. Any object with the right
methods qualifies (structural subtyping), which is how tests substitute mocks.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CommandRunner(Protocol):
    """Protocol for running shell commands.

    Example:
        class EchoRunner:
            def run(self, command: str) -> str:
                return "OK"
            def utility(self, name: str) -> str:
                return name

        runner: CommandRunner = EchoRunner()
    """

    def run(self, command: str) -> str:
        """Run a shell command and wait for it.

        Args:
            command: Shell-interpretable command string

        Returns:
            Standard output with surrounding whitespace stripped

        Raises:
            UtilityError: If the command exits non-zero
        """
        ...

    def utility(self, name: str) -> str:
        """Resolve the full path of an executable.

        Raises:
            UtilityError: If the executable cannot be found
        """
        ...


@runtime_checkable
class Filesystem(Protocol):
    """Protocol for the filesystem primitives staging needs."""

    def exists(self, path: str) -> bool:
        ...

    def copy(self, src: str, dst: str) -> None:
        ...

    def makedirs(self, path: str) -> None:
        """Create a directory and its parents; existing directories are fine."""
        ...
