"""Shell command execution and local filesystem access.

``ShellRunner`` is the only place dumpstage starts external processes.
"""

import os
import shutil
import subprocess
from typing import Dict, Optional

from dumpstage.exceptions import UtilityError
from dumpstage.logger import Logger, get_logger


class ShellRunner:
    """Run shell commands synchronously and resolve utility paths.

    Example:
        runner = ShellRunner(utility_paths={"redis-cli": "/opt/redis/bin/redis-cli"})
        cli = runner.utility("redis-cli")
        response = runner.run(f"{cli} SAVE")
    """

    def __init__(
        self,
        utility_paths: Optional[Dict[str, str]] = None,
        logger: Optional[Logger] = None,
    ):
        """Initialize the runner.

        Args:
            utility_paths: Explicit executable paths keyed by utility name,
                consulted before searching PATH
            logger: Logger for commands and their stderr output
        """
        self.utility_paths = dict(utility_paths or {})
        self.logger = logger or get_logger("dumpstage")

    def utility(self, name: str) -> str:
        """Return the path for ``name``, from configuration or PATH.

        Raises:
            UtilityError: If the utility is not configured and not on PATH
        """
        configured = self.utility_paths.get(name)
        if configured:
            return configured

        found = shutil.which(name)
        if not found:
            raise UtilityError(
                code="UTILITY_NOT_FOUND",
                message=f"Could not locate '{name}'. Make sure it is installed "
                        f"and on PATH, or configure its full path.",
                details={"utility": name},
            )
        return found

    def run(self, command: str) -> str:
        """Run ``command`` through the shell and return its stripped stdout.

        Anything written to stderr by a successful command is logged as a
        warning.

        Raises:
            UtilityError: If the command exits non-zero or cannot be started
        """
        self.logger.debug("Running system command", command=command)

        try:
            result = subprocess.run(
                command,
                shell=True,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise UtilityError(
                code="COMMAND_FAILED",
                message=f"Failed to execute system command: {e}",
                details={"command": command},
            ) from e

        stderr = result.stderr.strip()

        if result.returncode != 0:
            raise UtilityError(
                code="COMMAND_FAILED",
                message=f"'{command}' returned exit code {result.returncode}",
                details={
                    "command": command,
                    "returncode": result.returncode,
                    "stderr": stderr,
                },
            )

        for line in stderr.splitlines():
            self.logger.warning(line, command=command)

        return result.stdout.strip()


class LocalFilesystem:
    """Filesystem implementation backed by the local OS."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def copy(self, src: str, dst: str) -> None:
        shutil.copy(src, dst)

    def makedirs(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)
