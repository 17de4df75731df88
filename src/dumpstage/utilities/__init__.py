"""Process and filesystem collaborators.

Usage:
    from dumpstage.utilities import ShellRunner, LocalFilesystem

    runner = ShellRunner()
    runner.run("redis-cli SAVE")
"""

from dumpstage.utilities.base import CommandRunner, Filesystem
from dumpstage.utilities.shell import LocalFilesystem, ShellRunner

__all__ = [
    # Protocols
    "CommandRunner",
    "Filesystem",
    # Implementations
    "ShellRunner",
    "LocalFilesystem",
]
