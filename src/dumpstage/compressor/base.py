"""Compressor interface and the stock compressors.

A compressor does not touch files itself. It hands back a shell fragment that
compresses a file argument to stdout (``<command> -c '<file>'``) plus the
extension, leading dot included, to add to the staged file name.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from dumpstage.logger import Logger, get_logger
from dumpstage.utilities import CommandRunner, ShellRunner


class Compressor(ABC):
    """Abstract base class for compressors"""

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger or get_logger("dumpstage")

    @property
    def compressor_name(self) -> str:
        return self.__class__.__name__

    @property
    @abstractmethod
    def command(self) -> str:
        """Shell fragment that compresses to stdout"""
        pass

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension including the leading dot (e.g. '.gz')"""
        pass

    def compress_with(self, target_name: str) -> Tuple[str, str]:
        """Provide the compression command for one staged file

        Args:
            target_name: Base name of the file being staged (used for logging)

        Returns:
            Tuple of (command, extension)
        """
        self.logger.info(f"Using {self.compressor_name} compressor", target=target_name)
        return self.command, self.extension


class _LevelCompressor(Compressor):
    """Compressor driving a utility that accepts -1 .. -9"""

    utility_name: str = ""
    file_extension: str = ""

    def __init__(
        self,
        level: Optional[int] = None,
        runner: Optional[CommandRunner] = None,
        logger: Optional[Logger] = None,
    ):
        super().__init__(logger=logger)
        if level is not None and not 1 <= level <= 9:
            raise ValueError("Compression level must be between 1 and 9")
        self.level = level
        runner = runner or ShellRunner(logger=self.logger)
        self.utility = runner.utility(self.utility_name)

    def _options(self) -> str:
        return f" -{self.level}" if self.level else ""

    @property
    def command(self) -> str:
        return f"{self.utility}{self._options()}"

    @property
    def extension(self) -> str:
        return self.file_extension


class Gzip(_LevelCompressor):
    """gzip compression, optionally --rsyncable"""

    utility_name = "gzip"
    file_extension = ".gz"

    def __init__(
        self,
        level: Optional[int] = None,
        rsyncable: bool = False,
        runner: Optional[CommandRunner] = None,
        logger: Optional[Logger] = None,
    ):
        self.rsyncable = rsyncable
        super().__init__(level=level, runner=runner, logger=logger)

    def _options(self) -> str:
        opts = super()._options()
        if self.rsyncable:
            opts += " --rsyncable"
        return opts


class Bzip2(_LevelCompressor):
    utility_name = "bzip2"
    file_extension = ".bz2"


class Xz(_LevelCompressor):
    utility_name = "xz"
    file_extension = ".xz"


class Custom(Compressor):
    """User-supplied compression command and extension

    Example:
        Custom(command="pbzip2 -p4", extension=".bz2")
    """

    def __init__(self, command: str, extension: str, logger: Optional[Logger] = None):
        super().__init__(logger=logger)
        if not command:
            raise ValueError("Custom compressor requires a command")
        self._command = command
        self._extension = extension

    @property
    def command(self) -> str:
        return self._command

    @property
    def extension(self) -> str:
        return self._extension


_COMPRESSORS = {
    "gzip": Gzip,
    "bzip2": Bzip2,
    "xz": Xz,
}


def create_compressor(
    name: str,
    level: Optional[int] = None,
    runner: Optional[CommandRunner] = None,
    logger: Optional[Logger] = None,
) -> Optional[Compressor]:
    """Build the compressor for a compression setting

    Args:
        name: gzip, bzip2, xz or none
        level: Optional compression level (1-9)

    Returns:
        Compressor instance, or None for 'none'
    """
    key = name.lower()
    if key == "none":
        return None
    if key not in _COMPRESSORS:
        raise ValueError(f"Compression must be one of: {', '.join([*_COMPRESSORS, 'none'])}")
    return _COMPRESSORS[key](level=level, runner=runner, logger=logger)
