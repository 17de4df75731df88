"""Base class for database adapters.

An adapter turns one data store into a file in the model's staging directory.
Subclasses implement ``perform()`` as a fixed sequence of steps, starting with
``super().perform()`` and ending with ``log_event("finished")``.
"""

import re
import time
from abc import ABC, abstractmethod
from typing import List, Optional

from dumpstage.exceptions import DatabaseError
from dumpstage.logger import Logger, get_logger
from dumpstage.model import Model
from dumpstage.utilities import CommandRunner, Filesystem, LocalFilesystem, ShellRunner

_EVENT_MESSAGES = {
    "started": "Started...",
    "finished": "Finished!",
}


class Database(ABC):
    """Abstract base class for database adapters

    Collaborators are injected so each step can be exercised in isolation.
    """

    def __init__(
        self,
        model: Model,
        database_id: Optional[str] = None,
        runner: Optional[CommandRunner] = None,
        filesystem: Optional[Filesystem] = None,
        logger: Optional[Logger] = None,
    ):
        """Initialize the adapter.

        Args:
            model: Staging context the dump is written into
            database_id: Distinguishes several adapters of one kind in a model
            runner: Shell command runner (default: ShellRunner)
            filesystem: Filesystem primitives (default: LocalFilesystem)
            logger: Logger for lifecycle events
        """
        self.model = model
        self.database_id = re.sub(r"\W", "_", str(database_id)) if database_id else None
        self.logger = logger or get_logger("dumpstage")
        self.runner = runner or ShellRunner(logger=self.logger)
        self.filesystem = filesystem or LocalFilesystem()
        self.dump_path = str(model.dump_path)
        self._dump_filename: Optional[str] = None

    @property
    def database_name(self) -> str:
        """Name used in log output, e.g. 'Redis (cache)'"""
        name = self.__class__.__name__
        return f"{name} ({self.database_id})" if self.database_id else name

    @property
    def dump_filename(self) -> str:
        """Base name of the staged file, e.g. 'Redis' or 'Redis-cache'

        When the model holds several adapters of this class and none was given
        an id, one is generated so their files cannot overwrite each other.
        """
        if self._dump_filename is None:
            if not self.database_id and self._has_siblings():
                self.database_id = self._generate_database_id()
                self.logger.warning(
                    str(DatabaseError(
                        code="DATABASE_ID_MISSING",
                        message=(
                            f"Several {self.__class__.__name__} databases are configured "
                            f"in one model, so each needs a database_id. Generated "
                            f"'{self.database_id}' for this dump and continuing."
                        ),
                    ))
                )
            name = self.__class__.__name__
            self._dump_filename = f"{name}-{self.database_id}" if self.database_id else name
        return self._dump_filename

    def _siblings(self) -> List["Database"]:
        return [db for db in self.model.databases if type(db) is type(self) and db is not self]

    def _has_siblings(self) -> bool:
        return bool(self._siblings())

    def _generate_database_id(self) -> str:
        """Five clock digits, stepped past any id a sibling already holds"""
        taken = {db.database_id for db in self._siblings()}
        candidate = int(str(time.time_ns())[-5:])
        while f"{candidate:05d}" in taken:
            candidate = (candidate + 1) % 100000
        return f"{candidate:05d}"

    @abstractmethod
    def perform(self) -> None:
        """Run the dump; subclasses extend this."""
        self.log_event("started")
        self.prepare()

    def prepare(self) -> None:
        """Make sure the staging directory exists"""
        self.filesystem.makedirs(self.dump_path)

    def log_event(self, action: str) -> None:
        self.logger.info(f"{self.database_name} {_EVENT_MESSAGES[action]}")
