"""Backup model: the staging context a database adapter works in.

The model is owned by whatever schedules backups; adapters only read its
staging directory and compressor, and register themselves in ``databases``.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from dumpstage.compressor import Compressor
from dumpstage.config import StagingSettings, default_tmp_path

if TYPE_CHECKING:
    from dumpstage.database.base import Database


@dataclass
class Model:
    """Staging context for one backup trigger

    Attributes:
        trigger: Trigger name, used as the staging sub-directory
        label: Human-readable description
        tmp_path: Root of all staging directories
        compressor: Compressor applied to staged dumps, if any
        databases: Adapters registered with this model
    """

    trigger: str
    label: str = ""
    tmp_path: Path = field(default_factory=default_tmp_path)
    compressor: Optional[Compressor] = None
    databases: List["Database"] = field(default_factory=list)

    @property
    def dump_path(self) -> Path:
        """Directory where database dumps are staged"""
        return Path(self.tmp_path) / self.trigger / "databases"

    def add_database(self, database: "Database") -> "Database":
        self.databases.append(database)
        return database

    @classmethod
    def from_settings(
        cls, settings: StagingSettings, compressor: Optional[Compressor] = None
    ) -> "Model":
        return cls(
            trigger=settings.trigger,
            label=settings.label,
            tmp_path=settings.tmp_path,
            compressor=compressor,
        )
