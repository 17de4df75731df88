"""Staging settings for a backup run

Describes where a run collects its dumps and how they are compressed.
Supports environment variable overrides with a configurable prefix.
"""

from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from dumpstage.config.env_loader import EnvLoader

COMPRESSIONS = ("gzip", "bzip2", "xz", "none")


def default_tmp_path() -> Path:
    """Root of all staging directories (~/Backup/.tmp)"""
    return Path.home() / "Backup" / ".tmp"


class StagingSettings(BaseModel):
    """Settings for one backup trigger

    The staging directory for database dumps is
    ``tmp_path / trigger / "databases"``.
    """

    trigger: str = Field(
        min_length=1,
        description="Trigger name identifying the backup model (e.g., 'nightly_redis')"
    )
    label: str = Field(
        default="",
        description="Human-readable description of the backup model"
    )
    tmp_path: Path = Field(
        default_factory=default_tmp_path,
        description="Root directory under which each trigger stages its files"
    )

    # Compression settings
    compression: str = Field(
        default="gzip",
        description="Compression algorithm: gzip, bzip2, xz, or none"
    )
    compression_level: Optional[int] = Field(
        default=None,
        description="Compression level (1-9); the utility's default when unset",
        ge=1,
        le=9
    )

    @field_validator('trigger')
    @classmethod
    def validate_trigger(cls, v: str) -> str:
        """Triggers become directory names, so no path separators"""
        if "/" in v or v in (".", ".."):
            raise ValueError("Trigger must be a plain name, not a path")
        return v

    @field_validator('compression')
    @classmethod
    def validate_compression(cls, v: str) -> str:
        """Validate compression algorithm"""
        if v.lower() not in COMPRESSIONS:
            raise ValueError(f"Compression must be one of: {', '.join(COMPRESSIONS)}")
        return v.lower()

    @classmethod
    def from_env(
        cls,
        prefix: str = "DUMPSTAGE",
        env: Optional[Mapping[str, str]] = None,
    ) -> "StagingSettings":
        """Create settings from environment variables

        Args:
            prefix: Environment variable prefix
            env: Mapping to read instead of the process environment (and .env)

        Environment variables:
            {prefix}_TRIGGER: Trigger name (required)
            {prefix}_LABEL: Model label
            {prefix}_TMP_PATH: Staging root
            {prefix}_COMPRESSION: gzip, bzip2, xz or none
            {prefix}_COMPRESSION_LEVEL: 1-9

        Returns:
            StagingSettings instance
        """
        if env is None:
            env = EnvLoader().load()
        prefix = prefix.rstrip('_')

        level = env.get(f"{prefix}_COMPRESSION_LEVEL")
        tmp_path = env.get(f"{prefix}_TMP_PATH")

        return cls(
            trigger=env.get(f"{prefix}_TRIGGER", ""),
            label=env.get(f"{prefix}_LABEL", ""),
            tmp_path=Path(tmp_path) if tmp_path else default_tmp_path(),
            compression=env.get(f"{prefix}_COMPRESSION", "gzip"),
            compression_level=level or None,
        )
