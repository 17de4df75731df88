"""Redis database adapter

Optionally asks the server to SAVE through redis-cli, then stages the
resulting RDB file, either copied as-is or streamed through the model's
compressor.

Usage:
    from dumpstage.database import Redis, RedisConfig

    redis = Redis(model, RedisConfig(path="/var/lib/redis", invoke_save=True))
    redis.perform()
"""

import os
from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from dumpstage.config import EnvLoader, merge_defaults
from dumpstage.database.base import Database
from dumpstage.exceptions import CommandError, ConfigurationError, NotFoundError
from dumpstage.logger import Logger, get_logger
from dumpstage.model import Model
from dumpstage.utilities import CommandRunner, Filesystem

logger = get_logger("dumpstage")

# legacy name -> replacement
DEPRECATED_FIELDS = {
    "utility_path": "redis_cli_utility",
}

_ENV_FIELDS = {
    "DATABASE_ID": "database_id",
    "NAME": "name",
    "PATH": "path",
    "PASSWORD": "password",
    "HOST": "host",
    "PORT": "port",
    "SOCKET": "socket",
    "INVOKE_SAVE": "invoke_save",
    "ADDITIONAL_OPTIONS": "additional_options",
    "CLI_UTILITY": "redis_cli_utility",
    "UTILITY_PATH": "utility_path",
}


class RedisConfig(BaseModel):
    """Configuration for one Redis dump

    Only ``name`` has a default; ``redis_cli_utility`` is looked up on PATH
    by the adapter when left unset. When ``socket`` is set, ``host`` and
    ``port`` are ignored. Empty strings are values, not unset: an empty
    ``password`` still renders as ``-a ''``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    database_id: Optional[str] = None
    name: str = "dump"
    path: Optional[str] = None
    password: Optional[str] = None
    host: Optional[str] = None
    port: Optional[str] = None
    socket: Optional[str] = None
    invoke_save: Optional[bool] = None
    additional_options: Union[List[str], str, None] = None
    redis_cli_utility: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def migrate_deprecated(cls, data: Any) -> Any:
        """Move legacy settings onto their replacements, with a warning"""
        if not isinstance(data, dict):
            return data
        if not any(old in data for old in DEPRECATED_FIELDS):
            return data

        data = dict(data)
        for old, new in DEPRECATED_FIELDS.items():
            if old not in data:
                continue
            value = data.pop(old)
            err = ConfigurationError(
                f"Redis.{old} has been deprecated as of dumpstage 1.0.0. "
                f"Use Redis.{new} instead.",
                code="DEPRECATED_SETTING",
                details={"setting": old, "replacement": new},
            )
            logger.warning(str(err), setting=old, replacement=new)
            # an explicit replacement value wins over the legacy one
            data.setdefault(new, value)
        return data

    @field_validator("database_id", "port", mode="before")
    @classmethod
    def coerce_to_str(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @classmethod
    def from_env(
        cls,
        prefix: str = "DUMPSTAGE_REDIS",
        env: Optional[Mapping[str, str]] = None,
    ) -> "RedisConfig":
        """Create configuration from environment variables

        Only variables that are present become explicitly set fields, so the
        result can be merged over shared defaults.

        Environment variables:
            {prefix}_PATH, {prefix}_NAME, {prefix}_DATABASE_ID,
            {prefix}_PASSWORD, {prefix}_HOST, {prefix}_PORT, {prefix}_SOCKET,
            {prefix}_INVOKE_SAVE, {prefix}_ADDITIONAL_OPTIONS,
            {prefix}_CLI_UTILITY (legacy: {prefix}_UTILITY_PATH)
        """
        if env is None:
            env = EnvLoader().load()
        prefix = prefix.rstrip("_")

        data = {
            field: env[f"{prefix}_{key}"]
            for key, field in _ENV_FIELDS.items()
            if f"{prefix}_{key}" in env
        }
        return cls(**data)


class Redis(Database):
    """Stage the RDB dump of a Redis server"""

    def __init__(
        self,
        model: Model,
        config: Optional[RedisConfig] = None,
        defaults: Optional[RedisConfig] = None,
        runner: Optional[CommandRunner] = None,
        filesystem: Optional[Filesystem] = None,
        logger: Optional[Logger] = None,
    ):
        """Initialize the adapter.

        Args:
            model: Staging context
            config: Settings for this dump
            defaults: Shared settings that ``config`` is merged over
            runner: Shell command runner
            filesystem: Filesystem primitives
            logger: Logger for lifecycle events
        """
        config = merge_defaults(defaults, config or RedisConfig())
        super().__init__(
            model,
            database_id=config.database_id,
            runner=runner,
            filesystem=filesystem,
            logger=logger,
        )
        if not config.redis_cli_utility:
            config = config.model_copy(
                update={"redis_cli_utility": self.runner.utility("redis-cli")}
            )
        self.config = config

    @property
    def redis_cli_utility(self) -> Optional[str]:
        return self.config.redis_cli_utility

    def perform(self) -> None:
        super().perform()
        if self.config.invoke_save:
            self.invoke_save_command()
        self.copy_dump()
        self.log_event("finished")

    def invoke_save_command(self) -> None:
        """Ask the server to write its dataset to disk.

        redis-cli prints "OK" (the protocol reply is "+OK"); the runner strips
        trailing whitespace, so success is any response ending in "OK".

        Raises:
            CommandError: If the response does not end with "OK"
        """
        command = self.redis_save_cmd()
        response = self.runner.run(command)
        if not response.endswith("OK"):
            raise CommandError(command, response)

    def copy_dump(self) -> None:
        """Stage the dump file, compressed when the model has a compressor.

        Raises:
            NotFoundError: If the dump file does not exist
        """
        src_path = self.source_path
        if src_path is None or not self.filesystem.exists(src_path):
            raise NotFoundError(src_path)

        dst_path = os.path.join(self.dump_path, f"{self.dump_filename}.rdb")
        compressor = self.model.compressor

        if compressor:
            command, ext = compressor.compress_with(self.dump_filename)
            self.runner.run(f"{command} -c '{src_path}' > '{dst_path}{ext}'")
        else:
            self.filesystem.copy(src_path, dst_path)

    @property
    def source_path(self) -> Optional[str]:
        """Location of the server's dump file, None when no path is configured"""
        if not self.config.path:
            return None
        return os.path.join(self.config.path, f"{self.config.name}.rdb")

    def redis_save_cmd(self) -> str:
        fragments = [
            self.redis_cli_utility,
            self.password_option(),
            self.connectivity_options(),
            self.user_options(),
        ]
        # absent fragments still take their slot between separators
        return " ".join(f or "" for f in fragments) + " SAVE"

    def password_option(self) -> Optional[str]:
        if self.config.password is not None:
            return f"-a '{self.config.password}'"
        return None

    def connectivity_options(self) -> str:
        if self.config.socket is not None:
            return f"-s '{self.config.socket}'"

        opts = []
        if self.config.host is not None:
            opts.append(f"-h '{self.config.host}'")
        if self.config.port is not None:
            opts.append(f"-p '{self.config.port}'")
        return " ".join(opts)

    def user_options(self) -> str:
        options = self.config.additional_options
        if options is None:
            return ""
        if isinstance(options, str):
            return options
        return " ".join(options)
