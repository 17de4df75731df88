#!/usr/bin/env python3
"""Run a single Redis dump-and-stage from environment configuration

Meant to be called by cron or any external scheduler; one invocation
stages one dump and exits.

Environment:
    DUMPSTAGE_TRIGGER, DUMPSTAGE_TMP_PATH, DUMPSTAGE_COMPRESSION, ...
    DUMPSTAGE_REDIS_PATH, DUMPSTAGE_REDIS_INVOKE_SAVE, ...
"""

import sys
from typing import Mapping, Optional

from pydantic import ValidationError

from dumpstage.compressor import create_compressor
from dumpstage.config import EnvLoader, StagingSettings
from dumpstage.database import Redis, RedisConfig
from dumpstage.exceptions import DumpstageError
from dumpstage.logger import get_logger
from dumpstage.model import Model
from dumpstage.utilities import ShellRunner

logger = get_logger("dumpstage")


def run_redis_backup(env: Mapping[str, str]) -> Redis:
    """Build the model and adapter from ``env`` and perform the dump

    Returns:
        The adapter that ran
    """
    settings = StagingSettings.from_env(prefix="DUMPSTAGE", env=env)
    runner = ShellRunner(logger=logger)
    compressor = create_compressor(
        settings.compression,
        level=settings.compression_level,
        runner=runner,
        logger=logger,
    )
    model = Model.from_settings(settings, compressor=compressor)

    logger.info(f"Staging directory: {model.dump_path}", trigger=model.trigger)

    redis = model.add_database(
        Redis(
            model,
            RedisConfig.from_env(prefix="DUMPSTAGE_REDIS", env=env),
            runner=runner,
            logger=logger,
        )
    )
    redis.perform()
    return redis


def main(env: Optional[Mapping[str, str]] = None) -> int:
    """Entry point; returns the process exit code"""
    if env is None:
        env = EnvLoader().load()

    try:
        run_redis_backup(env)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except DumpstageError as e:
        logger.error(str(e), code=e.code)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
