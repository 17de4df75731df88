"""Configuration Module for dumpstage

Typed settings with environment variable support, and the merge of shared
adapter defaults into per-run configuration.

Example:
    from dumpstage.config import StagingSettings, merge_defaults

    settings = StagingSettings.from_env(prefix="DUMPSTAGE")
    config = merge_defaults(shared_defaults, RedisConfig(path="/var/lib/redis"))
"""

from dumpstage.config.defaults import merge_defaults
from dumpstage.config.env_loader import EnvLoader
from dumpstage.config.settings import COMPRESSIONS, StagingSettings, default_tmp_path

__all__ = [
    "EnvLoader",
    "StagingSettings",
    "COMPRESSIONS",
    "default_tmp_path",
    "merge_defaults",
]
