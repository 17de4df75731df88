"""Environment loader with optional .env support.

Values are layered in a fixed order:
1) .env file (if it exists)
2) OS environment variables
3) Explicit overrides (highest precedence)

The .env file is the one passed in, else the one named by
``DUMPSTAGE_ENV_FILE``, else ``./.env``. Cron jobs run from arbitrary
working directories, so pointing at the file through the environment is
the usual setup.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, MutableMapping, Optional

from dotenv import dotenv_values

ENV_FILE_VARIABLE = "DUMPSTAGE_ENV_FILE"


class EnvLoader:
    """Load environment-style key/value pairs with .env support."""

    def __init__(self, env_file: Optional[Path | str] = None) -> None:
        self.env_file = Path(env_file) if env_file else None

    def resolve_env_file(self) -> Path:
        if self.env_file:
            return self.env_file
        named = os.environ.get(ENV_FILE_VARIABLE)
        return Path(named) if named else Path.cwd() / ".env"

    def load(self, overrides: Optional[Mapping[str, str]] = None) -> MutableMapping[str, str]:
        """Precedence (low -> high): .env file, OS env vars, overrides"""
        env_path = self.resolve_env_file()
        data: MutableMapping[str, str] = {}

        if env_path.is_file():
            data.update({k: v for k, v in dotenv_values(env_path).items() if v is not None})

        data.update(os.environ)
        data.update({k: str(v) for k, v in (overrides or {}).items()})
        return data


__all__ = ["EnvLoader", "ENV_FILE_VARIABLE"]
