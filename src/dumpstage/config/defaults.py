"""Merging of shared defaults into per-run configuration.

Defaults are plain configuration objects; nothing is stored on classes or
at module level. A run's configuration is ``merge_defaults(defaults, own)``.
"""

from typing import Optional, TypeVar

from pydantic import BaseModel

ConfigT = TypeVar("ConfigT", bound=BaseModel)


def merge_defaults(base: Optional[ConfigT], override: ConfigT) -> ConfigT:
    """Return a new config with ``override``'s explicitly set fields over ``base``.

    Only fields that were passed when ``override`` was built count as set, so a
    field left at its declared default never hides a value from ``base``.
    Neither argument is modified.

    Args:
        base: Shared defaults, or None
        override: Per-adapter configuration

    Returns:
        The merged configuration
    """
    if base is None:
        return override

    updates = {name: getattr(override, name) for name in override.model_fields_set}
    return base.model_copy(update=updates)


__all__ = ["merge_defaults"]
