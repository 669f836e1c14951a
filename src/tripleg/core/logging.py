"""
Logging setup for the CLI and for embedding applications.

`logging.yaml` ships the handlers; the level comes from, in order:
an explicit `level` argument (the CLI's `--log-level`), `TRIPLEG_LOG_LEVEL`,
then `app.log_level` in the settings file.

Parsers log field extraction misses at DEBUG under `tripleg.parsing.parsers`,
so `--log-level debug` is the way to see why a pasted leg defaulted a field.
"""

from __future__ import annotations

import copy
import logging.config

from tripleg.config.settings import get_logging_config, get_settings


def configure_logging(level: str | None = None) -> str:
    """Apply the packaged dictConfig at the resolved level and return that level name."""
    resolved = (level or get_settings().app.log_level).upper()
    if not isinstance(logging.getLevelName(resolved), int):
        raise ValueError(f"Unknown log level: {resolved}")

    # get_logging_config() is cached; never mutate the shared dict.
    config = copy.deepcopy(get_logging_config())
    config.setdefault("root", {})["level"] = resolved
    for handler in config.get("handlers", {}).values():
        if isinstance(handler, dict) and "level" in handler:
            handler["level"] = resolved

    logging.config.dictConfig(config)
    return resolved
