"""Locate the ``shopnet.toml`` that applies to the current run."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "shopnet.toml"
CONFIG_ENV_VAR = "SHOPNET_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for a run started in *start* (default: cwd).

    ``SHOPNET_CONFIG`` wins when set, even if it names a missing file (then
    no config applies). Otherwise the nearest ``shopnet.toml`` in *start* or
    one of its parents is used.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    return next(
        (d / CONFIG_FILENAME for d in (here, *here.parents) if (d / CONFIG_FILENAME).is_file()),
        None,
    )
