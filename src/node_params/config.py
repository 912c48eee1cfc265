"""
Global configuration for node parameter resolution.

This module contains environment-specific settings read once at import.
"""

import os
from pathlib import Path

_SUPPORTED_ENVS: list[str] = ["prod", "test"]

NODE_PARAMS_ENV = os.environ.get("NODE_PARAMS_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Defaults to 'prod'."""

if NODE_PARAMS_ENV not in _SUPPORTED_ENVS:
    raise ValueError(
        f"Invalid NODE_PARAMS_ENV environment variable: '{NODE_PARAMS_ENV}'. "
        f"Supported values: {_SUPPORTED_ENVS}"
    )

DATA_DIR = Path(
    os.environ.get("NODE_PARAMS_DATA_DIR", Path.home() / ".local" / "share" / "node-params")
)
"""Directory holding the persisted defaults database."""

USER_DEFAULTS_FILENAME = "user_defaults.sqlite"
"""File name of the persisted defaults database inside `DATA_DIR`."""

DEBUG_BY_DEFAULT = NODE_PARAMS_ENV == "test"
"""Whether the CLI logs at DEBUG level without `--verbose`."""
