"""
Factory functions for constructing test fixtures.

Each builder returns a minimal valid value that tests override piecemeal.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from node_params.subspecs.client import ActiveMode, Mode
from node_params.subspecs.journaldb import Algorithm
from node_params.subspecs.storage import UserDefaults


def make_user_defaults(
    *,
    is_first_launch: bool = False,
    pruning: Algorithm = Algorithm.OVERLAY_RECENT,
    tracing: bool = False,
    fat_db: bool = False,
    mode: Mode | None = None,
) -> UserDefaults:
    """Create a defaults record; unlike `UserDefaults()` it describes an existing database."""
    return UserDefaults(
        is_first_launch=is_first_launch,
        pruning=pruning,
        tracing=tracing,
        fat_db=fat_db,
        mode=mode if mode is not None else ActiveMode(),
    )


FIRST_LAUNCH = UserDefaults()
"""Defaults of a node that has never started."""

EXISTING_DATABASE = make_user_defaults()
"""Defaults of a node that started before with every feature off."""


def make_spec_dict(name: str = "Custom", **overrides: Any) -> dict[str, Any]:
    """Create a minimal specification document in the file layout."""
    data: dict[str, Any] = {
        "name": name,
        "engine": {"InstantSeal": None},
        "params": {
            "accountStartNonce": "0x0",
            "maximumExtraDataSize": "0x20",
            "minGasLimit": "0x1388",
            "networkID": "0x45",
        },
        "genesis": {
            "seal": {
                "ethereum": {
                    "nonce": "0x0000000000000042",
                    "mixHash": "0x" + "00" * 32,
                }
            },
            "difficulty": "0x20000",
            "author": "0x" + "00" * 20,
            "timestamp": "0x00",
            "parentHash": "0x" + "00" * 32,
            "extraData": "0x",
            "gasLimit": "0x5B8D80",
        },
        "accounts": {
            "0x" + "00" * 19 + "01": {"balance": "1"},
        },
    }
    data.update(overrides)
    return data


def write_spec_file(directory: Path, filename: str = "spec.json", **overrides: Any) -> Path:
    """Write a specification document to disk, as JSON or YAML by extension."""
    path = directory / filename
    data = make_spec_dict(**overrides)
    if path.suffix in (".yaml", ".yml"):
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
    else:
        path.write_text(json.dumps(data), encoding="utf-8")
    return path
