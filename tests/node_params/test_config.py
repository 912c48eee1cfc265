"""Tests for environment configuration."""

import importlib
from pathlib import Path

import pytest

from node_params import config


def test_test_environment_enables_debug() -> None:
    assert config.NODE_PARAMS_ENV == "test"
    assert config.DEBUG_BY_DEFAULT is True


def test_rejects_unknown_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NODE_PARAMS_ENV", "staging")
    try:
        with pytest.raises(ValueError, match="Invalid NODE_PARAMS_ENV"):
            importlib.reload(config)
    finally:
        monkeypatch.setenv("NODE_PARAMS_ENV", "test")
        importlib.reload(config)


def test_data_dir_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("NODE_PARAMS_DATA_DIR", str(tmp_path))
    try:
        assert importlib.reload(config).DATA_DIR == tmp_path
    finally:
        monkeypatch.delenv("NODE_PARAMS_DATA_DIR")
        importlib.reload(config)
