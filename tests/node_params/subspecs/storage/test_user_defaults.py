"""Tests for the persisted defaults record."""

from datetime import timedelta
from typing import Any

import pytest

from node_params.subspecs.client import ActiveMode, DarkMode, OfflineMode, PassiveMode
from node_params.subspecs.journaldb import Algorithm
from node_params.subspecs.storage import UserDefaults
from node_params.types import StorageError


class TestFreshRecord:
    """Tests for a node that never ran."""

    def test_defaults(self) -> None:
        defaults = UserDefaults()
        assert defaults.is_first_launch is True
        assert defaults.pruning is Algorithm.OVERLAY_RECENT
        assert defaults.tracing is False
        assert defaults.fat_db is False
        assert defaults.mode == ActiveMode()

    def test_empty_document_is_fresh(self) -> None:
        assert UserDefaults.from_json_dict({}) == UserDefaults()


class TestJsonLayout:
    """Tests for the on-disk document."""

    def test_passive_writes_both_timings(self) -> None:
        defaults = UserDefaults(
            is_first_launch=False,
            pruning=Algorithm.ARCHIVE,
            tracing=True,
            mode=PassiveMode(timedelta(seconds=30), timedelta(seconds=90)),
        )
        assert defaults.to_json_dict() == {
            "is_first_launch": False,
            "pruning": "archive",
            "tracing": True,
            "fat_db": False,
            "mode": "passive",
            "mode.timeout": 30,
            "mode.alarm": 90,
        }

    def test_dark_writes_timeout_only(self) -> None:
        data = UserDefaults(mode=DarkMode(timedelta(seconds=45))).to_json_dict()
        assert data["mode.timeout"] == 45
        assert "mode.alarm" not in data

    @pytest.mark.parametrize(
        "defaults",
        [
            UserDefaults(),
            UserDefaults(is_first_launch=False, pruning=Algorithm.REF_COUNTED, fat_db=True),
            UserDefaults(mode=PassiveMode(timedelta(seconds=1), timedelta(seconds=2))),
            UserDefaults(mode=DarkMode(timedelta(seconds=3))),
            UserDefaults(mode=OfflineMode()),
        ],
    )
    def test_document_restores_record(self, defaults: UserDefaults) -> None:
        assert UserDefaults.from_json_dict(defaults.to_json_dict()) == defaults


class TestCorruption:
    """Tests for documents that cannot be used."""

    @pytest.mark.parametrize(
        "data",
        [
            [],
            "defaults",
            {"pruning": "everything"},
            {"mode": "sleepy"},
            {"mode": "passive", "mode.timeout": "soon"},
            {"mode": "dark", "mode.timeout": 10**20},
            {"mode": "passive", "mode.alarm": 10**20},
            {"tracing": "yes"},
            {"is_first_launch": 1},
        ],
    )
    def test_rejected(self, data: Any) -> None:
        with pytest.raises(StorageError):
            UserDefaults.from_json_dict(data)
