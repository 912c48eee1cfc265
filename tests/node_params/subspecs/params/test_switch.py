"""Tests for tri-state switches and the resync guards."""

from typing import Callable

import pytest

from node_params.subspecs.client import ActiveMode, DarkMode, OfflineMode, PassiveMode
from node_params.subspecs.journaldb import Algorithm
from node_params.subspecs.params import (
    Switch,
    fatdb_switch_to_bool,
    mode_switch_to_mode,
    tracing_switch_to_bool,
)
from node_params.subspecs.storage import PersistedDefaults
from node_params.types import InvalidTokenError, ResyncRequiredError
from tests.node_params.helpers import make_user_defaults


def _tracing(switch: Switch, defaults: PersistedDefaults) -> bool:
    return tracing_switch_to_bool(switch, defaults)


def _fatdb(switch: Switch, defaults: PersistedDefaults) -> bool:
    return fatdb_switch_to_bool(switch, defaults, Algorithm.ARCHIVE)


GUARDS = [
    pytest.param(_tracing, "tracing", "TraceDB", id="tracing"),
    pytest.param(_fatdb, "fat_db", "FatDB", id="fatdb"),
]


class TestSwitchParsing:
    """Tests for parsing switch tokens."""

    @pytest.mark.parametrize("text", ["on", "off", "auto"])
    def test_tokens(self, text: str) -> None:
        assert str(Switch.from_str(text)) == text

    @pytest.mark.parametrize("text", ["yes", "ON", "true", ""])
    def test_rejects_unknown(self, text: str) -> None:
        with pytest.raises(InvalidTokenError) as excinfo:
            Switch.from_str(text)
        assert excinfo.value.message == f"Invalid switch value: {text}"

    def test_default_is_auto(self) -> None:
        assert Switch.default() is Switch.AUTO


@pytest.mark.parametrize("guard, field, feature", GUARDS)
class TestGuards:
    """Every cell of the first-launch x switch x persisted table."""

    @pytest.mark.parametrize(
        "is_first_launch, switch, persisted, expected",
        [
            (True, Switch.ON, False, True),
            (True, Switch.ON, True, True),
            (True, Switch.OFF, False, False),
            (True, Switch.OFF, True, False),
            (True, Switch.AUTO, False, False),
            (True, Switch.AUTO, True, True),
            (False, Switch.ON, True, True),
            (False, Switch.OFF, False, False),
            (False, Switch.OFF, True, False),
            (False, Switch.AUTO, False, False),
            (False, Switch.AUTO, True, True),
        ],
    )
    def test_resolves(
        self,
        guard: Callable[[Switch, PersistedDefaults], bool],
        field: str,
        feature: str,
        is_first_launch: bool,
        switch: Switch,
        persisted: bool,
        expected: bool,
    ) -> None:
        defaults = make_user_defaults(is_first_launch=is_first_launch, **{field: persisted})
        assert guard(switch, defaults) is expected

    def test_enabling_on_existing_database_requires_resync(
        self,
        guard: Callable[[Switch, PersistedDefaults], bool],
        field: str,
        feature: str,
    ) -> None:
        defaults = make_user_defaults(is_first_launch=False, **{field: False})
        with pytest.raises(ResyncRequiredError) as excinfo:
            guard(Switch.ON, defaults)
        assert excinfo.value.feature == feature
        assert excinfo.value.message == f"{feature} resync required"


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_fatdb_ignores_algorithm(algorithm: Algorithm) -> None:
    """The pruning algorithm does not influence the fat database decision."""
    defaults = make_user_defaults(fat_db=True)
    assert fatdb_switch_to_bool(Switch.AUTO, defaults, algorithm) is True
    assert fatdb_switch_to_bool(Switch.OFF, defaults, algorithm) is False


class TestModeSwitch:
    """Tests for choosing the operating mode."""

    @pytest.mark.parametrize("persisted", [ActiveMode(), PassiveMode(), DarkMode(), OfflineMode()])
    def test_none_uses_persisted(self, persisted: object) -> None:
        defaults = make_user_defaults(mode=persisted)  # type: ignore[arg-type]
        assert mode_switch_to_mode(None, defaults) == persisted

    def test_requested_wins(self) -> None:
        defaults = make_user_defaults(mode=DarkMode())
        assert mode_switch_to_mode(OfflineMode(), defaults) == OfflineMode()
