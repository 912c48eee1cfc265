"""Tests for journal database pruning algorithms."""

import pytest

from node_params.subspecs.journaldb import Algorithm
from node_params.types import InvalidTokenError


class TestFromStr:
    """Tests for parsing user-facing names."""

    @pytest.mark.parametrize(
        "text, algorithm",
        [
            ("archive", Algorithm.ARCHIVE),
            ("light", Algorithm.EARLY_MERGE),
            ("fast", Algorithm.OVERLAY_RECENT),
            ("basic", Algorithm.REF_COUNTED),
        ],
    )
    def test_names(self, text: str, algorithm: Algorithm) -> None:
        assert Algorithm.from_str(text) is algorithm
        assert str(algorithm) == text

    @pytest.mark.parametrize("text", ["auto", "Archive", "overlayrecent", ""])
    def test_rejects_unknown(self, text: str) -> None:
        with pytest.raises(InvalidTokenError) as excinfo:
            Algorithm.from_str(text)
        assert excinfo.value.message == f"Invalid pruning method: {text}"


def test_internal_names() -> None:
    assert [a.as_internal_name_str() for a in Algorithm] == [
        "archive",
        "earlymerge",
        "overlayrecent",
        "refcounted",
    ]


def test_stability() -> None:
    assert {a for a in Algorithm if a.is_stable()} == {Algorithm.ARCHIVE, Algorithm.OVERLAY_RECENT}


def test_default() -> None:
    assert Algorithm.default() is Algorithm.OVERLAY_RECENT
