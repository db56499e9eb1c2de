"""Tests for RuleOptions presets and validation."""

import pytest

from atomic_chess.game.interfaces import RuleOptions


class TestRuleOptions:
    def test_defaults(self) -> None:
        options = RuleOptions()
        assert options.fifty_move_limit == 50
        assert options.threefold_repetition

    def test_presets(self) -> None:
        assert RuleOptions.standard() == RuleOptions()
        assert not RuleOptions.without_repetition().threefold_repetition

    @pytest.mark.parametrize("limit", [0, -5])
    def test_invalid_limit(self, limit: int) -> None:
        with pytest.raises(ValueError):
            RuleOptions(fifty_move_limit=limit)

    def test_repr(self) -> None:
        assert "fifty_move_limit=50" in repr(RuleOptions())
