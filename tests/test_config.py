"""Tests for GameSettings."""

import pytest

from chesslite.config import GameMode, GameSettings
from chesslite.core.enums import Color
from chesslite.engine.selector import Difficulty


class TestGameSettings:
    def test_defaults(self) -> None:
        s = GameSettings()
        assert s.mode == GameMode.TWO_PLAYER
        assert s.difficulty == Difficulty.MEDIUM
        assert s.computer_color == Color.BLACK
        assert s.think_delay_ms == 600

    def test_vs_computer(self) -> None:
        s = GameSettings.vs_computer(Difficulty.HARD, think_delay_ms=0)
        assert s.mode == GameMode.VS_COMPUTER
        assert s.difficulty == Difficulty.HARD
        assert s.think_delay_ms == 0

    def test_validate(self) -> None:
        GameSettings(think_delay_ms=0).validate()
        with pytest.raises(ValueError):
            GameSettings(think_delay_ms=-5).validate()
