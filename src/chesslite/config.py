"""User-configurable game settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chesslite.core.enums import Color
from chesslite.engine.selector import Difficulty


class GameMode(Enum):
    """Who sits at the board."""

    TWO_PLAYER = "two_player"
    VS_COMPUTER = "vs_computer"


@dataclass
class GameSettings:
    """All settings chosen before a game starts."""

    mode: GameMode = GameMode.TWO_PLAYER
    difficulty: Difficulty = Difficulty.MEDIUM
    computer_color: Color = Color.BLACK

    # Pause before the computer answers, so its move is visible.
    think_delay_ms: int = 600

    @classmethod
    def vs_computer(
        cls,
        difficulty: Difficulty = Difficulty.MEDIUM,
        computer_color: Color = Color.BLACK,
        think_delay_ms: int = 600,
    ) -> GameSettings:
        return cls(
            mode=GameMode.VS_COMPUTER,
            difficulty=difficulty,
            computer_color=computer_color,
            think_delay_ms=think_delay_ms,
        )

    def validate(self) -> None:
        if self.think_delay_ms < 0:
            raise ValueError(f"think_delay_ms must be >= 0, got {self.think_delay_ms}")
