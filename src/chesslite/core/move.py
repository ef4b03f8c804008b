"""Move value object (coordinate representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chesslite.core.types import Square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable (from_row, from_col, to_row, to_col) record on a single board."""

    from_row: int
    from_col: int
    to_row: int
    to_col: int

    @property
    def from_square(self) -> Square:
        return self.from_row, self.from_col

    @property
    def to_square(self) -> Square:
        return self.to_row, self.to_col

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return square_name(self.from_row, self.from_col) + square_name(
            self.to_row, self.to_col
        )

    @classmethod
    def from_squares(cls, from_sq: Square, to_sq: Square) -> Move:
        return cls(from_sq[0], from_sq[1], to_sq[0], to_sq[1])

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse coordinate notation, e.g. 'e2e4'."""
        text = text.strip()
        if len(text) != 4:
            raise ValueError(f"Invalid move text: {text!r}")
        try:
            return cls.from_squares(parse_square(text[:2]), parse_square(text[2:]))
        except ValueError:
            raise ValueError(f"Invalid move text: {text!r}") from None
