"""Piece value object with its FEN letter and board figurine."""

from __future__ import annotations

from dataclasses import dataclass

from chesslite.core.enums import Color, PieceType

# Per kind: lower-case FEN letter and the white figurine. Black figurines
# follow the white block in Unicode (U+2654..U+2659, then U+265A..U+265F).
_KIND_GLYPHS: dict[PieceType, tuple[str, str]] = {
    PieceType.PAWN: ("p", "♙"),
    PieceType.KNIGHT: ("n", "♘"),
    PieceType.BISHOP: ("b", "♗"),
    PieceType.ROOK: ("r", "♖"),
    PieceType.QUEEN: ("q", "♕"),
    PieceType.KING: ("k", "♔"),
}
_BLACK_FIGURINE_SHIFT = 6

_KIND_BY_LETTER = {letter: kind for kind, (letter, _) in _KIND_GLYPHS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """A side and a kind; two equal pieces are interchangeable."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        letter = _KIND_GLYPHS[self.piece_type][0]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Parse a FEN letter; upper case is white, lower case black."""
        kind = _KIND_BY_LETTER.get(char.lower()) if len(char) == 1 else None
        if kind is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, kind)

    @property
    def symbol(self) -> str:
        figurine = _KIND_GLYPHS[self.piece_type][1]
        if self.color == Color.BLACK:
            return chr(ord(figurine) + _BLACK_FIGURINE_SHIFT)
        return figurine
