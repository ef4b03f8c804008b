"""Computer opponent: material evaluation, minimax search, tiered selection.

The Qt worker lives in :mod:`chesslite.engine.qt_bridge` and is imported
from there, so this package stays usable without a Qt event loop.
"""

from chesslite.engine.evaluation import PIECE_VALUES, capture_value, evaluate
from chesslite.engine.search import MinimaxSearch, search
from chesslite.engine.selector import Difficulty, select_move

__all__ = [
    "Difficulty",
    "MinimaxSearch",
    "PIECE_VALUES",
    "capture_value",
    "evaluate",
    "search",
    "select_move",
]
