"""Game management layer: session state machine and players.

Quick start::

    from chesslite.config import GameSettings
    from chesslite.game import GameSession

    session = GameSession(GameSettings.vs_computer())
    session.start()
    session.click(6, 4)
    session.click(4, 4)
    session.play_computer_move()
"""

from chesslite.game.interfaces import GameEndReason, GamePhase, IPlayer
from chesslite.game.player import AIPlayer, HumanPlayer
from chesslite.game.session import GameEvents, GameSession

__all__ = [
    # Interfaces
    "GameEndReason",
    "GamePhase",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameEvents",
    "GameSession",
    "HumanPlayer",
]
