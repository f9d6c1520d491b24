"""Game rules for MEEPLE CATCHER."""

from meeple.game.bag import Bag
from meeple.game.catalog import GAMES, PIECES, GameDefinition, PieceKind
from meeple.game.engine import MeepleCatcher
from meeple.game.input import InputAdapter, InputFrame
from meeple.game.loop import GameLoop
from meeple.game.session import MissEvent, SessionState

__all__ = [
    "Bag",
    "GAMES",
    "PIECES",
    "GameDefinition",
    "PieceKind",
    "MeepleCatcher",
    "InputAdapter",
    "InputFrame",
    "GameLoop",
    "MissEvent",
    "SessionState",
]
