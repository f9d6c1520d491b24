"""Static catalog of board games and the pieces they can be missing."""

from dataclasses import dataclass
from typing import Dict, List, Tuple

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class PieceKind:
    """A collectible piece that can complete an incomplete box."""

    id: str
    name: str
    glyph: str
    color: str


@dataclass(frozen=True)
class GameDefinition:
    """A board game that falls as a box."""

    id: str
    name: str
    short: str
    color: str
    background: str
    piece_kind: str  # PieceKind.id required when the box is incomplete


PIECES: Dict[str, PieceKind] = {
    piece.id: piece for piece in (
        PieceKind("red-station", "Gare rouge", "🏠", "#ef4444"),
        PieceKind("yellow-wagon", "Wagon jaune", "🚃", "#fbbf24"),
        PieceKind("green-cube", "Cube vert", "🟩", "#4ade80"),
        PieceKind("wood-ox", "Bœuf en bois", "🐄", "#d97706"),
        PieceKind("blue-tile", "Tuile bleue", "🔷", "#60a5fa"),
        PieceKind("gold-token", "Jeton or", "🪙", "#fde68a"),
        PieceKind("bird-card", "Carte oiseau", "🦅", "#fb923c"),
        PieceKind("firework", "Feu d'artifice", "🎆", "#f472b6"),
        PieceKind("farmer", "Fermier", "👩‍🌾", "#84cc16"),
        PieceKind("age3-card", "Carte Age III", "📜", "#a855f7"),
        PieceKind("rabbit-card", "Carte lapin", "🐰", "#ec4899"),
        PieceKind("egg", "Oeuf", "🥚", "#fef3c7"),
    )
}

PIECE_IDS: List[str] = list(PIECES)

GAMES: List[GameDefinition] = [
    GameDefinition("aventuriers-du-rail", "Les Aventuriers du Rail", "AVT.RAIL",
                   "#ef4444", "#7f1d1d", "red-station"),
    GameDefinition("catan", "Catan", "CATAN", "#f59e0b", "#78350f", "yellow-wagon"),
    GameDefinition("carcassonne", "Carcassonne", "CARCA.", "#84cc16", "#3f6212", "farmer"),
    GameDefinition("7-wonders", "7 Wonders", "7 WOND.", "#a855f7", "#581c87", "age3-card"),
    GameDefinition("pandemie", "Pandemie", "PANDEM.", "#06b6d4", "#164e63", "green-cube"),
    GameDefinition("splendor", "Splendor", "SPLEND.", "#fbbf24", "#92400e", "gold-token"),
    GameDefinition("azul", "Azul", "AZUL", "#60a5fa", "#1e3a5f", "blue-tile"),
    GameDefinition("agricola", "Agricola", "AGRICO.", "#a78bfa", "#4c1d95", "wood-ox"),
    GameDefinition("wingspan", "Wingspan", "WINGSP.", "#fb923c", "#7c2d12", "bird-card"),
    GameDefinition("dixit", "Dixit", "DIXIT", "#f472b6", "#831843", "rabbit-card"),
    GameDefinition("hanabi", "Hanabi", "HANABI", "#fde68a", "#713f12", "firework"),
    GameDefinition("takenoko", "Takenoko", "TAKEN.", "#4ade80", "#14532d", "egg"),
]

_GAMES_BY_ID: Dict[str, GameDefinition] = {game.id: game for game in GAMES}


def get_piece(kind_id: str) -> PieceKind:
    """Look up a piece kind. Raises KeyError for unknown ids."""
    return PIECES[kind_id]


def get_game(game_id: str) -> GameDefinition:
    """Look up a game definition. Raises KeyError for unknown ids."""
    return _GAMES_BY_ID[game_id]


def piece_for(game: GameDefinition) -> PieceKind:
    """Piece an incomplete copy of ``game`` is missing."""
    return PIECES[game.piece_kind]


def hex_to_rgb(value: str) -> Color:
    """Convert ``#rrggbb`` to an RGB tuple."""
    value = value.lstrip("#")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))
