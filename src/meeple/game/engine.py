"""
MEEPLE CATCHER simulation.

The meeple walks along the bottom of the playfield following the pointer.
Board-game boxes and loose pieces fall from the top:

- a complete box caught scores ``10 + level * 2``
- an incomplete box caught with its piece in the bag scores a 25 bonus
- an incomplete box caught without its piece scores 2 and reports what
  was missing
- a complete box hitting the floor costs a life; three lives per game

Every sixth catch raises the level, which speeds up both falling and
spawning. One call to ``tick()`` advances the game by one frame.
"""

from typing import Any, List, Optional
import logging
import random

from meeple.core.events import Event, EventBus, EventType
from meeple.core.state import Phase, PhaseMachine
from meeple.game.bag import Bag
from meeple.game.catalog import hex_to_rgb, piece_for
from meeple.game.effects import Effects, GOLD
from meeple.game.entities import FallingBox, FallingPiece
from meeple.game.input import InputFrame
from meeple.game.session import MissEvent, SessionState, level_for
from meeple.game.spawner import Spawner
from meeple.storage.highscore import HighScoreStore, MemoryHighScoreStore

logger = logging.getLogger(__name__)

ORANGE = (249, 115, 22)
RED = (239, 68, 68)
GREEN = (74, 222, 128)
GREY = (107, 114, 128)
LIGHT_GREY = (156, 163, 175)


class MeepleCatcher:
    """Headless game engine: state, rules and notifications, no drawing."""

    # Geometry (pixels)
    MEEPLE_FLOOR_OFFSET = 68
    CATCH_LINE_OFFSET = 18
    CATCH_RADIUS = 30
    MEEPLE_MARGIN = 16
    FALL_MARGIN = 10
    FOLLOW_FACTOR = 0.18

    # Inspect window around the meeple
    INSPECT_DX = 55
    INSPECT_DY = 130

    # Scoring
    COMPLETE_POINTS = 10
    COMPLETE_LEVEL_BONUS = 2
    COMPLETED_POINTS = 25
    MISSING_PIECE_POINTS = 2
    PIECE_POINTS = 3

    # Feedback pulses (ticks)
    HAPPY_COMPLETE = 35
    HAPPY_COMPLETED = 50
    HAPPY_PIECE = 15
    SAD_MISSING = 30
    SAD_LIFE_LOST = 45

    def __init__(
        self,
        width: int,
        height: int,
        rng: Optional[random.Random] = None,
        store: Optional[HighScoreStore] = None,
        event_bus: Optional[EventBus] = None,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Playfield must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self.meeple_y = height - self.MEEPLE_FLOOR_OFFSET
        self.catch_y = self.meeple_y - self.CATCH_LINE_OFFSET

        self.rng = rng or random.Random()
        self.store = store or MemoryHighScoreStore()
        self.event_bus = event_bus or EventBus()

        self._machine = PhaseMachine(Phase.INTRO)
        self._machine.add_listener(self._on_phase_change)

        self.session = SessionState()
        self.bag = Bag()
        self.spawner = Spawner(width, self.rng)
        self.effects = Effects()
        self.boxes: List[FallingBox] = []
        self.pieces: List[FallingPiece] = []

        self.meeple_x = width / 2
        self.happy = 0
        self.sad = 0
        self.frame = 0
        self.high_score = self._load_high_score()

        logger.info(f"MeepleCatcher ready: {width}x{height}, record {self.high_score}")

    # ------------------------------------------------------------------
    # Public state
    # ------------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self._machine.phase

    @property
    def playing(self) -> bool:
        return self._machine.phase is Phase.PLAYING

    @property
    def score(self) -> int:
        return self.session.score

    @property
    def lives(self) -> int:
        return self.session.lives

    @property
    def level(self) -> int:
        return self.session.level

    @property
    def caught(self) -> int:
        return self.session.caught

    @property
    def last_miss(self) -> Optional[MissEvent]:
        return self.session.last_miss

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------

    def tick(self, inp: InputFrame) -> None:
        """Advance the game by one frame."""
        self.frame += 1

        if self.playing:
            self._update(inp)
        elif inp.trigger:
            self.start()

        self.effects.update()

    def start(self) -> bool:
        """Begin a fresh game from the intro or game-over screen."""
        if not self._machine.can_transition(Phase.PLAYING):
            return False

        self.session.reset()
        self.bag.clear()
        self.boxes.clear()
        self.pieces.clear()
        self.spawner.reset()
        self.effects.clear()
        self.meeple_x = self.width / 2
        self.happy = 0
        self.sad = 0

        self._machine.transition(Phase.PLAYING)
        self._emit(EventType.SCORE_CHANGED, score=0)
        self._emit(EventType.LIVES_CHANGED, lives=self.session.lives)
        self._emit(EventType.LEVEL_CHANGED, level=1)
        self._emit(EventType.BAG_CHANGED, bag=[])
        return True

    def _update(self, inp: InputFrame) -> None:
        # Follow the pointer
        self.meeple_x += (inp.target_x - self.meeple_x) * self.FOLLOW_FACTOR
        self.meeple_x = max(
            self.MEEPLE_MARGIN,
            min(self.width - self.MEEPLE_MARGIN, self.meeple_x),
        )

        if self.happy > 0:
            self.happy -= 1
        if self.sad > 0:
            self.sad -= 1

        new_boxes, new_pieces = self.spawner.update(self.session.level)
        self.boxes.extend(new_boxes)
        self.pieces.extend(new_pieces)

        self._refresh_level()

        for box in self.boxes:
            if not self.playing:
                break
            if not box.alive:
                box.age()
                continue

            box.advance()
            if self._reaches_meeple(box):
                self._catch_box(box)
                continue
            if inp.trigger and not box.inspected:
                self._inspect(box)
            if box.y > self.height + self.FALL_MARGIN:
                self._box_fell(box)

        for piece in self.pieces:
            if not self.playing:
                break
            if not piece.alive:
                piece.age()
                continue

            piece.advance()
            if self._reaches_meeple(piece):
                self._catch_piece(piece)
                continue
            if piece.y > self.height + self.FALL_MARGIN:
                piece.kill()

        self.boxes = [b for b in self.boxes if not b.removed]
        self.pieces = [p for p in self.pieces if not p.removed]

        # Catches made this tick may cross a level boundary, even the one
        # that also ended the game
        self._refresh_level()

    def _reaches_meeple(self, entity: FallingBox | FallingPiece) -> bool:
        return (
            entity.bottom >= self.catch_y
            and abs(entity.center_x - self.meeple_x) < self.CATCH_RADIUS + entity.w / 2
        )

    def _refresh_level(self) -> None:
        new_level = level_for(self.session.caught)
        if new_level == self.session.level:
            return

        self.session.level = new_level
        if self.playing:
            self.spawner.on_level_change(new_level)
            self.effects.flash_message([f"NIVEAU {new_level} !"], GOLD, 55)
        logger.info(f"Level up: {new_level}")
        self._emit(EventType.LEVEL_CHANGED, level=new_level)

    # ------------------------------------------------------------------
    # Outcomes
    # ------------------------------------------------------------------

    def _catch_box(self, box: FallingBox) -> None:
        box.kill()
        session = self.session
        cx, cy = box.center_x, box.center_y
        game = box.game

        if not box.incomplete:
            points = self.COMPLETE_POINTS + session.level * self.COMPLETE_LEVEL_BONUS
            session.score += points
            session.caught += 1
            self.happy = self.HAPPY_COMPLETE

            color = hex_to_rgb(game.color)
            self.effects.burst(cx, cy, color, 16)
            self.effects.float_text(f"+{points}", cx, cy, color)
            self.effects.flash_message([f"+{points} COMPLET !"], color, 40)

            logger.debug(f"Caught {game.id} for {points}")
            self._emit(EventType.SCORE_CHANGED, score=session.score)
            self._emit(EventType.BOX_CAUGHT, game_id=game.id, points=points)
            return

        piece = piece_for(game)
        if self.bag.remove(piece.id):
            points = self.COMPLETED_POINTS
            session.score += points
            session.caught += 1
            self.happy = self.HAPPY_COMPLETED

            self.effects.gold_burst(cx, cy)
            self.effects.float_text(f"+{points} BONUS !", cx, cy, GOLD)
            self.effects.flash_message(
                [f"+{points} BONUS !", f"{piece.glyph} {piece.name}", "COMPLETE !"],
                GOLD, 65,
            )

            logger.debug(f"Completed {game.id} with {piece.id}")
            self._emit(EventType.BAG_CHANGED, bag=self.bag.items())
            self._emit(EventType.SCORE_CHANGED, score=session.score)
            self._emit(EventType.BOX_COMPLETED, game_id=game.id, piece_id=piece.id,
                       points=points)
            return

        points = self.MISSING_PIECE_POINTS
        session.score += points
        session.caught += 1
        self.sad = self.SAD_MISSING
        miss = MissEvent(game_name=game.name, piece_name=piece.name, piece_glyph=piece.glyph)
        session.last_miss = miss

        self.effects.burst(cx, cy, ORANGE, 8)
        self.effects.float_text(f"+{points}", cx, cy, ORANGE)
        self.effects.flash_message(
            [game.name, f"MANQUE: {piece.glyph} {piece.name}"], ORANGE, 70
        )

        logger.debug(f"Caught {game.id} without {piece.id}")
        self._emit(EventType.SCORE_CHANGED, score=session.score)
        self._emit(
            EventType.PIECE_MISSING,
            game_name=miss.game_name,
            piece_name=miss.piece_name,
            piece_glyph=miss.piece_glyph,
        )

    def _catch_piece(self, piece: FallingPiece) -> None:
        piece.kill()
        cx, cy = piece.center_x, piece.center_y
        kind = piece.kind

        if not self.bag.add(kind.id):
            self.effects.burst(cx, cy, GREY, 6)
            self.effects.float_text("PLEIN!", cx, cy, LIGHT_GREY)
            self._emit(EventType.BAG_FULL, piece_id=kind.id)
            return

        self.session.score += self.PIECE_POINTS
        self.happy = max(self.happy, self.HAPPY_PIECE)

        color = hex_to_rgb(kind.color)
        self.effects.burst(cx, cy, color, 10)
        self.effects.float_text(f"+{self.PIECE_POINTS} {kind.glyph}", cx, cy, color)

        self._emit(EventType.BAG_CHANGED, bag=self.bag.items())
        self._emit(EventType.SCORE_CHANGED, score=self.session.score)
        self._emit(EventType.PIECE_CAUGHT, piece_id=kind.id, points=self.PIECE_POINTS)

    def _inspect(self, box: FallingBox) -> None:
        dx = abs(box.center_x - self.meeple_x)
        dy = abs(box.center_y - self.meeple_y)
        if dx >= self.INSPECT_DX or dy >= self.INSPECT_DY:
            return

        box.inspected = True
        piece = piece_for(box.game)
        has_piece = self.bag.contains(piece.id)

        if not box.incomplete:
            self.effects.float_text("COMPLET !", box.center_x, box.y, GREEN)
        elif has_piece:
            self.effects.float_text(f"J'AI {piece.name}!", box.center_x, box.y, GREEN)
        else:
            self.effects.float_text(
                f"MANQUE: {piece.glyph} {piece.name}", box.center_x, box.y, ORANGE
            )

        self._emit(
            EventType.BOX_INSPECTED,
            game_name=box.game.name,
            incomplete=box.incomplete,
            piece_name=piece.name,
            has_piece=has_piece,
        )

    def _box_fell(self, box: FallingBox) -> None:
        box.kill()
        if box.incomplete:
            return

        session = self.session
        session.lives = max(0, session.lives - 1)
        self.sad = self.SAD_LIFE_LOST
        self.effects.burst(box.center_x, self.height - 20, RED, 8)
        self.effects.flash_message(["-1 VIE !"], RED, 50)

        logger.info(f"Missed {box.game.id}, {session.lives} lives left")
        self._emit(EventType.LIVES_CHANGED, lives=session.lives)
        self._emit(EventType.LIFE_LOST, game_id=box.game.id)

        if session.lives <= 0:
            self._end_game()

    def _end_game(self) -> None:
        session = self.session
        if session.score > self.high_score:
            self.high_score = session.score
            session.new_high_score = True
            self._emit(EventType.HIGH_SCORE, score=session.score)
            self._save_high_score(session.score)

        logger.info(
            f"Game over: score {session.score}, level {session.level}, "
            f"{session.caught} games caught"
        )
        self._machine.transition(Phase.GAMEOVER)

    # ------------------------------------------------------------------
    # Plumbing
    # ------------------------------------------------------------------

    def _load_high_score(self) -> int:
        try:
            value = self.store.get()
        except Exception as e:
            logger.warning(f"High score unavailable, starting from 0: {e}")
            return 0
        return value if value is not None and value > 0 else 0

    def _save_high_score(self, value: int) -> None:
        try:
            self.store.set(value)
        except Exception as e:
            logger.warning(f"High score not saved: {e}")

    def _on_phase_change(self, old_phase: Phase, new_phase: Phase) -> None:
        self._emit(EventType.PHASE_CHANGED, phase=new_phase.value,
                   previous=old_phase.value)

    def _emit(self, event_type: EventType, **data: Any) -> None:
        self.event_bus.emit(Event(event_type, data=dict(data), source="meeple"))
