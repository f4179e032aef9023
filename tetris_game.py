"""
Tetris engine: one TetrisGame owns one game session.

The engine is driven by two kinds of input that the caller serializes on a
single thread: player commands (handle) and gravity ticks (tick). It never
schedules its own timer; the driver reads gravity_interval after each step
and reschedules when it changes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from tetris_board import Board, empty_board, ghost_y, is_valid_position, merge, sweep
from tetris_config import CONFIG, SCORE_TABLE
from tetris_piece import COLORS, KICKS, Piece, Shape, rotate_cw
from tetris_rng import PieceSource, UniformRandom
from tetris_scores import HighScoreStore, MemoryHighScoreStore

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


def level_for_lines(lines: int) -> int:
    return lines // CONFIG["LINES_PER_LEVEL"] + 1


def gravity_interval(level: int) -> int:
    """Milliseconds between gravity ticks at a given level."""
    base, step = CONFIG["INITIAL_SPEED_MS"], CONFIG["LEVEL_SPEED_STEP_MS"]
    return max(CONFIG["MIN_SPEED_MS"], base - (level - 1) * step)


class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ROTATE_CW = "rotate_cw"
    SOFT_DROP = "soft_drop"
    HARD_DROP = "hard_drop"
    TOGGLE_PAUSE = "toggle_pause"
    QUIT = "quit"
    RESTART = "restart"


class Step(Enum):
    NONE = "none"            # rejected or not a piece step
    MOVED = "moved"          # sideways move or rotation committed
    FELL = "fell"            # piece went down one row
    LOCKED = "locked"        # piece locked, next one spawned
    GAME_OVER = "game_over"  # piece locked, next one could not spawn


@dataclass(frozen=True)
class StepOutcome:
    kind: Step
    lines_cleared: int = 0


NOTHING = StepOutcome(Step.NONE)


@dataclass(frozen=True)
class Snapshot:
    """Everything a renderer needs, detached from engine state."""
    board: Tuple[Tuple[Optional[str], ...], ...]
    piece_kind: Optional[str]
    piece_color: Optional[Tuple[int, int, int]]
    piece_cells: Tuple[Cell, ...]
    ghost_cells: Tuple[Cell, ...]
    next_kind: str
    score: int
    lines: int
    level: int
    high_score: int
    gravity_interval: int
    running: bool
    paused: bool
    over: bool
    waiting: bool = False


class TetrisGame:
    """
    Board & piece engine.

    Contracts:
      - board holds LOCKED cells only (kind letter or None); the active piece
        is written into it on lock and never before.
      - current never overlaps the stack or leaves the well; every move and
        rotation is validated before it is committed.
      - illegal moves and rotations are rejected silently (False / NONE).
      - the only terminal state is a spawn that does not fit.
    """

    def __init__(
            self,
            cols: Optional[int] = None,
            rows: Optional[int] = None,
            rng: Optional[PieceSource] = None,
            scores: Optional[HighScoreStore] = None,
            wait_for_start: bool = False,
    ) -> None:
        self.cols = int(cols if cols is not None else CONFIG["BOARD_WIDTH"])
        self.rows = int(rows if rows is not None else CONFIG["BOARD_HEIGHT"])
        self.rng: PieceSource = rng if rng is not None else UniformRandom(CONFIG["SEED"])
        self.scores: HighScoreStore = scores if scores is not None else MemoryHighScoreStore()
        self.high_score = self.scores.load()

        self.board: Board = empty_board(self.cols, self.rows)
        self.current: Optional[Piece] = None
        self.next_type = ""
        self.score = 0
        self.lines = 0
        self.level = 1
        self.running = False
        self.paused = False
        self.over = False
        self.waiting = False
        self.reset()
        self.waiting = bool(wait_for_start)

    # ---- lifecycle ----------------------------------------------------------

    def reset(self) -> None:
        self.board = empty_board(self.cols, self.rows)
        self.score = 0
        self.lines = 0
        self.level = 1
        self.running = True
        self.paused = False
        self.over = False
        self.next_type = self.rng.next_piece()
        logger.info("new game on a %dx%d board", self.cols, self.rows)
        self.spawn_piece()

    @property
    def playing(self) -> bool:
        return self.running and not self.waiting and not self.paused and not self.over

    @property
    def gravity_interval(self) -> int:
        return gravity_interval(self.level)

    # ---- geometry -----------------------------------------------------------

    def is_valid_position(self, shape: Shape, x: int, y: int) -> bool:
        return is_valid_position(self.board, shape, x, y)

    def spawn_piece(self) -> Optional[Piece]:
        """Promote the next kind to the active piece and draw a new next kind.

        Returns None (and ends the game) when the new piece does not fit.
        The board is left untouched in that case.
        """
        t = self.next_type
        self.next_type = self.rng.next_piece()
        piece = Piece.spawn(t, self.cols)
        if not self.is_valid_position(piece.shape, piece.x, piece.y):
            self.current = None
            self._game_over()
            return None
        self.current = piece
        logger.debug("spawned %s at (%d, %d), next %s", t, piece.x, piece.y, self.next_type)
        return piece

    def move(self, dx: int, dy: int) -> bool:
        if not self.playing or self.current is None:
            return False
        p = self.current
        if not self.is_valid_position(p.shape, p.x + dx, p.y + dy):
            return False
        self.current = p.moved(dx, dy)
        return True

    def rotate(self) -> bool:
        """Rotate clockwise, trying each kick offset in order."""
        if not self.playing or self.current is None:
            return False
        p = self.current
        shape = rotate_cw(p.shape)
        for dx in KICKS:
            if self.is_valid_position(shape, p.x + dx, p.y):
                self.current = Piece(p.t, shape, p.x + dx, p.y)
                return True
        return False

    # ---- locking & scoring --------------------------------------------------

    def lock_piece(self) -> None:
        if self.current is None:
            return
        lost = merge(self.board, self.current)
        if lost:
            logger.debug("%d block(s) of %s locked above the board", lost, self.current.t)

    def clear_lines(self) -> int:
        return sweep(self.board)

    def apply_score(self, lines_cleared: int) -> None:
        if lines_cleared not in SCORE_TABLE:
            raise ValueError(f"cannot clear {lines_cleared} lines at once")
        self.score += SCORE_TABLE[lines_cleared] * self.level
        self.lines += lines_cleared
        level = level_for_lines(self.lines)
        if level != self.level:
            logger.info("level %d reached, gravity %d ms", level, gravity_interval(level))
        self.level = level

    def _lock_and_advance(self) -> StepOutcome:
        self.lock_piece()
        n = self.clear_lines()
        self.apply_score(n)
        if n:
            logger.info("cleared %d line(s), score %d", n, self.score)
        if self.spawn_piece() is None:
            return StepOutcome(Step.GAME_OVER, n)
        return StepOutcome(Step.LOCKED, n)

    # ---- steps --------------------------------------------------------------

    def tick(self) -> StepOutcome:
        """Gravity: one row down, or lock and respawn when blocked."""
        if not self.playing:
            return NOTHING
        if self.move(0, 1):
            return StepOutcome(Step.FELL)
        return self._lock_and_advance()

    def soft_drop(self) -> StepOutcome:
        # Same as a gravity tick, only player driven.
        return self.tick()

    def hard_drop(self) -> StepOutcome:
        if not self.playing:
            return NOTHING
        while self.move(0, 1):
            pass
        return self._lock_and_advance()

    def start(self) -> bool:
        """Leave the title screen. Returns False if already started."""
        if not self.waiting:
            return False
        self.waiting = False
        logger.info("game started, high score %d", self.high_score)
        return True

    def toggle_pause(self) -> bool:
        if not self.running or self.waiting or self.over:
            return False
        self.paused = not self.paused
        logger.info("paused" if self.paused else "resumed")
        return True

    def quit(self) -> None:
        self.running = False
        self.paused = False
        self._record_high_score()
        logger.info("quit with score %d", self.score)

    def restart(self) -> bool:
        """New game, only once the current one is over or quit."""
        if self.running and not self.over:
            return False
        self._record_high_score()
        self.reset()
        return True

    def _game_over(self) -> None:
        self.over = True
        self.paused = False
        logger.info("game over: score %d, lines %d, level %d", self.score, self.lines, self.level)
        self._record_high_score()

    def _record_high_score(self) -> None:
        self.scores.save(self.score)
        self.high_score = max(self.high_score, self.score)

    # ---- commands -----------------------------------------------------------

    def handle(self, cmd: Command) -> StepOutcome:
        if cmd is Command.QUIT:
            self.quit()
            return NOTHING
        if self.waiting:
            self.start()
            return NOTHING
        if cmd is Command.RESTART:
            self.restart()
            return NOTHING
        if cmd is Command.TOGGLE_PAUSE:
            self.toggle_pause()
            return NOTHING
        if not self.playing:
            return NOTHING
        if cmd is Command.MOVE_LEFT:
            return StepOutcome(Step.MOVED) if self.move(-1, 0) else NOTHING
        if cmd is Command.MOVE_RIGHT:
            return StepOutcome(Step.MOVED) if self.move(1, 0) else NOTHING
        if cmd is Command.ROTATE_CW:
            return StepOutcome(Step.MOVED) if self.rotate() else NOTHING
        if cmd is Command.SOFT_DROP:
            return self.soft_drop()
        if cmd is Command.HARD_DROP:
            return self.hard_drop()
        raise ValueError(f"unknown command {cmd!r}")

    # ---- renderer view ------------------------------------------------------

    def snapshot(self) -> Snapshot:
        p = self.current
        cells: Tuple[Cell, ...] = tuple(p.cells()) if p is not None else ()
        ghost: Tuple[Cell, ...] = ()
        if p is not None and not self.over:
            dy = ghost_y(self.board, p) - p.y
            ghost = tuple((x, y + dy) for x, y in cells)
        return Snapshot(
            board=tuple(tuple(row) for row in self.board),
            piece_kind=p.t if p is not None else None,
            piece_color=COLORS[p.t] if p is not None else None,
            piece_cells=cells,
            ghost_cells=ghost,
            next_kind=self.next_type,
            score=self.score,
            lines=self.lines,
            level=self.level,
            high_score=max(self.high_score, self.score),
            gravity_interval=self.gravity_interval,
            running=self.running,
            paused=self.paused,
            over=self.over,
            waiting=self.waiting,
        )


__all__ = [
    "Command",
    "Snapshot",
    "Step",
    "StepOutcome",
    "TetrisGame",
    "gravity_interval",
    "level_for_lines",
]
