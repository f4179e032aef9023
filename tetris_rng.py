"""Piece-kind sources: uniform random and scripted"""
import random
from typing import Iterable, List, Optional, Protocol

from tetris_piece import KINDS


class PieceSource(Protocol):
    def next_piece(self) -> str: ...


class UniformRandom:
    """Independent uniform pick over the seven kinds each call.

    No bag and no repeat rejection: the same kind can come up any number
    of times in a row.
    """
    PIECES = KINDS

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def next_piece(self) -> str:
        return self.rng.choice(self.PIECES)


class SequenceRandom:
    """Replays a fixed list of kinds, looping unless cycle=False."""

    def __init__(self, kinds: Iterable[str], cycle: bool = True):
        self.kinds: List[str] = list(kinds)
        if not self.kinds:
            raise ValueError("SequenceRandom needs at least one kind")
        bad = [k for k in self.kinds if k not in KINDS]
        if bad:
            raise ValueError(f"unknown piece kinds: {bad}")
        self.cycle = cycle
        self.index = 0

    def next_piece(self) -> str:
        if self.index >= len(self.kinds):
            if not self.cycle:
                raise RuntimeError(f"piece sequence exhausted after {len(self.kinds)} kinds")
            self.index = 0
        k = self.kinds[self.index]
        self.index += 1
        return k
