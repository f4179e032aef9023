"""
High-score persistence.

A single integer: the best score ever reached. Storage problems never end
the game; an unreadable store counts as no high score yet and a failed
write keeps the in-memory score.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, Union, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class HighScoreStore(Protocol):
    def load(self) -> int:
        raise NotImplementedError

    def save(self, score: int) -> bool:
        raise NotImplementedError


class MemoryHighScoreStore:
    def __init__(self, initial: int = 0):
        self.value = max(0, int(initial))

    def load(self) -> int:
        return self.value

    def save(self, score: int) -> bool:
        if score <= self.value:
            return False
        self.value = int(score)
        return True


class FileHighScoreStore:
    """Keeps the high score as plain text in one file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return 0
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("could not read high score from %s: %s", self.path, e)
            return 0
        try:
            return max(0, int(text.strip()))
        except ValueError:
            logger.warning("ignoring malformed high score file %s", self.path)
            return 0

    def save(self, score: int) -> bool:
        """Write score if it beats the stored one. Returns True when written."""
        if score <= self.load():
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(int(score)), encoding="utf-8")
        except OSError as e:
            logger.warning("could not save high score to %s: %s", self.path, e)
            return False
        logger.info("new high score %d saved to %s", score, self.path)
        return True


__all__ = ["FileHighScoreStore", "HighScoreStore", "MemoryHighScoreStore"]
