"""Key bindings: pygame key codes to engine commands"""
from typing import Dict, Optional
import pygame
from tetris_config import CONFIG
from tetris_game import Command

KEY_BINDINGS: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_a: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_d: Command.MOVE_RIGHT,
    pygame.K_UP: Command.ROTATE_CW,
    pygame.K_w: Command.ROTATE_CW,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_s: Command.SOFT_DROP,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_p: Command.TOGGLE_PAUSE,
    pygame.K_q: Command.QUIT,
    pygame.K_ESCAPE: Command.QUIT,
    pygame.K_r: Command.RESTART,
}

# Held keys repeat only for movement; the rest fire once per press
REPEATABLE = {Command.MOVE_LEFT, Command.MOVE_RIGHT, Command.SOFT_DROP}


def command_for_key(key: int) -> Optional[Command]:
    return KEY_BINDINGS.get(key)


def enable_key_repeat():
    pygame.key.set_repeat(CONFIG["KEY_REPEAT_DELAY_MS"], CONFIG["KEY_REPEAT_INTERVAL_MS"])


class KeyFilter:
    """Drops auto-repeated KEYDOWNs for keys that should fire once."""
    def __init__(self):
        self.held = set()

    def press(self, key: int) -> Optional[Command]:
        cmd = command_for_key(key)
        if cmd is None: return None
        repeat = key in self.held
        self.held.add(key)
        if repeat and cmd not in REPEATABLE: return None
        return cmd

    def release(self, key: int):
        self.held.discard(key)
