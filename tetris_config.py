import os

CONFIG = {
    "BOARD_WIDTH": 10,
    "BOARD_HEIGHT": 20,
    "INITIAL_SPEED_MS": 800,
    "MIN_SPEED_MS": 100,
    "LEVEL_SPEED_STEP_MS": 80,
    "LINES_PER_LEVEL": 10,
    "CELL_SIZE": 32,
    "KEY_REPEAT_DELAY_MS": 170,
    "KEY_REPEAT_INTERVAL_MS": 50,
    "HIGH_SCORE_FILE": os.path.join(os.path.dirname(os.path.abspath(__file__)), ".tetris_highscore"),
    "SEED": None,
    "LOG_LEVEL": "info",
    "LOG_FORMAT": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
}

# Points per simultaneous clear, multiplied by the current level
SCORE_TABLE = {0: 0, 1: 100, 2: 300, 3: 600, 4: 1000}
