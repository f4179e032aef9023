import argparse
import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_game import Command, Step, TetrisGame
from tetris_input import KeyFilter, enable_key_repeat
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import UniformRandom
from tetris_scores import FileHighScoreStore

logger = logging.getLogger(__name__)

GRAVITY_EVENT = pygame.USEREVENT + 1


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tetris")
    parser.add_argument('--seed', default=CONFIG["SEED"], type=int,
                        help='seed for the piece randomizer')
    parser.add_argument('--high-score-file', default=CONFIG["HIGH_SCORE_FILE"])
    parser.add_argument('--cell-size', default=CONFIG["CELL_SIZE"], type=int)
    parser.add_argument('--log-level', default=CONFIG["LOG_LEVEL"],
                        choices=['debug', 'info', 'warning', 'error'])
    return parser.parse_args(argv)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def wanted_interval(game):
    """Gravity timer period in ms; 0 stops the timer."""
    if not game.running or game.waiting or game.paused or game.over:
        return 0
    return game.gravity_interval


def run(game):
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP, GRAVITY_EVENT])
    enable_key_repeat()

    dims = compute_dims(game.cols, game.rows)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()
    keys = KeyFilter()

    timer_ms = 0
    dirty = True

    while game.running:
        # The engine only reports its interval; the timer lives here.
        want = wanted_interval(game)
        if want != timer_ms:
            pygame.time.set_timer(GRAVITY_EVENT, want)
            logger.debug("gravity timer %d ms -> %d ms", timer_ms, want)
            timer_ms = want

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                game.handle(Command.QUIT)
            elif e.type == pygame.KEYDOWN:
                cmd = keys.press(e.key)
                if game.waiting and cmd is not Command.QUIT:
                    # any key leaves the title screen
                    game.start()
                    dirty = True
                    continue
                if cmd is None: continue
                game.handle(cmd)
                dirty = True
            elif e.type == pygame.KEYUP:
                keys.release(e.key)
            elif e.type == GRAVITY_EVENT:
                if game.tick().kind is not Step.NONE:
                    dirty = True

        if dirty and game.running:
            render.draw(screen, game.snapshot())
            pygame.display.flip()
            dirty = False

        clock.tick(60)

    pygame.time.set_timer(GRAVITY_EVENT, 0)
    pygame.quit()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=CONFIG["LOG_FORMAT"])
    CONFIG["CELL_SIZE"] = args.cell_size

    scores = FileHighScoreStore(args.high_score_file)
    game = TetrisGame(rng=UniformRandom(args.seed), scores=scores, wait_for_start=True)
    logger.info("high score %d (%s)", game.high_score, args.high_score_file)
    run(game)
    logger.info('Finished! score %d, best %d', game.score, game.high_score)
    return 0


if __name__ == '__main__':
    sys.exit(main())
