# main.py
from __future__ import annotations
import argparse
from typing import List, Optional

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import WIDTH, HEIGHT, Config
from .game import new_game_state, advance_tick
from .events import poll_events, handle_event, wait_for_quit
from .render import draw_game, draw_game_over


def parse_args(argv: Optional[List[str]] = None) -> Config:
    defaults = Config()
    parser = argparse.ArgumentParser(description="Classic Snake")
    parser.add_argument("--seed", type=int, default=defaults.seed,
                        help="seed for food placement (default: random)")
    parser.add_argument("--step-every", type=int, default=defaults.step_every,
                        help="poll cycles per snake step")
    parser.add_argument("--fps", type=int, default=defaults.fps,
                        help="poll/render cycles per second")
    parser.add_argument("--font", type=str, default=defaults.font_path,
                        help="path to a .ttf font (default: pygame's built-in font)")
    parser.add_argument("--font-size", type=int, default=defaults.font_size)
    parser.add_argument("--debug", action="store_true", help="print every step")
    args = parser.parse_args(argv)

    if args.step_every < 1:
        parser.error("--step-every must be at least 1")
    if args.fps < 1:
        parser.error("--fps must be at least 1")

    return Config(
        seed=args.seed,
        step_every=args.step_every,
        fps=args.fps,
        font_path=args.font,
        font_size=args.font_size,
        debug=args.debug,
    )

def load_font(cfg: Config) -> pygame.font.Font:
    # A missing font file raises here and aborts startup
    if cfg.font_path is not None:
        return pygame.font.Font(cfg.font_path, cfg.font_size)
    return pygame.font.SysFont(None, cfg.font_size)

def run(cfg: Config) -> int:
    """Play one game. Returns the final score."""
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    font = load_font(cfg)
    clock = pygame.time.Clock()

    state = new_game_state(np.random.default_rng(cfg.seed))
    print(f"[GAME] Started. seed={cfg.seed}, step_every={cfg.step_every}, fps={cfg.fps}")

    while not state.game_over:
        # 1) input
        for event in poll_events():
            if not handle_event(state, event):
                print(f"[GAME] Quit. score={state.score}")
                return state.score

        # 2) update (fixed step, gated by the poll counter)
        if advance_tick(state, cfg.step_every) and cfg.debug:
            print(f"[STEP] head={state.head} food={state.food} score={state.score} alive={not state.game_over}")

        # 3) render
        draw_game(screen, font, state)
        pygame.display.flip()
        clock.tick(cfg.fps)

    draw_game(screen, font, state)
    draw_game_over(screen, font, state.score)
    pygame.display.flip()
    print(f"[GAME] Over. score={state.score}, length={len(state.snake)}")

    wait_for_quit()
    return state.score

def main(argv: Optional[List[str]] = None) -> None:
    cfg = parse_args(argv)
    pygame.init()
    try:
        run(cfg)
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
