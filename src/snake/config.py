from __future__ import annotations
from dataclasses import dataclass

# ----- Window & play area -----
WIDTH, HEIGHT = 640, 480
CELL_SIZE = 10
PLAY_AREA_TOP = 50
PLAY_AREA_WIDTH = WIDTH
PLAY_AREA_HEIGHT = HEIGHT - PLAY_AREA_TOP - 1  # 1px kept for the bottom border

# Food must fit entirely inside the play area
FOOD_COLS = PLAY_AREA_WIDTH // CELL_SIZE
FOOD_ROWS = PLAY_AREA_HEIGHT // CELL_SIZE

# ----- Colors -----
BG    = (0, 0, 0)
WHITE = (255, 255, 255)
RED   = (255, 0, 0)

# ----- Text placement -----
SCORE_POS = (10, 10)
GAME_OVER_GAP = 10

# ----- Directions (dx, dy), one cell per step -----
UP, DOWN, LEFT, RIGHT = (0, -CELL_SIZE), (0, CELL_SIZE), (-CELL_SIZE, 0), (CELL_SIZE, 0)

START_SNAKE = [
    (10, PLAY_AREA_TOP + 10),
    (20, PLAY_AREA_TOP + 10),
    (30, PLAY_AREA_TOP + 10),
]

# ----- Tunables -----
@dataclass
class Config:
    seed: int | None = None
    step_every: int = 10          # poll cycles per simulation step
    fps: int = 60                 # poll/render rate, ~16ms per cycle
    font_path: str | None = None  # None -> pygame default font
    font_size: int = 20
    max_food_attempts: int = 10_000
    debug: bool = False

CFG = Config()
