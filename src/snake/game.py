# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import AbstractSet, List, Tuple

import numpy as np  # type: ignore

from .config import (
    CELL_SIZE, PLAY_AREA_TOP, PLAY_AREA_WIDTH, PLAY_AREA_HEIGHT,
    FOOD_COLS, FOOD_ROWS, START_SNAKE, RIGHT,
    CFG,
)

Cell = Tuple[int, int]
Direction = Tuple[int, int]


class BoardFullError(RuntimeError):
    """Raised when there is no free cell left to put food on."""


# ---------- Helpers ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def in_play_area(x: int, y: int) -> bool:
    return 0 <= x < PLAY_AREA_WIDTH and PLAY_AREA_TOP <= y < PLAY_AREA_TOP + PLAY_AREA_HEIGHT

def request_direction(current: Direction, requested: Direction) -> Direction:
    """Return the requested direction, or keep the current one on a 180° turn."""
    if is_opposite(requested, current):
        return current
    return requested

def _first_free_cell(occupied: AbstractSet[Cell]) -> Cell:
    free = np.ones((FOOD_ROWS, FOOD_COLS), dtype=bool)
    for x, y in occupied:
        col, row = x // CELL_SIZE, (y - PLAY_AREA_TOP) // CELL_SIZE
        if 0 <= col < FOOD_COLS and 0 <= row < FOOD_ROWS:
            free[row, col] = False
    idx = np.flatnonzero(free)
    if idx.size == 0:
        raise BoardFullError("no free cell left for food")
    row, col = divmod(int(idx[0]), FOOD_COLS)
    return (col * CELL_SIZE, PLAY_AREA_TOP + row * CELL_SIZE)

def place_food(
    occupied: AbstractSet[Cell],
    rng: np.random.Generator | None = None,
    max_attempts: int = CFG.max_food_attempts,
) -> Cell:
    """
    Pick a random free cell by rejection sampling.

    Column and row are drawn independently and uniformly over the cells that
    fit fully inside the play area. If `max_attempts` draws all land on the
    snake, the first free cell (row-major) is returned instead.
    """
    if rng is None:
        rng = np.random.default_rng()
    for _ in range(max_attempts):
        col = int(rng.integers(FOOD_COLS))
        row = int(rng.integers(FOOD_ROWS))
        cell = (col * CELL_SIZE, PLAY_AREA_TOP + row * CELL_SIZE)
        if cell not in occupied:
            return cell
    return _first_free_cell(occupied)

# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # tail at index 0, head last
    food: Cell
    direction: Direction           # committed on the last step
    pending: Direction             # applied on the next step
    score: int = 0
    game_over: bool = False
    ticks: int = 0                 # poll cycles since the last step
    rng: np.random.Generator = field(default_factory=np.random.default_rng, repr=False)

    @property
    def head(self) -> Cell:
        return self.snake[-1]

def new_game_state(rng: np.random.Generator | None = None) -> GameState:
    if rng is None:
        rng = np.random.default_rng(CFG.seed)
    snake = list(START_SNAKE)
    return GameState(
        snake=snake,
        food=place_food(set(snake), rng),
        direction=RIGHT,
        pending=RIGHT,
        rng=rng,
    )

# ---------- Update ----------
def step_game(state: GameState) -> bool:
    """
    Advance the snake by one cell.
    Returns True if alive, False if game over. A finished game is never
    modified again.
    """
    if state.game_over:
        return False

    # Commit direction once per step
    state.direction = state.pending

    hx, hy = state.head
    dx, dy = state.direction
    new_head = (hx + dx, hy + dy)

    # Wall collision
    if not in_play_area(*new_head):
        state.game_over = True
        return False

    # Self collision; the tail still counts even though it is about to move
    if new_head in state.snake[:-1]:
        state.game_over = True
        return False

    # Move / grow
    state.snake.append(new_head)
    if new_head == state.food:
        state.score += 1
        try:
            state.food = place_food(set(state.snake), state.rng)
        except BoardFullError:
            # Nowhere left to grow; the board is filled and the game ends
            state.game_over = True
            return False
    else:
        del state.snake[0]
    return True

def advance_tick(state: GameState, step_every: int = CFG.step_every) -> bool:
    """
    Count one poll cycle and run a step every `step_every` cycles.
    Fixed-step on purpose: elapsed wall-clock time is never looked at.
    Returns True if a step ran.
    """
    state.ticks += 1
    if state.ticks < step_every:
        return False
    state.ticks = 0
    step_game(state)
    return True
