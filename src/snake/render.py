# render.py
from typing import Tuple
import pygame  # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_SIZE,
    PLAY_AREA_TOP, PLAY_AREA_WIDTH, PLAY_AREA_HEIGHT,
    BG, WHITE, RED,
    SCORE_POS, GAME_OVER_GAP,
)
from .game import GameState


def draw_cell(screen: pygame.Surface, x: int, y: int, color: Tuple[int, int, int], outline: bool = False) -> None:
    rect = pygame.Rect(x, y, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)
    if outline:
        pygame.draw.rect(screen, BG, rect, 1)

def draw_border(screen: pygame.Surface) -> None:
    """1px frame just outside the top/bottom and on the left/right edges of the play area."""
    bottom = PLAY_AREA_TOP + PLAY_AREA_HEIGHT
    pygame.draw.rect(screen, WHITE, (0, PLAY_AREA_TOP - 1, PLAY_AREA_WIDTH, 1))
    pygame.draw.rect(screen, WHITE, (0, bottom, PLAY_AREA_WIDTH, 1))
    pygame.draw.rect(screen, WHITE, (0, PLAY_AREA_TOP, 1, PLAY_AREA_HEIGHT))
    pygame.draw.rect(screen, WHITE, (PLAY_AREA_WIDTH - 1, PLAY_AREA_TOP, 1, PLAY_AREA_HEIGHT))

def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    screen.fill(BG)
    draw_border(screen)
    # snake
    for x, y in state.snake:
        draw_cell(screen, x, y, WHITE, outline=True)
    # food
    draw_cell(screen, state.food[0], state.food[1], RED)
    # score
    txt = font.render(f"Score: {state.score}", True, WHITE)
    screen.blit(txt, SCORE_POS)

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    screen.fill(BG, (0, PLAY_AREA_TOP, PLAY_AREA_WIDTH, PLAY_AREA_HEIGHT))

    title = font.render("Game Over", True, WHITE)
    sco   = font.render(f"Score: {score}", True, WHITE)

    tx = title.get_rect(center=(WIDTH // 2, HEIGHT // 2))
    cx = sco.get_rect(midtop=(WIDTH // 2, tx.bottom + GAME_OVER_GAP))

    screen.blit(title, tx)
    screen.blit(sco, cx)
