"""
Tests for render.py - drawn on an off-screen surface.
"""

import pygame
import pytest

from src.snake.config import BG, HEIGHT, RED, WHITE, WIDTH, PLAY_AREA_TOP
from src.snake.render import draw_game, draw_game_over

START = [(10, 60), (20, 60), (30, 60)]
FOOD = (500, 400)


@pytest.fixture
def font():
    pygame.font.init()
    yield pygame.font.SysFont(None, 20)
    pygame.font.quit()


@pytest.fixture
def screen():
    return pygame.Surface((WIDTH, HEIGHT))


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


class TestDrawGame:

    def test_snake_cells_are_outlined(self, screen, font, make_state):
        draw_game(screen, font, make_state(START, FOOD))
        for x, y in START:
            assert rgb(screen, (x + 5, y + 5)) == WHITE
            assert rgb(screen, (x, y)) == BG

    def test_food_is_red(self, screen, font, make_state):
        draw_game(screen, font, make_state(START, FOOD))
        assert rgb(screen, (FOOD[0] + 5, FOOD[1] + 5)) == RED

    def test_play_area_border(self, screen, font, make_state):
        draw_game(screen, font, make_state(START, FOOD))
        assert rgb(screen, (300, PLAY_AREA_TOP - 1)) == WHITE
        assert rgb(screen, (300, HEIGHT - 1)) == WHITE
        assert rgb(screen, (0, 200)) == WHITE
        assert rgb(screen, (WIDTH - 1, 200)) == WHITE
        assert rgb(screen, (300, 200)) == BG

    def test_score_text_drawn(self, screen, font, make_state):
        draw_game(screen, font, make_state(START, FOOD, score=12))
        text_area = screen.subsurface(pygame.Rect(10, 10, 100, 30))
        assert any(rgb(text_area, (x, y)) == WHITE for x in range(100) for y in range(30))


class TestDrawGameOver:

    def test_play_area_cleared_and_message_centered(self, screen, font, make_state):
        draw_game(screen, font, make_state(START, FOOD))
        draw_game_over(screen, font, 7)
        assert rgb(screen, (15, 65)) == BG
        assert rgb(screen, (FOOD[0] + 5, FOOD[1] + 5)) == BG
        center = screen.subsurface(pygame.Rect(WIDTH // 2 - 60, HEIGHT // 2 - 15, 120, 60))
        assert any(rgb(center, (x, y)) == WHITE for x in range(120) for y in range(60))
