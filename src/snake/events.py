# events.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Union

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .game import Direction, GameState, request_direction


@dataclass(frozen=True)
class Quit:
    pass

@dataclass(frozen=True)
class KeyPressed:
    direction: Direction

Event = Union[Quit, KeyPressed]

KEYMAP = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}


def translate_event(event: pygame.event.Event) -> Optional[Event]:
    """Map a raw pygame event to a game event; None for anything we ignore."""
    if event.type == pygame.QUIT:
        return Quit()
    if event.type == pygame.KEYDOWN and event.key in KEYMAP:
        return KeyPressed(KEYMAP[event.key])
    return None

def poll_events() -> List[Event]:
    events = []
    for raw in pygame.event.get():
        event = translate_event(raw)
        if event is not None:
            events.append(event)
    return events

def handle_event(state: GameState, event: Event) -> bool:
    """Apply one event to the state. Return False to quit."""
    match event:
        case Quit():
            return False
        case KeyPressed(direction=requested):
            # Validate against the committed direction; a rejected key keeps
            # whatever turn is already pending
            if request_direction(state.direction, requested) == requested:
                state.pending = requested
            return True
        case _:
            raise ValueError(f"Unknown event: {event!r}")

def wait_for_quit() -> None:
    """Block until the window is closed."""
    while True:
        if translate_event(pygame.event.wait()) == Quit():
            return
