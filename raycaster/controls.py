"""Keyboard state tracking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

import pygame

_BINDINGS = {
    pygame.K_w: "move_forward",
    pygame.K_s: "move_backward",
    pygame.K_a: "move_left",
    pygame.K_d: "move_right",
    pygame.K_LEFT: "turn_left",
    pygame.K_RIGHT: "turn_right",
    pygame.K_l: "e_wall",
    pygame.K_k: "n_wall",
    pygame.K_j: "s_wall",
    pygame.K_h: "w_wall",
}


@dataclass
class Input:
    """Which bound keys are currently held down."""

    move_forward: bool = False
    move_backward: bool = False
    move_left: bool = False
    move_right: bool = False
    turn_left: bool = False
    turn_right: bool = False
    n_wall: bool = False
    e_wall: bool = False
    s_wall: bool = False
    w_wall: bool = False

    def set_key(self, key: int, down: bool) -> bool:
        """Record a key press or release; return whether the key is bound."""
        name = _BINDINGS.get(key)
        if name is None:
            return False
        setattr(self, name, down)
        return True

    def handle_event(self, event: Any) -> bool:
        """Apply one event; return False if it asks the game to stop."""
        if event.type == pygame.QUIT:
            return False
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            if event.key == pygame.K_ESCAPE:
                return False
            self.set_key(event.key, event.type == pygame.KEYDOWN)
        return True


def poll_input(state: Input, events: Iterable[Any]) -> bool:
    """Apply every event in order; return False if any asked the game to stop."""
    running = True
    for event in events:
        if not state.handle_event(event):
            running = False
    return running