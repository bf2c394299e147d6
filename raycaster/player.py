"""The player's position, heading and movement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from raycaster.controls import Input
from raycaster.vectors import Vec2


@dataclass
class Player:
    pos: Vec2 = field(default_factory=lambda: Vec2(7, 7))
    direction: Vec2 = field(default_factory=lambda: Vec2(-1, 0))
    viewplane: Vec2 = field(default_factory=lambda: Vec2(0, -0.66))
    speed: float = 1.0
    rot: float = 1.0

    def handle_input(self, state: Input) -> None:
        """Turn and move according to the held keys."""
        if state.turn_left:
            self.direction = self.direction.rotate(-self.rot)
            self.viewplane = self.viewplane.rotate(-self.rot)
        if state.turn_right:
            self.direction = self.direction.rotate(self.rot)
            self.viewplane = self.viewplane.rotate(self.rot)

        if state.move_forward:
            self.pos = self.pos + self.direction * self.speed
        if state.move_backward:
            self.pos = self.pos + self.direction * -self.speed
        if state.move_left:
            self.pos = self.pos + self.direction.rotate(-math.pi / 2) * self.speed
        if state.move_right:
            self.pos = self.pos + self.direction.rotate(math.pi / 2) * self.speed