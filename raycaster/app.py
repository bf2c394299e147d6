"""Window setup and the main game loop."""

from __future__ import annotations

import argparse
import logging
import math
import struct
from typing import NamedTuple, Sequence

import pygame

from raycaster.controls import Input, poll_input
from raycaster.player import Player
from raycaster.render import render_sector_untextured
from raycaster.sector import create_world

VIEW_WIDTH = 640
VIEW_HEIGHT = 480
FOV = math.radians(90.0)
MOVE_RATE = 15.0
TURN_RATE = 3.0

log = logging.getLogger(__name__)


class FrameTiming(NamedTuple):
    frame_time: float
    speed: float
    rot: float

    @property
    def fps(self) -> float:
        return math.inf if self.frame_time == 0 else 1.0 / self.frame_time


def frame_timing(prev_ticks: int, ticks: int) -> FrameTiming:
    """Frame duration in seconds and the per-frame move and turn amounts."""
    frame_time = ((ticks - prev_ticks) & 0xFFFFFFFF) / 1000.0
    return FrameTiming(frame_time, frame_time * MOVE_RATE, frame_time * TURN_RATE)


def framebuffer_bytes(buffer: Sequence[int]) -> bytes:
    """Pack pixels so that the low byte of each comes first (RGBA order)."""
    return struct.pack(f"<{len(buffer)}I", *buffer)


def game_loop(screen: pygame.Surface, clock: pygame.time.Clock) -> None:
    """Run frames until the player quits."""
    player = Player()
    state = Input()
    world = create_world()
    ticks = 0
    running = True
    while running:
        prev_ticks, ticks = ticks, pygame.time.get_ticks()
        timing = frame_timing(prev_ticks, ticks)
        print(f"FPS: {timing.fps:f}")
        player.speed = timing.speed
        player.rot = timing.rot

        running = poll_input(state, pygame.event.get())
        player.handle_input(state)

        buffer = render_sector_untextured(
            world, VIEW_WIDTH, VIEW_HEIGHT, player.pos, player.direction, FOV
        )
        frame = pygame.image.frombuffer(
            framebuffer_bytes(buffer), (VIEW_WIDTH, VIEW_HEIGHT), "RGBA"
        )
        screen.fill((0, 0, 0))
        screen.blit(frame, (0, 0))
        pygame.display.flip()
        clock.tick(60)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="raycaster", description="Sector raycaster demo.")
    parser.parse_args(argv)

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((VIEW_WIDTH, VIEW_HEIGHT))
        except pygame.error as exc:
            log.error("could not create window: %s", exc)
            return 1
        pygame.display.set_caption("Raycaster")
        game_loop(screen, pygame.time.Clock())
    finally:
        pygame.quit()
    return 0