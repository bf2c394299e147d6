"""Column-based raycasting into a 32-bit pixel buffer."""

from __future__ import annotations

import math
from operator import itemgetter

from raycaster.sector import Ray, Wall, World
from raycaster.vectors import Vec2


def rgb_pixel(r: int, g: int, b: int) -> int:
    """Pack an opaque pixel with red in the low byte."""
    return 0xFF000000 | (r & 0xFF) | (g & 0xFF) << 8 | (b & 0xFF) << 16


def adjust_brightness(color: int, brightness: float) -> int:
    """Scale the three colour channels of ``color``; alpha is kept."""
    brightness = max(0.0, min(brightness, 1.0))
    a = (color >> 24) & 0xFF
    r = int(((color >> 16) & 0xFF) * brightness)
    g = int(((color >> 8) & 0xFF) * brightness)
    b = int((color & 0xFF) * brightness)
    return (a << 24) | (r << 16) | (g << 8) | b


def ray_intersects_wall(ray: Ray, wall: Wall) -> float | None:
    """Return the ray parameter of the hit on ``wall``, or None if it misses."""
    r = ray.direction
    s = wall.b - wall.a
    qp = wall.a - ray.origin

    rxs = r.cross(s)
    if rxs == 0.0:
        return None

    t = qp.cross(s) / rxs
    u = qp.cross(r) / rxs
    if t >= 0.0 and 0.0 <= u <= 1.0:
        return t
    return None


def _strip_height(view_h: int, distance: float) -> int:
    if distance == 0:
        return view_h
    return int(view_h / distance)


def render_sector_untextured(
    world: World, view_w: int, view_h: int, pos: Vec2, direction: Vec2, fov: float
) -> list[int]:
    """Render the first sector of ``world`` as flat-coloured wall strips.

    Returns a row-major list of ``view_w * view_h`` pixels, zero where nothing was drawn.
    """
    plane_length = math.tan(fov / 2)
    plane = Vec2(-direction.y * plane_length, direction.x * plane_length)
    buffer = [0] * (view_w * view_h)
    walls = world.sector_walls(0)

    for column in range(view_w):
        camera_x = 2.0 * column / view_w - 1.0
        ray = Ray(pos, direction + plane.scale(camera_x))
        hits = (
            (dist, wall)
            for wall in walls
            if (dist := ray_intersects_wall(ray, wall)) is not None
        )
        nearest = min(hits, key=itemgetter(0), default=None)
        if nearest is None:
            continue
        dist, wall = nearest

        strip = _strip_height(view_h, dist)
        start = max(view_h // 2 - strip // 2, 0)
        end = min(strip // 2 + view_h // 2, view_h - 1)
        if end <= start:
            continue

        brightness = 1.0 if dist == 0 else 16 / dist
        pixel = adjust_brightness(wall.rgb_color, brightness)
        buffer[start * view_w + column : end * view_w + column : view_w] = [pixel] * (end - start)
    return buffer