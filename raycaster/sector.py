"""World geometry: sectors, walls and rays."""

from __future__ import annotations

from dataclasses import dataclass, field

from raycaster.vectors import Vec2


@dataclass
class Sector:
    """A convex region bounded by a contiguous run of walls."""

    floor_height: float
    ceiling_height: float
    wall_start: int
    wall_count: int


@dataclass
class Wall:
    """A wall segment from ``a`` to ``b``."""

    a: Vec2
    b: Vec2
    rgb_color: int
    neighbor: int = -1
    texture_index: int = 0


@dataclass
class World:
    sectors: list[Sector] = field(default_factory=list)
    walls: list[Wall] = field(default_factory=list)
    vertices: list[Vec2] = field(default_factory=list)

    def sector_walls(self, index: int) -> list[Wall]:
        """Return the walls belonging to the sector at ``index``."""
        if not 0 <= index < len(self.sectors):
            raise IndexError(f"no sector {index}")
        sector = self.sectors[index]
        return self.walls[sector.wall_start : sector.wall_start + sector.wall_count]


@dataclass(frozen=True)
class Ray:
    origin: Vec2
    direction: Vec2


def create_world() -> World:
    """Build the demo world: a square room with a triangular pillar."""
    walls = [
        Wall(Vec2(0, 0), Vec2(64, 0), 0xFFFF0000),
        Wall(Vec2(64, 0), Vec2(64, 64), 0xFF00FF00),
        Wall(Vec2(64, 64), Vec2(0, 64), 0xFF0000FF),
        Wall(Vec2(0, 64), Vec2(0, 0), 0xFFFFFFFF),
        Wall(Vec2(24, 24), Vec2(36, 48), 0xFFFFFF00),
        Wall(Vec2(36, 48), Vec2(48, 24), 0xFFFF00FF),
        Wall(Vec2(48, 24), Vec2(24, 24), 0xFF00FFFF),
    ]
    sectors = [Sector(floor_height=0, ceiling_height=64, wall_start=0, wall_count=len(walls))]
    return World(sectors=sectors, walls=walls)