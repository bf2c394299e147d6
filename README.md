# raycaster

A small first-person raycaster. The world is a single sector made of straight
wall segments: an outer 64 × 64 room with a triangular pillar in the middle.
Each screen column casts one ray, finds the nearest wall it hits, and draws a
vertical strip in that wall's colour. The strip's height shrinks with distance
and the colour is dimmed with distance.

## Installing

```
pip install .
```

pygame is the only runtime dependency.

## Running

```
raycaster
```

This opens a 640 × 480 window titled "Raycaster" with a 90° field of view.
The frame rate is capped at 60 frames per second. The current frame rate is
printed to standard output once per frame. The command takes no options
except `--help`.

| Key            | Action              |
|----------------|---------------------|
| `W` / `S`      | move forward / back |
| `A` / `D`      | strafe left / right |
| `←` / `→`      | turn left / right   |
| `Esc`          | quit                |

Closing the window also quits. Movement and turning amounts are scaled by the
frame time, so they feel the same at any frame rate. The `H`, `J`, `K` and `L`
keys are tracked by `Input` (as `w_wall`, `s_wall`, `n_wall` and `e_wall`) but
do nothing in the game.

## Using the pieces

The package can also be used as a library.

```python
import math

from raycaster.render import render_sector_untextured
from raycaster.sector import create_world
from raycaster.vectors import Vec2

world = create_world()
pixels = render_sector_untextured(
    world, 640, 480, Vec2(7, 7), Vec2(-1, 0), math.radians(90)
)
```

- `raycaster.vectors.Vec2` is an immutable 2-D vector with `+`, `-`, scalar
  `*`, unary `-`, `scale`, `dot`, `cross`, `length`, `normalize`, `distance`,
  `rotate` and `reciprocal`.
- `raycaster.sector` holds the `Sector`, `Wall`, `World` and `Ray`
  dataclasses. `World.sector_walls(index)` returns a sector's walls and raises
  `IndexError` for a missing sector; `create_world()` builds the demo level.
- `raycaster.render` has `rgb_pixel`, `adjust_brightness`,
  `ray_intersects_wall` (the hit distance along the ray, or `None` on a miss)
  and `render_sector_untextured`, which returns a flat row-major list of
  32-bit pixels, zero where nothing was drawn.
- `raycaster.controls.Input` tracks which bound keys are held;
  `Input.handle_event` applies one pygame event and `poll_input` a batch,
  both returning `False` when the game should stop.
- `raycaster.player.Player` applies an `Input` to its position, facing and
  view plane.
- `raycaster.app` has `frame_timing`, `framebuffer_bytes`, `game_loop` and
  `main`, the function behind the `raycaster` command.

## Limitations

Only the first sector of a world is drawn. Walls are flat-coloured: there are
no textures, floors or ceilings. There is no collision detection, so the
player can walk through walls and out of the room. There is no map view and
no way to load or save levels; the only level is the one `create_world()`
builds.

## Tests

```
pip install .[test]
pytest
```