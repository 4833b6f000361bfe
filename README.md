# worldgen

Building blocks for generating Earth-like planets.

The terrain stages work on flat arrays of cell heights together with a
neighbour function: a callable that, given a cell index, returns the indices
of the cells next to it. This keeps them independent of how the planet is laid
out. A cube-sphere, a torus or a simple line of cells all work the same way.

## What is in the package

- **`worldgen.priority_flood`**: `priority_flood_fill(heights, neighbors4,
  outlet)` fills every depression up to its spill level. Cells at or below
  `outlet.sea_level` are the outlets. If no cell is that low, the lowest cell
  is used instead.
- **`worldgen.rivers`**: `compute_flow_directions_8` gives the
  steepest-descent downstream cell of every cell, or `NO_DOWNSTREAM` (`-1`)
  for sinks. Only strictly lower neighbours count. `compute_flow_accumulation`
  counts the cells that drain through each cell, and each cell counts itself.
  `river_mask_from_accum` returns 255 where the accumulation reaches a
  threshold and 0 elsewhere. `rivers_from_heights` does all three steps.
- **`worldgen.coast`**: `compute_coast_distance_km(heights, sea_level,
  neighbors4, step_km, inland_steps)` runs a breadth-first search from
  coastline cells, which are land cells with an ocean neighbour. Ocean cells
  get 0. Land that no coastline reaches gets `step_km * inland_steps`.
- **`worldgen.grid`**: `neighbors8(neighbors4, idx)` builds the eight
  surrounding cells from a four-neighbour function. The four-neighbour
  function must return cells in the order east, west, north, south. A
  diagonal cell is reached by a horizontal step followed by a vertical step,
  so the walk stays correct across seams.
- **`worldgen.temperature`**: `temperature_c(latitude_rad, elevation_km,
  is_ocean, coast_distance_km, month_idx, cfg)` gives the monthly temperature
  at a point. It combines a latitude gradient, a seasonal swing that depends
  on the hemisphere and is damped over ocean, an altitude lapse rate, and
  maritime buffering of land near the coast.
- **`worldgen.climate_util`**: `local_tangent_basis` returns the east and
  north unit tangents at a point on the unit sphere. `month_phase_sin` gives
  the seasonal sine at the centre of a month. `great_circle_step` steps a
  point along a tangent direction by an angle.
- **`worldgen.view_state`**: helpers for an equirectangular map view.
  `ViewState` keeps the window size, centre, zoom and display mode. Its
  methods are `pan_pixels`, `zoom`, `resize` and `select_mode`:
  - `zoom` changes the zoom by a factor of `1.1 ** scroll_y`, clamped to
    0.25–128. If a cursor position is given, the point under the cursor stays
    fixed.
  - `select_mode` takes `MODE_HEIGHT` or `MODE_BIOMES`. The biome mode is
    only accepted when `has_biomes` is set.

  The module also provides `lon_lat_from_screen` and `wrap_lon`.
- **`worldgen.texture_packing`**: `align_to` rounds a value up to a multiple
  of a power of two. `pack_u16_rows_padded`, `pack_rgba8_rows_padded` and
  `pack_f32_rows_padded` pad image rows to 256 bytes for texture uploads.
  Each returns the bytes and the padded bytes per row. `rgb_to_rgba` expands
  RGB8 data to opaque RGBA8.
- **Configuration dataclasses**:
  - `ClimateConfig` (`worldgen.climate_config`, with `earth_like()`)
  - `ErosionConfig`, `ErosionBackend` and `SeaLevelOutlet`
    (`worldgen.erosion_config`)
  - `BiomeConfig` (`worldgen.biome_config`)

The only runtime dependency is NumPy.

## Examples

Filling a depression on a line of five cells. The cells at both ends are sea:

```python
from worldgen.erosion_config import SeaLevelOutlet
from worldgen.priority_flood import priority_flood_fill

heights = [0.0, 2.0, 1.0, 3.0, 0.0]

def line(i):
    return [j for j in (i - 1, i + 1) if 0 <= j < len(heights)]

print(priority_flood_fill(heights, line, SeaLevelOutlet(0.0)))
# [0. 2. 2. 3. 0.]
```

Rivers on a slope:

```python
from worldgen.rivers import rivers_from_heights

heights = [3.0, 2.0, 1.0, 0.0]

def line(i):
    return [j for j in (i - 1, i + 1) if 0 <= j < len(heights)]

downstream, accum, mask = rivers_from_heights(heights, line, 3)
# downstream [1 2 3 -1], accum [1 2 3 4], mask [0 0 255 255]
```

Distance to the coast with 10 km cells:

```python
from worldgen.coast import compute_coast_distance_km

heights = [-1.0, 1.0, 1.0, 1.0, 1.0, -1.0]

def line(i):
    return [j for j in (i - 1, i + 1) if 0 <= j < len(heights)]

print(compute_coast_distance_km(heights, 0.0, line, 10.0, 100))
# [ 0.  0. 10. 10.  0.  0.]
```

Temperature at the equator and at the pole:

```python
import math

from worldgen.climate_config import ClimateConfig
from worldgen.temperature import temperature_c

cfg = ClimateConfig.earth_like()
equator = temperature_c(0.0, 0.0, False, 1e9, 0, cfg)
pole = temperature_c(math.pi / 2, 0.0, False, 1e9, 0, cfg)
assert equator > pole
```

## Units

- Heights and elevations are in kilometres. Sea level defaults to `0.0`.
- Temperatures are in degrees Celsius.
- Angles are in radians unless a field name says otherwise.

## What the package does not do

The package does not do the following:

- It has no cube-sphere geometry, such as face ids or the mapping between
  directions and face cells. Callers supply their own neighbour functions.
- It does not run hydraulic or thermal erosion. `ErosionConfig` only holds
  the parameters.
- It has no wind or moisture model and no precipitation.
- It does not classify biomes. `BiomeConfig` only holds the parameters.
- It has no viewer window. It does not read or write image files, and it
  installs no command-line programs.