# multitask

Small building blocks for running work away from a main loop, and a few jobs
built on them.

## Modules

- **`multitask.base`**: the task lifecycle.
  - `TaskBase` defines `start()`, `cancel()`, `is_running()`, `is_canceled()`,
    `on_cancel()`, `on_complete()` and `tick(delta_time)`. `cancel()` acts only
    on a running task that is not already cancelled. It then calls `on_cancel()`,
    which notifies every callable in `cancel_listeners`. `on_complete()` notifies
    `complete_listeners`.
  - `ThreadTask` runs its work as background jobs. `wait(timeout)` blocks until
    they finish and returns `False` on timeout. A `ThreadTask` can be used as a
    context manager: on exit it cancels a running task and waits for it.
  - `MultiThreadTask` runs `task_body()` once in the background. By default
    `task_body()` calls the `body` callable given to the constructor. The task
    then notifies `task_listeners`, and calls `on_complete()` unless it was
    cancelled. `start()` returns `False` while the task is still running.
  - `ExecutionType` chooses where the work runs:
    - `THREAD` gives the task its own thread.
    - `THREAD_POOL` uses the `thread_pool` executor you pass in, if any.
    - In every other case the work goes to a shared thread pool.
  - `Branches` and `BranchesWithBody` name the outcomes a caller can report:
    start, body, completed and cancelled.
- **`multitask.multiframe`**: frame-sliced tasks. Each call to `tick(delta_time)`
  runs up to `iterations_per_tick` iterations, once `delay` seconds have passed
  since the last batch.
  - `MultiFrameAsyncTask` calls `task_body()` until it is cancelled.
  - `MultiFrameLoop1DTask`, `MultiFrameLoop2DTask` and `MultiFrameLoop3DTask`
    call `task_body(x)`, `task_body(x, y)` or `task_body(x, y, z)` once for every
    cell. `x` varies fastest. They stop when every cell is done.
  - `start()` returns `False` in these cases: the size is not positive,
    `iterations_per_tick` is below 1, or `delay` is negative.
- **`multitask.dithering`**: Floyd–Steinberg error diffusion of row-major RGBA
  pixels.
  - `dither(pixels, width, height, scale)` returns a dithered copy. It raises
    `ValueError` when `scale` or a dimension is not positive, or when the pixel
    count does not match `width * height`.
  - `SetDitheringTask` dithers its `pixels` in place in the background. Its
    `start()` returns `False` for invalid input.
- **`multitask.url`**: `UrlToDataTask` sends one HTTP request in the background
  and stores the response body in `data`.
  - The verb is a `RequestMethod`.
  - Headers with an empty name or value are not sent.
  - An empty `content` sends no body.
  - A `timeout` of zero keeps the default timeout.
  - A request that cannot connect leaves `data` empty.
- **`multitask.dual_tables`**: lookup tables for dual marching cubes.
  - `dual_points(cube_code)` gives the dual point codes of a cell configuration.
  - `problematic_direction(cube_code)` gives the face to inspect for an
    ambiguous configuration, or `None`.
- **`multitask.voxels`**: voxel sampling and the dual point helpers.
  - `VolumeSettings` holds the volume parameters.
  - `DensityField` samples a density callable lazily and caches the results.
    The callable returns a float or a `DensityPoint`.
  - `Mesh` is an indexed triangle list. `add_triangle` drops degenerate
    triangles and raises `IndexError` for unknown vertices.
  - `cell_code`, `dual_point_code` and `dual_point` compute the cell
    configuration, the dual point code of an edge (with optional manifold
    fixing) and the averaged dual vertex position.

## Install

```
pip install .
pip install ".[test]"   # to run the tests
```

## Example: a background task

```python
from multitask.base import MultiThreadTask

class Sum(MultiThreadTask):
    def task_body(self):
        self.result = sum(range(1_000_000))

    def on_complete(self):
        print("done:", self.result)

task = Sum()
task.start()
task.wait(None)
```

## Example: a frame-sliced loop

```python
from multitask.multiframe import MultiFrameLoop2DTask

class Visit(MultiFrameLoop2DTask):
    def task_body(self, x, y):
        print(x, y)

loop = Visit(x_size=4, y_size=3, iterations_per_tick=5)
loop.start()
while loop.is_running():
    loop.tick(1 / 60)
```

## Example: dithering

```python
from multitask.dithering import dither

pixels = [(200, 120, 40, 255)] * (8 * 8)
result = dither(pixels, 8, 8, 4)
```

## Example: dual points in a density field

```python
from multitask.voxels import DensityField, VolumeSettings, cell_code, dual_point, dual_point_code

settings = VolumeSettings(units=(4, 4, 4), iso_level=0.5)
field = DensityField(settings, lambda c: 1.0 if c[0] >= 2 else 0.0)

code = cell_code(field, (1, 1, 1))
point_code = dual_point_code(field, (1, 1, 1), 1, force_manifold=False)
print(code, dual_point(field, (1, 1, 1), point_code))
```

## What it does not do

The package does not generate a complete mesh from a volume. `multitask.voxels`
and `multitask.dual_tables` supply sampling, cell codes and dual vertex
positions, plus a `Mesh` container to collect results. Walking the volume and
emitting triangles is left to the caller. There is no command-line tool.

## Tests

```
pytest
```