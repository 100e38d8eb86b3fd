"""Floyd-Steinberg error-diffusion dithering of RGBA pixel data."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from concurrent.futures import Executor

from .base import ExecutionType, MultiThreadTask

Pixel = tuple[int, int, int, int]

# (dx, dy, weight) for the neighbours that receive the quantisation error.
_DIFFUSION = (
    (1, 0, 7.0 / 16.0),
    (-1, 1, 3.0 / 16.0),
    (0, 1, 5.0 / 16.0),
    (1, 1, 1.0 / 16.0),
)


def _check(pixels: list[Pixel], width: int, height: int, scale: int) -> None:
    if scale <= 0:
        raise ValueError("scale must be positive")
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    if len(pixels) != width * height:
        raise ValueError("pixel count does not match width * height")


def _dither_in_place(
    pixels: list[Pixel],
    width: int,
    height: int,
    scale: int,
    should_stop: Callable[[], bool] = lambda: False,
) -> bool:
    """Dither ``pixels`` in place; return False if stopped early."""
    step = 255 // scale
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            if should_stop():
                return False
            r, g, b, a = pixels[y * width + x]
            old = (r, g, b)
            new = tuple(((scale * c) // 255) * step & 0xFF for c in old)
            pixels[y * width + x] = (*new, a)
            error = tuple((c - n) & 0xFF for c, n in zip(old, new))
            for dx, dy, weight in _DIFFUSION:
                index = (y + dy) * width + (x + dx)
                nr, ng, nb, na = pixels[index]
                spread = tuple(
                    int(c + e * weight) & 0xFF for c, e in zip((nr, ng, nb), error)
                )
                pixels[index] = (*spread, na)
    return True


def dither(pixels: Iterable[Pixel], width: int, height: int, scale: int) -> list[Pixel]:
    """Return a dithered copy of row-major ``pixels`` quantised to ``scale`` levels.

    The outermost rows and columns are only touched by diffused error.
    """
    result = [tuple(p) for p in pixels]
    _check(result, width, height, scale)
    _dither_in_place(result, width, height, scale)
    return result


class SetDitheringTask(MultiThreadTask):
    """Dithers its pixel data in place on a background thread."""

    def __init__(
        self,
        pixels: Iterable[Pixel] = (),
        width: int = 0,
        height: int = 0,
        scale: int = 1,
        execution_type: ExecutionType = ExecutionType.THREAD_POOL,
        thread_pool: Executor | None = None,
    ) -> None:
        super().__init__(None, execution_type, thread_pool)
        self.pixels: list[Pixel] = [tuple(p) for p in pixels]
        self.width = width
        self.height = height
        self.scale = scale

    def start(self) -> bool:
        try:
            _check(self.pixels, self.width, self.height, self.scale)
        except ValueError:
            return False
        return super().start()

    def task_body(self) -> None:
        _dither_in_place(self.pixels, self.width, self.height, self.scale, self.is_canceled)