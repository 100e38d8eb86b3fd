"""Voxel density sampling and the dual marching cubes point helpers."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .dual_tables import dual_points, problematic_direction

__all__ = [
    "VolumeSettings",
    "DensityPoint",
    "DensityField",
    "Mesh",
    "cell_code",
    "dual_point_code",
    "dual_point",
]

Coords = tuple[int, int, int]
Vector = tuple[float, float, float]
Color = tuple[int, int, int, int]

# Corner offsets of a dual cell: corner i sits at (i & 1, (i >> 1) & 1, (i >> 2) & 1).
_CORNERS: tuple[Coords, ...] = tuple(((i & 1), (i >> 1) & 1, (i >> 2) & 1) for i in range(8))

# Edge bit -> (low corner, high corner, axis along which the edge runs).
_EDGES: tuple[tuple[int, int, int, int], ...] = (
    (1, 0, 1, 0),
    (2, 1, 5, 2),
    (4, 4, 5, 0),
    (8, 0, 4, 2),
    (16, 2, 3, 0),
    (32, 3, 7, 2),
    (64, 6, 7, 0),
    (128, 2, 6, 2),
    (256, 0, 2, 1),
    (512, 1, 3, 1),
    (1024, 5, 7, 1),
    (2048, 4, 6, 1),
)


def _coords(value: Sequence[int]) -> Coords:
    x, y, z = value
    return int(x), int(y), int(z)


def _offset(coords: Coords, delta: Coords) -> Coords:
    return coords[0] + delta[0], coords[1] + delta[1], coords[2] + delta[2]


@dataclass
class VolumeSettings:
    """Size and sampling parameters of a voxel volume.

    ``units`` counts lattice points along x, y and z; ``margin`` points
    are kept free around the polygonised region.
    """

    units: Coords = (32, 32, 32)
    resolution: float = 100.0
    iso_level: float = 0.0
    inverted: bool = False
    margin: int = 2

    def __post_init__(self) -> None:
        self.units = _coords(self.units)

    @property
    def point_count(self) -> int:
        x, y, z = self.units
        return x * y * z

    @property
    def valid(self) -> bool:
        """True when every dimension exceeds the margin and resolution is non-zero."""
        return all(u > self.margin for u in self.units) and abs(self.resolution) > 1e-8


@dataclass
class DensityPoint:
    """A sampled density value and the colour carried by that lattice point."""

    value: float = 0.0
    color: Color = (0, 0, 0, 0)


DensitySource = Callable[[Coords], "DensityPoint | float"]


class DensityField:
    """Lazily samples and caches the density of every lattice point of a volume."""

    def __init__(self, settings: VolumeSettings, density: DensitySource | None = None) -> None:
        self.settings = settings
        self.density = density
        self._points: dict[int, DensityPoint] = {}

    def reset(self) -> None:
        """Forget every cached sample."""
        self._points.clear()

    def linear_index(self, coords: Sequence[int]) -> int:
        """Row-major index of ``coords``, clamped to ``[-1, point_count]``."""
        x, y, z = _coords(coords)
        ux, uy, _ = self.settings.units
        index = x + ux * y + ux * uy * z
        return max(-1, min(index, self.settings.point_count))

    def point(self, coords: Sequence[int]) -> DensityPoint:
        """Return the sample at ``coords``, constructing and caching it on first use."""
        key = _coords(coords)
        index = self.linear_index(key)
        if not 0 <= index < self.settings.point_count:
            raise IndexError(f"voxel coordinates outside the volume: {key}")
        cached = self._points.get(index)
        if cached is not None:
            return cached
        sample = self._construct(key)
        self._points[index] = sample
        return sample

    def value(self, coords: Sequence[int]) -> float:
        return self.point(coords).value

    def _construct(self, coords: Coords) -> DensityPoint:
        if self.density is None:
            return DensityPoint()
        sample = self.density(coords)
        if isinstance(sample, DensityPoint):
            return DensityPoint(sample.value, sample.color)
        return DensityPoint(float(sample))


@dataclass
class Mesh:
    """An indexed triangle mesh in voxel coordinates."""

    vertices: list[Vector] = field(default_factory=list)
    triangles: list[tuple[int, int, int]] = field(default_factory=list)

    def add_vertex(self, position: Sequence[float]) -> int:
        x, y, z = position
        self.vertices.append((float(x), float(y), float(z)))
        return len(self.vertices) - 1

    def add_triangle(self, a: int, b: int, c: int) -> int | None:
        """Append a triangle and return its index; degenerate triangles are dropped."""
        for index in (a, b, c):
            if not 0 <= index < len(self.vertices):
                raise IndexError(f"unknown vertex: {index}")
        if a == b or a == c or b == c:
            return None
        self.triangles.append((a, b, c))
        return len(self.triangles) - 1


def cell_code(field: DensityField, coords: Sequence[int]) -> int:
    """Bit ``i`` is set when corner ``i`` of the cell is at or above the iso level."""
    origin = _coords(coords)
    iso = field.settings.iso_level
    code = 0
    for bit, corner in enumerate(_CORNERS):
        if field.value(_offset(origin, corner)) >= iso:
            code |= 1 << bit
    return code


def dual_point_code(
    field: DensityField, coords: Sequence[int], edge: int, force_manifold: bool
) -> int:
    """Return the dual point code of the cell that contains ``edge``, or 0 if none does.

    With ``force_manifold`` an ambiguous cell whose facing neighbour is also
    ambiguous is treated as its complement.
    """
    origin = _coords(coords)
    code = cell_code(field, origin)
    if force_manifold:
        direction = problematic_direction(code)
        if direction is not None:
            axis = direction >> 1
            neighbor = list(origin)
            neighbor[axis] += 1 if direction & 1 else -1
            if 1 <= neighbor[axis] < field.settings.units[axis] - 1:
                if problematic_direction(cell_code(field, neighbor)) is not None:
                    code ^= 0xFF
    return next((point for point in dual_points(code) if point & edge), 0)


def dual_point(field: DensityField, coords: Sequence[int], point_code: int) -> Vector:
    """Average the iso crossings of the edges in ``point_code`` within the cell."""
    origin = _coords(coords)
    iso = field.settings.iso_level
    values = [field.value(_offset(origin, corner)) for corner in _CORNERS]
    total = [0.0, 0.0, 0.0]
    found = 0
    for bit, low, high, axis in _EDGES:
        if not point_code & bit:
            continue
        position = [float(v) for v in _CORNERS[low]]
        position[axis] = (iso - values[low]) / (values[high] - values[low])
        for dim in range(3):
            total[dim] += position[dim]
        found += 1
    if found == 0:
        raise ValueError("dual point code names no edge")
    return (
        total[0] / found + origin[0],
        total[1] / found + origin[1],
        total[2] / found + origin[2],
    )