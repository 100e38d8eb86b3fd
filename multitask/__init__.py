"""Background and frame-sliced tasks, dithering, HTTP fetching and dual marching cubes voxel helpers."""

__version__ = "0.1.0"
__all__ = [
    "base",
    "dithering",
    "multiframe",
    "dual_tables",
    "url",
    "voxels",
]