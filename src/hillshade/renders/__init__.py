"""
Relief shading of height grids.

This module estimates surface normals from a height grid, resolves the light
direction and shades every cell with the clamped dot product of the two.

Notes
-----
- Surface normals use central differences with one-sided differences at the borders
- An all-zero light vector means "derive the light from azimuth and altitude"
- NaN heights propagate to the shading of the neighbouring cells
"""

from .lighting import resolve_light_direction
from .normalizations import compute_surface_normals
from .shading import calculate_diffuse_lighting, compute_hillshade


__all__ = (
    "calculate_diffuse_lighting",
    "compute_hillshade",
    "compute_surface_normals",
    "resolve_light_direction",
)
