"""
Immutable data container models for the hillshade pipeline.

These models are validated containers for the height grid, the per-cell surface
normals, the light and the resulting shading. They are frozen, so every step of
the pipeline receives unmodified input.
"""

from .height_map import HeightMap
from .hillshade import Hillshade
from .light_source import LightDirection, LightSource
from .surface_normals import SurfaceNormals


__all__ = [
    "HeightMap",
    "Hillshade",
    "LightDirection",
    "LightSource",
    "SurfaceNormals",
]
