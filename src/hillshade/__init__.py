"""Hillshade (relief shading) of digital elevation models."""

from hillshade.container_models import (
    HeightMap,
    Hillshade,
    LightDirection,
    LightSource,
    SurfaceNormals,
)
from hillshade.parameters import HillshadeParameters
from hillshade.renders import (
    compute_hillshade,
    compute_surface_normals,
    resolve_light_direction,
)


__all__ = [
    "HeightMap",
    "Hillshade",
    "HillshadeParameters",
    "LightDirection",
    "LightSource",
    "SurfaceNormals",
    "compute_hillshade",
    "compute_surface_normals",
    "resolve_light_direction",
]
