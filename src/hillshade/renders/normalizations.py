import numpy as np
from typing import NamedTuple

from numpy.typing import NDArray
from returns.pipeline import flow

from hillshade.container_models.base import DepthData
from hillshade.container_models.surface_normals import SurfaceNormals


class GradientComponents(NamedTuple):
    """Container for gradient components with optional magnitude."""

    x: NDArray
    y: NDArray
    magnitude: NDArray | None = None


def _compute_depth_gradients(depth_data: DepthData) -> GradientComponents:
    """
    Compute depth gradients (∂z/∂x, ∂z/∂y) on unit spacing.

    Interior cells use central differences, the first and last row and column
    use one-sided differences, so the output keeps the shape of the input.
    """
    y_gradient, x_gradient = np.gradient(depth_data)
    return GradientComponents(x=x_gradient, y=y_gradient)


def _add_normal_magnitude(gradients: GradientComponents) -> GradientComponents:
    """Compute and attach the normal vector magnitude to gradient components."""
    magnitude = np.sqrt(gradients.x**2 + gradients.y**2 + 1)
    return GradientComponents(gradients.x, gradients.y, magnitude)


def _normalize_to_surface_normals(gradients: GradientComponents) -> SurfaceNormals:
    """Normalize gradient components to unit surface normal vectors."""
    x, y, magnitude = gradients
    if magnitude is None:
        raise ValueError("Normal magnitude must be computed before normalizing")
    return SurfaceNormals(
        x_normal_vector=-x / magnitude,
        y_normal_vector=-y / magnitude,
        z_normal_vector=1 / magnitude,
    )


def compute_surface_normals(depth_data: DepthData) -> SurfaceNormals:
    """
    Compute per-cell outward unit surface normals from a 2D height grid.

    The grid is treated as the surface ``z = depth_data[row, col]`` sampled on
    unit spacing, so spacing and exaggeration must already be folded into the
    heights. The normal is ``(-∂z/∂x, -∂z/∂y, 1)`` normalized per cell, where x
    follows the columns and y follows the rows. The vertical component is
    positive for every finite cell.

    Boundary rows and columns use one-sided differences instead of padding, so
    every axis needs at least 2 samples.

    :param depth_data: 2D array of (scaled) heights with shape (Height, Width).
    :returns: ``SurfaceNormals`` with three components of shape (Height, Width).
    """
    return flow(
        depth_data,
        _compute_depth_gradients,
        _add_normal_magnitude,
        _normalize_to_surface_normals,
    )
