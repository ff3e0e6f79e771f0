from functools import partial

from numpy.typing import ArrayLike
import numpy as np
from returns.pipeline import flow
from returns.result import safe

from hillshade.container_models.base import DepthData, UnitVector
from hillshade.container_models.height_map import HeightMap
from hillshade.container_models.hillshade import Hillshade
from hillshade.container_models.light_source import LightDirection
from hillshade.container_models.surface_normals import SurfaceNormals
from hillshade.parameters import HillshadeParameters
from hillshade.renders.lighting import resolve_light_direction
from hillshade.renders.normalizations import compute_surface_normals
from hillshade.utils.logger import log_railway_function


def calculate_diffuse_lighting(
    normals: SurfaceNormals, light_vector: UnitVector
) -> DepthData:
    """
    Compute Lambertian diffuse reflection: max(N · L, 0).

    The single light vector is broadcast over every cell. Cells facing away from
    the light get exactly 0, NaN normals give NaN.

    :param normals: Per-cell surface normals.
    :param light_vector: 3-element vector pointing towards the light.
    :returns: 2D array of shading values with the shape of the normals.
    """
    x_light, y_light, z_light = light_vector
    return np.maximum(
        x_light * normals.x_normal_vector
        + y_light * normals.y_normal_vector
        + z_light * normals.z_normal_vector,
        0,
    )


def _to_height_map(
    depth_data: HeightMap | ArrayLike,
    parameters: HillshadeParameters,
    check_spacing: bool,
) -> HeightMap:
    """Wrap raw heights in a `HeightMap`, or check a given map against the spacing option."""
    if not isinstance(depth_data, HeightMap):
        return HeightMap(data=depth_data, spacing=parameters.spacing)
    if (
        check_spacing
        and "spacing" in parameters.model_fields_set
        and parameters.spacing != depth_data.spacing
    ):
        raise ValueError(
            f"Spacing {parameters.spacing} conflicts with the height map spacing "
            f"{depth_data.spacing}"
        )
    return depth_data


def _shade(
    normals: SurfaceNormals, light_direction: LightDirection
) -> Hillshade:
    return Hillshade(
        data=calculate_diffuse_lighting(normals, light_direction.vector),
        light_direction=light_direction.vector,
        flat_reflection=light_direction.flat_reflection,
    )


@log_railway_function(
    failure_message="Failed to compute hillshade",
    success_message="Successfully computed hillshade",
)
@safe
def compute_hillshade(
    depth_data: HeightMap | ArrayLike,
    parameters: HillshadeParameters | None = None,
) -> Hillshade:
    """
    Compute the hillshade of a digital elevation model.

    The heights are scaled by ``exaggeration / spacing``, surface normals are
    estimated on the scaled grid and every cell is shaded with the clamped dot
    product of its normal and the resolved light direction.

    :param depth_data: ``HeightMap`` or 2D array of heights with shape (Height, Width).
        A ``HeightMap`` brings its own spacing, otherwise ``parameters.spacing`` is used.
        An explicitly set ``parameters.spacing`` that differs from the map spacing
        gives a ``Failure``.
    :param parameters: Hillshade options. Defaults to the configured settings.

    :returns: ``Success`` with a ``Hillshade`` holding the shading grid, the
              light direction used and the flat reflection, or a ``Failure``
              when the input could not be validated.
    """
    check_spacing = parameters is not None
    if parameters is None:
        parameters = HillshadeParameters.from_settings()
    height_map = _to_height_map(depth_data, parameters, check_spacing)

    return flow(
        height_map.scaled(parameters.exaggeration),
        compute_surface_normals,
        partial(_shade, light_direction=resolve_light_direction(parameters)),
    )
