from numpy.typing import NDArray
import numpy as np
from returns.pipeline import flow

from hillshade.container_models.base import UnitVector
from hillshade.container_models.light_source import LightDirection
from hillshade.parameters import HillshadeParameters


def _select_light_vector(parameters: HillshadeParameters) -> NDArray:
    """Take the explicit light vector when set, otherwise derive it from the angles."""
    if parameters.has_light_direction:
        return _divide_by_sum_of_squares(parameters.light_direction)
    return parameters.light_source.unit_vector


def _divide_by_sum_of_squares(vector: UnitVector) -> NDArray:
    """
    Scale an explicit light vector by ``1 / Σv²``.

    Note that this is not the Euclidean normalization: only unit length input
    stays unit length. The direction and sign are kept, which is what the dot
    product with the surface normals depends on.
    """
    return vector / np.sum(vector**2)


def _point_upwards(vector: NDArray) -> NDArray:
    """Negate the vector when it points below the horizon, light comes from above."""
    if vector[2] < 0:
        return -vector
    return vector


def _to_light_direction(vector: NDArray) -> LightDirection:
    return LightDirection(vector=vector, flat_reflection=float(vector[2]))


def resolve_light_direction(parameters: HillshadeParameters) -> LightDirection:
    """
    Resolve the light direction used for shading.

    An all-zero ``light_direction`` selects ``[sin(az)·cos(al), cos(az)·cos(al), sin(al)]``
    from ``azimuth`` and ``altitude``. Any other vector is divided by its sum of
    squares. Either way the result is flipped when its vertical component is
    negative, and that vertical component is returned as the flat reflection.

    :param parameters: The hillshade options holding the light specification.
    :returns: ``LightDirection`` with the resolved vector and the flat reflection.
    """
    return flow(
        parameters,
        _select_light_vector,
        _point_upwards,
        _to_light_direction,
    )
