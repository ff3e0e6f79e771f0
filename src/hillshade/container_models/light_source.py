from functools import cached_property

import numpy as np
from pydantic import Field

from .base import ConfigBaseModel, UnitVector


class LightSource(ConfigBaseModel):
    """
    Representation of a light source using an angular direction (azimuth and altitude)
    together with a derived 3D unit direction vector.

    The angles are not range checked: any real value is passed through the
    trigonometric functions as is.
    """

    azimuth: float = Field(
        default=45.0,
        description="Horizontal angle in degrees measured clockwise from the +y (row) axis. "
        "0° is +y direction, 90° is +x (column) direction.",
        examples=[45, 90, 315],
    )
    altitude: float = Field(
        default=45.0,
        description="Vertical angle in degrees measured from the x–y plane. "
        "0° is horizontal, +90° is upward (+z).",
        examples=[30, 45, 90],
    )

    @cached_property
    def unit_vector(self) -> UnitVector:
        """
        Returns the unit direction vector [x, y, z] pointing towards the light.

        x = sin(azimuth)·cos(altitude), y = cos(azimuth)·cos(altitude) and
        z = sin(altitude), i.e. compass style azimuth and elevation style altitude.
        """
        azimuth = np.deg2rad(self.azimuth)
        altitude = np.deg2rad(self.altitude)
        vec = np.array(
            [
                np.sin(azimuth) * np.cos(altitude),
                np.cos(azimuth) * np.cos(altitude),
                np.sin(altitude),
            ]
        )
        vec.setflags(write=False)
        return vec


class LightDirection(ConfigBaseModel):
    """
    The light direction actually used for shading.

    ``vector`` is sign-normalized so its vertical component is never negative,
    ``flat_reflection`` is that vertical component: the shading a horizontal
    surface receives.
    """

    vector: UnitVector
    flat_reflection: float
