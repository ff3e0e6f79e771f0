from typing import Self

import numpy as np
from pydantic import Field, field_validator

from hillshade.container_models.base import ConfigBaseModel, UnitVector
from hillshade.container_models.light_source import LightSource
from hillshade.settings import Settings, get_settings


class HillshadeParameters(ConfigBaseModel):
    """
    Options of a single hillshade computation.

    The light is specified either by ``azimuth`` and ``altitude`` or by
    ``light_direction``. An all-zero ``light_direction`` means "unset" and the
    angles are used, any other vector takes precedence over the angles.
    """

    spacing: float = Field(
        default=1.0,
        gt=0.0,
        description="Distance between adjacent samples along both axes.",
    )
    azimuth: float = Field(
        default=45.0,
        description="Compass direction of the light in degrees.",
    )
    altitude: float = Field(
        default=45.0,
        description="Elevation of the light above the horizon in degrees.",
    )
    light_direction: UnitVector = Field(
        default_factory=lambda: np.zeros(3),
        validate_default=True,
        description="Explicit light vector [x, y, z], all zeros when unset.",
    )
    exaggeration: float = Field(
        default=1.0,
        gt=0.0,
        description="Vertical exaggeration applied to the heights.",
    )

    @field_validator("light_direction")
    @classmethod
    def validate_light_direction(cls, value: UnitVector) -> UnitVector:
        if value.shape != (3,):
            raise ValueError(
                f"Light direction must have 3 components, but got {value.shape[0]}"
            )
        value.setflags(write=False)
        return value

    @property
    def light_source(self) -> LightSource:
        return LightSource(azimuth=self.azimuth, altitude=self.altitude)

    @property
    def has_light_direction(self) -> bool:
        """Whether an explicit light vector overrides azimuth and altitude."""
        return bool(np.sum(self.light_direction**2) != 0)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> Self:
        """Build parameters from the (environment configured) default settings."""
        settings = settings or get_settings()
        return cls(
            spacing=settings.spacing,
            azimuth=settings.azimuth,
            altitude=settings.altitude,
            light_direction=settings.light_direction,
            exaggeration=settings.exaggeration,
        )
