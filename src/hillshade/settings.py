"""Process wide default hillshade parameters."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Default values used when no explicit parameters are passed.

    Settings can be configured via:

    1. Environment variables (e.g., HILLSHADE_AZIMUTH=315)
    2. .env file in the working directory
    3. Default values defined below

    .. rubric:: Examples

    Light from the north-west, low over the horizon::

        export HILLSHADE_AZIMUTH=315
        export HILLSHADE_ALTITUDE=30

    Or set an explicit light vector (JSON encoded)::

        HILLSHADE_LIGHT_DIRECTION="[1, 1, 1]"

    Trace every hillshade call with its arguments::

        export HILLSHADE_VERBOSE=true
    """

    spacing: Annotated[
        float,
        Field(default=1.0, gt=0.0, description="Grid spacing of the height map"),
    ]
    azimuth: Annotated[
        float, Field(default=45.0, description="Light azimuth in degrees")
    ]
    altitude: Annotated[
        float, Field(default=45.0, description="Light altitude in degrees")
    ]
    light_direction: Annotated[
        tuple[float, float, float],
        Field(
            default=(0.0, 0.0, 0.0),
            description="Explicit light vector, all zeros derives it from the angles",
        ),
    ]
    exaggeration: Annotated[
        float,
        Field(default=1.0, gt=0.0, description="Vertical exaggeration factor"),
    ]
    verbose: Annotated[
        bool,
        Field(
            default=False,
            description="Log every hillshade call with its arguments at DEBUG",
        ),
    ]

    model_config = SettingsConfigDict(
        env_prefix="HILLSHADE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
