from typing import Self

import numpy as np
from pydantic import model_validator

from .base import ConfigBaseModel, DepthData, VectorField


class SurfaceNormals(ConfigBaseModel):
    """
    Normal vectors per grid cell, stored per component.

    ``x_normal_vector`` follows the column axis, ``y_normal_vector`` the row axis
    and ``z_normal_vector`` points up. Each component has shape (height, width).
    """

    x_normal_vector: DepthData
    y_normal_vector: DepthData
    z_normal_vector: DepthData

    @model_validator(mode="after")
    def validate_same_shape(self) -> Self:
        """Validate that all normal vector components have the same shape."""
        x_shape = self.x_normal_vector.shape
        y_shape = self.y_normal_vector.shape
        z_shape = self.z_normal_vector.shape

        if not (x_shape == y_shape == z_shape):
            raise ValueError(
                f"All normal vector components must have the same shape. "
                f"Got x: {x_shape}, y: {y_shape}, z: {z_shape}"
            )

        return self

    @property
    def stacked(self) -> VectorField:
        """The normals as a single field with shape (height, width, 3)."""
        return np.stack(
            [self.x_normal_vector, self.y_normal_vector, self.z_normal_vector],
            axis=-1,
        )
