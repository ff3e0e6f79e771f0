from .base import ConfigBaseModel, DepthData, UnitVector


class Hillshade(ConfigBaseModel):
    """
    Shaded relief of a height grid.

    ``data`` has the shape of the input grid and holds non-negative values,
    ``light_direction`` is the resolved light vector and ``flat_reflection`` the
    value a horizontal surface receives under that light.
    """

    data: DepthData
    light_direction: UnitVector
    flat_reflection: float

    @property
    def width(self) -> int:
        """The grid width in samples."""
        return self.data.shape[1]

    @property
    def height(self) -> int:
        """The grid height in samples."""
        return self.data.shape[0]
