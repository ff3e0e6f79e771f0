from pydantic import Field

from .base import ConfigBaseModel, DepthData


class HeightMap(ConfigBaseModel):
    """
    A digital elevation model: a 2D grid of heights on an isotropic grid.

    Rows and columns are the two horizontal axes, in the (row, column) order
    produced by ``numpy.meshgrid(..., indexing="ij")``.
    Shape: (height, width)
    """

    data: DepthData
    spacing: float = Field(
        ...,
        gt=0.0,
        description="Distance between adjacent samples along both axes, "
        "in the same unit as the heights.",
    )

    @property
    def width(self) -> int:
        """The grid width in samples."""
        return self.data.shape[1]

    @property
    def height(self) -> int:
        """The grid height in samples."""
        return self.data.shape[0]

    def scaled(self, exaggeration: float) -> DepthData:
        """
        Heights multiplied by ``exaggeration / spacing``.

        After scaling the grid can be treated as if it was sampled on unit
        spacing, so exaggeration and inverse spacing steepen slopes identically.
        """
        return self.data * exaggeration / self.spacing
