from collections.abc import Sequence
from functools import partial
from typing import Annotated, Any

from numpy import array, float64
from numpy.typing import DTypeLike, NDArray
from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    PlainSerializer,
)


class ConfigBaseModel(BaseModel):
    """Base class for the frozen, array carrying containers."""

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        extra="forbid",
    )


def serialize_ndarray(array_: NDArray[Any]) -> list:
    """Serialize numpy array to a Python list for JSON serialization."""
    return array_.tolist()


def coerce_to_array(dtype: DTypeLike, value: Sequence | NDArray | None) -> NDArray:
    """
    Coerce input to dtype numpy array.

    Handles JSON deserialization where Python creates int64 integers by default,
    and integer height grids which would otherwise break float arithmetic.
    """
    if value is None:
        return value
    try:
        return array(value, dtype=dtype)
    except OverflowError as ofe:
        raise ValueError("Array's value(s) out of range") from ofe


def validate_shape(n_dims: int, value: NDArray) -> NDArray:
    if (array_dims := len(value.shape)) != n_dims:
        raise ValueError(
            f"Array shape mismatch, expected {n_dims} dimension(s), but got {array_dims}"
        )
    return value


type FloatArray = Annotated[
    NDArray[float64],
    BeforeValidator(partial(coerce_to_array, float64)),
    PlainSerializer(serialize_ndarray),
]

type FloatArray1D = Annotated[FloatArray, AfterValidator(partial(validate_shape, 1))]
type FloatArray2D = Annotated[FloatArray, AfterValidator(partial(validate_shape, 2))]
type FloatArray3D = Annotated[FloatArray, AfterValidator(partial(validate_shape, 3))]

type UnitVector = FloatArray1D  # Shape: (3,)
type DepthData = FloatArray2D  # Shape: (H, W)
type VectorField = FloatArray3D  # Shape: (H, W, 3)
