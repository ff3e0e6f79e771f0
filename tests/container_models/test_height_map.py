import numpy as np
from numpy.testing import assert_allclose
from pydantic import ValidationError
import pytest

from hillshade.container_models.height_map import HeightMap


def test_integer_heights_are_coerced_to_float() -> None:
    # Act
    height_map = HeightMap(data=[[1, 2], [3, 4]], spacing=1)

    # Assert
    assert height_map.data.dtype == np.float64


def test_spacing_is_required() -> None:
    # Act and assert
    with pytest.raises(ValidationError, match="spacing"):
        HeightMap(data=np.zeros((3, 3)))


def test_width_and_height_follow_columns_and_rows() -> None:
    # Act
    height_map = HeightMap(data=np.zeros((4, 7)), spacing=2.0)

    # Assert
    assert height_map.height == 4
    assert height_map.width == 7


@pytest.mark.parametrize(
    "data",
    [
        pytest.param(np.zeros(5), id="1D array"),
        pytest.param(np.zeros((2, 2, 2)), id="3D array"),
    ],
)
def test_non_2d_data_is_rejected(data: np.ndarray) -> None:
    # Act and assert
    with pytest.raises(ValidationError, match="Array shape mismatch"):
        HeightMap(data=data, spacing=1.0)


@pytest.mark.parametrize("spacing", [0.0, -1.0])
def test_spacing_must_be_positive(spacing: float) -> None:
    # Act and assert
    with pytest.raises(ValidationError):
        HeightMap(data=np.zeros((3, 3)), spacing=spacing)


def test_scaled_multiplies_by_exaggeration_over_spacing() -> None:
    # Arrange
    height_map = HeightMap(data=np.array([[1.0, 2.0], [3.0, 4.0]]), spacing=4.0)

    # Act
    scaled = height_map.scaled(exaggeration=2.0)

    # Assert
    assert_allclose(scaled, [[0.5, 1.0], [1.5, 2.0]])


def test_scaled_leaves_data_untouched() -> None:
    # Arrange
    height_map = HeightMap(data=np.ones((2, 2)), spacing=0.5)

    # Act
    _ = height_map.scaled(exaggeration=3.0)

    # Assert
    assert_allclose(height_map.data, 1.0)
