import logging

import numpy as np
import pytest
from loguru import logger

from hillshade.container_models.base import DepthData
from hillshade.container_models.height_map import HeightMap

GRID_SIZE = 3
FLAT_HEIGHT = 10.0


class PropagateHandler(logging.Handler):
    """Handler that propagates loguru records to standard logging."""

    def emit(self, record: logging.LogRecord) -> None:
        logging.getLogger(record.name).handle(record)


@pytest.fixture
def caplog(caplog):
    """Fixture to enable caplog to capture loguru logs."""
    handler_id = logger.add(PropagateHandler(), format="{message}")
    yield caplog
    logger.remove(handler_id)


@pytest.fixture(scope="session")
def flat_depth_data() -> DepthData:
    """3x3 grid with a constant height."""
    return np.full((GRID_SIZE, GRID_SIZE), FLAT_HEIGHT)


@pytest.fixture(scope="session")
def ramp_depth_data() -> DepthData:
    """3x3 grid whose height increases by 1 per row step."""
    return np.repeat(np.arange(GRID_SIZE, dtype=np.float64)[:, None], GRID_SIZE, axis=1)


@pytest.fixture(scope="session")
def rough_depth_data() -> DepthData:
    """Random terrain for properties that must hold for any input."""
    rng = np.random.default_rng(42)
    return rng.normal(scale=5.0, size=(40, 60)).cumsum(axis=0).cumsum(axis=1)


@pytest.fixture(scope="session")
def flat_height_map(flat_depth_data: DepthData) -> HeightMap:
    return HeightMap(data=flat_depth_data, spacing=1.0)
