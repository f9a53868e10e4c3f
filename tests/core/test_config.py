"""Tests for config module."""

from dataclasses import FrozenInstanceError, replace

import pytest

from vecmat.core.config import DEFAULT_CONFIG, AlgebraConfig, AxisPlanes
from vecmat.core.primitives import AXIS_PLANES, X_AXIS, Y_AXIS, Z_AXIS


def test_axis_planes_lookup() -> None:
    """Test plane lookup by index and by name."""
    planes = AxisPlanes()

    # Standard case 1 - lookup by index
    assert planes.plane(X_AXIS) == (2, 1)
    assert planes.plane(Y_AXIS) == (0, 2)
    assert planes.plane(Z_AXIS) == (1, 0)

    # Standard case 2 - lookup by name, case insensitive
    assert planes.plane("x") == AXIS_PLANES[X_AXIS]
    assert planes.plane("Y") == AXIS_PLANES[Y_AXIS]
    assert planes.plane("z") == AXIS_PLANES[Z_AXIS]

    # Edge case 1 - unknown index
    with pytest.raises(ValueError, match="Unknown axis"):
        planes.plane(3)

    # Edge case 2 - unknown name
    with pytest.raises(ValueError, match="Unknown axis"):
        planes.plane("w")


def test_axis_planes_legacy() -> None:
    """Test the legacy mapping where every axis uses the X plane."""
    legacy = AxisPlanes.legacy()
    assert legacy.x == legacy.y == legacy.z == AXIS_PLANES[X_AXIS]
    assert legacy != AxisPlanes()


def test_algebra_config() -> None:
    """Test algebra configuration defaults and immutability."""
    # Standard case 1 - defaults
    assert DEFAULT_CONFIG.check_dimensions is True
    assert DEFAULT_CONFIG.planes == AxisPlanes()

    # Standard case 2 - derived configuration
    unchecked = replace(DEFAULT_CONFIG, check_dimensions=False)
    assert unchecked.check_dimensions is False
    assert unchecked.planes == DEFAULT_CONFIG.planes

    # Edge case 1 - frozen
    config = AlgebraConfig()
    with pytest.raises(FrozenInstanceError):
        config.check_dimensions = False  # type: ignore[misc]
