"""Configuration dataclasses for rotation axis conventions and operand checks."""

from dataclasses import dataclass

from .primitives import AXIS_NAMES, AXIS_PLANES, X_AXIS, Y_AXIS, Z_AXIS


@dataclass(frozen=True)
class AxisPlanes:
    """Rotation planes (a, b) used by the named-axis rotations."""

    x: tuple[int, int] = AXIS_PLANES[X_AXIS]
    """Plane rotated by a rotation about X (a = Z, b = Y)."""

    y: tuple[int, int] = AXIS_PLANES[Y_AXIS]
    """Plane rotated by a rotation about Y (a = X, b = Z)."""

    z: tuple[int, int] = AXIS_PLANES[Z_AXIS]
    """Plane rotated by a rotation about Z (a = Y, b = X)."""

    def plane(self, axis: int | str) -> tuple[int, int]:
        """Return the (a, b) plane for an axis index (0, 1, 2) or name ("x", "y", "z")."""
        if isinstance(axis, str):
            key = axis.lower()
            if key not in AXIS_NAMES:
                raise ValueError(f"Unknown axis: {axis!r}")
            axis = AXIS_NAMES[key]
        if axis == X_AXIS:
            return self.x
        elif axis == Y_AXIS:
            return self.y
        elif axis == Z_AXIS:
            return self.z
        else:
            raise ValueError(f"Unknown axis: {axis!r}")

    @classmethod
    def legacy(cls) -> "AxisPlanes":
        """
        Planes of the historical implementation, where every named axis
        rotated the X plane. Only useful for reproducing old results.
        """
        x_plane = AXIS_PLANES[X_AXIS]
        return cls(x=x_plane, y=x_plane, z=x_plane)


@dataclass(frozen=True)
class AlgebraConfig:
    """Configuration shared by Vector and Matrix entities."""

    planes: AxisPlanes = AxisPlanes()
    """Axis to rotation plane mapping."""

    check_dimensions: bool = True
    """Assert operand shapes and rotation planes before computing."""


DEFAULT_CONFIG = AlgebraConfig()
