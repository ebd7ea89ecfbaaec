"""
Named-field 2- and 3-component vectors and the cross product.

Vec2 and Vec3 are Vectors of fixed length 2 and 3 whose components are
also reachable as ``x``, ``y`` (and ``z``). All Vector algebra applies and
returns the same named type.
"""

from __future__ import annotations

from typing import Any

from fixedlinalg.core.compute.precision import python_scalar, to_storage
from fixedlinalg.core.exceptions import DimensionError
from fixedlinalg.vector.vector import Vector


class Vec2(Vector):
    """Two-component vector with ``x`` and ``y`` fields."""

    def __init__(self, x: Any = 0, y: Any = 0, dtype: Any = float):
        super().__init__(2, (x, y), dtype=dtype)

    @property
    def x(self) -> Any:
        return python_scalar(self._store()[0])

    @x.setter
    def x(self, value: Any) -> None:
        self._store()[0] = self._traits.coerce(value)

    @property
    def y(self) -> Any:
        return python_scalar(self._store()[1])

    @y.setter
    def y(self, value: Any) -> None:
        self._store()[1] = self._traits.coerce(value)

    def __repr__(self) -> str:
        if self.is_moved:
            return "Vec2(<moved>)"
        return f"Vec2(x={self.x!r}, y={self.y!r}, dtype={self._traits.name})"


class Vec3(Vector):
    """Three-component vector with ``x``, ``y`` and ``z`` fields."""

    def __init__(self, x: Any = 0, y: Any = 0, z: Any = 0, dtype: Any = float):
        super().__init__(3, (x, y, z), dtype=dtype)

    @property
    def x(self) -> Any:
        return python_scalar(self._store()[0])

    @x.setter
    def x(self, value: Any) -> None:
        self._store()[0] = self._traits.coerce(value)

    @property
    def y(self) -> Any:
        return python_scalar(self._store()[1])

    @y.setter
    def y(self, value: Any) -> None:
        self._store()[1] = self._traits.coerce(value)

    @property
    def z(self) -> Any:
        return python_scalar(self._store()[2])

    @z.setter
    def z(self, value: Any) -> None:
        self._store()[2] = self._traits.coerce(value)

    def __repr__(self) -> str:
        if self.is_moved:
            return "Vec3(<moved>)"
        return f"Vec3(x={self.x!r}, y={self.y!r}, z={self.z!r}, dtype={self._traits.name})"


def cross(left: Vector, right: Vector) -> Any:
    """
    Cross product.

    2-D operands give the scalar z-component ``l0*r1 - l1*r0``;
    3-D operands give a Vec3 in the left operand's element type.

    Raises:
        DimensionError: If the operands differ in length or aren't 2-D/3-D
    """
    if len(left) != len(right):
        raise DimensionError(
            f"cross: length mismatch {len(left)} vs {len(right)}",
            expected=len(left),
            actual=len(right),
        )
    a, b = left._store(), right._store()
    if len(left) == 2:
        return python_scalar(a[0] * b[1] - a[1] * b[0])
    if len(left) == 3:
        traits = left.traits
        components = [
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        ]
        return Vec3._wrap(to_storage(traits, components), traits)
    raise DimensionError(
        f"cross: defined for 2-D and 3-D vectors, got {len(left)}-D",
        expected=(2, 3),
        actual=len(left),
    )


def as_named(vector: Vector) -> Vector:
    """View a length-2 or length-3 Vector as Vec2/Vec3 (copies the storage)."""
    if len(vector) == 2:
        return Vec2._wrap(vector._store().copy(), vector.traits)
    if len(vector) == 3:
        return Vec3._wrap(vector._store().copy(), vector.traits)
    raise DimensionError(
        f"as_named: expected a 2-D or 3-D vector, got {len(vector)}-D",
        expected=(2, 3),
        actual=len(vector),
    )


__all__ = ["Vec2", "Vec3", "cross", "as_named"]
