"""
Vector algebra module.

Fixed-length numeric vectors with elementwise arithmetic and geometry.

Public API:
    Vector          - n-element vector
    Vec2, Vec3      - named-field 2-D and 3-D vectors
    cross(a, b)     - 2-D scalar or 3-D vector cross product
    as_named(v)     - copy a length-2/3 Vector into Vec2/Vec3
"""

from fixedlinalg.vector.vector import Vector
from fixedlinalg.vector.named import Vec2, Vec3, as_named, cross

__all__ = [
    "Vector",
    "Vec2",
    "Vec3",
    "as_named",
    "cross",
]
