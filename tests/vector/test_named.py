"""
Tests for Vec2, Vec3, cross() and as_named().
"""

from fractions import Fraction

import pytest

from fixedlinalg import Vec2, Vec3, Vector, cross
from fixedlinalg.core.exceptions import DimensionError
from fixedlinalg.vector import as_named


# ═══════════════════════════════════════════════════════════════════════
# Named fields
# ═══════════════════════════════════════════════════════════════════════


class TestVec2:

    def test_fields(self):
        v = Vec2(3, 4)
        assert (v.x, v.y) == (3.0, 4.0)
        assert len(v) == 2

    def test_default_zero(self):
        assert list(Vec2()) == [0.0, 0.0]

    def test_setters_write_storage(self):
        v = Vec2()
        v.x = 1
        v.y = 2
        assert v[0] == 1.0 and v[1] == 2.0

    def test_ops_keep_type(self):
        v = Vec2(1, 2)
        assert isinstance(v + v, Vec2)
        assert isinstance(v * 2, Vec2)
        assert isinstance(-v, Vec2)
        assert isinstance(v.copy(), Vec2)

    def test_length(self):
        assert Vec2(3, 4).length() == 5.0

    def test_is_a_vector(self):
        assert Vec2(1, 2) == Vector(2, [1, 2])

    def test_repr(self):
        assert repr(Vec2(3, 4)) == "Vec2(x=3.0, y=4.0, dtype=float64)"


class TestVec3:

    def test_fields(self):
        v = Vec3(1, 2, 3, dtype=int)
        assert (v.x, v.y, v.z) == (1, 2, 3)
        assert isinstance(v.z, int)

    def test_setter_converts(self):
        v = Vec3(dtype=int)
        v.z = 2.9
        assert v.z == 2

    def test_normalized_keeps_type(self):
        n = Vec3(0, 0, 2).normalized()
        assert isinstance(n, Vec3)
        assert n.z == pytest.approx(1.0)

    def test_repr(self):
        assert repr(Vec3(1, 2, 3, dtype=int)) == "Vec3(x=1, y=2, z=3, dtype=int64)"


# ═══════════════════════════════════════════════════════════════════════
# Cross product
# ═══════════════════════════════════════════════════════════════════════


class TestCross:

    def test_3d(self):
        result = cross(Vec3(1, 2, 3), Vec3(4, 5, 6))
        assert isinstance(result, Vec3)
        assert result == Vec3(-3, 6, -3)

    def test_3d_basis(self):
        assert cross(Vec3(1, 0, 0), Vec3(0, 1, 0)) == Vec3(0, 0, 1)

    def test_3d_anticommutative(self):
        a, b = Vec3(2, -1, 5), Vec3(0.5, 3, 1)
        assert cross(a, b) == -cross(b, a)

    def test_3d_orthogonal(self):
        a, b = Vec3(2, -1, 5), Vec3(0.5, 3, 1)
        c = cross(a, b)
        assert c.dot(a) == pytest.approx(0.0, abs=1e-12)
        assert c.dot(b) == pytest.approx(0.0, abs=1e-12)

    def test_2d_scalar(self):
        assert cross(Vec2(1, 2), Vec2(3, 4)) == -2.0

    def test_plain_vectors(self):
        assert cross(Vector(2, [1, 0]), Vector(2, [0, 1])) == 1.0

    def test_fraction(self):
        a = Vec3(Fraction(1, 2), 0, 0, dtype=Fraction)
        b = Vec3(0, Fraction(1, 3), 0, dtype=Fraction)
        assert cross(a, b).z == Fraction(1, 6)

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            cross(Vec2(1, 2), Vec3(1, 2, 3))

    def test_unsupported_dimension(self):
        with pytest.raises(DimensionError):
            cross(Vector(4), Vector(4))


class TestAsNamed:

    def test_two(self):
        v = as_named(Vector(2, [1, 2]))
        assert isinstance(v, Vec2)
        assert v.y == 2.0

    def test_three_copies(self):
        source = Vector(3, [1, 2, 3])
        v = as_named(source)
        v.x = 9
        assert isinstance(v, Vec3)
        assert source[0] == 1.0

    def test_other_length(self):
        with pytest.raises(DimensionError):
            as_named(Vector(5))
