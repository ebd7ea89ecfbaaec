"""
Tests for the numeric predicate layer.

Validates:
    - is_nonzero: exact for integral/rational, epsilon for floating types
    - values_equal: reflexive, symmetric, tolerance per type
    - traits_for: resolution, caching, rejection of non-numeric types
    - register_numeric_type: custom element types through the protocol
    - Tolerance tiers
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from fixedlinalg import Matrix, Vector
from fixedlinalg.core.compute import precision
from fixedlinalg.core.compute.precision import (
    RATIONAL,
    FloatingTraits,
    IntegralTraits,
    common_traits,
    is_nonzero,
    register_numeric_type,
    traits_for,
    values_equal,
)
from fixedlinalg.core.compute.tolerances import (
    EPSILON_32,
    EPSILON_64,
    EXACT,
    FLOAT32,
    FLOAT64,
    machine_epsilon,
    select_tolerance,
)
from fixedlinalg.core.exceptions import UnsupportedElementTypeError, ValidationError
from fixedlinalg.core.protocols import NumericTraits


# ═══════════════════════════════════════════════════════════════════════
# is_nonzero
# ═══════════════════════════════════════════════════════════════════════


class TestIsNonzero:

    @pytest.mark.parametrize("value", [0, np.int8(0), np.int32(0), np.uint16(0)])
    def test_integral_zero(self, value):
        assert is_nonzero(value) is False

    @pytest.mark.parametrize("value", [1, -1, np.int64(7), np.uint8(255)])
    def test_integral_nonzero(self, value):
        assert is_nonzero(value) is True

    def test_float64_below_epsilon_is_zero(self):
        assert is_nonzero(EPSILON_64 / 2) is False

    def test_float64_at_epsilon_is_nonzero(self):
        assert is_nonzero(EPSILON_64) is True

    def test_float64_small_but_nonzero(self):
        assert is_nonzero(1e-10) is True

    def test_negative_float_uses_magnitude(self):
        assert is_nonzero(-1e-10) is True
        assert is_nonzero(-1e-17) is False

    def test_float32_uses_single_precision_epsilon(self):
        assert is_nonzero(np.float32(1e-8)) is False
        assert is_nonzero(np.float32(1e-3)) is True

    def test_fraction_is_exact(self):
        assert is_nonzero(Fraction(1, 10**30)) is True
        assert is_nonzero(Fraction(0)) is False

    def test_rounding_residue_is_zero(self):
        assert is_nonzero((0.1 + 0.2) - 0.3) is False


# ═══════════════════════════════════════════════════════════════════════
# values_equal
# ═══════════════════════════════════════════════════════════════════════


class TestValuesEqual:

    def test_float_rounding_tolerated(self):
        assert values_equal(0.1 + 0.2, 0.3) is True

    def test_float_tolerance_is_single_precision(self):
        assert values_equal(1.0, 1.0 + 1e-9) is True
        assert values_equal(1.0, 1.001) is False

    def test_integral_exact(self):
        assert values_equal(3, 3) is True
        assert values_equal(3, 4) is False

    def test_fraction_exact(self):
        assert values_equal(Fraction(1, 3), Fraction(2, 6)) is True
        assert values_equal(Fraction(1, 3), Fraction(1, 3) + Fraction(1, 10**20)) is False

    def test_mixed_fraction_and_float(self):
        assert values_equal(Fraction(1, 2), 0.5) is True

    @pytest.mark.parametrize("value", [0, 5, -2.5, 1e300, Fraction(7, 3), np.float32(0.1)])
    def test_reflexive(self, value):
        assert values_equal(value, value) is True

    @pytest.mark.parametrize("x, y", [
        (1.0, 1.0 + 1e-9),
        (1.0, 1.5),
        (2, 3),
        (Fraction(1, 2), 0.5),
        (np.float32(1.0), 1.0),
    ])
    def test_symmetric(self, x, y):
        assert values_equal(x, y) == values_equal(y, x)


# ═══════════════════════════════════════════════════════════════════════
# traits_for
# ═══════════════════════════════════════════════════════════════════════


class TestTraitsFor:

    def test_python_int(self):
        traits = traits_for(int)
        assert isinstance(traits, IntegralTraits)
        assert traits.exact and traits.integral

    def test_float_aliases_share_traits(self):
        assert traits_for(float) is traits_for(np.float64)
        assert traits_for('float64') is traits_for(np.float64)

    def test_floating_traits_tier(self):
        assert traits_for(np.float32).tier is FLOAT32
        assert traits_for(float).tier is FLOAT64

    def test_fraction(self):
        assert traits_for(Fraction) is RATIONAL
        assert RATIONAL.storage_dtype == np.dtype(object)

    @pytest.mark.parametrize("element_type", [str, bool, complex, object, 'datetime64[s]'])
    def test_unsupported_types_rejected(self, element_type):
        with pytest.raises(UnsupportedElementTypeError) as exc_info:
            traits_for(element_type)
        assert exc_info.value.element_type == element_type

    def test_unsupported_value_rejected_by_predicates(self):
        with pytest.raises(UnsupportedElementTypeError):
            is_nonzero("0")
        with pytest.raises(UnsupportedElementTypeError):
            values_equal(True, True)

    def test_builtin_traits_satisfy_protocol(self):
        for traits in (traits_for(int), traits_for(float), RATIONAL):
            assert isinstance(traits, NumericTraits)


class TestCommonTraits:

    def test_inexact_wins(self):
        assert common_traits(RATIONAL, traits_for(float)) is traits_for(float)
        assert common_traits(traits_for(float), traits_for(int)) is traits_for(float)

    def test_looser_float_wins(self):
        f32, f64 = traits_for(np.float32), traits_for(np.float64)
        assert common_traits(f32, f64) is f32
        assert common_traits(f64, f32) is f32

    def test_rational_preferred_over_integral(self):
        assert common_traits(traits_for(int), RATIONAL) is RATIONAL


# ═══════════════════════════════════════════════════════════════════════
# Element arithmetic helpers
# ═══════════════════════════════════════════════════════════════════════


class TestTraitsArithmetic:

    def test_integral_divide_truncates_toward_zero(self):
        traits = traits_for(np.int64)
        assert traits.divide(7, 2) == 3
        assert traits.divide(-7, 2) == -3
        assert traits.divide(7, -2) == -3

    def test_integral_divide_array(self):
        traits = traits_for(np.int64)
        result = traits.divide(np.array([7, -7, 4], dtype=np.int64), 2)
        np.testing.assert_array_equal(result, [3, -3, 2])
        assert result.dtype == np.int64

    def test_integral_coerce_truncates(self):
        assert traits_for(int).coerce(2.9) == 2
        assert traits_for(int).coerce(-2.9) == -2

    def test_floating_divide_keeps_dtype(self):
        traits = traits_for(np.float32)
        result = traits.divide(np.array([1.0, 2.0], dtype=np.float32), 4)
        assert result.dtype == np.float32

    def test_rational_coerce_numpy_scalars(self):
        assert RATIONAL.coerce(np.int64(3)) == Fraction(3)
        assert RATIONAL.coerce(np.float32(0.5)) == Fraction(1, 2)

    def test_format(self):
        assert traits_for(int).format(np.int64(12)) == "12"
        assert traits_for(float).format(2.5) == "2.5"
        assert traits_for(float).format(1.0) == "1"
        assert RATIONAL.format(Fraction(1, 3)) == "1/3"


# ═══════════════════════════════════════════════════════════════════════
# register_numeric_type
# ═══════════════════════════════════════════════════════════════════════


class DecimalTraits:
    """Exact-comparison traits for decimal.Decimal elements."""
    name = 'decimal'
    storage_dtype = np.dtype(object)
    exact = True
    integral = False
    zero_tolerance = Decimal(0)

    def is_nonzero(self, x):
        return x != 0

    def values_equal(self, x, y):
        return x == y

    def coerce(self, value):
        return Decimal(str(value)) if isinstance(value, float) else Decimal(value)

    def divide(self, numerator, denominator):
        return numerator / denominator

    def format(self, value):
        return str(value)


@pytest.fixture
def decimal_registered():
    register_numeric_type(Decimal, DecimalTraits())
    yield
    precision._TYPE_REGISTRY.pop(Decimal, None)


class TestRegisterNumericType:

    def test_registered_type_resolves(self, decimal_registered):
        assert isinstance(traits_for(Decimal), DecimalTraits)
        assert is_nonzero(Decimal('0.0')) is False
        assert values_equal(Decimal('1.10'), Decimal('1.1')) is True

    def test_registered_type_in_vector(self, decimal_registered):
        v = Vector(2, [Decimal('1.5'), Decimal('2.5')], dtype=Decimal)
        assert v.length_square() == Decimal('8.50')

    def test_registered_type_in_elimination(self, decimal_registered):
        m = Matrix.from_rows([[Decimal(2), Decimal(1)], [Decimal(1), Decimal(3)]],
                             dtype=Decimal)
        assert m.determinant() == 5
        assert m.is_invertible() is True

    def test_unregistered_type_rejected(self):
        with pytest.raises(UnsupportedElementTypeError):
            Vector(2, dtype=Decimal)

    def test_non_protocol_traits_rejected(self):
        with pytest.raises(ValidationError, match="NumericTraits"):
            register_numeric_type(Decimal, object())

    def test_non_type_rejected(self):
        with pytest.raises(ValidationError):
            register_numeric_type("decimal", DecimalTraits())


# ═══════════════════════════════════════════════════════════════════════
# Tolerance tiers
# ═══════════════════════════════════════════════════════════════════════


class TestTolerances:

    def test_select_integral(self):
        assert select_tolerance(np.int16) is EXACT

    def test_select_float32(self):
        assert select_tolerance(np.float32) is FLOAT32

    def test_float64_equality_uses_single_precision(self):
        tier = select_tolerance(np.float64)
        assert tier.zero_tol == EPSILON_64
        assert tier.equal_tol == EPSILON_32

    def test_select_unknown(self):
        with pytest.raises(ValueError):
            select_tolerance(complex)

    def test_machine_epsilon(self):
        assert machine_epsilon(np.float32) == float(np.finfo(np.float32).eps)
        assert machine_epsilon() == EPSILON_64

    def test_floating_traits_is_frozen(self):
        traits = traits_for(float)
        assert isinstance(traits, FloatingTraits)
        with pytest.raises(AttributeError):
            traits.tier = FLOAT32
