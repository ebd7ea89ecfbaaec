"""
Numeric predicate layer.

Type-aware "is this effectively nonzero" and "are these two values equal"
tests, tolerant of floating-point rounding. Everything above this module
(vector algebra, matrix equality, the elimination engine) compares
elements only through the predicates defined here.

Every element type resolves to a NumericTraits implementation:

    integral numpy dtypes   exact, x != 0 / x == y
    floating numpy dtypes   |x| >= eps(T) / |x - y| < tol(T)
    fractions.Fraction      exact, stored in object arrays

There is no fallback for unknown types: traits_for() raises
UnsupportedElementTypeError. Custom types are added with
register_numeric_type().
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Iterable

import numpy as np
from numpy.typing import NDArray

from fixedlinalg.core.compute.tolerances import ToleranceTier, select_tolerance
from fixedlinalg.core.exceptions import UnsupportedElementTypeError, ValidationError
from fixedlinalg.core.protocols import NumericTraits


@dataclass(frozen=True)
class IntegralTraits:
    """Traits for signed and unsigned numpy integer dtypes."""
    dtype: np.dtype

    @property
    def name(self) -> str:
        return self.dtype.name

    @property
    def storage_dtype(self) -> np.dtype:
        return self.dtype

    @property
    def exact(self) -> bool:
        return True

    @property
    def integral(self) -> bool:
        return True

    @property
    def zero_tolerance(self) -> int:
        return 0

    def is_nonzero(self, x):
        return x != 0

    def values_equal(self, x, y):
        return x == y

    def coerce(self, value):
        # int() truncates toward zero, like a C conversion
        return self.dtype.type(int(value))

    def divide(self, numerator, denominator):
        # Truncating division; numpy's // floors toward -inf
        quotient = np.abs(numerator) // np.abs(denominator)
        signed = np.sign(numerator) * np.sign(denominator) * quotient
        return np.asarray(signed).astype(self.dtype)[()]

    def format(self, value) -> str:
        return str(int(value))


@dataclass(frozen=True)
class FloatingTraits:
    """Traits for numpy floating dtypes, with epsilon-based comparisons."""
    dtype: np.dtype
    tier: ToleranceTier

    @property
    def name(self) -> str:
        return self.dtype.name

    @property
    def storage_dtype(self) -> np.dtype:
        return self.dtype

    @property
    def exact(self) -> bool:
        return False

    @property
    def integral(self) -> bool:
        return False

    @property
    def zero_tolerance(self) -> float:
        return self.tier.zero_tol

    def is_nonzero(self, x):
        return np.abs(x) >= self.tier.zero_tol

    def values_equal(self, x, y):
        return np.abs(x - y) < self.tier.equal_tol

    def coerce(self, value):
        return self.dtype.type(float(value))

    def divide(self, numerator, denominator):
        return np.asarray(np.true_divide(numerator, denominator)).astype(self.dtype)[()]

    def format(self, value) -> str:
        # Same shape as a default C++ stream: %g with 6 significant digits
        return format(float(value), 'g')


@dataclass(frozen=True)
class RationalTraits:
    """Traits for fractions.Fraction elements (exact, object storage)."""

    @property
    def name(self) -> str:
        return 'fraction'

    @property
    def storage_dtype(self) -> np.dtype:
        return np.dtype(object)

    @property
    def exact(self) -> bool:
        return True

    @property
    def integral(self) -> bool:
        return False

    @property
    def zero_tolerance(self) -> Fraction:
        return Fraction(0)

    def is_nonzero(self, x):
        return x != 0

    def values_equal(self, x, y):
        return x == y

    def coerce(self, value) -> Fraction:
        if isinstance(value, np.integer):
            return Fraction(int(value))
        if isinstance(value, np.floating):
            return Fraction(float(value))
        return Fraction(value)

    def divide(self, numerator, denominator):
        return numerator / denominator

    def format(self, value) -> str:
        return str(value)


RATIONAL = RationalTraits()

_TYPE_REGISTRY: dict[type, NumericTraits] = {Fraction: RATIONAL}
_DTYPE_CACHE: dict[np.dtype, NumericTraits] = {}


def register_numeric_type(py_type: type, traits: NumericTraits) -> None:
    """
    Register numeric traits for a Python element type.

    Registered types take precedence over numpy dtype resolution, so a
    registration for e.g. decimal.Decimal stores its values in object
    arrays and compares them through the supplied traits.

    Args:
        py_type: The element type (used as ``dtype=`` in constructors)
        traits: Object satisfying the NumericTraits protocol

    Raises:
        ValidationError: If traits doesn't satisfy NumericTraits
    """
    if not isinstance(py_type, type):
        raise ValidationError(f"py_type: expected a type, got {py_type!r}")
    if not isinstance(traits, NumericTraits):
        raise ValidationError(
            f"traits for {py_type.__name__}: {type(traits).__name__} "
            f"does not implement the NumericTraits protocol"
        )
    _TYPE_REGISTRY[py_type] = traits


def traits_for(element_type: Any) -> NumericTraits:
    """
    Resolve the NumericTraits for an element type or numpy dtype.

    Args:
        element_type: Python type, numpy scalar type, dtype or dtype string

    Returns:
        NumericTraits for that element type

    Raises:
        UnsupportedElementTypeError: If the type has no numeric traits
    """
    if isinstance(element_type, type) and element_type in _TYPE_REGISTRY:
        return _TYPE_REGISTRY[element_type]

    try:
        dt = np.dtype(element_type)
    except TypeError as e:
        raise UnsupportedElementTypeError(
            f"element type {element_type!r} is not a numeric type: {e}",
            element_type=element_type,
        ) from e

    cached = _DTYPE_CACHE.get(dt)
    if cached is not None:
        return cached

    if dt.kind in 'iu':
        traits: NumericTraits = IntegralTraits(dt)
    elif dt.kind == 'f':
        traits = FloatingTraits(dt, select_tolerance(dt))
    else:
        raise UnsupportedElementTypeError(
            f"element type {element_type!r} (dtype {dt}) has no numeric traits; "
            f"register one with register_numeric_type()",
            element_type=element_type,
        )

    _DTYPE_CACHE[dt] = traits
    return traits


def traits_of(value: Any) -> NumericTraits:
    """Resolve the NumericTraits for a scalar value's type."""
    return traits_for(type(value))


def common_traits(left: NumericTraits, right: NumericTraits) -> NumericTraits:
    """
    Pick the traits used to compare values of two element types.

    An inexact side wins over an exact one, and the looser of two inexact
    sides wins, so comparing a float64 with a float32 uses float32
    tolerances.
    """
    if left is right:
        return left
    if left.exact and not right.exact:
        return right
    if right.exact and not left.exact:
        return left
    if not left.exact:
        return left if left.zero_tolerance >= right.zero_tolerance else right
    return right if left.integral else left


def is_nonzero(x: Any) -> bool:
    """
    Whether x is effectively nonzero for its type.

    Integral and rational: ``x != 0``. Floating: ``|x| >= eps(T)``.

    Raises:
        UnsupportedElementTypeError: If type(x) has no numeric traits
    """
    return bool(traits_of(x).is_nonzero(x))


def values_equal(x: Any, y: Any) -> bool:
    """
    Whether x and y are effectively equal.

    Exact equality for discrete types; ``|x - y| < tol(T)`` for floating
    types. When the two types differ, common_traits() decides.

    Raises:
        UnsupportedElementTypeError: If either type has no numeric traits
    """
    traits = common_traits(traits_of(x), traits_of(y))
    return bool(traits.values_equal(x, y))


def zeros_storage(traits: NumericTraits, size: int) -> NDArray[Any]:
    """Zero-filled 1-D backing array of the given size."""
    return np.full(size, traits.coerce(0), dtype=traits.storage_dtype)


def to_storage(traits: NumericTraits, values: Iterable[Any]) -> NDArray[Any]:
    """
    Copy values into a new 1-D backing array of the element type.

    Raises:
        ValidationError: If a value can't be converted to the element type
    """
    try:
        if traits.storage_dtype == np.dtype(object):
            return np.array([traits.coerce(v) for v in values], dtype=object)
        source = values if isinstance(values, np.ndarray) else np.asarray(list(values))
        if source.dtype == np.dtype(object):
            return np.array([traits.coerce(v) for v in source.ravel()],
                            dtype=traits.storage_dtype)
        return source.ravel().astype(traits.storage_dtype)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"values: cannot convert to {traits.name} elements: {e}"
        ) from e


def python_scalar(value: Any) -> Any:
    """Unwrap numpy scalars to Python numbers; other values pass through."""
    if isinstance(value, np.generic):
        return value.item()
    return value
