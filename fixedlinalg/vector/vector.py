"""
Vector: fixed-length numeric sequence.

Elementwise arithmetic, dot product, length, normalization and
projection. The length is fixed at construction; operands of a binary
operation must have the same length.

Access paths:
    v[i], v.get(i), v.set(i, x)   checked, IndexOutOfRangeError outside [0, n)
    v.get_unchecked(i)            no validation; caller guarantees 0 <= i < n

Scalars returned by the algebra (get, dot, length, projection) are Python
numbers (int, float) or Fraction, never numpy scalars.
"""

from __future__ import annotations

import math
import numbers
import warnings
from typing import Any, Iterable, Iterator

import numpy as np
from numpy.typing import NDArray

from fixedlinalg.core.compute.precision import (
    common_traits,
    python_scalar,
    to_storage,
    traits_for,
    zeros_storage,
)
from fixedlinalg.core.protocols import NumericTraits
from fixedlinalg.core.storage import FixedStorage
from fixedlinalg.core.validation import (
    check_dimension,
    check_index,
    check_length,
    check_max_length,
    check_same_shape,
)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (numbers.Number, np.number)) and not isinstance(value, bool)


class Vector(FixedStorage):
    """
    Fixed-length vector of numeric elements.

    Construction:
        Vector(3)                      zero-filled
        Vector(3, [1, 2])              literal: copies what is given, rest zero
        Vector.from_values(3, seq)     raw sequence of exactly 3 values
        v.copy() / v.move()            deep copy / ownership transfer

    Parameters
    ----------
    size : int
        Number of elements, >= 1.
    values : iterable, optional
        Leading elements; at most ``size`` of them.
    dtype : type or dtype, default float
        Element type. Any numpy integer or floating dtype, ``Fraction``,
        or a type registered with ``register_numeric_type``.
    """

    def __init__(
        self,
        size: int,
        values: Iterable[Any] | None = None,
        dtype: Any = float,
    ):
        self._size = check_dimension(size, 'size')
        self._traits = traits_for(dtype)
        elements = zeros_storage(self._traits, self._size)
        if values is not None:
            given = to_storage(self._traits, values)
            check_max_length(len(given), self._size, 'values')
            elements[:len(given)] = given
        self._elements = elements

    @classmethod
    def from_values(cls, size: int, values: Iterable[Any], dtype: Any = float) -> Vector:
        """Build a vector from exactly ``size`` values."""
        size = check_dimension(size, 'size')
        traits = traits_for(dtype)
        elements = to_storage(traits, values)
        check_length(len(elements), size, 'values')
        return cls._wrap(elements, traits)

    @classmethod
    def _wrap(cls, elements: NDArray[Any], traits: NumericTraits) -> Vector:
        """Adopt a 1-D backing array without copying or validating."""
        vec = cls.__new__(cls)
        vec._size = len(elements)
        vec._traits = traits
        vec._elements = elements
        return vec

    def _wrap_like(self, elements: NDArray[Any], traits: NumericTraits | None = None) -> Vector:
        return type(self)._wrap(elements, traits or self._traits)

    # -- Shape and access ---------------------------------------------------

    @property
    def shape(self) -> tuple[int]:
        return (self._size,)

    def __len__(self) -> int:
        return self._size

    def get(self, index: int) -> Any:
        """Checked element read."""
        idx = check_index(index, self._size, 'index')
        return python_scalar(self._store()[idx])

    def set(self, index: int, value: Any) -> None:
        """Checked element write; value is converted to the element type."""
        idx = check_index(index, self._size, 'index')
        self._store()[idx] = self._traits.coerce(value)

    def get_unchecked(self, index: int) -> Any:
        """Element read without bounds or ownership checks."""
        return self._elements[index]

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set(index, value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._store().tolist())

    # -- Conversion and rendering -------------------------------------------

    def astype(self, dtype: Any) -> Vector:
        """Copy converted to another element type."""
        traits = traits_for(dtype)
        return self._wrap_like(to_storage(traits, self._store()), traits)

    def to_string(self, separator: str = " ") -> str:
        """Elements in order, each followed by separator."""
        fmt = self._traits.format
        return "".join(fmt(v) + separator for v in self._store())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self.is_moved:
            return f"{type(self).__name__}(<moved>)"
        return f"{type(self).__name__}({self._size}, {list(self)!r}, dtype={self._traits.name})"

    # -- Comparison ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if self.shape != other.shape:
            return False
        traits = common_traits(self._traits, other._traits)
        return bool(np.all(traits.values_equal(self._store(), other._store())))

    __hash__ = None  # type: ignore[assignment]

    # -- Elementwise arithmetic ---------------------------------------------

    def _cast(self, result: NDArray[Any]) -> NDArray[Any]:
        """Bring an operation result back to the receiver's element type."""
        if result.dtype != self.dtype:
            return to_storage(self._traits, result)
        return result

    def _operand(self, other: Vector, operation: str) -> NDArray[Any]:
        check_same_shape(self.shape, other.shape, operation)
        return other._store()

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        rhs = self._operand(other, 'add')
        return self._wrap_like(self._cast(self._store() + rhs))

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        rhs = self._operand(other, 'subtract')
        return self._wrap_like(self._cast(self._store() - rhs))

    def __mul__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            # Hadamard (elementwise) product
            rhs = self._operand(other, 'multiply')
            return self._wrap_like(self._cast(self._store() * rhs))
        if not _is_scalar(other):
            return NotImplemented
        k = self._traits.coerce(other)
        return self._wrap_like(self._cast(self._store() * k))

    def __rmul__(self, other: Any) -> Vector:
        if not _is_scalar(other):
            return NotImplemented
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Vector:
        if not _is_scalar(other):
            return NotImplemented
        k = self._traits.coerce(other)
        return self._wrap_like(self._cast(self._traits.divide(self._store(), k)))

    def __neg__(self) -> Vector:
        return self._wrap_like(self._cast(-self._store()))

    def __pos__(self) -> Vector:
        return self.copy()

    def __iadd__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        store = self._store()
        store[:] = self._cast(store + self._operand(other, 'add'))
        return self

    def __isub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        store = self._store()
        store[:] = self._cast(store - self._operand(other, 'subtract'))
        return self

    def __imul__(self, other: Any) -> Vector:
        if not _is_scalar(other):
            return NotImplemented
        store = self._store()
        store[:] = self._cast(store * self._traits.coerce(other))
        return self

    def __itruediv__(self, other: Any) -> Vector:
        if not _is_scalar(other):
            return NotImplemented
        store = self._store()
        store[:] = self._cast(self._traits.divide(store, self._traits.coerce(other)))
        return self

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, Vector):
            return self.dot(other)
        return NotImplemented

    # -- Geometry -----------------------------------------------------------

    def dot(self, other: Vector) -> Any:
        """Dot product (sum of elementwise products)."""
        rhs = self._operand(other, 'dot')
        return python_scalar(np.dot(self._store(), rhs))

    def length_square(self) -> Any:
        """Squared Euclidean length, in the element type."""
        return self.dot(self)

    def length(self, dtype: Any = float) -> Any:
        """
        Euclidean length converted to dtype.

        The square root is taken in double precision and then converted,
        so an integral dtype truncates (a RuntimeWarning says so).
        """
        target = traits_for(dtype)
        value = math.sqrt(float(self.length_square()))
        if target.integral:
            warnings.warn(
                f"length of {self._traits.name} vector requested as {target.name}; "
                f"the square root {value!r} is truncated",
                RuntimeWarning,
                stacklevel=2,
            )
        return python_scalar(target.coerce(value))

    def _real_traits(self) -> NumericTraits:
        # Integral vectors normalize and project in float64
        if self._traits.integral:
            return traits_for(np.float64)
        return self._traits

    def normalized(self) -> Vector:
        """
        Unit vector in the same direction.

        Integral vectors produce a float64 result. A zero-length vector is
        not guarded: floating types yield non-finite elements, Fraction
        raises ZeroDivisionError.
        """
        traits = self._real_traits()
        elements = to_storage(traits, self._store())
        length = traits.coerce(self.length())
        return self._wrap_like(traits.divide(elements, length), traits)

    def projection(self, other: Vector) -> Any:
        """
        Scalar projection of this vector onto other: dot / |other|.

        Not guarded against a zero-length other.
        """
        traits = other._real_traits()
        return python_scalar(traits.divide(
            traits.coerce(self.dot(other)),
            traits.coerce(other.length()),
        ))

    def projection_vector(self, other: Vector) -> Vector:
        """Vector projection of this vector onto other."""
        return other.normalized() * self.projection(other)
