"""
Matrix: fixed n x m numeric grid.

Storage is one contiguous 1-D array in row-major order; element (r, c)
lives at offset r*m + c. Rows handed out by row() and row_unchecked() are
views into that storage.

Access paths:
    m[r, c], m.get(r, c), m.set(r, c, x), m.row(r)
        checked, IndexOutOfRangeError outside [0, n) x [0, m)
    m.get_unchecked(r, c), m.row_unchecked(r)
        no validation; caller guarantees the indices are in range

Row reduction (scale_row, swap_rows, add_scaled_row, eliminate) mutates
the receiver; determinant() and is_invertible() work on a copy.
"""

from __future__ import annotations

import numbers
from typing import Any, Iterable, Iterator, Sequence

import numpy as np
from numpy.typing import NDArray

from fixedlinalg.core.compute.linalg import elimination
from fixedlinalg.core.compute.linalg.elimination import EliminationResult
from fixedlinalg.core.compute.precision import (
    common_traits,
    python_scalar,
    to_storage,
    traits_for,
    zeros_storage,
)
from fixedlinalg.core.exceptions import DimensionError
from fixedlinalg.core.protocols import NumericTraits
from fixedlinalg.core.storage import FixedStorage
from fixedlinalg.core.validation import (
    check_dimension,
    check_index,
    check_length,
    check_max_length,
    check_same_shape,
)
from fixedlinalg.vector import Vector


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (numbers.Number, np.number)) and not isinstance(value, bool)


class Matrix(FixedStorage):
    """
    Dense n x m matrix of numeric elements.

    Construction:
        Matrix(2, 3)                        zero-filled
        Matrix(2, 2, [1, 2, 3])             literal: row-major, rest zero
        Matrix.from_values(2, 2, seq)       raw sequence of exactly n*m values
        Matrix.from_rows([[1, 2], [3, 4]])  nested rows
        Matrix.identity(3)
        m.copy() / m.move()                 deep copy / ownership transfer

    Parameters
    ----------
    rows, cols : int
        Dimensions, both >= 1.
    values : iterable, optional
        Leading elements in row-major order; at most rows*cols of them.
    dtype : type or dtype, default float
        Element type. Any numpy integer or floating dtype, ``Fraction``,
        or a type registered with ``register_numeric_type``.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        values: Iterable[Any] | None = None,
        dtype: Any = float,
    ):
        self._rows = check_dimension(rows, 'rows')
        self._cols = check_dimension(cols, 'cols')
        self._traits = traits_for(dtype)
        elements = zeros_storage(self._traits, self._rows * self._cols)
        if values is not None:
            given = to_storage(self._traits, values)
            check_max_length(len(given), elements.size, 'values')
            elements[:len(given)] = given
        self._elements = elements

    @classmethod
    def from_values(
        cls,
        rows: int,
        cols: int,
        values: Iterable[Any],
        dtype: Any = float,
    ) -> Matrix:
        """Build a matrix from exactly rows*cols row-major values."""
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        traits = traits_for(dtype)
        elements = to_storage(traits, values)
        check_length(len(elements), rows * cols, 'values')
        return cls._wrap(elements, rows, cols, traits)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]], dtype: Any = float) -> Matrix:
        """
        Build a matrix from a sequence of equal-length rows.

        Raises:
            DimensionError: If the rows differ in length
        """
        n = check_dimension(len(rows), 'rows')
        m = check_dimension(len(rows[0]), 'cols')
        for r, row in enumerate(rows):
            if len(row) != m:
                raise DimensionError(
                    f"rows: row {r} has {len(row)} elements, expected {m}",
                    expected=m,
                    actual=len(row),
                )
        return cls.from_values(n, m, [v for row in rows for v in row], dtype=dtype)

    @classmethod
    def identity(cls, size: int, dtype: Any = float) -> Matrix:
        """size x size identity matrix."""
        size = check_dimension(size, 'size')
        result = cls(size, size, dtype=dtype)
        one = result._traits.coerce(1)
        store = result._store()
        for i in range(size):
            store[i * size + i] = one
        return result

    @classmethod
    def _wrap(
        cls,
        elements: NDArray[Any],
        rows: int,
        cols: int,
        traits: NumericTraits,
    ) -> Matrix:
        """Adopt a 1-D row-major backing array without copying or validating."""
        mat = cls.__new__(cls)
        mat._rows = rows
        mat._cols = cols
        mat._traits = traits
        mat._elements = elements
        return mat

    def _wrap_like(self, elements: NDArray[Any], traits: NumericTraits | None = None) -> Matrix:
        return type(self)._wrap(elements, self._rows, self._cols, traits or self._traits)

    def _grid(self) -> NDArray[Any]:
        """2-D view of the backing array (writes go to the storage)."""
        return self._store().reshape(self._rows, self._cols)

    # -- Shape and access ---------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def rows_count(self) -> int:
        return self._rows

    @property
    def cols_count(self) -> int:
        return self._cols

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    def get(self, row: int, col: int) -> Any:
        """Checked element read."""
        r = check_index(row, self._rows, 'row')
        c = check_index(col, self._cols, 'column')
        return python_scalar(self._store()[r * self._cols + c])

    def set(self, row: int, col: int, value: Any) -> None:
        """Checked element write; value is converted to the element type."""
        r = check_index(row, self._rows, 'row')
        c = check_index(col, self._cols, 'column')
        self._store()[r * self._cols + c] = self._traits.coerce(value)

    def get_unchecked(self, row: int, col: int) -> Any:
        """Element read at offset row*cols + col, without any checks."""
        return self._elements[row * self._cols + col]

    def row(self, row: int) -> NDArray[Any]:
        """Checked view of one row; writes go to the matrix."""
        r = check_index(row, self._rows, 'row')
        return self._store()[r * self._cols:(r + 1) * self._cols]

    def row_unchecked(self, row: int) -> NDArray[Any]:
        """View starting at offset row*cols, without any checks."""
        start = row * self._cols
        return self._elements[start:start + self._cols]

    def rows(self) -> Iterator[NDArray[Any]]:
        """Iterate over row views."""
        grid = self._grid()
        for r in range(self._rows):
            yield grid[r]

    def diagonal(self) -> list[Any]:
        """Elements (i, i) for i < min(n, m)."""
        return [python_scalar(v) for v in np.diagonal(self._grid())]

    def __getitem__(self, index: tuple[int, int]) -> Any:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError(
                f"Matrix indices must be (row, col) pairs, got {type(index).__name__}; "
                f"use row(r) for a whole row"
            )
        return self.get(*index)

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError(
                f"Matrix indices must be (row, col) pairs, got {type(index).__name__}"
            )
        self.set(index[0], index[1], value)

    # -- Conversion and rendering -------------------------------------------

    def astype(self, dtype: Any) -> Matrix:
        """Copy converted to another element type."""
        traits = traits_for(dtype)
        return self._wrap_like(to_storage(traits, self._store()), traits)

    def tolist(self) -> list[list[Any]]:
        """Nested Python lists, one per row."""
        return self._grid().tolist()

    def to_string(self, separator: str = " ", end_row: str = "") -> str:
        """
        Row-major rendering for diagnostics.

        Each element is followed by separator and each row by end_row, so
        the defaults put every element on one line.
        """
        fmt = self._traits.format
        parts = []
        for row in self.rows():
            parts.append("".join(fmt(v) + separator for v in row))
            parts.append(end_row)
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self.is_moved:
            return f"{type(self).__name__}(<moved>)"
        return (
            f"{type(self).__name__}({self._rows}, {self._cols}, "
            f"{self._store().tolist()!r}, dtype={self._traits.name})"
        )

    # -- Comparison ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
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

    def _operand(self, other: Matrix, operation: str) -> NDArray[Any]:
        check_same_shape(self.shape, other.shape, operation)
        return other._store()

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        rhs = self._operand(other, 'add')
        return self._wrap_like(self._cast(self._store() + rhs))

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        rhs = self._operand(other, 'subtract')
        return self._wrap_like(self._cast(self._store() - rhs))

    def __mul__(self, other: Any) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        k = self._traits.coerce(other)
        return self._wrap_like(self._cast(self._store() * k))

    def __rmul__(self, other: Any) -> Matrix:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        k = self._traits.coerce(other)
        return self._wrap_like(self._cast(self._traits.divide(self._store(), k)))

    def __neg__(self) -> Matrix:
        return self._wrap_like(self._cast(-self._store()))

    def __pos__(self) -> Matrix:
        return self.copy()

    def __iadd__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        store = self._store()
        store[:] = self._cast(store + self._operand(other, 'add'))
        return self

    def __isub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        store = self._store()
        store[:] = self._cast(store - self._operand(other, 'subtract'))
        return self

    def __imul__(self, other: Any) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        store = self._store()
        store[:] = self._cast(store * self._traits.coerce(other))
        return self

    def __itruediv__(self, other: Any) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        store = self._store()
        store[:] = self._cast(self._traits.divide(store, self._traits.coerce(other)))
        return self

    def transpose(self) -> Matrix:
        """New m x n matrix with t[c, r] = self[r, c]."""
        flipped = np.ascontiguousarray(self._grid().T).ravel()
        return type(self)._wrap(flipped, self._cols, self._rows, self._traits)

    @property
    def T(self) -> Matrix:
        return self.transpose()

    # -- Products -----------------------------------------------------------

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, Matrix):
            return self._matmul_matrix(other)
        if isinstance(other, Vector):
            return self._matmul_vector(other)
        return NotImplemented

    def __rmatmul__(self, other: Any) -> Any:
        if isinstance(other, Vector):
            return self._vector_matmul(other)
        return NotImplemented

    def _matmul_matrix(self, other: Matrix) -> Matrix:
        """(n x m) @ (m x w) -> n x w, standard triple-loop sum."""
        if self._cols != other._rows:
            raise DimensionError(
                f"matmul: inner dimensions differ, {self.shape} @ {other.shape}",
                expected=self._cols,
                actual=other._rows,
            )
        product = self._cast(np.dot(self._grid(), other._grid()))
        return type(self)._wrap(product.ravel(), self._rows, other._cols, self._traits)

    def _matmul_vector(self, vec: Vector) -> Vector:
        """(n x m) @ m-vector -> n-vector."""
        if self._cols != len(vec):
            raise DimensionError(
                f"matmul: matrix {self.shape} @ vector of length {len(vec)}",
                expected=self._cols,
                actual=len(vec),
            )
        product = self._cast(np.dot(self._grid(), vec._store()))
        return Vector._wrap(product, self._traits)

    def _vector_matmul(self, vec: Vector) -> Vector:
        """n-vector @ (n x m) -> m-vector."""
        if self._rows != len(vec):
            raise DimensionError(
                f"matmul: vector of length {len(vec)} @ matrix {self.shape}",
                expected=self._rows,
                actual=len(vec),
            )
        product = self._cast(np.dot(vec._store(), self._grid()))
        return Vector._wrap(product, self._traits)

    # -- Row reduction ------------------------------------------------------

    def scale_row(self, row: int, k: Any) -> None:
        """Multiply every element of row by k (in place)."""
        row = check_index(row, self._rows, 'row')
        elimination.scale_row(self._grid(), row, self._traits.coerce(k))

    def swap_rows(self, r1: int, r2: int) -> None:
        """Exchange rows r1 and r2 (in place)."""
        r1 = check_index(r1, self._rows, 'row')
        r2 = check_index(r2, self._rows, 'row')
        elimination.swap_rows(self._grid(), r1, r2)

    def add_scaled_row(self, target: int, source: int, k: Any) -> None:
        """target[i] += source[i] * k for every column i (in place)."""
        target = check_index(target, self._rows, 'row')
        source = check_index(source, self._rows, 'row')
        elimination.add_scaled_row(self._grid(), target, source, self._traits.coerce(k))

    def eliminate(self) -> EliminationResult:
        """
        Reduce to row-echelon form in place (first-nonzero pivoting).

        Destructive: take a copy() first to keep the input. Integral
        matrices use truncating multipliers; eliminated() is exact.
        """
        return elimination.eliminate(self._grid(), self._traits)

    def eliminated(self) -> tuple[Matrix, EliminationResult]:
        """
        Eliminated copy, leaving the receiver untouched.

        Integral matrices are reduced on an exact Fraction copy.
        """
        work, traits = elimination.working_copy(self._grid(), self._traits)
        result = elimination.eliminate(work, traits)
        return type(self)._wrap(work.ravel(), self._rows, self._cols, traits), result

    def determinant(self) -> Any:
        """
        Determinant by elimination of a copy.

        Row swaps flip the sign, so the result is the true determinant.
        Integral matrices give exact ints.

        Raises:
            InvalidOperationError: If the matrix is not square
        """
        return elimination.determinant(self._grid(), self._traits)

    def det(self) -> Any:
        return self.determinant()

    def is_invertible(self) -> bool:
        """True for square matrices whose eliminated diagonal has no zero."""
        return elimination.is_invertible(self._grid(), self._traits)
