"""
Row-reduction engine.

Gaussian elimination to row-echelon form, determinant by elimination and
the invertibility test. Kernels operate in place on a 2-D numpy view of a
matrix's row-major storage and compare elements only through the
NumericTraits of the element type.

Pivoting is first-nonzero, not partial (maximal magnitude) pivoting: for
column i the pivot is the first row at or below i whose entry is nonzero
per the traits. This is deterministic and simple but numerically weaker
than partial pivoting on ill-conditioned floating matrices.

Conventions:
    - Kernels take (grid, traits) and never allocate unless documented
    - determinant() and is_invertible() work on a copy; eliminate() is
      destructive on its argument
    - determinant() and is_invertible() reduce integral grids on an exact
      Fraction working copy
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from fixedlinalg.core.compute.precision import RATIONAL, python_scalar, to_storage
from fixedlinalg.core.protocols import NumericTraits
from fixedlinalg.core.validation import check_square

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EliminationResult:
    """
    Outcome of one elimination pass.

    Attributes:
        pivot_columns: Columns (== diagonal positions) where a pivot was found
        degenerate_columns: Columns with no nonzero candidate at or below
            the diagonal (rank-deficient columns)
        swaps: Number of row swaps performed
    """
    pivot_columns: tuple[int, ...]
    degenerate_columns: tuple[int, ...]
    swaps: int

    @property
    def sign(self) -> int:
        """Determinant sign factor contributed by the row swaps."""
        return -1 if self.swaps % 2 else 1

    @property
    def is_degenerate(self) -> bool:
        """True when at least one column had no pivot."""
        return len(self.degenerate_columns) > 0


# -- Primitive row operations ------------------------------------------------


def scale_row(grid: NDArray[Any], r: int, k: Any) -> None:
    """Multiply every element of row r by k."""
    grid[r, :] *= k


def swap_rows(grid: NDArray[Any], r1: int, r2: int) -> None:
    """Exchange rows r1 and r2 elementwise."""
    grid[[r1, r2], :] = grid[[r2, r1], :]


def add_scaled_row(grid: NDArray[Any], target: int, source: int, k: Any) -> None:
    """target[i] += source[i] * k for every column i."""
    grid[target, :] += grid[source, :] * k


# -- Elimination -------------------------------------------------------------


def eliminate(grid: NDArray[Any], traits: NumericTraits) -> EliminationResult:
    """
    Reduce grid to row-echelon form in place.

    For each column i < min(n, m): find the first row at or below i with a
    nonzero entry in column i, swap it into row i, then clear every entry
    below it with add_scaled_row(r, i, -grid[r, i] / grid[i, i]). Columns
    with no candidate are skipped and their diagonal entry is left as is.

    Integral grids are reduced with truncating multipliers
    (traits.divide rounds toward zero), so entries below a pivot are only
    cleared when the pivot divides them. Use working_copy() for an exact
    reduction.

    Args:
        grid: n x m array, modified in place
        traits: Numeric traits of the element type

    Returns:
        EliminationResult describing pivots and swaps
    """
    n, m = grid.shape
    pivots: list[int] = []
    degenerate: list[int] = []
    swaps = 0

    for i in range(min(n, m)):
        candidates = np.flatnonzero(traits.is_nonzero(grid[i:, i]))
        if candidates.size == 0:
            logger.debug(f"column {i}: no pivot, rank-deficient")
            degenerate.append(i)
            continue

        pivot = i + int(candidates[0])
        if pivot != i:
            logger.debug(f"column {i}: swapping pivot row {pivot} into row {i}")
            swap_rows(grid, i, pivot)
            swaps += 1

        for r in range(i + 1, n):
            k = traits.divide(-grid[r, i], grid[i, i])
            add_scaled_row(grid, r, i, k)
        pivots.append(i)

    return EliminationResult(
        pivot_columns=tuple(pivots),
        degenerate_columns=tuple(degenerate),
        swaps=swaps,
    )


def working_copy(
    grid: NDArray[Any],
    traits: NumericTraits,
) -> tuple[NDArray[Any], NumericTraits]:
    """
    Copy grid into storage that elimination can run on.

    Integral grids become exact Fraction grids; everything else is a plain
    copy with the same traits.
    """
    if traits.integral:
        work = to_storage(RATIONAL, grid.ravel()).reshape(grid.shape)
        return work, RATIONAL
    return grid.copy(), traits


def determinant(grid: NDArray[Any], traits: NumericTraits) -> Any:
    """
    Determinant by elimination.

    Eliminates a working copy and multiplies its diagonal. Every pivot
    swap flips the sign of the result, so the value matches the
    mathematical determinant (not just its magnitude).

    Args:
        grid: Square n x n array (not modified)
        traits: Numeric traits of the element type

    Returns:
        The determinant: int for integral types, Fraction for rationals,
        Python float for floating types

    Raises:
        InvalidOperationError: If grid is not square
    """
    check_square(grid.shape, 'determinant')

    work, work_traits = working_copy(grid, traits)
    result = eliminate(work, work_traits)

    product = work[0, 0]
    for i in range(1, work.shape[0]):
        product = product * work[i, i]
    if result.sign < 0:
        product = -product

    if traits.integral:
        # Exact Fraction arithmetic on integers: denominator is 1
        return int(product)
    return python_scalar(product)


def is_invertible(grid: NDArray[Any], traits: NumericTraits) -> bool:
    """
    Whether a matrix is invertible.

    Eliminates a working copy and requires every diagonal pivot to be
    nonzero. Non-square grids are never invertible.

    For floating types each pivot is tested on its own, so this agrees
    with is_nonzero(determinant(...)) only while the diagonal product
    stays above the zero tolerance. diag(1e-9, 1e-9) is invertible here,
    but its determinant 1e-18 compares as zero.
    """
    n, m = grid.shape
    if n != m:
        return False

    work, work_traits = working_copy(grid, traits)
    result = eliminate(work, work_traits)
    if result.is_degenerate:
        return False
    return bool(np.all(work_traits.is_nonzero(np.diagonal(work))))
