"""
Linear algebra kernels for fixedlinalg.

All functions follow these conventions:
    - Kernels operate on 2-D numpy views of a matrix's row-major storage
    - Element comparisons go through the element type's NumericTraits
    - Errors are raised immediately with clear messages

Submodules:
    elimination: Row operations, Gaussian elimination, determinant,
                 invertibility
"""

from fixedlinalg.core.compute.linalg.elimination import (
    EliminationResult,
    add_scaled_row,
    determinant,
    eliminate,
    is_invertible,
    scale_row,
    swap_rows,
    working_copy,
)

__all__ = [
    "EliminationResult",
    "add_scaled_row",
    "determinant",
    "eliminate",
    "is_invertible",
    "scale_row",
    "swap_rows",
    "working_copy",
]
