"""
Matrix module.

Fixed-size dense matrices with elementwise algebra, products and
row-reduction based analysis.

Public API:
    Matrix                  - n x m matrix
    Matrix.eliminate()      - in-place row-echelon reduction
    Matrix.determinant()    - determinant by elimination (square only)
    Matrix.is_invertible()  - full-diagonal pivot test
    EliminationResult       - pivots, degenerate columns and swaps of one pass
"""

from fixedlinalg.core.compute.linalg.elimination import EliminationResult
from fixedlinalg.matrix.matrix import Matrix

__all__ = [
    "Matrix",
    "EliminationResult",
]
