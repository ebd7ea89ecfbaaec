"""
fixedlinalg: fixed-dimension linear algebra kernel.

Vectors and matrices whose sizes are fixed at construction, with
elementwise arithmetic, geometric operations and Gaussian-elimination
based matrix analysis (determinant, invertibility), on top of an
epsilon-aware numeric predicate layer.

Submodules:
    core: exceptions, numeric traits and predicates, row-reduction kernels
    vector: Vector, Vec2, Vec3, cross
    matrix: Matrix
"""

import logging as _logging

__version__ = "0.1.0"

from fixedlinalg.core.compute.precision import (
    is_nonzero,
    register_numeric_type,
    traits_for,
    values_equal,
)
from fixedlinalg.core.exceptions import (
    FixedLinalgError,
    ValidationError,
    DimensionError,
    UnsupportedElementTypeError,
    IndexOutOfRangeError,
    InvalidOperationError,
    MovedFromError,
)
from fixedlinalg.vector import Vector, Vec2, Vec3, cross
from fixedlinalg.matrix import Matrix, EliminationResult

# Library logging stays silent unless the application configures handlers
_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    "__version__",
    # Types
    "Vector",
    "Vec2",
    "Vec3",
    "Matrix",
    "EliminationResult",
    "cross",
    # Numeric predicates
    "is_nonzero",
    "values_equal",
    "register_numeric_type",
    "traits_for",
    # Exceptions
    "FixedLinalgError",
    "ValidationError",
    "DimensionError",
    "UnsupportedElementTypeError",
    "IndexOutOfRangeError",
    "InvalidOperationError",
    "MovedFromError",
]
