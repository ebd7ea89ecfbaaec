"""
Core infrastructure for fixedlinalg.

This module provides shared abstractions, utilities and numeric
infrastructure used by the vector and matrix modules.

Key components:
    protocols: NumericTraits protocol every element type implements
    exceptions: Exception hierarchy
    validation: Dimension and index validators
    compute: Tolerances, numeric predicates, row-reduction kernels
"""

from fixedlinalg.core.protocols import NumericTraits
from fixedlinalg.core.exceptions import (
    FixedLinalgError,
    ValidationError,
    DimensionError,
    UnsupportedElementTypeError,
    IndexOutOfRangeError,
    InvalidOperationError,
    MovedFromError,
)

__all__ = [
    # Protocols
    "NumericTraits",
    # Exceptions
    "FixedLinalgError",
    "ValidationError",
    "DimensionError",
    "UnsupportedElementTypeError",
    "IndexOutOfRangeError",
    "InvalidOperationError",
    "MovedFromError",
]
