"""
Core protocols for fixedlinalg.

These define structural interfaces that element types must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so a
caller can register traits for a third-party numeric type without
inheriting from anything in this package.

Design Principles:
    - Minimal contracts: only what elimination and equality need
    - Explicit: an element type without traits is rejected, never
      silently treated as always-zero
    - Array-friendly: predicates accept scalars and numpy arrays alike
"""

from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class NumericTraits(Protocol):
    """
    Numeric capabilities of one element type.

    Every Vector and Matrix resolves its element type to a NumericTraits
    instance at construction. The elimination engine never inspects
    element values except through these methods.

    Implementations must keep both predicates total (never raise for a
    value of their own type), reflexive and symmetric.
    """

    @property
    def name(self) -> str:
        """Short identifier, e.g. 'float64', 'int32', 'fraction'."""
        ...

    @property
    def storage_dtype(self) -> np.dtype:
        """numpy dtype of the backing array (object for Python-level types)."""
        ...

    @property
    def exact(self) -> bool:
        """True when arithmetic is exact (integral and rational types)."""
        ...

    @property
    def integral(self) -> bool:
        """True when the type cannot represent fractional values."""
        ...

    @property
    def zero_tolerance(self) -> Any:
        """Magnitude below which a value counts as zero (0 for exact types)."""
        ...

    def is_nonzero(self, x: Any) -> Any:
        """Whether x (scalar or array) is effectively nonzero."""
        ...

    def values_equal(self, x: Any, y: Any) -> Any:
        """Whether x and y (scalars or arrays) are effectively equal."""
        ...

    def coerce(self, value: Any) -> Any:
        """Convert a scalar to this element type."""
        ...

    def divide(self, numerator: Any, denominator: Any) -> Any:
        """Divide keeping the element type (truncating for integral types)."""
        ...

    def format(self, value: Any) -> str:
        """Render one element for to_string()."""
        ...
