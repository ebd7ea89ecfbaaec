"""
Exception hierarchy for fixedlinalg.

All exceptions inherit from FixedLinalgError to allow catching any
library-specific error. Two kinds are raised by the public algebra:

    IndexOutOfRangeError   checked element access outside the valid bound
    InvalidOperationError  operation undefined for the receiver
                           (determinant of a non-square matrix, use of a
                           moved-from object, ...)

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Unchecked paths never raise these; they are caller responsibility
"""

from __future__ import annotations

from typing import Any


class FixedLinalgError(Exception):
    """Base exception for all fixedlinalg errors."""
    pass


class ValidationError(FixedLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs (dimensions, element sequences,
    element types) fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Dimensions are incorrect or inconsistent.

    Raised when a shape or element count doesn't match what the receiver
    was constructed with, or when two operands have incompatible shapes.

    Attributes:
        expected: Expected shape or length, if known
        actual: Actual shape or length, if known
    """

    def __init__(
        self,
        message: str,
        expected: Any = None,
        actual: Any = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class UnsupportedElementTypeError(ValidationError):
    """
    No numeric traits are registered for an element type.

    Every element type must provide the numeric predicates used by the
    elimination engine. Register custom types with
    ``register_numeric_type`` before use.

    Attributes:
        element_type: The rejected type or dtype
    """

    def __init__(self, message: str, element_type: Any = None):
        super().__init__(message)
        self.element_type = element_type


class IndexOutOfRangeError(FixedLinalgError, IndexError):
    """
    Checked element access with an index outside its dimension.

    Also an IndexError, so sequence protocols (iteration, ``in``) behave
    the way Python expects.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound for that axis
        axis: Axis name ('row', 'column' or 'index')
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class InvalidOperationError(FixedLinalgError):
    """
    Operation is not defined for the receiver.

    Attributes:
        operation: Name of the rejected operation, if known
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


class MovedFromError(InvalidOperationError):
    """
    A Vector or Matrix was used after its storage was moved away.

    After ``move()`` the source only supports ``take()`` (reassignment)
    and being dropped.
    """
    pass
