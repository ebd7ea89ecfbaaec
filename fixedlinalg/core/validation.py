"""
Input validation utilities for fixedlinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than clamping indices or
padding sequences.

Design principles:
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
    - Only checked paths call these; unchecked accessors never validate
"""

import operator
from typing import Any

from fixedlinalg.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    InvalidOperationError,
    ValidationError,
)


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a fixed dimension (row count, column count, vector size).

    Args:
        value: Proposed dimension
        name: Parameter name for error messages

    Returns:
        The dimension as int

    Raises:
        ValidationError: If value is not an integer >= 1
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected a positive integer, got {value!r}")
    try:
        dim = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected a positive integer, got {type(value).__name__}"
        ) from e
    if dim < 1:
        raise ValidationError(f"{name}: must be >= 1, got {dim}")
    return dim


def check_index(index: Any, bound: int, axis: str) -> int:
    """
    Validate an index against [0, bound).

    Negative indices are rejected rather than wrapped.

    Args:
        index: Index to check
        bound: Exclusive upper bound
        axis: Axis name for error messages ('row', 'column', 'index')

    Returns:
        The index as int

    Raises:
        IndexOutOfRangeError: If index is outside [0, bound)
    """
    try:
        idx = operator.index(index)
    except TypeError as e:
        raise IndexOutOfRangeError(
            f"{axis} index must be an integer, got {type(index).__name__}",
            axis=axis,
            bound=bound,
        ) from e
    if not 0 <= idx < bound:
        raise IndexOutOfRangeError(
            f"{axis} index {idx} out of range [0, {bound})",
            index=idx,
            bound=bound,
            axis=axis,
        )
    return idx


def check_length(length: int, expected: int, name: str) -> None:
    """
    Verify an element sequence has exactly the expected length.

    Raises:
        DimensionError: If length != expected
    """
    if length != expected:
        raise DimensionError(
            f"{name}: expected exactly {expected} elements, got {length}",
            expected=expected,
            actual=length,
        )


def check_max_length(length: int, maximum: int, name: str) -> None:
    """
    Verify an element sequence fits in the receiver.

    Raises:
        DimensionError: If length > maximum
    """
    if length > maximum:
        raise DimensionError(
            f"{name}: at most {maximum} elements fit, got {length}",
            expected=maximum,
            actual=length,
        )


def check_same_shape(
    left: tuple[int, ...],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionError: If the shapes differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: shape mismatch {left} vs {right}",
            expected=left,
            actual=right,
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix shape is square.

    Raises:
        InvalidOperationError: If rows != columns
    """
    n, m = shape
    if n != m:
        raise InvalidOperationError(
            f"{operation}: requires a square matrix, got {n}x{m}",
            operation=operation,
        )
