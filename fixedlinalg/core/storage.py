"""
Owned fixed-size element storage.

FixedStorage is the base of Vector and Matrix. It owns one contiguous 1-D
numpy array whose length never changes, plus the NumericTraits of the
element type.

Ownership:
    copy()  deep-clones the backing array
    move()  hands the backing array to a new owner and empties the source;
            every later use of the source raises MovedFromError, except
            take() (reassignment)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TypeVar

import numpy as np
from numpy.typing import NDArray

from fixedlinalg.core.exceptions import MovedFromError
from fixedlinalg.core.protocols import NumericTraits
from fixedlinalg.core.validation import check_same_shape

S = TypeVar('S', bound='FixedStorage')


class FixedStorage(ABC):
    """Base class owning a fixed-length backing array."""

    _elements: NDArray[Any] | None
    _traits: NumericTraits

    @property
    @abstractmethod
    def shape(self) -> tuple[int, ...]:
        """Dimensions of the stored object."""

    @abstractmethod
    def _wrap_like(self: S, elements: NDArray[Any], traits: NumericTraits | None = None) -> S:
        """New instance of the same type and shape around elements (no copy)."""

    def _store(self) -> NDArray[Any]:
        """Backing array; raises if the storage was moved away."""
        if self._elements is None:
            raise MovedFromError(
                f"{type(self).__name__} was moved from and holds no storage",
                operation='access',
            )
        return self._elements

    @property
    def traits(self) -> NumericTraits:
        """NumericTraits of the element type."""
        return self._traits

    @property
    def dtype(self) -> np.dtype:
        """numpy dtype of the backing array."""
        return self._traits.storage_dtype

    @property
    def size(self) -> int:
        """Total number of elements."""
        return int(np.prod(self.shape))

    @property
    def is_moved(self) -> bool:
        """True once move() handed the storage to another owner."""
        return self._elements is None

    def copy(self: S) -> S:
        """Deep copy with its own backing array."""
        return self._wrap_like(self._store().copy())

    def __copy__(self: S) -> S:
        return self.copy()

    def __deepcopy__(self: S, memo: dict[int, Any]) -> S:
        return self.copy()

    def move(self: S) -> S:
        """
        Transfer the backing array to a new owner.

        Returns:
            New instance owning the storage

        After the call this instance is empty: any access raises
        MovedFromError until take() gives it storage again.
        """
        elements = self._store()
        moved = self._wrap_like(elements)
        self._elements = None
        return moved

    def take(self: S, other: S) -> S:
        """
        Move-assign: adopt other's storage and empty other.

        Valid on a moved-from receiver.

        Raises:
            DimensionError: If the shapes differ
            MovedFromError: If other was moved from
        """
        check_same_shape(self.shape, other.shape, 'take')
        elements = other._store()
        self._elements = elements
        self._traits = other._traits
        other._elements = None
        return self

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the elements as a numpy array of the receiver's shape."""
        return self._store().reshape(self.shape).copy()
