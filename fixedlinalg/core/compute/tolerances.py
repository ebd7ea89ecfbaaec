"""
Tolerance tiers for numerical comparison.

Each element family gets a pair of tolerances:
- zero_tol: magnitude below which a value is treated as zero (pivot search)
- equal_tol: maximum |x - y| for two values to compare equal

Tiers:
- EXACT: integral and rational types, both tolerances zero
- FLOAT32: single precision, machine epsilon for both tests
- FLOAT64: double precision zero test, single precision equality test
- FLOAT16 / LONGDOUBLE: their own machine epsilon for both tests

FLOAT64 compares with the single precision epsilon so that products
accumulated in different orders, e.g. (A @ B) @ C vs A @ (B @ C), still
compare equal.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance thresholds for numerical comparison."""
    zero_tol: float
    equal_tol: float
    name: str
    description: str


EPSILON_16: float = float(np.finfo(np.float16).eps)  # ~9.77e-4
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

EXACT = ToleranceTier(
    zero_tol=0.0,
    equal_tol=0.0,
    name='exact',
    description='Integral and rational types: exact comparison',
)

FLOAT16 = ToleranceTier(
    zero_tol=EPSILON_16,
    equal_tol=EPSILON_16,
    name='float16',
    description='Half precision: machine epsilon for both tests',
)

FLOAT32 = ToleranceTier(
    zero_tol=EPSILON_32,
    equal_tol=EPSILON_32,
    name='float32',
    description='Single precision: machine epsilon for both tests',
)

FLOAT64 = ToleranceTier(
    zero_tol=EPSILON_64,
    equal_tol=EPSILON_32,
    name='float64',
    description='Double precision zero test, single precision equality',
)

LONGDOUBLE = ToleranceTier(
    zero_tol=float(np.finfo(np.longdouble).eps),
    equal_tol=EPSILON_32,
    name='longdouble',
    description='Extended precision zero test, single precision equality',
)


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a floating dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def select_tolerance(dtype: np.dtype | type) -> ToleranceTier:
    """Select the tolerance tier for a numpy dtype."""
    dt = np.dtype(dtype)
    if dt.kind in 'iu':
        return EXACT
    if dt == np.float16:
        return FLOAT16
    if dt == np.float32:
        return FLOAT32
    if dt == np.float64:
        return FLOAT64
    if dt.kind == 'f':
        return LONGDOUBLE
    raise ValueError(f"no tolerance tier for dtype {dt}")
