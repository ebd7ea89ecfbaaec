"""
Shared compute infrastructure for fixedlinalg.

This module contains the NUMERIC infrastructure shared by the Vector and
Matrix types: tolerance tiers, the numeric predicate layer and the
row-reduction kernels.

Submodules:
    tolerances: Tolerance tiers per element family
    precision: NumericTraits implementations, registry and predicates
    linalg: Row-reduction kernels (elimination, determinant, invertibility)
"""

from fixedlinalg.core.compute.precision import (
    FloatingTraits,
    IntegralTraits,
    RationalTraits,
    common_traits,
    is_nonzero,
    register_numeric_type,
    traits_for,
    values_equal,
)
from fixedlinalg.core.compute.tolerances import (
    ToleranceTier,
    machine_epsilon,
    select_tolerance,
)

__all__ = [
    # Numeric traits
    "FloatingTraits",
    "IntegralTraits",
    "RationalTraits",
    "common_traits",
    "register_numeric_type",
    "traits_for",
    # Predicates
    "is_nonzero",
    "values_equal",
    # Tolerances
    "ToleranceTier",
    "machine_epsilon",
    "select_tolerance",
]
