"""
Tolerance constants and comparison tiers.

Two thresholds drive the RREF engine:
- PIVOT_TOLERANCE: a candidate pivot (or elimination factor) smaller than
  this in magnitude is treated as zero.
- CLEANUP_TOLERANCE: after elimination, any cell smaller than this is
  snapped to exactly 0.

The pivot threshold is always the looser of the two.

Comparison tiers are used by Matrix.allclose() and the test suite.
"""

from dataclasses import dataclass
import math

from pymatrix.core.exceptions import ValidationError


PIVOT_TOLERANCE = 1e-10

CLEANUP_TOLERANCE = 1e-12


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Bitwise-equal results (identity, idempotence, snapped zeros)
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact equality, no rounding allowed',
)

# Inverse-operation round trips such as (A + B) - B
ROUNDTRIP = ToleranceTier(
    rtol=0.0,
    atol=1e-9,
    name='roundtrip',
    description='Absolute 1e-9, for add/subtract round trips',
)

# General double-precision agreement (associativity, reference checks)
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, reordered arithmetic',
)


def check_tolerances(pivot_tol: float, cleanup_tol: float) -> None:
    """
    Verify a pair of RREF tolerances is usable.

    Raises:
        ValidationError: If either value is non-positive or non-finite, or
            cleanup_tol exceeds pivot_tol
    """
    for name, value in (('pivot_tol', pivot_tol), ('cleanup_tol', cleanup_tol)):
        if not math.isfinite(value) or value <= 0:
            raise ValidationError(
                f"{name}: must be a positive finite number, got {value!r}"
            )
    if cleanup_tol > pivot_tol:
        raise ValidationError(
            f"cleanup_tol: must not exceed pivot_tol "
            f"({cleanup_tol:g} > {pivot_tol:g})"
        )
