"""
Shared compute infrastructure for PyMatrix.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical tolerance constants and comparison tiers
"""

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import (
    PIVOT_TOLERANCE,
    CLEANUP_TOLERANCE,
    ToleranceTier,
)

__all__ = [
    "Timer",
    "PIVOT_TOLERANCE",
    "CLEANUP_TOLERANCE",
    "ToleranceTier",
]
