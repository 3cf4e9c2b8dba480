"""
Shared compute infrastructure for PyMoments.

IMPORTANT: This is NOT where statistics live. Those go in descriptive/.
This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical tolerance tiers
"""

from pymoments.core.compute.timing import Timer, timed
from pymoments.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "select_tolerance",
]
