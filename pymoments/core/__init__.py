"""
Core infrastructure for PyMoments.

This module provides shared abstractions and utilities used by the
descriptive statistics module.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and numerical tolerance tiers
"""

from pymoments.core.result import Result
from pymoments.core.exceptions import (
    PyMomentsError,
    ValidationError,
    DimensionError,
    EmptySampleError,
    InsufficientSampleSizeError,
    NumericalError,
    DivisionByZeroError,
    InvalidBinWidthError,
    DomainError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMomentsError",
    "ValidationError",
    "DimensionError",
    "EmptySampleError",
    "InsufficientSampleSizeError",
    "NumericalError",
    "DivisionByZeroError",
    "InvalidBinWidthError",
    "DomainError",
]
