"""
Exception hierarchy for PyMoments.

All exceptions inherit from PyMomentsError to allow catching any
library-specific error. Statistic-specific failures inherit from the
appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never return NaN or Inf where a precondition was violated
"""


class PyMomentsError(Exception):
    """Base exception for all PyMoments errors."""
    pass


class ValidationError(PyMomentsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a sample is not a flat (1D) sequence of observations.
    """
    pass


class EmptySampleError(ValidationError):
    """
    A reduction or statistic was invoked on zero observations.
    """
    pass


class InsufficientSampleSizeError(ValidationError):
    """
    Sample is smaller than the statistic's minimum size.

    Sample variance needs n >= 2, sample skewness n >= 3 and sample
    kurtosis n >= 4.

    Attributes:
        statistic: Name of the statistic that was requested
        required: Minimum number of observations
        actual: Number of observations supplied
    """

    def __init__(
        self,
        message: str,
        statistic: str | None = None,
        required: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.statistic = statistic
        self.required = required
        self.actual = actual


class NumericalError(PyMomentsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation,
    including results that overflow float64.
    """
    pass


class DivisionByZeroError(NumericalError):
    """
    A statistic would divide by zero.

    Raised for the harmonic mean of a sample containing zero, and for shape
    statistics of a sample with zero dispersion.

    Attributes:
        statistic: Name of the statistic that was requested
    """

    def __init__(self, message: str, statistic: str | None = None):
        super().__init__(message)
        self.statistic = statistic


class InvalidBinWidthError(DivisionByZeroError):
    """
    A histogram bin-width rule produced a zero width.

    Happens when the sample range, standard deviation or IQR the rule is
    built on is zero.

    Attributes:
        rule: Name of the bin-width rule
        width: The offending width (normally 0.0)
    """

    def __init__(
        self,
        message: str,
        rule: str | None = None,
        width: float | None = None,
    ):
        super().__init__(message, statistic=rule)
        self.rule = rule
        self.width = width


class DomainError(NumericalError):
    """
    Input lies outside the statistic's real domain.

    Raised for non-finite observations (NaN, Inf) and for the geometric
    mean of a sample with non-positive values.

    Attributes:
        statistic: Name of the statistic that was requested, if any
        n_invalid: Number of offending observations, if counted
    """

    def __init__(
        self,
        message: str,
        statistic: str | None = None,
        n_invalid: int | None = None,
    ):
        super().__init__(message)
        self.statistic = statistic
        self.n_invalid = n_invalid
