"""
Generic result container for PyMoments computations.

The Result class provides a standardized envelope for bundled statistics
(see descriptive.describe). It carries timing, warnings and metadata next
to a domain-specific parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (sample size, computed statistics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, Any]:
    """Version metadata recorded on every result."""
    from pymoments import __version__
    return {
        'pymoments_version': __version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (means, variances, etc.)
        info: Structured metadata (sample size, computed/skipped statistics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Algorithm choices that produced the payload

    Examples:
        >>> Result(
        ...     params=DescriptiveParams(n=5, mean=3.0),
        ...     info={'n': 5, 'computed': ['mean']},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_descriptive'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, Any] = field(default_factory=_default_provenance)
