"""
Tolerance tiers for numerical validation.

Defines precision expectations for the two variance paths:
- well-conditioned data: two-pass and online (Knuth) variance agree to
  near machine precision
- ill-conditioned data (mean large relative to spread): agreement is
  relaxed, the online path is the reference

Used by the test suite and by describe()'s variance agreement check.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Well-conditioned samples: both variance algorithms agree
CPU_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned sample',
)

# Ill-conditioned samples (|mean| / sd > 1e6)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, mean large relative to spread',
)

# |mean| / sd above this ratio counts as ill-conditioned for variance.
# Squared deviations then lose about log10(ratio) digits in the two-pass sum.
ILL_CONDITIONED_RATIO = 1e6


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for a variance comparison."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64


def values_agree(a: float, b: float, tier: ToleranceTier) -> bool:
    """Whether two scalars agree under a tolerance tier (numpy isclose rule)."""
    return abs(a - b) <= tier.atol + tier.rtol * abs(b)
