"""
Solver dispatch for descriptive statistics.

Provides describe() as the comprehensive entry point, and bin_width() to
select a histogram rule by name. The individual statistics live in the
private modules and are re-exported from pymoments.descriptive.
"""

from __future__ import annotations

from typing import Any, Callable, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymoments.core.compute.timing import Timer, timed
from pymoments.core.compute.tolerances import (
    ILL_CONDITIONED_RATIO,
    select_tolerance,
    values_agree,
)
from pymoments.core.exceptions import (
    InsufficientSampleSizeError,
    NumericalError,
    ValidationError,
)
from pymoments.core.result import Result, _default_provenance
from pymoments.descriptive.design import SampleDesign
from pymoments.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pymoments.descriptive._reductions import data_range, maximum, minimum
from pymoments.descriptive._location import geometric_mean, harmonic_mean, mean, median
from pymoments.descriptive._order import quartiles
from pymoments.descriptive._moments import (
    stable_variance,
    stable_variance_pop,
    variance,
    variance_pop,
)
from pymoments.descriptive._shape import kurtosis, kurtosis_pop, skewness, skewness_pop
from pymoments.descriptive._binning import (
    BinWidth,
    freedman_diaconis,
    scott,
    square_root_choice,
    sturges,
)


BinRule = Literal['sturges', 'scott', 'sqrt', 'fd']

_BIN_RULES: dict[str, Callable[..., BinWidth]] = {
    'sturges': sturges,
    'scott': scott,
    'sqrt': square_root_choice,
    'fd': freedman_diaconis,
}

# Statistics computed by describe(), in order. Each is skipped (None) when
# it raises one of _UNDEFINED for this sample.
_STATISTICS: tuple[tuple[str, Callable], ...] = (
    ('minimum', minimum),
    ('maximum', maximum),
    ('range', data_range),
    ('mean', mean),
    ('geometric_mean', geometric_mean),
    ('harmonic_mean', harmonic_mean),
    ('median', median),
    ('quartiles', quartiles),
    ('variance', variance),
    ('variance_pop', variance_pop),
    ('stable_variance', stable_variance),
    ('stable_variance_pop', stable_variance_pop),
    ('skewness', skewness),
    ('skewness_pop', skewness_pop),
    ('kurtosis', kurtosis),
    ('kurtosis_pop', kurtosis_pop),
)

# NumericalError covers DivisionByZeroError, DomainError and float64 overflow
_UNDEFINED = (InsufficientSampleSizeError, NumericalError)


def _ensure_design(data: ArrayLike | SampleDesign) -> SampleDesign:
    """Convert raw array to SampleDesign if needed."""
    if isinstance(data, SampleDesign):
        return data
    return SampleDesign.from_array(data)


def _sqrt_or_none(value: float | None) -> float | None:
    return None if value is None else float(np.sqrt(value))


def _check_variance_agreement(
    values: dict[str, object],
    warnings_list: list[str],
) -> None:
    """Warn when the two-pass and online sample variances disagree."""
    two_pass = values.get('variance')
    online = values.get('stable_variance')
    xbar = values.get('mean')
    if two_pass is None or online is None or xbar is None:
        return

    sd = np.sqrt(online)
    ill = sd > 0 and abs(xbar) / sd > ILL_CONDITIONED_RATIO
    tier = select_tolerance(is_ill_conditioned=ill)
    if not values_agree(two_pass, online, tier):
        warnings_list.append(
            f"variance: two-pass ({two_pass!r}) and online ({online!r}) "
            f"estimates disagree beyond {tier.name} tolerance "
            f"(rtol={tier.rtol}); prefer stable_variance"
        )


def _compute_statistics(
    x: NDArray[np.floating[Any]],
    timer: Timer,
    *,
    stable: bool,
) -> tuple[dict[str, object], list[str], list[str], list[str]]:
    """Run every statistic in its own timer section, skipping undefined ones."""
    values: dict[str, object] = {}
    computed: list[str] = []
    skipped: list[str] = []
    warnings_list: list[str] = []

    for name, func in _STATISTICS:
        with timer.section(name):
            try:
                values[name] = func(x)
            except _UNDEFINED as e:
                values[name] = None
                skipped.append(name)
                warnings_list.append(str(e))
            else:
                computed.append(name)

    with timer.section('std_dev'):
        variant = 'stable_variance' if stable else 'variance'
        values['std_dev'] = _sqrt_or_none(values[variant])
        values['std_dev_pop'] = _sqrt_or_none(values[variant + '_pop'])
    for name in ('std_dev', 'std_dev_pop'):
        (computed if values[name] is not None else skipped).append(name)

    return values, computed, skipped, warnings_list


def describe(
    data: ArrayLike | SampleDesign,
    *,
    stable: bool = False,
) -> DescriptiveSolution:
    """
    Compute every descriptive statistic defined for a sample.

    Computes: minimum, maximum, range, mean, geometric and harmonic means,
    median, quartiles with outlier fences, two-pass and online variances,
    standard deviations, skewness and kurtosis (population and sample).

    Statistics that are undefined for the sample (n too small, zero
    dispersion, non-positive values for the geometric mean, a zero for the
    harmonic mean, an intermediate sum that overflows float64) are None.
    The reason is listed in ``warnings`` and the name in
    ``info['skipped']``.

    Parameters
    ----------
    data : array-like or SampleDesign
        Non-empty, finite 1D sample.
    stable : bool
        If True, std_dev and std_dev_pop are derived from the online
        (Knuth) variance instead of the two-pass variance.

    Returns
    -------
    DescriptiveSolution with all defined statistics populated.

    Raises
    ------
    ValidationError, EmptySampleError, DimensionError, DomainError
        The input is not a valid sample.
    """
    design = _ensure_design(data)
    x = design.data

    with timed() as timer:
        values, computed, skipped, warnings_list = _compute_statistics(
            x, timer, stable=stable,
        )
        _check_variance_agreement(values, warnings_list)

    if design.n < 4:
        warnings_list.append(
            f"quartiles: n={design.n} < 4, quartiles and fences are degenerate"
        )

    params = DescriptiveParams(n=design.n, **values)

    result = Result(
        params=params,
        info={'n': design.n, 'computed': computed, 'skipped': skipped},
        timing=timer.result(),
        backend_name='cpu_descriptive',
        warnings=tuple(warnings_list),
        provenance={
            **_default_provenance(),
            'variance_algorithm': 'online' if stable else 'two_pass',
            'quartile_method': 'ti83',
        },
    )

    return DescriptiveSolution(_result=result, _design=design)


def bin_width(
    data: ArrayLike | SampleDesign,
    rule: BinRule = 'sturges',
) -> BinWidth:
    """
    Suggest histogram binning with a named rule.

    Parameters
    ----------
    data : array-like or SampleDesign
        Non-empty, finite 1D sample.
    rule : str
        'sturges', 'scott', 'sqrt' (square-root choice) or 'fd'
        (Freedman-Diaconis).

    Returns
    -------
    BinWidth(k, h)
    """
    try:
        func = _BIN_RULES[rule]
    except KeyError:
        raise ValidationError(
            f"Unknown bin-width rule: {rule!r}. "
            f"Must be one of {sorted(_BIN_RULES)}."
        ) from None
    return func(_ensure_design(data))
