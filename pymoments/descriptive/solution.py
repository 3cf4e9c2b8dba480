"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper returned
by describe().
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, TYPE_CHECKING

from pymoments.core.result import Result
from pymoments.descriptive._order import Quartiles

if TYPE_CHECKING:
    from pymoments.descriptive.design import SampleDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    All statistic fields are optional: None means the statistic is
    undefined for this sample (too few observations, zero dispersion,
    non-positive values for the geometric mean, a zero for the harmonic
    mean). The reason is recorded in Result.warnings.
    """
    n: int

    # Extremes
    minimum: float | None = None
    maximum: float | None = None
    range: float | None = None

    # Location
    mean: float | None = None
    geometric_mean: float | None = None
    harmonic_mean: float | None = None
    median: float | None = None

    # Order statistics
    quartiles: Quartiles | None = None

    # Dispersion: two-pass and online (Knuth) variants
    variance: float | None = None
    variance_pop: float | None = None
    stable_variance: float | None = None
    stable_variance_pop: float | None = None
    std_dev: float | None = None
    std_dev_pop: float | None = None

    # Shape
    skewness: float | None = None
    skewness_pop: float | None = None
    kurtosis: float | None = None
    kurtosis_pop: float | None = None

    def as_dict(self) -> dict[str, Any]:
        """Plain dict of every field; quartiles are flattened to a dict."""
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Quartiles):
                value = value.as_dict()
            out[f.name] = value
        return out


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'SampleDesign'

    # --- Extremes ---

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._result.params.n

    @property
    def minimum(self) -> float | None:
        return self._result.params.minimum

    @property
    def maximum(self) -> float | None:
        return self._result.params.maximum

    @property
    def range(self) -> float | None:
        """max - min."""
        return self._result.params.range

    # --- Location ---

    @property
    def mean(self) -> float | None:
        """Arithmetic mean."""
        return self._result.params.mean

    @property
    def geometric_mean(self) -> float | None:
        """Geometric mean, None unless every observation is positive."""
        return self._result.params.geometric_mean

    @property
    def harmonic_mean(self) -> float | None:
        """Harmonic mean, None if any observation is zero."""
        return self._result.params.harmonic_mean

    @property
    def median(self) -> float | None:
        return self._result.params.median

    # --- Order statistics ---

    @property
    def quartiles(self) -> Quartiles | None:
        """TI-83 quartiles with outlier fences."""
        return self._result.params.quartiles

    @property
    def iqr(self) -> float | None:
        q = self._result.params.quartiles
        return None if q is None else q.iqr

    # --- Dispersion ---

    @property
    def variance(self) -> float | None:
        """Sample variance (two-pass, n-1)."""
        return self._result.params.variance

    @property
    def variance_pop(self) -> float | None:
        """Population variance (two-pass, n)."""
        return self._result.params.variance_pop

    @property
    def stable_variance(self) -> float | None:
        """Sample variance (online, n-1)."""
        return self._result.params.stable_variance

    @property
    def stable_variance_pop(self) -> float | None:
        """Population variance (online, n)."""
        return self._result.params.stable_variance_pop

    @property
    def std_dev(self) -> float | None:
        """Sample standard deviation; see provenance for the variance path."""
        return self._result.params.std_dev

    @property
    def std_dev_pop(self) -> float | None:
        """Population standard deviation; see provenance for the variance path."""
        return self._result.params.std_dev_pop

    # --- Shape ---

    @property
    def skewness(self) -> float | None:
        """Sample skewness (bias-corrected)."""
        return self._result.params.skewness

    @property
    def skewness_pop(self) -> float | None:
        return self._result.params.skewness_pop

    @property
    def kurtosis(self) -> float | None:
        """Sample excess kurtosis (bias-corrected)."""
        return self._result.params.kurtosis

    @property
    def kurtosis_pop(self) -> float | None:
        """Population kurtosis proper (3 for a normal population)."""
        return self._result.params.kurtosis_pop

    # --- Metadata ---

    @property
    def params(self) -> DescriptiveParams:
        return self._result.params

    @property
    def name(self) -> str | None:
        """Sample label from the design."""
        return self._design.name

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def provenance(self) -> dict[str, Any]:
        return self._result.provenance

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Text summary, one statistic per line."""
        rows: list[tuple[str, float | None]] = [
            ("n", self.n),
            ("Min.", self.minimum),
            ("1st Qu.", None if self.quartiles is None else self.quartiles.q1),
            ("Median", self.median),
            ("Mean", self.mean),
            ("3rd Qu.", None if self.quartiles is None else self.quartiles.q3),
            ("Max.", self.maximum),
            ("Geo. mean", self.geometric_mean),
            ("Harm. mean", self.harmonic_mean),
            ("Variance", self.variance),
            ("Std. dev.", self.std_dev),
            ("Skewness", self.skewness),
            ("Kurtosis", self.kurtosis),
        ]
        label_width = max(len(label) for label, _ in rows)

        lines = []
        title = self.name or "sample"
        lines.append(f"Descriptive Statistics: {title}")
        for label, value in rows:
            if value is None:
                text = "NA"
            elif label == "n":
                text = str(value)
            else:
                text = f"{value:.6f}"
            lines.append(f"  {label.ljust(label_width)}  {text}")

        if self.warnings:
            lines.append("Warnings:")
            for w in self.warnings:
                lines.append(f"  - {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        computed = self._result.info.get('computed', [])
        stats_str = ", ".join(computed) if computed else "none"
        return f"DescriptiveSolution(n={self.n}, computed=[{stats_str}])"
