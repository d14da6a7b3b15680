"""Aggregate result of a Monte Carlo estimation run."""

from dataclasses import dataclass

import numpy as np
from scipy import stats

# P(origin inside) for four independent uniform points on the sphere (Wendel).
THEORETICAL_PROBABILITY = 1.0 / 8.0


@dataclass(frozen=True)
class EstimationRun:
    """Integer counts of a finished run.

    The ratio is derived on demand; only counts are accumulated.

    Attributes
    ----------
    success_count : int
        Trials whose tetrahedron contained the origin.
    trial_count : int
        Trials performed.
    """
    success_count: int
    trial_count: int

    def __post_init__(self):
        if self.trial_count < 1:
            raise ValueError(f"trial_count must be positive, got {self.trial_count}")
        if not 0 <= self.success_count <= self.trial_count:
            raise ValueError(
                f"success_count must lie in [0, {self.trial_count}], "
                f"got {self.success_count}"
            )

    @property
    def ratio(self) -> float:
        return self.success_count / self.trial_count

    @property
    def percentage(self) -> float:
        return self.ratio * 100.0

    @property
    def standard_error(self) -> float:
        """Binomial standard error of ``ratio``."""
        p = self.ratio
        return float(np.sqrt(p * (1.0 - p) / self.trial_count))

    def confidence_interval(self, level: float = 0.95) -> tuple[float, float]:
        """Exact (Clopper-Pearson) confidence interval for the probability."""
        ci = stats.binomtest(self.success_count, self.trial_count).proportion_ci(
            confidence_level=level, method='exact')
        return float(ci.low), float(ci.high)

    def combine(self, other: 'EstimationRun') -> 'EstimationRun':
        """Pool two independent runs by summing their counts."""
        return EstimationRun(
            self.success_count + other.success_count,
            self.trial_count + other.trial_count,
        )

    __add__ = combine


def deviation_sigma(run: EstimationRun, p: float = THEORETICAL_PROBABILITY) -> float:
    """Distance of the estimate from ``p`` in units of the binomial std. error under ``p``."""
    sigma = np.sqrt(p * (1.0 - p) / run.trial_count)
    return float((run.ratio - p) / sigma)
