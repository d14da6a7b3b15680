"""Monte Carlo estimation: serial and process-parallel runners plus result type."""

from tetsphere.estimation._run import (
    EstimationRun,
    THEORETICAL_PROBABILITY,
    deviation_sigma,
)
from tetsphere.estimation._estimator import (
    EstimationParams,
    MonteCarloEstimator,
    estimate,
    estimate_parallel,
)

__all__ = [
    'EstimationRun',
    'THEORETICAL_PROBABILITY',
    'deviation_sigma',
    'EstimationParams',
    'MonteCarloEstimator',
    'estimate',
    'estimate_parallel',
]
