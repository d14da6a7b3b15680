# Estimate how often four random points on the unit sphere enclose its center,
# then animate one sampled tetrahedron.
import logging
import sys

import numpy as np

from tetsphere import includes_origin, tetrahedron_on_sphere, SingularMatrixError
from tetsphere.estimation import EstimationParams, MonteCarloEstimator
from tetsphere.reporting import format_containment, format_estimate, format_failure
from tetsphere.visualization import animate_tetrahedron

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

#Parameters
TRIALS = 100_000
SAMPLER = 'rotation'  # 'gaussian' for exactly uniform points
SEED = None
N_WORKERS = 1
GIF_PATH = 'results/fig/tetrahedron.gif'


def display_tetrahedron(seed=None, sampler=SAMPLER):
    """Sample the tetrahedron to show, from a stream separate from the estimate's."""
    child = np.random.SeedSequence(seed).spawn(1)[0]
    return tetrahedron_on_sphere(np.random.default_rng(child), method=sampler)


def main():
    params = EstimationParams(trial_count=TRIALS, sampler=SAMPLER, seed=SEED,
                              n_workers=N_WORKERS)
    try:
        run = MonteCarloEstimator(params).run()
    except SingularMatrixError as err:
        print(format_failure(err))
        return 1
    print(format_estimate(run), '\n')

    print('Visualizing one of the tetrahedrons:')
    tetra = display_tetrahedron(SEED, SAMPLER)
    try:
        inside = includes_origin(tetra)
    except SingularMatrixError as err:
        print(format_failure(err))
        return 1
    print(format_containment(inside), '\n')

    print('Plotting tetrahedron on graph...')
    animate_tetrahedron(tetra, save_path=GIF_PATH)
    print(f'Done! GIF saved to {GIF_PATH}.')
    return 0


if __name__ == '__main__':
    sys.exit(main())
