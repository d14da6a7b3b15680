"""
Monte Carlo estimation of P(origin inside a random spherical tetrahedron).

Each trial samples four points on the unit sphere, builds a tetrahedron and
tests whether it contains the origin. Successes are counted as integers and
the ratio is only formed from the final counts.

A singular barycentric matrix aborts the run: the error is re-raised with
the 1-based index of the failing trial and no partial result is returned.
Skipping or redrawing degenerate samples would change the distribution
being estimated.

Usage
-----
    from tetsphere.estimation import estimate, MonteCarloEstimator, EstimationParams

    run = estimate(100_000, rng=42)
    print(run.success_count, run.trial_count, run.ratio)

    est = MonteCarloEstimator(EstimationParams(trial_count=1_000_000, seed=1, n_workers=4))
    run = est.run()
"""

import logging
from concurrent.futures import FIRST_COMPLETED, ProcessPoolExecutor, wait
from dataclasses import dataclass
from typing import Optional

import numpy as np

from tetsphere._containment import SingularMatrixError, includes_origin
from tetsphere._sampling import as_generator, sphere_samplers, tetrahedron_on_sphere
from tetsphere.estimation._run import EstimationRun

logger = logging.getLogger(__name__)


@dataclass
class EstimationParams:
    """Parameters for an estimation run.

    Attributes
    ----------
    trial_count : int
        Number of tetrahedra to sample.
    sampler : str
        Sphere sampler name (``'rotation'`` or ``'gaussian'``).
    seed : int or None
        Seed for the random source. None draws fresh OS entropy.
    n_workers : int
        Worker processes. 1 runs in the calling process.
    log_every : int
        Emit a DEBUG progress line every this many trials (0 disables).
    """
    trial_count: int = 100_000
    sampler: str = 'rotation'
    seed: Optional[int] = None
    n_workers: int = 1
    log_every: int = 10_000


def estimate(
    trial_count: int = 100_000,
    rng=None,
    sampler: str = 'rotation',
    log_every: int = 10_000,
    first_trial: int = 1,
) -> EstimationRun:
    """Run ``trial_count`` trials sequentially.

    Parameters
    ----------
    trial_count : int
        Number of trials (must be >= 1).
    rng : numpy.random.Generator, int, SeedSequence or None
        Random source, consumed by every trial in order.
    sampler : str
        Registered sphere sampler.
    log_every : int
        DEBUG progress interval (0 disables).
    first_trial : int
        Index reported for the first trial; workers of a parallel run pass
        their offset so failures carry global indices.

    Returns
    -------
    EstimationRun

    Raises
    ------
    SingularMatrixError
        On the first degenerate tetrahedron, tagged with its trial index.
    """
    if trial_count < 1:
        raise ValueError(f"trial_count must be >= 1, got {trial_count}")
    # Fail on unknown names before spending any randomness.
    sphere_samplers[sampler]
    rng = as_generator(rng)

    inside = 0
    for i in range(trial_count):
        trial = first_trial + i
        tetra = tetrahedron_on_sphere(rng, method=sampler)
        try:
            if includes_origin(tetra):
                inside += 1
        except SingularMatrixError as err:
            logger.error("Trial %d produced a degenerate tetrahedron: %s", trial, tetra)
            raise err.at_trial(trial) from err
        if log_every and (i + 1) % log_every == 0:
            logger.debug("%d/%d trials done, %d inside", i + 1, trial_count, inside)

    return EstimationRun(inside, trial_count)


def _estimate_chunk(trial_count, seed_seq, sampler, log_every, first_trial):
    """Worker entry point; must stay importable at module level for pickling."""
    run = estimate(trial_count, rng=np.random.default_rng(seed_seq),
                   sampler=sampler, log_every=log_every, first_trial=first_trial)
    return run.success_count


def estimate_parallel(
    trial_count: int = 100_000,
    n_workers: int = 2,
    seed=None,
    sampler: str = 'rotation',
    log_every: int = 10_000,
) -> EstimationRun:
    """Split trials over worker processes and sum their success counts.

    Every worker draws from its own generator spawned from a single
    ``SeedSequence``, so a given ``seed`` and ``n_workers`` reproduce the
    same result regardless of completion order.

    A degenerate trial stops the run without waiting for chunks that start
    after it. Chunks that start earlier still run to completion, so the
    error raised always names the lowest failing trial index.
    """
    if trial_count < 1:
        raise ValueError(f"trial_count must be >= 1, got {trial_count}")
    if n_workers < 1:
        raise ValueError(f"n_workers must be >= 1, got {n_workers}")
    sphere_samplers[sampler]

    n_chunks = min(n_workers, trial_count)
    sizes = [len(c) for c in np.array_split(np.arange(trial_count), n_chunks)]
    starts = np.concatenate([[1], 1 + np.cumsum(sizes)[:-1]])
    children = np.random.SeedSequence(seed).spawn(n_chunks)

    inside = 0
    failure = None
    executor = ProcessPoolExecutor(max_workers=n_chunks)
    try:
        futures = {
            executor.submit(_estimate_chunk, size, child, sampler, log_every, int(start)): int(start)
            for size, child, start in zip(sizes, children, starts)
        }
        pending = set(futures)
        while pending:
            done, pending = wait(pending, return_when=FIRST_COMPLETED)
            for future in done:
                try:
                    inside += future.result()
                except SingularMatrixError as err:
                    if failure is None or err.trial < failure.trial:
                        failure = err
            if failure is not None:
                # Only chunks starting before the failing trial can fail lower.
                pending = {f for f in pending if futures[f] < failure.trial}
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    if failure is not None:
        logger.error("Parallel run aborted at trial %d", failure.trial)
        raise failure

    return EstimationRun(inside, trial_count)


class MonteCarloEstimator:
    """Runs an estimation according to ``EstimationParams``.

    Parameters
    ----------
    params : EstimationParams or None
        Run parameters (defaults: 100,000 serial trials, rotation sampler).
    """

    def __init__(self, params: Optional[EstimationParams] = None):
        self.params = params if params is not None else EstimationParams()

    def run(self) -> EstimationRun:
        p = self.params
        logger.info("Estimating with %d trials (sampler=%s, workers=%d, seed=%s)",
                    p.trial_count, p.sampler, p.n_workers, p.seed)
        if p.n_workers > 1:
            result = estimate_parallel(p.trial_count, n_workers=p.n_workers,
                                       seed=p.seed, sampler=p.sampler,
                                       log_every=p.log_every)
        else:
            result = estimate(p.trial_count, rng=p.seed, sampler=p.sampler,
                              log_every=p.log_every)
        logger.info("%d of %d tetrahedra contained the origin (%.3f%%)",
                    result.success_count, result.trial_count, result.percentage)
        return result
