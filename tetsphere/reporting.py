"""Console text for estimation results. Formatting only."""

from tetsphere._containment import SingularMatrixError
from tetsphere.estimation import EstimationRun


def format_estimate(run: EstimationRun) -> str:
    """e.g. ``Out of 100000 tetrahedrons, 4217 included the origin. That's 4.217%.``"""
    return (f"Out of {run.trial_count} tetrahedrons, {run.success_count} "
            f"included the origin. That's {run.percentage:.3f}%.")


def format_containment(inside: bool) -> str:
    where = 'inside' if inside else 'outside'
    return f"The origin is {where} of the tetrahedron."


def format_failure(err: SingularMatrixError) -> str:
    if err.trial is None:
        return "The sampled tetrahedron is degenerate; no result."
    return f"Trial {err.trial} produced a degenerate tetrahedron; run aborted, no result."
