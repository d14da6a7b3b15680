"""Tests for tetsphere.reporting."""

from tetsphere import Point3, SingularMatrixError, Tetrahedron
from tetsphere.estimation import EstimationRun
from tetsphere.reporting import format_containment, format_estimate, format_failure


def _flat():
    return Tetrahedron(*(Point3(float(x), float(y), 1.0) for x, y in ((0, 0), (1, 0), (0, 1), (1, 1))))


class TestFormatEstimate:
    def test_reference_format(self):
        run = EstimationRun(4217, 100_000)
        assert format_estimate(run) == (
            "Out of 100000 tetrahedrons, 4217 included the origin. That's 4.217%."
        )

    def test_three_decimals(self):
        assert format_estimate(EstimationRun(1, 3)).endswith("That's 33.333%.")
        assert format_estimate(EstimationRun(0, 10)).endswith("That's 0.000%.")


class TestFormatContainment:
    def test_inside(self):
        assert format_containment(True) == "The origin is inside of the tetrahedron."

    def test_outside(self):
        assert format_containment(False) == "The origin is outside of the tetrahedron."


class TestFormatFailure:
    def test_names_trial(self):
        msg = format_failure(SingularMatrixError(_flat(), trial=42))
        assert "Trial 42" in msg
        assert "no result" in msg

    def test_single_sample(self):
        assert "degenerate" in format_failure(SingularMatrixError(_flat()))
