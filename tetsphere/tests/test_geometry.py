"""Tests for Point3 rotations and the Tetrahedron type."""

import dataclasses

import numpy as np
import numpy.testing as npt
import pytest

from tetsphere import FACE_INDICES, ORIGIN, Point3, Tetrahedron


@pytest.fixture
def regular_tetra():
    """Regular tetrahedron centred on the origin."""
    return Tetrahedron(
        Point3(1.0, 1.0, 1.0),
        Point3(1.0, -1.0, -1.0),
        Point3(-1.0, 1.0, -1.0),
        Point3(-1.0, -1.0, 1.0),
    )


# ---------------------------------------------------------------------------
# Point3
# ---------------------------------------------------------------------------

class TestRotations:
    def test_rotate_x_quarter_turn(self):
        p = Point3(0.0, 1.0, 0.0).rotate_x(90)
        npt.assert_allclose(p, (0.0, 0.0, 1.0), atol=1e-12)

    def test_rotate_y_quarter_turn(self):
        p = Point3(0.0, 0.0, 1.0).rotate_y(90)
        npt.assert_allclose(p, (1.0, 0.0, 0.0), atol=1e-12)

    def test_rotate_z_quarter_turn(self):
        p = Point3(1.0, 0.0, 0.0).rotate_z(90)
        npt.assert_allclose(p, (0.0, 1.0, 0.0), atol=1e-12)

    @pytest.mark.parametrize("axis, fixed", [("x", 0), ("y", 1), ("z", 2)])
    def test_rotation_axis_coordinate_fixed(self, axis, fixed):
        p = Point3(0.3, -1.2, 2.5)
        q = getattr(p, f"rotate_{axis}")(37.0)
        assert q[fixed] == p[fixed]

    @pytest.mark.parametrize("axis", ["x", "y", "z"])
    @pytest.mark.parametrize("theta", [0.0, 13.0, 90.0, 181.5, 359.9, -45.0, 1234.0])
    def test_rotation_preserves_norm(self, axis, theta):
        p = Point3(0.3, -1.2, 2.5)
        q = getattr(p, f"rotate_{axis}")(theta)
        assert q.norm() == pytest.approx(p.norm(), abs=1e-9)

    @pytest.mark.parametrize("axis", ["x", "y", "z"])
    def test_full_turn_is_identity(self, axis):
        p = Point3(0.3, -1.2, 2.5)
        q = getattr(p, f"rotate_{axis}")(360.0)
        npt.assert_allclose(q, p, atol=1e-12)

    def test_rotation_returns_new_point(self):
        p = Point3(1.0, 2.0, 3.0)
        q = p.rotate_z(10.0)
        assert q is not p
        assert p == Point3(1.0, 2.0, 3.0)


class TestPoint3:
    def test_structural_equality(self):
        assert Point3(1.0, 2.0, 3.0) == Point3(1.0, 2.0, 3.0)
        assert Point3(1.0, 2.0, 3.0) != Point3(1.0, 2.0, 3.5)

    def test_immutable(self):
        p = Point3(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            p.x = 5.0

    def test_difference_and_negation(self):
        assert Point3(1.0, 2.0, 3.0) - Point3(0.5, 0.5, 0.5) == Point3(0.5, 1.5, 2.5)
        assert -Point3(1.0, -2.0, 0.0) == Point3(-1.0, 2.0, -0.0)

    def test_array_conversion(self):
        p = Point3(1.0, 2.0, 3.0)
        npt.assert_array_equal(p.as_array(), [1.0, 2.0, 3.0])
        assert Point3.from_array(np.array([1.0, 2.0, 3.0])) == p

    def test_origin(self):
        assert ORIGIN.norm() == 0.0


# ---------------------------------------------------------------------------
# Tetrahedron
# ---------------------------------------------------------------------------

class TestTetrahedron:
    def test_barycentric_matrix_columns_are_edges(self, regular_tetra):
        M = regular_tetra.barycentric_matrix()
        assert M.shape == (3, 3)
        p0 = regular_tetra.p0.as_array()
        for j, p in enumerate((regular_tetra.p1, regular_tetra.p2, regular_tetra.p3)):
            npt.assert_array_equal(M[:, j], p.as_array() - p0)

    def test_barycentric_matrix_entries(self):
        tetra = Tetrahedron(
            Point3(1.0, 2.0, 3.0),
            Point3(2.0, 2.0, 3.0),
            Point3(1.0, 5.0, 3.0),
            Point3(1.0, 2.0, -1.0),
        )
        expected = np.array([
            [1.0, 0.0, 0.0],
            [0.0, 3.0, 0.0],
            [0.0, 0.0, -4.0],
        ])
        npt.assert_array_equal(tetra.barycentric_matrix(), expected)

    def test_barycentric_matrix_idempotent(self, regular_tetra):
        M1 = regular_tetra.barycentric_matrix()
        M2 = regular_tetra.barycentric_matrix()
        npt.assert_array_equal(M1, M2)
        assert M1 is not M2

    def test_points_order(self, regular_tetra):
        pts = regular_tetra.points()
        assert len(pts) == 4
        assert pts[0] == regular_tetra.p0
        assert pts[3] == regular_tetra.p3

    def test_faces_are_all_triples(self, regular_tetra):
        faces = regular_tetra.faces()
        assert len(faces) == 4
        assert FACE_INDICES == ((0, 1, 2), (0, 1, 3), (0, 2, 3), (1, 2, 3))
        pts = regular_tetra.points()
        for face, idx in zip(faces, FACE_INDICES):
            assert face == tuple(tuple(pts[i]) for i in idx)

    def test_volume_regular(self, regular_tetra):
        # Edge length 2*sqrt(2) gives volume a^3 / (6 sqrt(2)) = 8/3
        assert abs(regular_tetra.volume()) == pytest.approx(8.0 / 3.0)
        assert not regular_tetra.is_degenerate()

    def test_degenerate_detection(self):
        flat = Tetrahedron(
            Point3(0.0, 0.0, 1.0),
            Point3(1.0, 0.0, 1.0),
            Point3(0.0, 1.0, 1.0),
            Point3(1.0, 1.0, 1.0),
        )
        assert flat.is_degenerate()

    def test_frozen(self, regular_tetra):
        with pytest.raises(dataclasses.FrozenInstanceError):
            regular_tetra.p0 = ORIGIN

    def test_array_round_trip(self, regular_tetra):
        a = regular_tetra.as_array()
        assert a.shape == (4, 3)
        assert Tetrahedron.from_array(a) == regular_tetra

    def test_from_array_bad_shape(self):
        with pytest.raises(ValueError, match="4, 3"):
            Tetrahedron.from_array(np.zeros((3, 3)))
