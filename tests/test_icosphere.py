"""Тесты для икосферы и разбиения икосаэдра."""

import math

import numpy as np
import pytest

from meshgen.geombase import (
    ICOSAHEDRON_FACES,
    ICOSAHEDRON_VERTICES,
    IcoSphereSubdivider,
    icosphere_point_count,
)
from meshgen.mesh import (
    ICOSPHERE_VERTEX_LIMIT,
    Icosphere,
    MeshGenerationError,
    TooManyVerticesError,
    build,
    icosphere_mesh,
    spherical_uv,
)


class TestIcoSphereSubdivider:
    @pytest.mark.parametrize("n", [0, 1, 2, 3, 7])
    def test_point_count(self, n):
        sub = IcoSphereSubdivider(n, spherical_uv)
        assert sub.raw_points().shape == (icosphere_point_count(n), 3)
        assert len(sub.raw_data()) == icosphere_point_count(n)
        assert icosphere_point_count(n) == (n + 1) ** 2 * 10 + 2

    @pytest.mark.parametrize("n", [0, 1, 4])
    def test_points_on_unit_sphere(self, n):
        points = IcoSphereSubdivider(n, spherical_uv).raw_points()
        np.testing.assert_allclose(np.linalg.norm(points, axis=1), 1.0, atol=1e-12)

    def test_base_vertices_come_first(self):
        points = IcoSphereSubdivider(3, spherical_uv).raw_points()
        np.testing.assert_array_equal(points[:12], ICOSAHEDRON_VERTICES)

    def test_points_are_unique(self):
        points = IcoSphereSubdivider(4, spherical_uv).raw_points()
        rounded = {tuple(np.round(p, 9)) for p in points}
        assert len(rounded) == len(points)

    def test_level_zero_faces_are_base_faces(self):
        sub = IcoSphereSubdivider(0, spherical_uv)
        for face in range(20):
            buffer = []
            sub.get_indices(face, buffer)
            assert buffer == ICOSAHEDRON_FACES[face].tolist()

    @pytest.mark.parametrize("n", [0, 1, 2, 5])
    def test_indices_per_face(self, n):
        sub = IcoSphereSubdivider(n, spherical_uv)
        assert sub.indices_per_main_triangle() == 3 * (n + 1) ** 2
        buffer = [99]
        sub.get_indices(7, buffer)
        assert len(buffer) == 1 + sub.indices_per_main_triangle()
        assert buffer[0] == 99

    def test_every_point_is_used(self):
        sub = IcoSphereSubdivider(3, spherical_uv)
        buffer = []
        for face in range(20):
            sub.get_indices(face, buffer)
        assert set(buffer) == set(range(len(sub.raw_points())))

    def test_callback_called_per_point(self):
        seen = []

        def uv_fn(point):
            seen.append(np.array(point))
            return [len(seen), 0.0]

        sub = IcoSphereSubdivider(2, uv_fn)
        assert len(seen) == len(sub.raw_points())
        np.testing.assert_array_equal(np.array(seen), sub.raw_points())
        assert [d[0] for d in sub.raw_data()] == list(range(1, len(seen) + 1))

    def test_face_out_of_range(self):
        sub = IcoSphereSubdivider(1, spherical_uv)
        with pytest.raises(IndexError):
            sub.get_indices(20, [])
        with pytest.raises(IndexError):
            sub.get_indices(-1, [])

    def test_negative_subdivisions(self):
        with pytest.raises(ValueError):
            IcoSphereSubdivider(-1, spherical_uv)


class TestSphericalUV:
    def test_equator_on_positive_x(self):
        assert spherical_uv([1.0, 0.0, 0.0]) == pytest.approx([0.5, 0.0])

    def test_poles(self):
        assert spherical_uv([0.0, 0.0, 1.0]) == pytest.approx([1.0, 0.0])
        assert spherical_uv([0.0, 0.0, -1.0]) == pytest.approx([0.0, 0.0])

    def test_azimuth_range(self):
        assert spherical_uv([0.0, 1.0, 0.0])[1] == pytest.approx(0.25)
        assert spherical_uv([-1.0, 0.0, 0.0])[1] == pytest.approx(0.5)
        assert spherical_uv([-1.0, -1e-12, 0.0])[1] == pytest.approx(-0.5)

    def test_formula(self):
        p = np.array([0.3, -0.4, 0.5])
        p /= np.linalg.norm(p)
        u, v = spherical_uv(p)
        assert u == pytest.approx(1.0 - math.acos(p[2]) / math.pi)
        assert v == pytest.approx(math.atan2(p[1], p[0]) / math.pi * 0.5)


class TestIcosphereMesh:
    def test_bare_icosahedron(self):
        mesh = icosphere_mesh(Icosphere(radius=2.0, subdivisions=0))
        assert mesh.positions.shape == (12, 3)
        assert mesh.normals.shape == (12, 3)
        assert mesh.uvs.shape == (12, 2)
        assert mesh.indices.shape == (60,)
        np.testing.assert_allclose(np.linalg.norm(mesh.positions, axis=1), 2.0, rtol=1e-6)
        assert mesh.indices.tolist() == ICOSAHEDRON_FACES.ravel().tolist()

    @pytest.mark.parametrize("radius,n", [(1.0, 1), (0.5, 3), (3.0, 5)])
    def test_positions_and_normals(self, radius, n):
        mesh = icosphere_mesh(Icosphere(radius=radius, subdivisions=n))
        assert mesh.vertex_count == icosphere_point_count(n)
        assert mesh.indices.shape == (60 * (n + 1) ** 2,)
        assert int(mesh.indices.max()) < mesh.vertex_count
        np.testing.assert_allclose(np.linalg.norm(mesh.positions, axis=1), radius, rtol=1e-5)
        np.testing.assert_allclose(mesh.positions / radius, mesh.normals, atol=1e-6)

    def test_uvs_come_from_callback(self):
        mesh = icosphere_mesh(Icosphere(radius=4.0, subdivisions=2))
        raw = IcoSphereSubdivider(2, spherical_uv).raw_points()
        expected = np.array([spherical_uv(p) for p in raw])
        np.testing.assert_allclose(mesh.uvs, expected, atol=1e-6)
        assert mesh.uvs[:, 0].min() >= 0.0 and mesh.uvs[:, 0].max() <= 1.0
        assert mesh.uvs[:, 1].min() >= -0.5 and mesh.uvs[:, 1].max() <= 0.5

    def test_triangles_wind_outward(self):
        mesh = icosphere_mesh(Icosphere(radius=1.0, subdivisions=4))
        tri = mesh.triangles.astype(int)
        p = mesh.positions.astype(float)
        n = np.cross(p[tri[:, 1]] - p[tri[:, 0]], p[tri[:, 2]] - p[tri[:, 0]])
        centroids = p[tri].mean(axis=1)
        assert np.all(np.einsum("ij,ij->i", n, centroids) > 0)

    def test_default_descriptor(self):
        sphere = Icosphere()
        assert sphere.radius == 1.0
        assert sphere.subdivisions == 5
        mesh = build(sphere)
        assert mesh.vertex_count == 362

    def test_highest_level_succeeds(self):
        mesh = icosphere_mesh(Icosphere(radius=1.0, subdivisions=79))
        assert mesh.vertex_count == 64002
        assert mesh.vertex_count <= ICOSPHERE_VERTEX_LIMIT
        assert mesh.indices.shape == (60 * 80 * 80,)
        assert int(mesh.indices.max()) == 64001

    def test_too_many_vertices(self):
        with pytest.raises(TooManyVerticesError) as excinfo:
            icosphere_mesh(Icosphere(radius=1.0, subdivisions=80))
        err = excinfo.value
        assert err.requested == 80
        assert err.projected == 65612
        assert err.limit == 65535
        assert "80" in str(err)
        assert "65612" in str(err)
        assert isinstance(err, MeshGenerationError)

    def test_check_runs_before_subdivision(self):
        def subdivider(level, uv_fn):
            raise AssertionError("subdivider must not be called")

        with pytest.raises(TooManyVerticesError) as excinfo:
            icosphere_mesh(Icosphere(subdivisions=200), subdivider=subdivider)
        assert excinfo.value.projected == 201 * 201 * 10 + 2


class RecordingSubdivider:
    """Bare icosahedron that records how it is queried."""

    instances = []

    def __init__(self, level, uv_fn):
        self.level = level
        self.uv_fn = uv_fn
        self.faces = []
        RecordingSubdivider.instances.append(self)

    def raw_points(self):
        return ICOSAHEDRON_VERTICES

    def raw_data(self):
        return [self.uv_fn(p) for p in ICOSAHEDRON_VERTICES]

    def indices_per_main_triangle(self):
        return 3

    def get_indices(self, face, buffer):
        self.faces.append(face)
        buffer.extend(ICOSAHEDRON_FACES[face].tolist())


class TestInjectedSubdivider:
    def test_faces_queried_in_order(self):
        RecordingSubdivider.instances.clear()
        mesh = icosphere_mesh(Icosphere(radius=1.5, subdivisions=6), subdivider=RecordingSubdivider)

        sub = RecordingSubdivider.instances[-1]
        assert sub.level == 6
        assert sub.uv_fn is spherical_uv
        assert sub.faces == list(range(20))
        assert mesh.indices.tolist() == ICOSAHEDRON_FACES.ravel().tolist()
        np.testing.assert_allclose(mesh.positions, ICOSAHEDRON_VERTICES * 1.5, rtol=1e-6)
