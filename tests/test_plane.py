"""Unit tests for the infinite plane."""


class TestPlane:
    """Tests for plane normals and intersections."""

    def test_normal_is_constant(self):
        """The normal is +y everywhere."""
        from whitted.core.tuples import point, vector
        from whitted.geometry.plane import Plane

        p = Plane()
        for x, y, z in [(0.0, 0.0, 0.0), (10.0, 0.0, -10.0), (-5.0, 0.0, 150.0)]:
            assert p.local_normal_at(point(x, y, z)) == vector(0.0, 1.0, 0.0)

    def test_parallel_ray(self):
        """A ray parallel to the plane never hits."""
        from whitted.core.ray import Ray
        from whitted.core.tuples import point, vector
        from whitted.geometry.plane import Plane

        assert Plane().intersect(Ray(point(0.0, 10.0, 0.0), vector(0.0, 0.0, 1.0))) == []

    def test_coplanar_ray(self):
        """A ray lying in the plane does not count as a hit."""
        from whitted.core.ray import Ray
        from whitted.core.tuples import point, vector
        from whitted.geometry.plane import Plane

        assert Plane().intersect(Ray(point(0.0, 0.0, 0.0), vector(0.0, 0.0, 1.0))) == []

    def test_ray_from_above(self):
        """A ray coming down hits once."""
        from whitted.core.ray import Ray
        from whitted.core.tuples import point, vector
        from whitted.geometry.plane import Plane

        p = Plane()
        xs = p.intersect(Ray(point(0.0, 1.0, 0.0), vector(0.0, -1.0, 0.0)))
        assert len(xs) == 1
        assert xs[0].t == 1.0
        assert xs[0].object is p

    def test_ray_from_below(self):
        """A ray coming up hits once."""
        from whitted.core.ray import Ray
        from whitted.core.tuples import point, vector
        from whitted.geometry.plane import Plane

        p = Plane()
        xs = p.intersect(Ray(point(0.0, -1.0, 0.0), vector(0.0, 1.0, 0.0)))
        assert len(xs) == 1
        assert xs[0].t == 1.0
        assert xs[0].object is p

    def test_transformed_plane_normal(self):
        """A plane rotated into a wall faces along z."""
        import math

        from whitted.core.transform import rotation_x
        from whitted.core.tuples import point, vector
        from whitted.geometry.plane import Plane

        wall = Plane(transform=rotation_x(math.pi / 2))
        assert wall.normal_at(point(3.0, 2.0, 0.0)) == vector(0.0, 0.0, 1.0)
