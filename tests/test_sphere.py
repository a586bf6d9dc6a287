"""Unit tests for sphere intersection.

Tests cover:
- Ray hitting sphere from outside
- Ray missing sphere
- Ray starting inside sphere
- Ray tangent to sphere
- Sphere behind the ray
- Transformed spheres
- Surface normals
- Numerical stability edge cases
"""

import math

import pytest


def _ray(origin, direction):
    from whitted.core.ray import Ray
    from whitted.core.tuples import point, vector

    return Ray(point(*origin), vector(*direction))


class TestSphereIntersection:
    """Tests for ray-sphere intersection."""

    def test_two_points(self):
        """A ray through the center hits twice."""
        from whitted.geometry.sphere import Sphere

        xs = Sphere().intersect(_ray((0.0, 0.0, -5.0), (0.0, 0.0, 1.0)))
        assert [i.t for i in xs] == pytest.approx([4.0, 6.0])

    def test_tangent(self):
        """A tangent ray yields two equal roots."""
        from whitted.geometry.sphere import Sphere

        xs = Sphere().intersect(_ray((0.0, 1.0, -5.0), (0.0, 0.0, 1.0)))
        assert [i.t for i in xs] == pytest.approx([5.0, 5.0])

    def test_miss(self):
        """A ray passing above the sphere misses."""
        from whitted.geometry.sphere import Sphere

        assert Sphere().intersect(_ray((0.0, 2.0, -5.0), (0.0, 0.0, 1.0))) == []

    def test_ray_inside(self):
        """A ray from the center hits behind and in front."""
        from whitted.geometry.sphere import Sphere

        xs = Sphere().intersect(_ray((0.0, 0.0, 0.0), (0.0, 0.0, 1.0)))
        assert [i.t for i in xs] == pytest.approx([-1.0, 1.0])

    def test_sphere_behind_ray(self):
        """Both intersections may be negative."""
        from whitted.geometry.sphere import Sphere

        xs = Sphere().intersect(_ray((0.0, 0.0, 5.0), (0.0, 0.0, 1.0)))
        assert [i.t for i in xs] == pytest.approx([-6.0, -4.0])

    def test_intersect_sets_object(self):
        """Every intersection points back at the sphere."""
        from whitted.geometry.sphere import Sphere

        s = Sphere()
        xs = s.intersect(_ray((0.0, 0.0, -5.0), (0.0, 0.0, 1.0)))
        assert len(xs) == 2
        assert xs[0].object is s
        assert xs[1].object is s

    def test_scaled_sphere(self):
        """A sphere of radius 2 is hit earlier and left later."""
        from whitted.core.transform import scaling
        from whitted.geometry.sphere import Sphere

        s = Sphere(transform=scaling(2.0, 2.0, 2.0))
        xs = s.intersect(_ray((0.0, 0.0, -5.0), (0.0, 0.0, 1.0)))
        assert [i.t for i in xs] == pytest.approx([3.0, 7.0])

    def test_translated_sphere(self):
        """A sphere moved out of the ray's path is missed."""
        from whitted.core.transform import translation
        from whitted.geometry.sphere import Sphere

        s = Sphere(transform=translation(5.0, 0.0, 0.0))
        assert s.intersect(_ray((0.0, 0.0, -5.0), (0.0, 0.0, 1.0))) == []

    def test_zero_direction(self):
        """A ray that goes nowhere hits nothing."""
        from whitted.geometry.sphere import Sphere

        assert Sphere().local_intersect(_ray((0.0, 0.0, -5.0), (0.0, 0.0, 0.0))) == []

    def test_near_zero_direction(self):
        """A direction too short to square above the tolerance is treated as degenerate."""
        from whitted.geometry.sphere import Sphere

        assert Sphere().local_intersect(_ray((0.0, 0.0, -5.0), (1e-7, 0.0, 0.0))) == []


class TestQuadraticSolver:
    """Tests for solve_quadratic_robust()."""

    def test_negative_discriminant(self):
        """No real roots."""
        from whitted.geometry.sphere import solve_quadratic_robust

        assert solve_quadratic_robust(1.0, 0.0, 1.0) == []

    def test_roots_are_ordered(self):
        """Roots come back smallest first."""
        from whitted.geometry.sphere import solve_quadratic_robust

        # t^2 - 6t + 8 = 0 -> 2, 4
        assert solve_quadratic_robust(1.0, -3.0, 8.0) == pytest.approx([2.0, 4.0])
        # t^2 + 6t + 8 = 0 -> -4, -2
        assert solve_quadratic_robust(1.0, 3.0, 8.0) == pytest.approx([-4.0, -2.0])

    def test_small_root_is_accurate(self):
        """The small root survives when b^2 dwarfs 4ac."""
        from whitted.geometry.sphere import solve_quadratic_robust

        t0, t1 = solve_quadratic_robust(1.0, -1e8, 1.0)
        assert t0 == pytest.approx(5e-9, rel=1e-6)
        assert t1 == pytest.approx(2e8, rel=1e-6)


class TestSphereNormal:
    """Tests for sphere surface normals."""

    @pytest.mark.parametrize(
        "p,expected",
        [
            ((1.0, 0.0, 0.0), (1.0, 0.0, 0.0)),
            ((0.0, 1.0, 0.0), (0.0, 1.0, 0.0)),
            ((0.0, 0.0, 1.0), (0.0, 0.0, 1.0)),
        ],
    )
    def test_normal_on_axis(self, p, expected):
        """Normals on the axes point along them."""
        from whitted.core.tuples import point, vector
        from whitted.geometry.sphere import Sphere

        assert Sphere().normal_at(point(*p)) == vector(*expected)

    def test_normal_at_nonaxial_point(self):
        """Normals elsewhere point from the center to the point."""
        from whitted.core.tuples import point, vector
        from whitted.geometry.sphere import Sphere

        k = math.sqrt(3.0) / 3.0
        n = Sphere().normal_at(point(k, k, k))
        assert n == vector(k, k, k)
        assert n == n.normalize()

    def test_normal_on_scaled_sphere(self):
        """Normals stay perpendicular under non-uniform scaling."""
        from whitted.core.transform import scaling
        from whitted.core.tuples import point, vector
        from whitted.geometry.sphere import Sphere

        s = Sphere(transform=scaling(1.0, 0.5, 1.0))
        half = math.sqrt(2.0) / 2.0
        # Object-space point (0, 1/sqrt2, -1/sqrt2) lands at y / 2 in world space
        n = s.normal_at(point(0.0, half / 2.0, -half))
        assert n.magnitude() == pytest.approx(1.0)
        assert n == vector(0.0, 2.0, -1.0).normalize()
