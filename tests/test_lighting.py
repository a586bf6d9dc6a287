"""Unit tests for materials, point lights and Phong lighting.

Tests cover:
- Material defaults and validation
- Point light construction
- lighting() for the standard eye/light arrangements
- Ambient-only shading in shadow
"""

import math

import pytest

HALF_SQRT2 = math.sqrt(2.0) / 2.0


def _approx_color(c):
    return pytest.approx(c.as_tuple(), abs=1e-4)


class TestMaterial:
    """Tests for Material."""

    def test_defaults(self):
        """The default material is white with standard Phong weights."""
        from whitted.core.color import WHITE
        from whitted.materials.phong import Material

        m = Material()
        assert m.color == WHITE
        assert m.ambient == 0.1
        assert m.diffuse == 0.9
        assert m.specular == 0.9
        assert m.shininess == 200.0

    def test_negative_parameter_rejected(self):
        """Phong weights cannot be negative."""
        from whitted.materials.phong import Material

        with pytest.raises(ValueError):
            Material(ambient=-0.1)
        with pytest.raises(ValueError):
            Material(shininess=-1.0)

    def test_replace_creates_variant(self):
        """Materials are values; replace() makes a modified copy."""
        from dataclasses import replace

        from whitted.materials.phong import Material

        m = Material()
        m2 = replace(m, ambient=1.0)
        assert m.ambient == 0.1
        assert m2.ambient == 1.0
        assert m != m2


class TestPointLight:
    """Tests for PointLight."""

    def test_position_and_intensity(self):
        """A point light has a position and an intensity."""
        from whitted.core.color import Color
        from whitted.core.tuples import point
        from whitted.materials.light import PointLight

        light = PointLight(point(0.0, 0.0, 0.0), Color(1.0, 1.0, 1.0))
        assert light.position == point(0.0, 0.0, 0.0)
        assert light.intensity == Color(1.0, 1.0, 1.0)

    def test_position_must_be_point(self):
        """A vector is not a valid light position."""
        from whitted.core.color import WHITE
        from whitted.core.tuples import vector
        from whitted.materials.light import PointLight

        with pytest.raises(ValueError):
            PointLight(vector(0.0, 1.0, 0.0), WHITE)


class TestLighting:
    """Tests for the Phong reflection model."""

    @pytest.fixture
    def setup(self):
        from whitted.core.tuples import point
        from whitted.materials.phong import Material

        return Material(), point(0.0, 0.0, 0.0)

    def _light(self, x, y, z):
        from whitted.core.color import WHITE
        from whitted.core.tuples import point
        from whitted.materials.light import PointLight

        return PointLight(point(x, y, z), WHITE)

    def test_eye_between_light_and_surface(self, setup):
        """Full ambient, diffuse and specular."""
        from whitted.core.color import Color
        from whitted.core.tuples import vector
        from whitted.materials.phong import lighting

        m, position = setup
        result = lighting(
            m, self._light(0.0, 0.0, -10.0), position, vector(0.0, 0.0, -1.0), vector(0.0, 0.0, -1.0)
        )
        assert result.as_tuple() == _approx_color(Color(1.9, 1.9, 1.9))

    def test_eye_offset_45_degrees(self, setup):
        """Specular falls to effectively zero."""
        from whitted.core.color import Color
        from whitted.core.tuples import vector
        from whitted.materials.phong import lighting

        m, position = setup
        eyev = vector(0.0, HALF_SQRT2, -HALF_SQRT2)
        result = lighting(m, self._light(0.0, 0.0, -10.0), position, eyev, vector(0.0, 0.0, -1.0))
        assert result.as_tuple() == _approx_color(Color(1.0, 1.0, 1.0))

    def test_light_offset_45_degrees(self, setup):
        """Diffuse drops with the cosine; no specular."""
        from whitted.core.color import Color
        from whitted.core.tuples import vector
        from whitted.materials.phong import lighting

        m, position = setup
        result = lighting(
            m, self._light(0.0, 10.0, -10.0), position, vector(0.0, 0.0, -1.0), vector(0.0, 0.0, -1.0)
        )
        assert result.as_tuple() == _approx_color(Color(0.7364, 0.7364, 0.7364))

    def test_eye_in_reflection_path(self, setup):
        """Specular peaks when the eye sits on the reflection vector."""
        from whitted.core.color import Color
        from whitted.core.tuples import vector
        from whitted.materials.phong import lighting

        m, position = setup
        eyev = vector(0.0, -HALF_SQRT2, -HALF_SQRT2)
        result = lighting(m, self._light(0.0, 10.0, -10.0), position, eyev, vector(0.0, 0.0, -1.0))
        assert result.as_tuple() == _approx_color(Color(1.6364, 1.6364, 1.6364))

    def test_light_behind_surface(self, setup):
        """Only ambient when the light is on the far side."""
        from whitted.core.color import Color
        from whitted.core.tuples import vector
        from whitted.materials.phong import lighting

        m, position = setup
        result = lighting(
            m, self._light(0.0, 0.0, 10.0), position, vector(0.0, 0.0, -1.0), vector(0.0, 0.0, -1.0)
        )
        assert result.as_tuple() == _approx_color(Color(0.1, 0.1, 0.1))

    def test_surface_in_shadow(self, setup):
        """Only ambient when in shadow."""
        from whitted.core.color import Color
        from whitted.core.tuples import vector
        from whitted.materials.phong import lighting

        m, position = setup
        result = lighting(
            m,
            self._light(0.0, 0.0, -10.0),
            position,
            vector(0.0, 0.0, -1.0),
            vector(0.0, 0.0, -1.0),
            in_shadow=True,
        )
        assert result.as_tuple() == _approx_color(Color(0.1, 0.1, 0.1))

    def test_colored_light_tints_surface(self, setup):
        """Light intensity multiplies the surface color."""
        from whitted.core.color import Color
        from whitted.core.tuples import point, vector
        from whitted.materials.light import PointLight
        from whitted.materials.phong import lighting

        m, position = setup
        red = PointLight(point(0.0, 0.0, 10.0), Color(1.0, 0.0, 0.0))
        result = lighting(m, red, position, vector(0.0, 0.0, -1.0), vector(0.0, 0.0, -1.0))
        assert result.as_tuple() == _approx_color(Color(0.1, 0.0, 0.0))
