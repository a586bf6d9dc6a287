"""Tests for the demo scene and the example render script.

Tests cover:
- Scene contents and parameter overrides
- Rendering a small image
- The command-line entry point writing PPM and PNG files
"""

import importlib.util
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).resolve().parent.parent / "examples" / "render_scene.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("render_scene", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestDemoScene:
    """Tests for create_demo_scene()."""

    def test_scene_contents(self):
        """Two planes and three spheres under one light."""
        from whitted.geometry.plane import Plane
        from whitted.geometry.sphere import Sphere
        from whitted.scene.demo import create_demo_scene

        world, camera = create_demo_scene(40, 20)
        assert sum(isinstance(s, Plane) for s in world.shapes) == 2
        assert sum(isinstance(s, Sphere) for s in world.shapes) == 3
        assert len(world.lights) == 1
        assert camera.hsize == 40
        assert camera.vsize == 20

    def test_params_override_defaults(self):
        """DemoSceneParams changes the light and colors."""
        from whitted.core.color import Color
        from whitted.scene.demo import DemoSceneParams, create_demo_scene

        params = DemoSceneParams(light_color=(1.0, 0.9, 0.8), middle_color=(0.2, 0.2, 0.8))
        world, _ = create_demo_scene(10, 5, params)
        assert world.lights[0].intensity == Color(1.0, 0.9, 0.8)
        assert any(s.material.color == Color(0.2, 0.2, 0.8) for s in world.shapes)

    def test_render_is_lit(self):
        """The middle of the image shows a lit sphere, not background."""
        from whitted.scene.demo import create_demo_scene

        world, camera = create_demo_scene(16, 8)
        image = camera.render(world)
        assert sum(image.pixel_at(8, 4).as_tuple()) > 0.0


class TestRenderScript:
    """Tests for examples/render_scene.py."""

    def test_writes_ppm(self, tmp_path):
        """The default output format is plain PPM."""
        script = _load_script()
        out = tmp_path / "scene.ppm"
        code = script.main(["--width", "8", "--height", "4", "--output", str(out), "--quiet"])
        assert code == 0
        assert out.read_text(encoding="ascii").startswith("P3\n8 4\n255\n")

    def test_writes_png_with_taichi(self, tmp_path):
        """A .png output goes through Pillow; the taichi backend works too."""
        from PIL import Image as PILImage

        script = _load_script()
        out = tmp_path / "scene.png"
        code = script.main(
            ["--width", "8", "--height", "4", "--output", str(out), "--backend", "taichi", "--quiet"]
        )
        assert code == 0
        with PILImage.open(out) as img:
            assert img.size == (8, 4)

    def test_rejects_unknown_format(self, tmp_path, capsys):
        """Unsupported suffixes fail with a message and exit code 1."""
        script = _load_script()
        code = script.main(["--output", str(tmp_path / "scene.jpg"), "--quiet"])
        assert code == 1
        assert "Unsupported output format" in capsys.readouterr().err

    def test_progress_output(self, tmp_path, capsys):
        """Without --quiet, progress and timing are printed."""
        script = _load_script()
        script.main(["--width", "4", "--height", "2", "--output", str(tmp_path / "s.ppm")])
        out = capsys.readouterr().out
        assert "Progress: 2/2 rows" in out
        assert "Total time" in out

    def test_threads_ignored_by_python_backend(self, tmp_path, capsys):
        """A thread cap with the python backend is reported as ignored."""
        script = _load_script()
        code = script.main(
            ["--width", "4", "--height", "2", "--output", str(tmp_path / "s.ppm"), "--threads", "2"]
        )
        captured = capsys.readouterr()
        assert code == 0
        assert "only applies to the taichi backend" in captured.err
        assert "threads: 2" not in captured.out

    def test_threads_after_taichi_initialized(self, tmp_path, capsys):
        """Taichi is already running in the test session, so the cap cannot apply."""
        script = _load_script()
        code = script.main(
            [
                "--width", "4", "--height", "2", "--output", str(tmp_path / "s.ppm"),
                "--backend", "taichi", "--threads", "2",
            ]
        )
        captured = capsys.readouterr()
        assert code == 0
        assert "has no effect" in captured.err
        assert "threads: 2" not in captured.out

    def test_invalid_size(self, tmp_path):
        """A non-positive size is reported, not raised."""
        script = _load_script()
        code = script.main(["--width", "0", "--output", str(tmp_path / "s.ppm"), "--quiet"])
        assert code == 1


@pytest.mark.parametrize("width,height", [(6, 3), (3, 6)])
def test_demo_scene_backends_agree(width, height):
    """Python and taichi renders of the demo scene match."""
    import numpy as np

    from whitted.scene.demo import create_demo_scene

    world, camera = create_demo_scene(width, height)
    expected = camera.render(world)
    actual = camera.render(world, backend="taichi")
    assert np.allclose(actual.to_array(), expected.to_array(), atol=1e-6)
