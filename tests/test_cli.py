"""Tests for the command-line entry point and presenter."""

from __future__ import annotations

import pytest

from shape_recognition.cli import detect_shapes
from shape_recognition.models.pipeline_config import PipelineConfig
from shape_recognition.pipeline import presenter
from shape_recognition.pipeline.contour_pipeline import run_pipeline


class FakeDisplay:
    def __init__(self):
        self.shown = []
        self.waited = False
        self.closed = False

    def scale(self, img, width, height, is_binary_mask=None):
        self.shown.append((width, height, is_binary_mask))
        return img

    def show(self, title, img):
        self.shown[-1] = (title,) + self.shown[-1]

    def wait_for_key(self):
        self.waited = True
        return 27

    def close_all(self):
        self.closed = True


class TestMain:
    def test_missing_image_exits_non_zero(self, tmp_path, capsys):
        code = detect_shapes.main(["--input", str(tmp_path / "missing.png"), "--no-display"])
        assert code == detect_shapes.EXIT_ACQUISITION_FAILED
        assert code != 0
        assert capsys.readouterr().out == ""

    def test_report_and_output(self, scene_path, tmp_path, capsys):
        out = tmp_path / "annotated.png"
        code = detect_shapes.main(["--input", str(scene_path), "--output", str(out), "--no-display"])

        assert code == detect_shapes.EXIT_OK
        assert out.exists()
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0].startswith("Found ")
        assert lines[0].endswith(" contours (after morphology).")
        assert sum("shape = Square" in line for line in lines) == 1
        assert sum("shape = Circle" in line for line in lines) == 1
        assert len(lines) == 3

    def test_unwritable_output_raises(self, scene_path, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(OSError):
            detect_shapes.main(["--input", str(scene_path),
                                "--output", str(blocker / "annotated.png"), "--no-display"])

    def test_windows_shown_unless_disabled(self, scene_path, monkeypatch):
        calls = []
        monkeypatch.setattr(detect_shapes, "show_stages", lambda result, w, h: calls.append((w, h)))

        detect_shapes.main(["--input", str(scene_path), "--display-size", "640", "480"])

        assert calls == [(640, 480)]


class TestPresenter:
    def test_show_stages(self, scene_path):
        result = run_pipeline(PipelineConfig(input_path=scene_path, show_windows=False))
        display = FakeDisplay()

        presenter.show_stages(result, 800, 785, display_service=display)

        titles = [entry[0] for entry in display.shown]
        assert titles[0] == "1. Original Grayscale Image"
        assert titles[-1] == "4. Detected Shapes"
        assert len(titles) == 6
        masks = [entry[-1] for entry in display.shown]
        assert masks == [False, False, True, True, True, False]
        assert display.waited and display.closed


class TestConfig:
    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("INPUT_IMAGE_PATH", str(tmp_path / "in.png"))
        monkeypatch.setenv("OUTPUT_IMAGE_PATH", "")
        monkeypatch.setenv("DISPLAY_WIDTH", "320")
        monkeypatch.setenv("SHOW_WINDOWS", "false")

        config = PipelineConfig.from_env()

        assert config.input_path == tmp_path / "in.png"
        assert config.output_path is None
        assert config.display_width == 320
        assert config.show_windows is False
        assert config.min_contour_area == 500.0
        assert config.approx_epsilon_factor == 0.01

    def test_overrides_ignore_none(self):
        config = PipelineConfig().with_overrides(display_width=None, display_height=100)
        assert config.display_width == 800
        assert config.display_height == 100

    def test_blank_env_values_fall_back_to_defaults(self, monkeypatch):
        monkeypatch.setenv("DISPLAY_WIDTH", "")
        monkeypatch.setenv("DISPLAY_HEIGHT", "  ")
        monkeypatch.setenv("SHOW_WINDOWS", "")

        config = PipelineConfig.from_env()

        assert config.display_width == 800
        assert config.display_height == 785
        assert config.show_windows is True
