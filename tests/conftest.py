"""Shared test fixtures: synthetic grayscale scenes drawn with OpenCV."""

from __future__ import annotations

import math

import cv2
import numpy as np
import pytest

from shape_recognition.models.image import Image
from shape_recognition.models.pipeline_config import PipelineConfig

SCENE_W, SCENE_H = 450, 300


def regular_polygon(n: int, radius: float = 100.0, center=(200, 200)) -> np.ndarray:
    cx, cy = center
    pts = [
        (int(round(cx + radius * math.cos(2 * math.pi * k / n))),
         int(round(cy + radius * math.sin(2 * math.pi * k / n))))
        for k in range(n)
    ]
    return np.array(pts, dtype=np.int32)


def draw_scene() -> np.ndarray:
    """Filled square (side 100), filled circle (r 60) and sub-threshold specks on black."""
    canvas = np.zeros((SCENE_H, SCENE_W), dtype=np.uint8)
    cv2.rectangle(canvas, (50, 50), (149, 149), 255, thickness=-1)
    cv2.circle(canvas, (300, 150), 60, 255, thickness=-1)
    # specks: too small to survive the area filter
    cv2.rectangle(canvas, (400, 260), (409, 269), 255, thickness=-1)
    for x, y in [(30, 250), (200, 40), (420, 30)]:
        cv2.rectangle(canvas, (x, y), (x + 2, y + 2), 255, thickness=-1)
    return canvas


@pytest.fixture
def scene_image() -> Image:
    return Image(pixels=draw_scene())


@pytest.fixture
def scene_path(tmp_path):
    path = tmp_path / "scene.png"
    cv2.imwrite(str(path), draw_scene())
    return path


@pytest.fixture
def headless_config(tmp_path) -> PipelineConfig:
    return PipelineConfig(input_path=tmp_path / "scene.png", show_windows=False)


@pytest.fixture
def square_contour() -> np.ndarray:
    return np.array([[10, 10], [110, 10], [110, 110], [10, 110]], dtype=np.int32).reshape(-1, 1, 2)
