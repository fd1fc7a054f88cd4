"""Pipeline configuration: input/output locations and fixed processing constants."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_INPUT_PATH = "images/test1.tif"
DEFAULT_DISPLAY_WIDTH = 800
DEFAULT_DISPLAY_HEIGHT = 785

# Preprocessing
MEDIAN_BLUR_WINDOW = 7
CANNY_LOW_THRESHOLD = 20
CANNY_HIGH_THRESHOLD = 60
MORPH_KERNEL_SIZE = 3
DILATE_ITERATIONS = 1
OPEN_ITERATIONS = 1

# Contour filtering / simplification
MIN_CONTOUR_AREA = 500.0
APPROX_EPSILON_FACTOR = 0.01

# Annotation style (BGR)
CONTOUR_COLOR = (0, 255, 0)
CONTOUR_THICKNESS = 4
LABEL_COLOR = (0, 0, 255)
LABEL_FONT_SCALE = 2.0
LABEL_THICKNESS = 5
LABEL_X_OFFSET = 20


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


@dataclass(frozen=True)
class PipelineConfig:
    """Everything a single run needs. Defaults reproduce the reference tuning."""

    input_path: Path = Path(DEFAULT_INPUT_PATH)
    output_path: Path | None = None

    # Presentation
    display_width: int = DEFAULT_DISPLAY_WIDTH
    display_height: int = DEFAULT_DISPLAY_HEIGHT
    show_windows: bool = True

    # Preprocessing
    median_blur_window: int = MEDIAN_BLUR_WINDOW
    canny_low: int = CANNY_LOW_THRESHOLD
    canny_high: int = CANNY_HIGH_THRESHOLD
    morph_kernel_size: int = MORPH_KERNEL_SIZE
    dilate_iterations: int = DILATE_ITERATIONS
    open_iterations: int = OPEN_ITERATIONS

    # Contour filtering / simplification
    min_contour_area: float = MIN_CONTOUR_AREA
    approx_epsilon_factor: float = APPROX_EPSILON_FACTOR

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        output = os.getenv("OUTPUT_IMAGE_PATH")
        return cls(
            input_path=Path(os.getenv("INPUT_IMAGE_PATH", DEFAULT_INPUT_PATH)),
            output_path=Path(output) if output else None,
            display_width=_env_int("DISPLAY_WIDTH", DEFAULT_DISPLAY_WIDTH),
            display_height=_env_int("DISPLAY_HEIGHT", DEFAULT_DISPLAY_HEIGHT),
            show_windows=_env_flag("SHOW_WINDOWS", True),
        )

    def with_overrides(self, **changes) -> "PipelineConfig":
        """Copy with the non-None entries of *changes* applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
