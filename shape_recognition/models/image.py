from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Image:
    """
    Simple data object: pixels (+ optional source path for bookkeeping).
    No OpenCV logic outside the repositories.
    """
    pixels: np.ndarray # Shape (H, W) grayscale/binary or (H, W, 3) BGR, dtype uint8.
    path: Path | None = None # Source (or destination) of the image.

    @property
    def is_empty(self) -> bool:
        return self.pixels.size == 0

    @property
    def is_single_channel(self) -> bool:
        return self.pixels.ndim == 2 or (self.pixels.ndim == 3 and self.pixels.shape[2] == 1)
