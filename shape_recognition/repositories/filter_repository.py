# repositories/filter_repository.py
import cv2
import numpy as np


class FilterRepository:
    """
    Low-level raster filters over uint8 single-channel pixels.

    • Noise suppression (median blur).
    • Edge detection (Canny).
    • Binary morphology with a square structuring element.
    """

    @staticmethod
    def _square_kernel(size: int) -> np.ndarray:
        return cv2.getStructuringElement(cv2.MORPH_RECT, (size, size))

    @staticmethod
    def median_blur(gray: np.ndarray, window: int) -> np.ndarray:
        return cv2.medianBlur(gray, window)

    @staticmethod
    def detect_edges(gray: np.ndarray, low: int, high: int) -> np.ndarray:
        """Returns uint8 mask (H, W) with 0/255 values."""
        return cv2.Canny(gray, low, high)

    def dilate(self, mask: np.ndarray, kernel_size: int, iterations: int) -> np.ndarray:
        return cv2.dilate(mask, self._square_kernel(kernel_size), iterations=iterations)

    def open(self, mask: np.ndarray, kernel_size: int, iterations: int) -> np.ndarray:
        """Erosion followed by dilation; drops speckle while keeping closed loops."""
        return cv2.morphologyEx(mask, cv2.MORPH_OPEN, self._square_kernel(kernel_size),
                                iterations=iterations)
