from __future__ import annotations
import logging
import cv2
import numpy as np
from ..models.image import Image

logger = logging.getLogger(__name__)


class DisplayService:
    """
    Presentation helpers: bounded-size scaling and OpenCV windows.
    Nothing here influences classification results.
    """

    @staticmethod
    def is_binary_mask(img: Image) -> bool:
        """True for a single-channel image whose samples are all 0 or 255."""
        if not img.is_single_channel or img.pixels.dtype != np.uint8:
            return False
        px = img.pixels
        return bool(np.all((px == 0) | (px == 255)))

    def scale(
        self,
        img: Image,
        target_width: int,
        target_height: int,
        is_binary_mask: bool | None = None,
    ) -> Image:
        """
        Fit *img* inside a target_width x target_height box, keeping aspect ratio.

        Binary masks are resampled nearest-neighbour so no grey appears at
        edges; anything else is resampled bilinearly. Pass *is_binary_mask*
        to skip the per-pixel scan.
        """
        if img.is_empty:
            return Image(pixels=img.pixels.copy(), path=img.path)
        if target_width <= 0 or target_height <= 0:
            return Image(pixels=img.pixels.copy(), path=img.path)

        height, width = img.pixels.shape[:2]
        factor = min(target_width / float(width), target_height / float(height))

        new_width = min(target_width, max(1, int(round(width * factor))))
        new_height = min(target_height, max(1, int(round(height * factor))))

        if is_binary_mask is None:
            is_binary_mask = self.is_binary_mask(img)
        interpolation = cv2.INTER_NEAREST if is_binary_mask else cv2.INTER_LINEAR

        resized = cv2.resize(img.pixels, (new_width, new_height), interpolation=interpolation)
        return Image(pixels=resized, path=img.path)

    @staticmethod
    def show(title: str, img: Image) -> None:
        cv2.imshow(title, img.pixels)

    @staticmethod
    def wait_for_key() -> int:
        return cv2.waitKey(0)

    @staticmethod
    def close_all() -> None:
        cv2.destroyAllWindows()
