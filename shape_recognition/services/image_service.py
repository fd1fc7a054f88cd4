from pathlib import Path
from typing import Union
import numpy as np
from ..models.image import Image
from ..repositories.image_repository import ImageRepository


class ImageService:
    """I/O helpers.  No shape logic."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load_grayscale(self, path: Union[str, Path]) -> Image:
        """Load a single image from disk as 8-bit grayscale. Raises FileNotFoundError."""
        return self.image_repository.load_grayscale(path)

    def to_color(self, img: Image) -> Image:
        """
        Business-level method returning a 3-channel BGR copy for annotation.
        The source image is left untouched.
        """
        if not img.is_single_channel:
            return self.create_image(img.pixels.copy(), img.path)
        return self.create_image(self.image_repository.gray_to_bgr(img.pixels), img.path)

    def save(self, image: Image, path: Union[str, Path] = None) -> None:
        """
        Business-level method to save the image, optionally to a new path.
        """
        if path is not None:
            image.path = Path(path)
        self.image_repository.save(image)
