from pathlib import Path
from typing import Union
import numpy as np
import cv2
from PIL import Image as PILImage
from ..models.image import Image


class ImageRepository:
    """
    Handles file I/O and colour-space conversion for Image entities.
    """

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    @staticmethod
    def load_grayscale(path: Union[str, Path]) -> Image:
        path = Path(path)
        arr = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE)

        if arr is None or arr.size == 0:
            raise FileNotFoundError(f"Image not found or unreadable: {path}")

        return Image(pixels=arr, path=path)

    @staticmethod
    def save(image: Image) -> None:
        if image.path is None:
            raise ValueError("Image has no destination path")
        path = Path(image.path)
        path.parent.mkdir(parents=True, exist_ok=True)

        # Pillow expects RGB order for colour data
        pixels = image.pixels
        if pixels.ndim == 3 and pixels.shape[2] == 3:
            pixels = cv2.cvtColor(pixels, cv2.COLOR_BGR2RGB)
        elif pixels.ndim == 3:
            pixels = pixels[:, :, 0]
        PILImage.fromarray(np.ascontiguousarray(pixels)).save(path)

    @staticmethod
    def gray_to_bgr(pixels: np.ndarray) -> np.ndarray:
        return cv2.cvtColor(pixels, cv2.COLOR_GRAY2BGR)
