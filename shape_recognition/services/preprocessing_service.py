import logging
from dataclasses import dataclass
from ..models.image import Image
from ..models.pipeline_config import PipelineConfig
from ..repositories.filter_repository import FilterRepository

logger = logging.getLogger(__name__)


@dataclass
class PreprocessedStages:
    blurred: Image
    edges: Image
    dilated: Image
    cleaned: Image


class PreprocessingService:
    """
    Turns a grayscale image into a cleaned binary edge mask,
    keeping every intermediate stage for display.
    """

    def __init__(self):
        self.filter_repository = FilterRepository()

    def run(self, gray: Image, config: PipelineConfig) -> PreprocessedStages:
        blurred = self.filter_repository.median_blur(gray.pixels, config.median_blur_window)
        edges = self.filter_repository.detect_edges(blurred, config.canny_low, config.canny_high)
        dilated = self.filter_repository.dilate(edges, config.morph_kernel_size,
                                                config.dilate_iterations)
        cleaned = self.filter_repository.open(dilated, config.morph_kernel_size,
                                              config.open_iterations)

        logger.debug(f"Edge pixels: raw={int((edges > 0).sum())}, "
                     f"dilated={int((dilated > 0).sum())}, cleaned={int((cleaned > 0).sum())}")

        return PreprocessedStages(
            blurred=Image(pixels=blurred),
            edges=Image(pixels=edges),
            dilated=Image(pixels=dilated),
            cleaned=Image(pixels=cleaned),
        )
