# pipeline/contour_pipeline.py
from __future__ import annotations

import logging
from functools import reduce
from typing import Iterable, List, Optional

import numpy as np

from ..models.image import Image
from ..models.pipeline_config import PipelineConfig
from ..models.pipeline_result import PipelineResult
from ..models.shape import ClassifiedContour
from ..repositories.contour_repository import ContourRepository
from ..services.annotation_service import AnnotationService
from ..services.image_service import ImageService
from ..services.preprocessing_service import PreprocessingService
from ..services.shape_classifier_service import ShapeClassifierService

logger = logging.getLogger(__name__)


def classify_contour(
    index: int,
    contour: np.ndarray,
    config: PipelineConfig,
    *,
    contour_repository: ContourRepository = ContourRepository(),
    classifier: ShapeClassifierService = ShapeClassifierService(),
    annotation_service: AnnotationService = AnnotationService(),
) -> Optional[ClassifiedContour]:
    """
    Filter, simplify and label a single outline.
    Returns None when the outline is too small or has no perimeter.
    """
    area = contour_repository.area(contour)
    if area < config.min_contour_area:
        logger.debug(f"Contour #{index}: skipped, area {area:g} < {config.min_contour_area:g}")
        return None

    perimeter = contour_repository.perimeter(contour, closed=True)
    if perimeter == 0:
        logger.debug(f"Contour #{index}: skipped, zero perimeter")
        return None

    approx = contour_repository.approximate(contour, config.approx_epsilon_factor * perimeter,
                                            closed=True)
    label = classifier.classify(approx, contour)

    return ClassifiedContour(
        index=index,
        vertices=len(approx),
        area=area,
        annotation=annotation_service.annotate(label, contour),
        contour=contour_repository.as_contour(contour),
    )


def classify_contours(
    contours: Iterable[np.ndarray],
    config: PipelineConfig,
    **services,
) -> List[ClassifiedContour]:
    """
    Classify every outline independently, keeping extraction order.
    Skipped outlines leave no entry; indices still refer to extraction order.
    """
    classified = (classify_contour(i, c, config, **services) for i, c in enumerate(contours))
    return [item for item in classified if item is not None]


def annotate(
    canvas: Image,
    classified: Iterable[ClassifiedContour],
    *,
    annotation_service: AnnotationService = AnnotationService(),
) -> Image:
    """
    Fold the classified outlines onto a copy of *canvas*; the input stays untouched.
    """
    pixels = reduce(annotation_service.draw, classified, canvas.pixels.copy())
    return Image(pixels=pixels, path=canvas.path)


def run_pipeline(
    config: PipelineConfig,
    image: Image | None = None,
    *,
    image_service: ImageService = ImageService(),
    preprocessing_service: PreprocessingService = PreprocessingService(),
    contour_repository: ContourRepository = ContourRepository(),
    annotation_service: AnnotationService = AnnotationService(),
) -> PipelineResult:
    """
    Single pass over one grayscale image:
        • blur → Canny → dilate → open
        • external contours, area / perimeter filtering
        • simplify + classify each outline
        • draw outlines and labels on a colour copy
    Raises FileNotFoundError when the source image cannot be read.
    """
    if image is None:
        image = image_service.load_grayscale(config.input_path)
    elif image.is_empty:
        raise FileNotFoundError(f"Image not found or unreadable: {image.path}")

    logger.info(f"Processing {image.path or 'in-memory image'} "
                f"({image.pixels.shape[1]}x{image.pixels.shape[0]})")

    presentation = image_service.to_color(image)
    stages = preprocessing_service.run(image, config)

    contours = contour_repository.find_external(stages.cleaned.pixels)
    logger.info(f"Found {len(contours)} contours (after morphology)")

    classified = classify_contours(
        contours,
        config,
        contour_repository=contour_repository,
        annotation_service=annotation_service,
    )
    logger.info(f"Classified {len(classified)} of {len(contours)} contours")

    annotated = annotate(presentation, classified, annotation_service=annotation_service)
    if config.output_path is not None:
        annotated.path = config.output_path

    return PipelineResult(
        original=image,
        blurred=stages.blurred,
        edges=stages.edges,
        dilated=stages.dilated,
        cleaned=stages.cleaned,
        annotated=annotated,
        contour_count=len(contours),
        classified=classified,
    )
