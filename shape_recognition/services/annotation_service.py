from typing import Tuple
import cv2
import numpy as np
from ..models.pipeline_config import (
    CONTOUR_COLOR,
    CONTOUR_THICKNESS,
    LABEL_COLOR,
    LABEL_FONT_SCALE,
    LABEL_THICKNESS,
    LABEL_X_OFFSET,
)
from ..models.shape import Annotation, ClassifiedContour, ShapeLabel
from ..repositories.contour_repository import ContourRepository


class AnnotationService:
    """
    Places labels and draws outlines onto a BGR canvas.
    """

    def __init__(self):
        self.contour_repository = ContourRepository()

    def label_anchor(self, contour: np.ndarray) -> Tuple[int, int]:
        """
        Text origin for a contour's label: centroid from area moments,
        or the bounding-box centre when the zeroth moment vanishes.
        Both are shifted LABEL_X_OFFSET pixels to the left.
        """
        m = self.contour_repository.moments(contour)
        if m["m00"] != 0:
            c_x = int(m["m10"] / m["m00"])
            c_y = int(m["m01"] / m["m00"])
            return c_x - LABEL_X_OFFSET, c_y

        x, y, w, h = self.contour_repository.bounding_box(contour)
        return x + w // 2 - LABEL_X_OFFSET, y + h // 2

    def annotate(self, label: ShapeLabel, contour: np.ndarray) -> Annotation:
        return Annotation(label=label, anchor=self.label_anchor(contour))

    def draw(self, canvas: np.ndarray, item: ClassifiedContour) -> np.ndarray:
        """
        Draw one classified contour onto *canvas* in place and return it.
        """
        contour = self.contour_repository.as_contour(item.contour)
        cv2.drawContours(canvas, [contour], -1, CONTOUR_COLOR, CONTOUR_THICKNESS)
        cv2.putText(
            canvas,
            item.label.value,
            tuple(int(v) for v in item.annotation.anchor),
            cv2.FONT_HERSHEY_SIMPLEX,
            LABEL_FONT_SCALE,
            LABEL_COLOR,
            LABEL_THICKNESS,
        )
        return canvas
