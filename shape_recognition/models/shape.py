from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple
import numpy as np


class ShapeLabel(str, Enum):
    """Classification output. The value doubles as the on-image label text."""
    TRIANGLE = "Triangle"
    SQUARE = "Square"
    RECTANGLE = "Rectangle"
    PENTAGON = "Pentagon"
    HEXAGON = "Hexagon"
    CIRCLE = "Circle"
    POLYGON = "Polygon"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Annotation:
    label: ShapeLabel
    anchor: Tuple[int, int]  # (x, y) origin of the label text


@dataclass
class ClassifiedContour:
    """
    Data object for one outline that passed the area/perimeter filters.
    Used both for the console report and for drawing.
    """
    index: int              # extraction order within findContours output
    vertices: int           # vertex count of the simplified polygon
    area: float             # enclosed area of the raw outline
    annotation: Annotation
    contour: np.ndarray     # raw outline, shape (N, 1, 2) int32

    @property
    def label(self) -> ShapeLabel:
        return self.annotation.label

    def report_line(self) -> str:
        return (f"Contour #{self.index}: vertices = {self.vertices}, "
                f"shape = {self.label.value}, area = {self.area:g}")
