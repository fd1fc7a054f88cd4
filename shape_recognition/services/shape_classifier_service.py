import logging
import math
import numpy as np
from ..models.shape import ShapeLabel
from ..repositories.contour_repository import ContourRepository, Points

logger = logging.getLogger(__name__)

# Square band on bounding-box aspect ratio (inclusive)
SQUARE_ASPECT_MIN = 0.95
SQUARE_ASPECT_MAX = 1.05

# Isoperimetric ratio band (exclusive); 1.0 for an ideal disk
CIRCULARITY_MIN = 0.85
CIRCULARITY_MAX = 1.15

# Max relative area deficit against the minimum enclosing circle
ENCLOSING_CIRCLE_TOLERANCE = 0.15


class ShapeClassifierService:
    """
    Labels a simplified polygon from its vertex count and a few area ratios.
    Pure: no drawing, no I/O, never raises on degenerate input.
    """

    def __init__(self):
        self.contour_repository = ContourRepository()

    def aspect_ratio(self, polygon: Points) -> float:
        """Bounding-box width / height, or 0 for a zero-height box."""
        _, _, width, height = self.contour_repository.bounding_box(polygon)
        if height <= 0:
            return 0.0
        return width / float(height)

    def circularity(self, polygon: Points, area: float) -> float:
        """
        Args:
            polygon: Simplified polygon vertices.
            area: Enclosed polygon area.

        Returns:
            (float): 4*pi*area / perimeter^2, or 0 when undefined.
        """
        perimeter = self.contour_repository.perimeter(polygon, closed=True)
        if perimeter <= 0 or area <= 0:
            return 0.0
        return (4 * math.pi * area) / (perimeter * perimeter)

    def enclosing_circle_fill(self, polygon: Points, area: float) -> float:
        """Polygon area as a fraction of its minimum enclosing circle, or 0."""
        _, radius = self.contour_repository.min_enclosing_circle(polygon)
        if radius <= 0:
            return 0.0
        circle_area = math.pi * radius * radius
        if circle_area <= 0:
            return 0.0
        return area / circle_area

    def is_circle(self, polygon: Points, area: float) -> bool:
        circularity = self.circularity(polygon, area)
        if CIRCULARITY_MIN < circularity < CIRCULARITY_MAX:
            return True

        fill = self.enclosing_circle_fill(polygon, area)
        # fill == 0 means no usable circle, never a match
        return fill > 0 and abs(1.0 - fill) < ENCLOSING_CIRCLE_TOLERANCE

    def classify(self, polygon: Points, contour: Points = None) -> ShapeLabel:
        """
        Classify one simplified polygon.

        Args:
            polygon: Simplified vertex sequence (closed).
            contour: The raw outline *polygon* was derived from. Only logged.

        Returns:
            ShapeLabel: Triangle/Square/Rectangle for 3-4 vertices, Circle when
            either roundness test passes, else Pentagon/Hexagon/Polygon by
            vertex count. Unknown below 3 vertices.
        """
        polygon = self.contour_repository.as_contour(polygon)
        vertices = len(polygon)

        if vertices == 3:
            label = ShapeLabel.TRIANGLE
        elif vertices == 4:
            aspect = self.aspect_ratio(polygon)
            if SQUARE_ASPECT_MIN <= aspect <= SQUARE_ASPECT_MAX:
                label = ShapeLabel.SQUARE
            else:
                label = ShapeLabel.RECTANGLE
        elif vertices > 4:
            area = abs(self.contour_repository.area(polygon))
            if self.is_circle(polygon, area):
                label = ShapeLabel.CIRCLE
            elif vertices == 5:
                label = ShapeLabel.PENTAGON
            elif vertices == 6:
                label = ShapeLabel.HEXAGON
            else:
                label = ShapeLabel.POLYGON
        else:
            label = ShapeLabel.UNKNOWN

        if contour is not None:
            logger.debug(f"{len(np.asarray(contour).reshape(-1, 2))} outline points -> "
                         f"{vertices} vertices -> {label.value}")
        return label
