import cv2
import numpy as np
from typing import Dict, List, Sequence, Tuple, Union

Points = Union[np.ndarray, Sequence[Sequence[int]]]


class ContourRepository:
    """
    Thin wrapper around the OpenCV contour geometry primitives.
    Every method accepts (N, 2) or (N, 1, 2) point data.
    """

    @staticmethod
    def as_contour(points: Points) -> np.ndarray:
        """Normalise to the (N, 1, 2) int32 layout OpenCV expects."""
        return np.asarray(points, dtype=np.int32).reshape(-1, 1, 2)

    @staticmethod
    def find_external(mask: np.ndarray) -> List[np.ndarray]:
        # Outer boundaries only, straight runs compressed to their end points
        contours, _ = cv2.findContours(mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
        return list(contours)

    def area(self, points: Points) -> float:
        contour = self.as_contour(points)
        if len(contour) == 0:
            return 0.0
        return float(cv2.contourArea(contour))

    def perimeter(self, points: Points, closed: bool = True) -> float:
        contour = self.as_contour(points)
        if len(contour) == 0:
            return 0.0
        return float(cv2.arcLength(contour, closed))

    def bounding_box(self, points: Points) -> Tuple[int, int, int, int]:
        contour = self.as_contour(points)
        if len(contour) == 0:
            return 0, 0, 0, 0
        x, y, w, h = cv2.boundingRect(contour)
        return int(x), int(y), int(w), int(h)

    def approximate(self, points: Points, epsilon: float, closed: bool = True) -> np.ndarray:
        return cv2.approxPolyDP(self.as_contour(points), epsilon, closed)

    def min_enclosing_circle(self, points: Points) -> Tuple[Tuple[float, float], float]:
        contour = self.as_contour(points)
        if len(contour) == 0:
            return (0.0, 0.0), 0.0
        (cx, cy), radius = cv2.minEnclosingCircle(contour)
        return (float(cx), float(cy)), float(radius)

    def moments(self, points: Points) -> Dict[str, float]:
        return cv2.moments(self.as_contour(points))
