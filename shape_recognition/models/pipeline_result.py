from __future__ import annotations
from dataclasses import dataclass, field
from typing import List
from .image import Image
from .shape import ClassifiedContour


@dataclass
class PipelineResult:
    """
    Data object containing every intermediate artifact of one run.
    Used by the presenter and by the CLI report.
    """
    original: Image         # grayscale source, unmodified
    blurred: Image          # median blurred
    edges: Image            # raw Canny mask
    dilated: Image          # mask after dilation
    cleaned: Image          # mask after dilation + opening
    annotated: Image        # BGR presentation copy with outlines and labels
    contour_count: int      # outlines found before area filtering
    classified: List[ClassifiedContour] = field(default_factory=list)

    def summary_line(self) -> str:
        return f"Found {self.contour_count} contours (after morphology)."

    def report_lines(self) -> List[str]:
        return [self.summary_line()] + [c.report_line() for c in self.classified]
