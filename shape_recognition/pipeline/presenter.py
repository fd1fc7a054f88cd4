"""
Presentation of a finished run: console report and stage windows.
"""

from typing import List, Tuple

from ..models.image import Image
from ..models.pipeline_result import PipelineResult
from ..services.display_service import DisplayService


def stage_views(result: PipelineResult) -> List[Tuple[str, Image, bool]]:
    """(window title, image, is binary mask) for every stage, in display order."""
    return [
        ("1. Original Grayscale Image", result.original, False),
        ("2. Median Blurred", result.blurred, False),
        ("3a. Canny Edges (Raw)", result.edges, True),
        ("3b. Edges (Dilated)", result.dilated, True),
        ("3c. Edges (After Dilate+Open)", result.cleaned, True),
        ("4. Detected Shapes", result.annotated, False),
    ]


def print_report(result: PipelineResult) -> None:
    for line in result.report_lines():
        print(line)


def show_stages(
    result: PipelineResult,
    width: int,
    height: int,
    *,
    display_service: DisplayService = DisplayService(),
) -> None:
    """
    Show every stage scaled into a width x height box, then block until
    a key is pressed and close the windows.
    """
    for title, img, is_mask in stage_views(result):
        display_service.show(title, display_service.scale(img, width, height, is_binary_mask=is_mask))

    display_service.wait_for_key()
    display_service.close_all()
