"""
Detect and label basic shapes in a grayscale image.

Usage: shape-recognition --input images/test1.tif --output out/annotated.png
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..models.pipeline_config import PipelineConfig
from ..pipeline.contour_pipeline import run_pipeline
from ..pipeline.presenter import print_report, show_stages
from ..services.image_service import ImageService

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ACQUISITION_FAILED = -1


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Classify shapes in a grayscale image")
    ap.add_argument("--input", type=Path, default=None,
                    help="source image (default: INPUT_IMAGE_PATH from .env)")
    ap.add_argument("--output", type=Path, default=None,
                    help="where to save the annotated image (default: OUTPUT_IMAGE_PATH)")
    ap.add_argument("--no-display", action="store_true",
                    help="skip the stage windows and the key wait")
    ap.add_argument("--display-size", type=int, nargs=2, metavar=("W", "H"), default=None,
                    help="viewport for the stage windows")
    ap.add_argument("--debug", action="store_true", help="verbose logging")
    return ap


def configure_logging(debug: bool = False) -> None:
    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)

    width, height = args.display_size or (None, None)
    config = PipelineConfig.from_env().with_overrides(
        input_path=args.input,
        output_path=args.output,
        display_width=width,
        display_height=height,
    )
    if args.no_display:
        config = config.with_overrides(show_windows=False)

    try:
        result = run_pipeline(config)
    except FileNotFoundError:
        logger.error(f"Error: Could not open or find the image at: {config.input_path}")
        return EXIT_ACQUISITION_FAILED

    print_report(result)

    if config.output_path is not None:
        ImageService().save(result.annotated, config.output_path)
        logger.info(f"Annotated image saved to {config.output_path}")

    if config.show_windows:
        show_stages(result, config.display_width, config.display_height)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
