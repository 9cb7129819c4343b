"""Output extractor component mapping CSV rows to model output payloads."""

from src.components.output_extractor.extractor import (
    BBOX_STRATEGIES,
    NO_TEXT_DATA,
    extract_bounding_boxes,
    extract_model_output,
    extract_svg,
    extract_text_lines,
    unique_filenames,
)

__all__ = [
    "BBOX_STRATEGIES",
    "NO_TEXT_DATA",
    "extract_bounding_boxes",
    "extract_model_output",
    "extract_svg",
    "extract_text_lines",
    "unique_filenames",
]
