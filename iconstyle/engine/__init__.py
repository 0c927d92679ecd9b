"""iconstyle generation engine."""

from iconstyle.engine.batch import BatchReport, FileResult, export_directory, export_file
from iconstyle.engine.composer import generate_icon
from iconstyle.engine.style_generator import create_styled_base
from iconstyle.engine.transform import calculate_transform

__all__ = [
    "generate_icon",
    "calculate_transform",
    "create_styled_base",
    "export_directory",
    "export_file",
    "BatchReport",
    "FileResult",
]
