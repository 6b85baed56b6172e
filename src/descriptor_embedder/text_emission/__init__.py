"""Text emission exports."""

from .annotation_collector import AnnotationCollector
from .code_printer import INDENT_STEP, CodePrinter, PrinterError
from .output_directory import OutputDirectory

__all__ = [
    "AnnotationCollector",
    "INDENT_STEP",
    "CodePrinter",
    "PrinterError",
    "OutputDirectory",
]
