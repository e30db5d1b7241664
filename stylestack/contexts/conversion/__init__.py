"""
Conversion Context

Responsibilities:
- Reads PDF characters into runs of Tokens (via pdfplumber)
- Wraps pages and lines in page/paragraph elements
- Orchestrates PDF -> XHTML conversion with result reporting

Owns: Token sourcing, document structure, conversion orchestration
Never: Changes how styles are reconciled
"""

from stylestack.contexts.conversion.converter import (
    ConversionResult,
    DocumentConverter,
    DocumentStats,
    convert_pdf,
)
from stylestack.contexts.conversion.pdf_source import PDFTokenSource, chars_to_runs

__all__ = [
    "convert_pdf",
    "ConversionResult",
    "DocumentConverter",
    "DocumentStats",
    "PDFTokenSource",
    "chars_to_runs",
]
