"""
Document Conversion

Drives whole documents through the run emitter:

    html > body > div.page > p > (span annotation, b/i tags, text)

Each page becomes a `div class="page"` and each run (text line) a paragraph.

This module exports:
- DocumentConverter: page/run driver over any MarkupSink
- convert_pdf: orchestration from a PDF file to XHTML, returning ConversionResult
"""

import contextlib
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from stylestack.contexts.conversion.logger import (
    log_conversion_result,
    log_conversion_start,
)
from stylestack.contexts.conversion.pdf_source import PDFTokenSource
from stylestack.contexts.emission.exceptions import MarkupEmissionError
from stylestack.contexts.emission.run_emitter import StyledRunEmitter, call_sink
from stylestack.contexts.emission.sink import MarkupSink, XhtmlTreeSink
from stylestack.contexts.styling.tokens import Token
from stylestack.contexts.styling.vocabulary import StyleVocabulary

PAGE_TAG = "div"
PAGE_ATTRIBUTES = {"class": "page"}
PARAGRAPH_TAG = "p"


@dataclass
class DocumentStats:
    """Counts accumulated while converting a document."""

    pages: int = 0
    runs: int = 0
    tokens: int = 0


@dataclass
class ConversionResult:
    """Result from convert_pdf() orchestration function."""

    success: bool
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    error: Optional[str] = None
    time_s: float = 0.0
    xhtml: Optional[str] = None
    pages: int = 0
    runs: int = 0
    tokens: int = 0


class DocumentConverter:
    """
    Wraps pages and runs in page/paragraph elements and emits styled runs.

    A MarkupEmissionError from any run propagates unchanged; the caller decides
    whether to abandon the document.

    Args:
        vocabulary: Style vocabulary shared by every run (default Bold/Italic)
    """

    def __init__(self, vocabulary: Optional[StyleVocabulary] = None):
        self.vocabulary = vocabulary or StyleVocabulary.default()

    def convert(
        self, pages: Iterable[Iterable[Iterable[Token]]], sink: MarkupSink
    ) -> DocumentStats:
        emitter = StyledRunEmitter(sink, vocabulary=self.vocabulary)
        stats = DocumentStats()

        for page in pages:
            call_sink(sink.start_element, "start_element", PAGE_TAG, PAGE_TAG, PAGE_ATTRIBUTES)
            for run in page:
                call_sink(sink.start_element, "start_element", PARAGRAPH_TAG, PARAGRAPH_TAG)
                result = emitter.emit_run(run)
                call_sink(sink.end_element, "end_element", PARAGRAPH_TAG, PARAGRAPH_TAG)
                stats.runs += 1
                stats.tokens += result.token_count
            call_sink(sink.end_element, "end_element", PAGE_TAG, PAGE_TAG)
            stats.pages += 1

        return stats


def convert_pdf(
    pdf_path: Path,
    output_path: Optional[Path] = None,
    vocabulary: Optional[StyleVocabulary] = None,
    y_tolerance: float = 3.0,
) -> ConversionResult:
    """
    Convert a PDF into styled XHTML.

    Args:
        pdf_path: Input PDF
        output_path: Optional path to write the XHTML to
        vocabulary: Style vocabulary (default Bold/Italic)
        y_tolerance: Line clustering tolerance in points

    Returns:
        ConversionResult; success=False with the error message if emission failed

    Raises:
        FileNotFoundError: If the PDF does not exist
    """
    pdf_path = Path(pdf_path)
    vocabulary = vocabulary or StyleVocabulary.default()
    source = PDFTokenSource(pdf_path, y_tolerance=y_tolerance)
    log_conversion_start(pdf_path, vocabulary)

    start_time = time.time()
    sink = XhtmlTreeSink()
    try:
        with contextlib.closing(source.iter_pages()) as pages:
            stats = DocumentConverter(vocabulary).convert(pages, sink)
        xhtml = sink.tostring()
    except MarkupEmissionError as e:
        result = ConversionResult(
            success=False,
            input_path=pdf_path,
            error=f"Unable to extract PDF content: {e}",
            time_s=time.time() - start_time,
        )
        log_conversion_result(result, result.time_s)
        return result

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(xhtml, encoding="utf-8")

    result = ConversionResult(
        success=True,
        input_path=pdf_path,
        output_path=output_path,
        time_s=time.time() - start_time,
        xhtml=xhtml,
        pages=stats.pages,
        runs=stats.runs,
        tokens=stats.tokens,
    )
    log_conversion_result(result, result.time_s)
    return result
