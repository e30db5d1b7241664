"""
PDF token source built on pdfplumber character extraction.

Main class:
    PDFTokenSource: Yields each page as a list of runs (text lines) of Tokens.

Helper functions:
    cluster_by_y_tolerance: Y-coordinate clustering for line detection.
    char_origin: Baseline origin of a char from its text matrix.
    char_to_token: pdfplumber char dict -> Token.
    chars_to_runs: Character list -> x-sorted runs of Tokens.
"""

from collections import Counter
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

import pdfplumber

from stylestack.contexts.conversion.logger import _log_debug
from stylestack.contexts.styling.tokens import Token

# One run of tokens per text line; one list of runs per page
Run = List[Token]
Page = List[Run]


def cluster_by_y_tolerance(chars: List[dict], tolerance: float = 3.0) -> List[List[dict]]:
    """
    Group characters into lines by Y-coordinate proximity.

    Handles baseline shifts between bold/regular text that would otherwise split lines.
    """
    if not chars:
        return []

    sorted_chars = sorted(chars, key=lambda c: c["top"])

    lines = []
    current_line = [sorted_chars[0]]
    current_y = sorted_chars[0]["top"]

    for char in sorted_chars[1:]:
        if abs(char["top"] - current_y) <= tolerance:
            current_line.append(char)
        else:
            lines.append(current_line)
            current_line = [char]
            current_y = char["top"]

    lines.append(current_line)
    return lines


def char_origin(char: dict) -> Tuple[Optional[float], Optional[float]]:
    """
    Baseline origin of a char in PDF user space (bottom-left origin).

    Uses the translation of the text rendering matrix (matrix[4], matrix[5]), which
    sits on the baseline. Falls back to the bounding box corner (x0, y0) when the
    char carries no matrix; y0 is below the baseline by the font's descent.
    """
    matrix = char.get("matrix")
    if matrix is not None and len(matrix) == 6:
        return matrix[4], matrix[5]
    return char.get("x0"), char.get("y0")


def char_to_token(char: dict) -> Token:
    """Convert a pdfplumber char dict (text, fontname, matrix, size) to a Token."""
    x, y = char_origin(char)
    return Token(
        text=char["text"],
        font_name=char.get("fontname") or "",
        x=x,
        y=y,
        font_size=char.get("size"),
    )


def chars_to_runs(chars: List[dict], y_tolerance: float = 3.0) -> Page:
    """Convert a page's characters to runs of Tokens, top-to-bottom, each sorted by X."""
    runs: Page = []
    for line in cluster_by_y_tolerance(chars, tolerance=y_tolerance):
        line = sorted(line, key=lambda c: c["x0"])
        runs.append([char_to_token(c) for c in line])
    return runs


class PDFTokenSource:
    """
    Token source over a PDF file.

    Args:
        pdf_path: Path to PDF file
        y_tolerance: Max Y-distance (points) to group characters as same line
        max_pages: Only read the first N pages (None = all)

    Example:
        >>> source = PDFTokenSource(Path("document.pdf"))
        >>> for page in source.iter_pages():
        ...     for run in page:
        ...         print("".join(token.text for token in run))
    """

    def __init__(
        self,
        pdf_path: Union[str, Path],
        y_tolerance: float = 3.0,
        max_pages: Optional[int] = None,
    ):
        pdf_path = Path(pdf_path)
        if not pdf_path.exists():
            raise FileNotFoundError(f"PDF not found: {pdf_path}")

        self.pdf_path = pdf_path
        self.y_tolerance = y_tolerance
        self.max_pages = max_pages

    def iter_pages(self) -> Iterator[Page]:
        """Yield pages in order; the PDF stays open until iteration finishes or is closed."""
        with pdfplumber.open(self.pdf_path) as pdf:
            pages = pdf.pages if self.max_pages is None else pdf.pages[: self.max_pages]
            for page_num, page in enumerate(pages, start=1):
                runs = chars_to_runs(page.chars, y_tolerance=self.y_tolerance)
                _log_debug(f"Page {page_num}: {len(runs)} lines")
                yield runs

    def font_names(self) -> Dict[str, int]:
        """Count characters per font name across the document, most used first."""
        counts: Counter = Counter()
        for page in self.iter_pages():
            for run in page:
                counts.update(token.font_name for token in run)
        return dict(counts.most_common())
