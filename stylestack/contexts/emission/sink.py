"""
Markup Sinks

A markup sink consumes the linear event stream produced by the run emitter:
element starts (optionally with attributes), element ends, and character data.

Sinks provided here:
    RecordingSink: Keeps every event in memory; used for traces and tests.
    XhtmlTreeSink: Builds an XHTML tree with lxml's TreeBuilder.
"""

import re
from typing import Any, Dict, List, Mapping, Optional, Protocol, Tuple

from lxml import etree

from stylestack.contexts.emission.exceptions import MarkupEmissionError
from stylestack.contexts.emission.logger import _log_debug

REPLACEMENT_CHARACTER = "\ufffd"

# Anything outside the XML 1.0 Char production (includes lone surrogates)
_INVALID_XML_CHARS = re.compile(r"[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def replace_invalid_xml_chars(text: str) -> str:
    """Replace characters XML 1.0 cannot carry with U+FFFD."""
    return _INVALID_XML_CHARS.sub(REPLACEMENT_CHARACTER, text)


class MarkupSink(Protocol):
    """Capability surface the emitter drives. Any method may raise."""

    def start_element(self, tag: str, attributes: Optional[Mapping[str, str]] = None) -> None:
        ...

    def end_element(self, tag: str) -> None:
        ...

    def characters(self, text: str) -> None:
        ...


class RecordingSink:
    """
    Sink that records events as tuples.

    Events:
        ("start", tag, attributes)  attributes is a dict, or None when none were given
        ("end", tag)
        ("text", text)

    Example:
        >>> sink = RecordingSink()
        >>> sink.start_element("b"); sink.characters("x"); sink.end_element("b")
        >>> sink.trace()
        ['start(b)', 'text(x)', 'end(b)']
    """

    def __init__(self):
        self.events: List[Tuple[Any, ...]] = []

    def start_element(self, tag: str, attributes: Optional[Mapping[str, str]] = None) -> None:
        self.events.append(("start", tag, dict(attributes) if attributes is not None else None))

    def end_element(self, tag: str) -> None:
        self.events.append(("end", tag))

    def characters(self, text: str) -> None:
        self.events.append(("text", text))

    def trace(self) -> List[str]:
        """Compact string form of the events (attributes omitted)."""
        return [f"{event[0]}({event[1]})" for event in self.events]

    def tag_events(self) -> List[Tuple[str, str]]:
        """Only start/end events as (kind, tag) pairs."""
        return [(event[0], event[1]) for event in self.events if event[0] in ("start", "end")]

    def text(self) -> str:
        return "".join(event[1] for event in self.events if event[0] == "text")


class XhtmlTreeSink:
    """
    Sink that builds an html > body tree using lxml.etree.TreeBuilder.

    Checks nesting itself: ending any element other than the innermost open one
    raises MarkupEmissionError. Tag names lxml rejects are reported as
    MarkupEmissionError too. Characters XML cannot carry (NUL, most C0 controls,
    lone surrogates) are replaced with U+FFFD before they reach the builder, so
    character data never fails later at an unrelated end call.

    Example:
        >>> sink = XhtmlTreeSink()
        >>> sink.start_element("p"); sink.characters("hi"); sink.end_element("p")
        >>> root = sink.close()
        >>> etree.tostring(root, encoding="unicode")
        '<html><body><p>hi</p></body></html>'
    """

    def __init__(self):
        self._builder = etree.TreeBuilder()
        self._open: List[str] = []
        self._root: Optional[etree._Element] = None
        self.start_element("html")
        self.start_element("body")

    def start_element(self, tag: str, attributes: Optional[Mapping[str, str]] = None) -> None:
        self._ensure_open("start_element", tag)
        attrs: Dict[str, str] = {key: str(value) for key, value in (attributes or {}).items()}
        try:
            self._builder.start(tag, attrs)
        except (ValueError, TypeError, etree.LxmlError) as e:
            raise MarkupEmissionError(f"Unable to start {tag}", "start_element", tag, e) from e
        self._open.append(tag)

    def end_element(self, tag: str) -> None:
        self._ensure_open("end_element", tag)
        if not self._open or self._open[-1] != tag:
            innermost = self._open[-1] if self._open else None
            raise MarkupEmissionError(
                f"Unable to end {tag}: innermost open element is {innermost}", "end_element", tag
            )
        try:
            self._builder.end(tag)
        except (ValueError, TypeError, etree.LxmlError) as e:
            raise MarkupEmissionError(f"Unable to end {tag}", "end_element", tag, e) from e
        self._open.pop()

    def characters(self, text: str) -> None:
        self._ensure_open("characters")
        try:
            safe_text = replace_invalid_xml_chars(text)
            if safe_text != text:
                _log_debug(f"Replaced invalid XML characters in {text!r}")
            self._builder.data(safe_text)
        except (ValueError, TypeError, etree.LxmlError) as e:
            raise MarkupEmissionError("Unable to write characters", "characters", None, e) from e

    def close(self) -> etree._Element:
        """
        Finish the document and return the root element.

        Raises:
            MarkupEmissionError: If elements other than html/body are still open
        """
        if self._root is not None:
            return self._root
        if self._open != ["html", "body"]:
            raise MarkupEmissionError(f"Unable to close document with open elements: {self._open}")
        self.end_element("body")
        self.end_element("html")
        self._root = self._builder.close()
        return self._root

    def tostring(self) -> str:
        """Close (if needed) and serialize the document."""
        return etree.tostring(self.close(), pretty_print=True, encoding="unicode")

    def _ensure_open(self, operation: str, tag: Optional[str] = None) -> None:
        if self._root is not None:
            raise MarkupEmissionError("Document already closed", operation, tag)
