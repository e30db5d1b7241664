"""Unit tests for markup sinks."""

import pytest
from lxml import etree

from stylestack.contexts.emission.exceptions import MarkupEmissionError
from stylestack.contexts.emission.run_emitter import StyledRunEmitter
from stylestack.contexts.emission.sink import RecordingSink, XhtmlTreeSink
from stylestack.contexts.styling.tokens import Token


@pytest.mark.unit
def test_recording_sink_keeps_attributes():
    sink = RecordingSink()
    sink.start_element("span", {"x_pos": "1.0"})
    sink.end_element("span")
    sink.start_element("b")

    assert sink.events == [
        ("start", "span", {"x_pos": "1.0"}),
        ("end", "span"),
        ("start", "b", None),
    ]
    assert sink.tag_events() == [("start", "span"), ("end", "span"), ("start", "b")]


@pytest.mark.unit
class TestXhtmlTreeSink:
    """Tests for the lxml-backed XHTML sink."""

    def test_minimal_document(self):
        sink = XhtmlTreeSink()
        sink.start_element("p")
        sink.characters("hi")
        sink.end_element("p")

        root = sink.close()

        assert etree.tostring(root, encoding="unicode") == "<html><body><p>hi</p></body></html>"

    def test_styled_run_produces_nested_tree(self):
        sink = XhtmlTreeSink()
        emitter = StyledRunEmitter(sink)

        sink.start_element("p")
        emitter.emit_run(
            [
                Token("A", "Arial-Bold", x=12.5, y=700.0, font_size=10.0),
                Token("B", "Arial"),
                Token("C", "Arial-BoldItalic"),
            ]
        )
        sink.end_element("p")
        root = sink.close()

        paragraph = root.find("body/p")
        span = paragraph.find("span")
        assert dict(span.attrib) == {
            "x_pos": "12.5",
            "y_pos": "700.0",
            "font_size": "10.0",
            "font_type": "Arial-Bold",
        }
        assert len(span) == 0 and not span.text
        assert [child.tag for child in paragraph] == ["span", "b", "b"]
        assert paragraph[1].text == "A"
        assert paragraph[1].tail == "B"
        assert paragraph[2].find("i").text == "C"
        assert "".join(paragraph.itertext()) == "ABC"

    def test_mismatched_end_tag(self):
        sink = XhtmlTreeSink()
        sink.start_element("b")

        with pytest.raises(MarkupEmissionError) as exc_info:
            sink.end_element("i")

        assert exc_info.value.operation == "end_element"
        assert exc_info.value.tag == "i"

    def test_invalid_tag_name(self):
        sink = XhtmlTreeSink()

        with pytest.raises(MarkupEmissionError, match="Unable to start"):
            sink.start_element("1bad tag")

    def test_control_characters_replaced(self):
        sink = XhtmlTreeSink()
        sink.start_element("p")
        sink.characters("bad\x00te\x1bxt\ud800")
        sink.end_element("p")

        root = sink.close()

        assert root.find("body/p").text == "bad\ufffdte\ufffdxt\ufffd"

    def test_control_characters_inside_styled_run(self):
        sink = XhtmlTreeSink()
        emitter = StyledRunEmitter(sink)

        sink.start_element("p")
        emitter.emit_run([Token("a", "Arial-Bold"), Token("\x00", "Arial-Bold"), Token("c", "Arial")])
        sink.end_element("p")
        root = sink.close()

        bold = root.find("body/p/b")
        assert bold.text == "a\ufffd"
        assert bold.tail == "c"

    def test_tab_and_newline_kept(self):
        sink = XhtmlTreeSink()
        sink.start_element("p")
        sink.characters("a\tb\nc")
        sink.end_element("p")

        assert sink.close().find("body/p").text == "a\tb\nc"

    def test_character_failure_names_characters_operation(self):
        sink = XhtmlTreeSink()
        sink.start_element("p")

        with pytest.raises(MarkupEmissionError) as exc_info:
            sink.characters(None)

        assert exc_info.value.operation == "characters"
        assert exc_info.value.tag is None
        assert isinstance(exc_info.value.original_error, TypeError)

    def test_close_with_open_elements(self):
        sink = XhtmlTreeSink()
        sink.start_element("p")

        with pytest.raises(MarkupEmissionError, match="open elements"):
            sink.close()

    def test_closed_document_rejects_events(self):
        sink = XhtmlTreeSink()
        sink.close()

        with pytest.raises(MarkupEmissionError, match="already closed"):
            sink.characters("late")

    def test_tostring_is_idempotent(self):
        sink = XhtmlTreeSink()
        first = sink.tostring()

        assert first == sink.tostring()
        assert first.startswith("<html>")
