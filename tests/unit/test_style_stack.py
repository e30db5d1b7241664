"""Unit tests for StyleStack."""

import pytest

from stylestack.contexts.styling.style_stack import StyleStack


@pytest.mark.unit
def test_new_stack_is_empty():
    stack = StyleStack()
    assert stack.is_empty()
    assert len(stack) == 0
    assert stack.labels() == ()
    assert stack.as_set() == frozenset()


@pytest.mark.unit
def test_push_peek_pop_order():
    stack = StyleStack()
    stack.push("Bold")
    stack.push("Italic")

    assert stack.labels() == ("Bold", "Italic")
    assert stack.peek() == "Italic"
    assert stack.pop() == "Italic"
    assert stack.pop() == "Bold"
    assert stack.is_empty()


@pytest.mark.unit
def test_duplicate_push_rejected():
    stack = StyleStack()
    stack.push("Bold")

    with pytest.raises(ValueError, match="already open"):
        stack.push("Bold")

    assert stack.labels() == ("Bold",)


@pytest.mark.unit
def test_pop_and_peek_on_empty_stack():
    stack = StyleStack()

    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


@pytest.mark.unit
def test_remove_at_keeps_relative_order():
    stack = StyleStack()
    for label in ("Bold", "Italic", "Underline"):
        stack.push(label)

    assert stack.remove_at(1) == "Italic"
    assert stack.labels() == ("Bold", "Underline")
    assert "Italic" not in stack
    assert "Bold" in stack


@pytest.mark.unit
def test_labels_is_a_snapshot():
    stack = StyleStack()
    stack.push("Bold")
    snapshot = stack.labels()

    stack.push("Italic")

    assert snapshot == ("Bold",)
    assert list(stack) == ["Bold", "Italic"]
