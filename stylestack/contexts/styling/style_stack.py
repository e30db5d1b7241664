"""
Style Stack

Ordered record of the markup tags currently open within a run, outermost first.
A label never appears twice. One stack lives for exactly one run: it starts empty,
is mutated only through reconciliation, and ends drained.
"""

from typing import Iterator, List, Tuple

from stylestack.contexts.styling.tokens import StyleSet


class StyleStack:
    """
    Ordered, duplicate-free sequence of open style labels (index 0 = outermost).

    Example:
        >>> stack = StyleStack()
        >>> stack.push("Bold")
        >>> stack.push("Italic")
        >>> stack.labels()
        ('Bold', 'Italic')
        >>> stack.peek()
        'Italic'
    """

    def __init__(self):
        self._labels: List[str] = []

    def push(self, label: str) -> None:
        """
        Open a label as the new innermost entry.

        Raises:
            ValueError: If the label is already open
        """
        if label in self._labels:
            raise ValueError(f"Style '{label}' is already open: {self._labels}")
        self._labels.append(label)

    def pop(self) -> str:
        """
        Remove and return the innermost label.

        Raises:
            IndexError: If the stack is empty
        """
        if not self._labels:
            raise IndexError("pop from empty style stack")
        return self._labels.pop()

    def peek(self) -> str:
        """
        Return the innermost label without removing it.

        Raises:
            IndexError: If the stack is empty
        """
        if not self._labels:
            raise IndexError("peek at empty style stack")
        return self._labels[-1]

    def remove_at(self, index: int) -> str:
        """Remove and return the label at a position (0 = outermost)."""
        return self._labels.pop(index)

    def labels(self) -> Tuple[str, ...]:
        """Snapshot of open labels, outer -> inner."""
        return tuple(self._labels)

    def as_set(self) -> StyleSet:
        return frozenset(self._labels)

    def is_empty(self) -> bool:
        return not self._labels

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._labels))

    def __contains__(self, label: object) -> bool:
        return label in self._labels

    def __repr__(self) -> str:
        return f"StyleStack({self._labels})"
