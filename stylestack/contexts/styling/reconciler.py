"""
Style Reconciliation

Turns a change of active style set into the shortest properly nested sequence of
close/open markup events, and applies it to a StyleStack.

Tags nest strictly LIFO, so an outer tag can only be closed after everything opened
inside it. When a label leaves the active set, every still-open label above it is
closed first (innermost first), the label itself is closed, and the labels that are
still required are reopened in their original outer -> inner order. Labels entering
the active set are then opened on top, in vocabulary declaration order.

Example (stack [Bold, Italic], new set {Italic}):

    close i, close b, open i

Planning is pure: plan_transition() returns an immutable Transition before any stack
is touched, so the algorithm can be tested without a sink.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from stylestack.contexts.styling.style_stack import StyleStack
from stylestack.contexts.styling.tokens import StyleSet
from stylestack.contexts.styling.vocabulary import StyleVocabulary


class EventKind(str, Enum):
    OPEN = "open"
    CLOSE = "close"


@dataclass(frozen=True)
class MarkupEvent:
    """A single open or close of the tag belonging to a style label."""

    kind: EventKind
    label: str
    tag: str

    def __str__(self) -> str:
        verb = "start" if self.kind is EventKind.OPEN else "end"
        return f"{verb}({self.tag})"


@dataclass(frozen=True)
class Transition:
    """
    Planned change from one stack state to another.

    Attributes:
        events: Ordered close/open events to emit
        removed: Labels closed for good, innermost first
        added: Labels newly opened, in vocabulary order
        result: Stack contents after the transition, outer -> inner
    """

    events: Tuple[MarkupEvent, ...]
    removed: Tuple[str, ...]
    added: Tuple[str, ...]
    result: Tuple[str, ...]

    @property
    def is_noop(self) -> bool:
        return not self.events


def plan_transition(
    labels: Sequence[str], new_styles: StyleSet, vocabulary: StyleVocabulary
) -> Transition:
    """
    Plan the events that take an open-label sequence to a new style set.

    Args:
        labels: Currently open labels, outer -> inner
        new_styles: Labels that must be open afterwards
        vocabulary: Supplies tags and the canonical open order

    Returns:
        Transition with events, removals, additions and resulting stack order

    Raises:
        KeyError: If a label is not part of the vocabulary
    """
    labels = tuple(labels)
    if frozenset(labels) == new_styles:
        return Transition(events=(), removed=(), added=(), result=labels)

    def close(label: str) -> MarkupEvent:
        return MarkupEvent(EventKind.CLOSE, label, vocabulary.tag_for(label))

    def open_(label: str) -> MarkupEvent:
        return MarkupEvent(EventKind.OPEN, label, vocabulary.tag_for(label))

    events: List[MarkupEvent] = []
    removed: List[str] = []
    # Survivors closed only to get at a label beneath them
    closed_above: List[str] = []

    # Pass 1: removals, scanning innermost -> outermost
    for i in range(len(labels) - 1, -1, -1):
        label = labels[i]
        if label in new_styles:
            continue
        for above in reversed(labels[i + 1 :]):
            if above in removed or above in closed_above:
                continue
            events.append(close(above))
            closed_above.append(above)
        events.append(close(label))
        removed.append(label)

    survivors = [label for label in labels if label not in removed]
    events.extend(open_(label) for label in survivors if label in closed_above)

    # Pass 2: insertions, in vocabulary order
    added = vocabulary.ordered(label for label in new_styles if label not in survivors)
    events.extend(open_(label) for label in added)

    return Transition(
        events=tuple(events),
        removed=tuple(removed),
        added=tuple(added),
        result=tuple(survivors + added),
    )


class Reconciler:
    """
    Applies planned transitions to a live StyleStack.

    Example:
        >>> reconciler = Reconciler()
        >>> stack = StyleStack()
        >>> [str(e) for e in reconciler.reconcile(stack, frozenset({"Bold", "Italic"}))]
        ['start(b)', 'start(i)']
        >>> [str(e) for e in reconciler.reconcile(stack, frozenset({"Italic"}))]
        ['end(i)', 'end(b)', 'start(i)']
        >>> [str(e) for e in reconciler.drain(stack)]
        ['end(i)']
    """

    def __init__(self, vocabulary: Optional[StyleVocabulary] = None):
        self.vocabulary = vocabulary or StyleVocabulary.default()

    def plan(self, stack: StyleStack, new_styles: StyleSet) -> Transition:
        return plan_transition(stack.labels(), new_styles, self.vocabulary)

    def reconcile(self, stack: StyleStack, new_styles: StyleSet) -> Tuple[MarkupEvent, ...]:
        """Mutate the stack to represent new_styles; return the events that do so."""
        transition = self.plan(stack, new_styles)
        if transition.is_noop:
            return ()

        for label in transition.removed:
            stack.remove_at(stack.labels().index(label))
        for label in transition.added:
            stack.push(label)

        return transition.events

    def drain(self, stack: StyleStack) -> Tuple[MarkupEvent, ...]:
        """Empty the stack, closing labels innermost -> outermost."""
        events = []
        while not stack.is_empty():
            label = stack.pop()
            events.append(MarkupEvent(EventKind.CLOSE, label, self.vocabulary.tag_for(label)))
        return tuple(events)
