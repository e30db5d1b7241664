"""
Styled Run Emitter

Drives one run (e.g. one text line) of tokens into a markup sink:

1. For the first token, emit a self-closing span carrying the run's line origin
   (x_pos, y_pos, font_size, font_type), before any style tag.
2. For every token, classify its font, reconcile the style stack against the
   previous token's style set, then emit the token's text.
3. At the end of the run, close whatever is still open, innermost first.

A failing sink call aborts the run with MarkupEmissionError. Every run gets a fresh
StyleStack, so a half-drained stack is never carried into the next run.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple

from stylestack.contexts.emission.exceptions import MarkupEmissionError
from stylestack.contexts.emission.logger import _log_debug, _log_error, _log_warning
from stylestack.contexts.emission.sink import MarkupSink
from stylestack.contexts.styling.classifier import StyleClassifier
from stylestack.contexts.styling.reconciler import EventKind, MarkupEvent, Reconciler
from stylestack.contexts.styling.style_stack import StyleStack
from stylestack.contexts.styling.tokens import Token
from stylestack.contexts.styling.vocabulary import StyleVocabulary

ANNOTATION_TAG = "span"

# Previous-style sentinel: never equal to a real style set
_NO_STYLE = object()


@dataclass(frozen=True)
class LineOrigin:
    """Position and font of a run's first token."""

    x: float
    y: float
    font_size: float
    font_name: str

    @classmethod
    def from_token(cls, token: Token) -> Optional["LineOrigin"]:
        """Build from a token, or None if it lacks position metadata."""
        if not token.has_position:
            return None
        return cls(
            x=float(token.x),
            y=float(token.y),
            font_size=float(token.font_size),
            font_name=token.font_name,
        )

    def attributes(self) -> Dict[str, str]:
        return {
            "x_pos": str(self.x),
            "y_pos": str(self.y),
            "font_size": str(self.font_size),
            "font_type": self.font_name,
        }


@dataclass
class RunResult:
    """Summary of one emitted run."""

    token_count: int = 0
    opened: int = 0
    closed: int = 0
    origin: Optional[LineOrigin] = None


class StyledRunEmitter:
    """
    Turns runs of tokens into nested markup events on a sink.

    One emitter serves one document/session. The vocabulary is read-only and may be
    shared; stacks are created per run and never leave emit_run().

    Args:
        sink: Receiver of start/end/text events
        vocabulary: Style labels and tags (default Bold -> b, Italic -> i)
        classifier: Optional custom classifier (default: font-name matching on vocabulary)

    Example:
        >>> sink = RecordingSink()
        >>> emitter = StyledRunEmitter(sink)
        >>> result = emitter.emit_run([Token("a", "Arial-Bold"), Token("b", "Arial")])
        >>> sink.trace()
        ['start(b)', 'text(a)', 'end(b)', 'text(b)']
    """

    def __init__(
        self,
        sink: MarkupSink,
        vocabulary: Optional[StyleVocabulary] = None,
        classifier: Optional[StyleClassifier] = None,
    ):
        self.sink = sink
        self.vocabulary = vocabulary or StyleVocabulary.default()
        self.classifier = classifier or StyleClassifier(self.vocabulary)
        self.reconciler = Reconciler(self.vocabulary)
        self.runs_emitted = 0

    def emit_run(self, tokens: Iterable[Token]) -> RunResult:
        """
        Emit one run of tokens.

        Args:
            tokens: Finite, ordered tokens; the first should carry position metadata

        Returns:
            RunResult with token and tag counts

        Raises:
            MarkupEmissionError: If the sink fails; the run is abandoned at that point
        """
        stack = StyleStack()
        result = RunResult()
        previous = _NO_STYLE

        for token in tokens:
            if result.token_count == 0:
                result.origin = self._annotate(token)

            styles = self.classifier.classify(token)
            if styles != previous:
                self._emit_events(self.reconciler.reconcile(stack, styles), result)
                previous = styles

            if token.text:
                call_sink(self.sink.characters, "characters", None, token.text)
            result.token_count += 1

        self._emit_events(self.reconciler.drain(stack), result)

        self.runs_emitted += 1
        _log_debug(
            f"Run {self.runs_emitted}: {result.token_count} tokens, "
            f"{result.opened} opens, {result.closed} closes"
        )
        return result

    def _annotate(self, token: Token) -> Optional[LineOrigin]:
        origin = LineOrigin.from_token(token)
        if origin is None:
            _log_warning(f"First token {token.text!r} has no position, skipping line annotation")
            return None

        call_sink(
            self.sink.start_element, "start_element", ANNOTATION_TAG, ANNOTATION_TAG, origin.attributes()
        )
        call_sink(self.sink.end_element, "end_element", ANNOTATION_TAG, ANNOTATION_TAG)
        return origin

    def _emit_events(self, events: Tuple[MarkupEvent, ...], result: RunResult) -> None:
        for event in events:
            if event.kind is EventKind.OPEN:
                call_sink(self.sink.start_element, "start_element", event.tag, event.tag)
                result.opened += 1
            else:
                call_sink(self.sink.end_element, "end_element", event.tag, event.tag)
                result.closed += 1


def call_sink(method: Callable[..., None], operation: str, tag: Optional[str], *args) -> None:
    """
    Call a bound sink method, converting any failure into MarkupEmissionError.

    Args:
        method: Bound sink method, e.g. sink.start_element
        operation: Name reported in errors ("start_element", "end_element", "characters")
        tag: Tag involved, for error reporting (None for character data)
        *args: Arguments passed through to the method

    Example:
        >>> call_sink(sink.start_element, "start_element", "b", "b")
    """
    try:
        method(*args)
    except MarkupEmissionError as e:
        _log_error(f"Emission aborted: {e.message}")
        raise
    except Exception as e:
        _log_error(f"Emission aborted: sink failed on {operation} ({tag or 'text'}): {e}")
        raise MarkupEmissionError(f"Sink failed during {operation}", operation, tag, e) from e
