"""Custom exceptions for the emission context."""

from typing import Optional


class MarkupEmissionError(Exception):
    """
    Exception raised when a markup sink fails to accept an event.

    Aborts the current run. Emission is not retried: sink side effects are not
    repeatable, and replaying would duplicate tags or text.

    Attributes:
        message: Error description
        operation: Sink operation that failed ("start_element", "end_element", "characters")
        tag: Tag involved in the failing call, if any
        original_error: The sink-specific error
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        tag: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.operation = operation
        self.tag = tag
        self.original_error = original_error

        parts = [message]

        if operation:
            parts.append(f"Operation: {operation}" + (f" <{tag}>" if tag else ""))

        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))
