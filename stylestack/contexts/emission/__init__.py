"""
Emission Context

Responsibilities:
- Drives runs of tokens through classification and reconciliation
- Emits line-origin annotations and text into a markup sink
- Provides sinks (in-memory recording, lxml XHTML tree)
- Reports sink failures as MarkupEmissionError

Owns: Run orchestration, sink interface, emission errors
Never: Decides which styles are active
"""

from stylestack.contexts.emission.exceptions import MarkupEmissionError
from stylestack.contexts.emission.run_emitter import (
    LineOrigin,
    RunResult,
    StyledRunEmitter,
    call_sink,
)
from stylestack.contexts.emission.sink import MarkupSink, RecordingSink, XhtmlTreeSink

__all__ = [
    "StyledRunEmitter",
    "RunResult",
    "LineOrigin",
    "MarkupSink",
    "RecordingSink",
    "XhtmlTreeSink",
    "MarkupEmissionError",
    "call_sink",
]
