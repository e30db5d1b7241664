"""
STYLESTACK - Style-Tag Reconciliation for Annotated Text Streams

Converts characters annotated with font styles into a well-nested stream of markup
open/close events interleaved with text.

Architecture:
- Styling Context: Vocabulary, classification and style-stack reconciliation
- Emission Context: Run orchestration and markup sinks
- Conversion Context: PDF token sourcing and document-level XHTML output
"""

__version__ = "0.1.0"
