"""
Style classification of tokens by font name.

A vocabulary label is active for a token when any of its patterns occurs,
case-insensitively, in the token's font name. "Arial-BoldItalic" is both Bold and
Italic under the default vocabulary; "Arial" is neither.
"""

from typing import Optional

from stylestack.contexts.styling.tokens import StyleSet, Token
from stylestack.contexts.styling.vocabulary import StyleVocabulary


class StyleClassifier:
    """Maps tokens to the set of style labels active for them. Pure and total."""

    def __init__(self, vocabulary: Optional[StyleVocabulary] = None):
        self.vocabulary = vocabulary or StyleVocabulary.default()

    def classify(self, token: Token) -> StyleSet:
        return self.classify_font(token.font_name)

    def classify_font(self, font_name: Optional[str]) -> StyleSet:
        """Classify a bare font name (None counts as no font)."""
        if not font_name:
            return frozenset()
        return frozenset(d.label for d in self.vocabulary if d.matches(font_name))
