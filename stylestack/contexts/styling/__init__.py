"""
Styling Context

Responsibilities:
- Defines the style vocabulary (label -> tag table with font-name patterns)
- Classifies tokens into style sets by font name
- Tracks open styles in a StyleStack
- Reconciles style-set changes into properly nested close/open events

Owns: Style vocabulary, classification, stack reconciliation
Never: Talks to a markup sink
"""

from stylestack.contexts.styling.classifier import StyleClassifier
from stylestack.contexts.styling.reconciler import (
    EventKind,
    MarkupEvent,
    Reconciler,
    Transition,
    plan_transition,
)
from stylestack.contexts.styling.style_stack import StyleStack
from stylestack.contexts.styling.tokens import StyleSet, Token
from stylestack.contexts.styling.vocabulary import (
    StyleDefinition,
    StyleVocabulary,
    load_vocabulary,
)

__all__ = [
    # Vocabulary
    "StyleDefinition",
    "StyleVocabulary",
    "load_vocabulary",
    # Classification
    "StyleClassifier",
    "StyleSet",
    "Token",
    # Reconciliation
    "StyleStack",
    "Reconciler",
    "Transition",
    "MarkupEvent",
    "EventKind",
    "plan_transition",
]
