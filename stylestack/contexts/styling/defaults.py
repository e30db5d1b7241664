"""
Default values for STYLESTACK style vocabularies.

Provides the built-in label -> tag table used when no vocabulary file is configured.
Declaration order is significant: it is the canonical order in which labels that
become active together are opened.
"""

from typing import Dict

# Label -> tag name (insertion order = canonical open order)
DEFAULT_STYLE_TAGS: Dict[str, str] = {
    "Bold": "b",
    "Italic": "i",
}

# Top-level key for the list form of a vocabulary YAML file
STYLES_KEY = "styles"
