"""
Style Vocabulary

Ordered, read-only table of the style labels a converter knows about. Each label maps
1:1 to a markup tag and carries one or more font-name patterns that activate it.

Vocabularies can be built in code, from a plain label -> tag mapping, or loaded from a
YAML file:

    # list form (patterns optional, default to the label itself)
    styles:
      - label: Bold
        tag: b
      - label: Italic
        tag: i
        patterns: [Italic, Oblique]

    # mapping form
    Bold: b
    Italic: i
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from dotenv import load_dotenv
from omegaconf import OmegaConf

from stylestack.contexts.styling.defaults import DEFAULT_STYLE_TAGS, STYLES_KEY
from stylestack.contexts.styling.logger import _log_debug, _log_info

load_dotenv()
STYLE_VOCABULARY_PATH = os.getenv("STYLE_VOCABULARY_PATH")


@dataclass(frozen=True)
class StyleDefinition:
    """
    One entry of a style vocabulary.

    Attributes:
        label: Style label (e.g., "Bold")
        tag: Markup tag emitted for the label (e.g., "b")
        patterns: Font-name substrings that activate the label (case-insensitive).
                  Empty means "match the label itself".
    """

    label: str
    tag: str
    patterns: Tuple[str, ...] = ()

    def __post_init__(self):
        if not self.label or not self.tag:
            raise ValueError(f"Style definition needs a label and a tag, got {self.label!r} -> {self.tag!r}")
        patterns = tuple(self.patterns) or (self.label,)
        if any(not pattern for pattern in patterns):
            raise ValueError(f"Empty font-name pattern for style '{self.label}'")
        object.__setattr__(self, "patterns", patterns)

    def matches(self, font_name: str) -> bool:
        """Check if any pattern occurs in the font name, ignoring case."""
        name = font_name.casefold()
        return any(pattern.casefold() in name for pattern in self.patterns)


class StyleVocabulary:
    """
    Immutable, ordered collection of StyleDefinitions.

    Declaration order is the canonical order used whenever several labels must be
    opened in the same transition. Safe to share across sessions.

    Example:
        >>> vocab = StyleVocabulary.from_mapping({"Bold": "b", "Italic": "i"})
        >>> vocab.tag_for("Italic")
        'i'
        >>> vocab.ordered({"Italic", "Bold"})
        ['Bold', 'Italic']
    """

    def __init__(self, definitions: Iterable[StyleDefinition]):
        self._definitions: Tuple[StyleDefinition, ...] = tuple(definitions)

        labels = [d.label for d in self._definitions]
        tags = [d.tag for d in self._definitions]
        if len(set(labels)) != len(labels):
            raise ValueError(f"Duplicate style labels in vocabulary: {labels}")
        if len(set(tags)) != len(tags):
            raise ValueError(f"Style tags must map 1:1 to labels, got duplicates: {tags}")

        self._by_label: Dict[str, StyleDefinition] = {d.label: d for d in self._definitions}
        self._rank: Dict[str, int] = {label: i for i, label in enumerate(labels)}

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "StyleVocabulary":
        """Build a vocabulary from a label -> tag mapping (iteration order is kept)."""
        return cls(StyleDefinition(label=label, tag=tag) for label, tag in mapping.items())

    @classmethod
    def default(cls) -> "StyleVocabulary":
        """The built-in vocabulary: Bold -> b, Italic -> i."""
        return cls.from_mapping(DEFAULT_STYLE_TAGS)

    @property
    def definitions(self) -> Tuple[StyleDefinition, ...]:
        return self._definitions

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(d.label for d in self._definitions)

    def tag_for(self, label: str) -> str:
        """
        Get the markup tag for a label.

        Raises:
            KeyError: If the label is not part of this vocabulary
        """
        try:
            return self._by_label[label].tag
        except KeyError:
            raise KeyError(f"Unknown style label '{label}'. Known labels: {list(self.labels)}") from None

    def ordered(self, labels: Iterable[str]) -> List[str]:
        """
        Sort labels into vocabulary declaration order.

        Raises:
            KeyError: If any label is not part of this vocabulary
        """
        labels = list(labels)
        unknown = [label for label in labels if label not in self._rank]
        if unknown:
            raise KeyError(f"Unknown style labels {unknown}. Known labels: {list(self.labels)}")
        return sorted(labels, key=self._rank.__getitem__)

    def extend(self, extra: Union[Mapping[str, str], Iterable[StyleDefinition]]) -> "StyleVocabulary":
        """Return a new vocabulary with extra definitions appended after the existing ones."""
        if isinstance(extra, Mapping):
            extra = [StyleDefinition(label=label, tag=tag) for label, tag in extra.items()]
        return StyleVocabulary([*self._definitions, *extra])

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[StyleDefinition]:
        return iter(self._definitions)

    def __contains__(self, label: object) -> bool:
        return label in self._by_label

    def __repr__(self) -> str:
        table = ", ".join(f"{d.label}->{d.tag}" for d in self._definitions)
        return f"StyleVocabulary({table})"


def _definitions_from_config(config: dict) -> List[StyleDefinition]:
    """Parse either the `styles:` list form or the plain mapping form."""
    if STYLES_KEY in config:
        entries = config[STYLES_KEY]
        if not isinstance(entries, list):
            raise ValueError(f"'{STYLES_KEY}' must be a list of {{label, tag, patterns}} entries")

        definitions = []
        for entry in entries:
            if not isinstance(entry, dict) or "label" not in entry or "tag" not in entry:
                raise ValueError(f"Style entry must have 'label' and 'tag' keys, got: {entry}")
            patterns = entry.get("patterns") or ()
            if isinstance(patterns, str):
                patterns = [patterns]
            definitions.append(
                StyleDefinition(
                    label=str(entry["label"]),
                    tag=str(entry["tag"]),
                    patterns=tuple(str(p) for p in patterns),
                )
            )
        return definitions

    for label, tag in config.items():
        if not isinstance(tag, str):
            raise ValueError(f"Expected 'label: tag' pairs, got {label!r}: {tag!r}")
    return [StyleDefinition(label=str(label), tag=tag) for label, tag in config.items()]


def load_vocabulary(config_path: Optional[Path] = None) -> StyleVocabulary:
    """
    Load a style vocabulary from YAML, falling back to the built-in default.

    Args:
        config_path: Optional path to vocabulary YAML (defaults to STYLE_VOCABULARY_PATH
                     env variable; built-in Bold/Italic vocabulary if neither is set)

    Returns:
        StyleVocabulary in file declaration order

    Raises:
        ValueError: If the file does not describe a valid vocabulary
    """
    if config_path is None and STYLE_VOCABULARY_PATH:
        config_path = Path(STYLE_VOCABULARY_PATH)

    if config_path is None:
        _log_debug("No vocabulary file configured, using default Bold/Italic table")
        return StyleVocabulary.default()

    config = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    if not isinstance(config, dict) or not config:
        raise ValueError(f"Vocabulary file {config_path} must contain a non-empty mapping")

    vocabulary = StyleVocabulary(_definitions_from_config(config))
    _log_info(f"Loaded {len(vocabulary)} style labels from {config_path}")
    return vocabulary
