"""Unit tests for style vocabularies and vocabulary loading."""

import pytest

from stylestack.contexts.styling import vocabulary as vocabulary_module
from stylestack.contexts.styling.vocabulary import (
    StyleDefinition,
    StyleVocabulary,
    load_vocabulary,
)


@pytest.mark.unit
class TestStyleVocabulary:
    """Tests for the in-memory vocabulary table."""

    def test_default_vocabulary(self):
        vocab = StyleVocabulary.default()
        assert vocab.labels == ("Bold", "Italic")
        assert vocab.tag_for("Bold") == "b"
        assert vocab.tag_for("Italic") == "i"

    def test_from_mapping_keeps_declaration_order(self):
        vocab = StyleVocabulary.from_mapping({"Italic": "em", "Bold": "strong"})
        assert vocab.labels == ("Italic", "Bold")
        assert vocab.ordered({"Bold", "Italic"}) == ["Italic", "Bold"]

    def test_unknown_label(self):
        vocab = StyleVocabulary.default()
        assert "Underline" not in vocab
        with pytest.raises(KeyError, match="Unknown style label"):
            vocab.tag_for("Underline")
        with pytest.raises(KeyError, match=r"Unknown style labels \[.Underline.\]"):
            vocab.ordered(["Bold", "Underline"])

    def test_duplicate_labels_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            StyleVocabulary([StyleDefinition("Bold", "b"), StyleDefinition("Bold", "strong")])

    def test_duplicate_tags_rejected(self):
        with pytest.raises(ValueError, match="1:1"):
            StyleVocabulary.from_mapping({"Bold": "b", "Heavy": "b"})

    def test_extend_appends_after_existing(self):
        vocab = StyleVocabulary.default().extend({"Underline": "u"})
        assert vocab.labels == ("Bold", "Italic", "Underline")
        assert len(StyleVocabulary.default()) == 2

    def test_definition_defaults_pattern_to_label(self):
        definition = StyleDefinition("Bold", "b")
        assert definition.patterns == ("Bold",)
        assert definition.matches("TimesNewRoman-BOLD")
        assert not definition.matches("TimesNewRoman")

    def test_definition_with_extra_patterns(self):
        definition = StyleDefinition("Italic", "i", ("Italic", "Oblique"))
        assert definition.matches("Helvetica-Oblique")
        assert definition.matches("Arial-ItalicMT")

    def test_definition_requires_label_and_tag(self):
        with pytest.raises(ValueError):
            StyleDefinition("", "b")
        with pytest.raises(ValueError):
            StyleDefinition("Bold", "")


@pytest.mark.unit
class TestLoadVocabulary:
    """Tests for YAML vocabulary loading."""

    def test_default_when_nothing_configured(self, monkeypatch):
        monkeypatch.setattr(vocabulary_module, "STYLE_VOCABULARY_PATH", None)
        assert load_vocabulary().labels == ("Bold", "Italic")

    def test_env_path_used_when_no_argument(self, tmp_path, monkeypatch):
        config = tmp_path / "styles.yaml"
        config.write_text("Bold: strong\n")
        monkeypatch.setattr(vocabulary_module, "STYLE_VOCABULARY_PATH", str(config))

        vocab = load_vocabulary()

        assert vocab.labels == ("Bold",)
        assert vocab.tag_for("Bold") == "strong"

    def test_mapping_form(self, tmp_path):
        config = tmp_path / "styles.yaml"
        config.write_text("Bold: b\nItalic: i\nUnderline: u\n")

        vocab = load_vocabulary(config)

        assert vocab.labels == ("Bold", "Italic", "Underline")
        assert vocab.tag_for("Underline") == "u"

    def test_list_form_with_patterns(self, tmp_path):
        config = tmp_path / "styles.yaml"
        config.write_text(
            "styles:\n"
            "  - label: Bold\n"
            "    tag: b\n"
            "    patterns: [Bold, Heavy, Black]\n"
            "  - label: Italic\n"
            "    tag: i\n"
            "    patterns: Oblique\n"
        )

        vocab = load_vocabulary(config)

        assert vocab.labels == ("Bold", "Italic")
        assert vocab.definitions[0].patterns == ("Bold", "Heavy", "Black")
        assert vocab.definitions[1].patterns == ("Oblique",)

    def test_list_entry_missing_tag(self, tmp_path):
        config = tmp_path / "styles.yaml"
        config.write_text("styles:\n  - label: Bold\n")

        with pytest.raises(ValueError, match="'label' and 'tag'"):
            load_vocabulary(config)

    def test_mapping_with_non_string_tag(self, tmp_path):
        config = tmp_path / "styles.yaml"
        config.write_text("Bold:\n  tag: b\n")

        with pytest.raises(ValueError, match="label: tag"):
            load_vocabulary(config)
