import pytest
from pydantic import ValidationError

from notecraft.core.config import GenerationSettings
from notecraft.modules.text import markdown
from notecraft.modules.text.analyzer import ContentAnalyzer, analyze, analyze_text
from notecraft.modules.text.models import ContentSource, Definition, RawContent
from notecraft.modules.text.normalizer import (
    normalize,
    strip_punctuation,
    split_paragraphs,
    split_sentences,
)


class TestNormalizer:
    def test_lines_are_trimmed_and_empties_dropped(self):
        raw = "  first line  \n\n\t\nsecond line\r\n   third\n"
        assert normalize(raw).lines == ["first line", "second line", "third"]

    def test_empty_input(self):
        assert normalize("").lines == []
        assert normalize("   \n  ").lines == []

    def test_paragraphs_split_on_blank_lines(self):
        raw = "One.\nStill one.\n\nTwo.\n   \nThree."
        assert split_paragraphs(raw) == ["One.\nStill one.", "Two.", "Three."]

    def test_sentences_collapse_whitespace(self):
        raw = "Plants grow.  They need\nwater. ."
        assert split_sentences(raw) == ["Plants grow", "They need water"]


class TestMarkdownStrip:
    def test_headers_and_list_markers(self):
        assert markdown.strip("## Title\n- item") == "Title\nitem"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("**Bold** and *italic* and ***both***", "Bold and italic and both"),
            ("Use `code` here", "Use code here"),
            ("> quoted text", "quoted text"),
            ("1. First step\n2. Second step", "First step\nSecond step"),
            ("### Details", "Details"),
            ("See [the docs](https://example.com/a_b)", "See the docs"),
            ("See <https://example.com>", "See https://example.com"),
            ("__strong__ and _soft_", "strong and soft"),
            ("```python\nprint(1)\n```\nAfter", "After"),
            ("* starred item", "starred item"),
            ("> > nested quote", "nested quote"),
            ("- - item", "item"),
            ("1. 2. x", "x"),
            ("> - quoted item", "quoted item"),
            ("[a] and [b](https://example.com)", "[a] and b"),
        ],
    )
    def test_strips_markdown_syntax(self, text, expected):
        assert markdown.strip(text) == expected

    def test_horizontal_rule_removed(self):
        out = markdown.strip("Intro\n\n---\n\nOutro")
        assert "---" not in out
        assert out.startswith("Intro") and out.endswith("Outro")

    def test_blanks_and_identifiers_survive(self):
        text = "Fill in the blank: plants _____ light"
        assert markdown.strip(text) == text
        assert markdown.strip("call snake_case_name now") == "call snake_case_name now"

    def test_collapses_space_runs_and_trims(self):
        assert markdown.strip("  too    many \t spaces  ") == "too many spaces"

    def test_none_and_empty(self):
        assert markdown.strip("") == ""
        assert markdown.strip(None) == ""

    @pytest.mark.parametrize(
        "text",
        [
            "## Title\n- item",
            "**Bold** and *italic* and ***both***",
            "- **Term**: a definition with `code`",
            "Intro\n\n---\n\nOutro",
            "See <https://example.com>",
            "> **quoted** _text_",
            "Fill in the blank: plants _____ light",
            "> > nested quote",
            "- - item\n1. 2. x",
        ],
    )
    def test_idempotent(self, text):
        once = markdown.strip(text)
        assert markdown.strip(once) == once


class TestDefinitions:
    def test_term_definition_line(self):
        result = analyze(["Photosynthesis: process by which plants convert light to energy"])
        assert result.definitions == [
            Definition(
                term="Photosynthesis",
                definition="process by which plants convert light to energy",
            )
        ]

    def test_splits_on_first_colon_only(self):
        result = analyze(["Meeting time: 10:30 am"])
        assert result.definitions == [Definition(term="Meeting time", definition="10:30 am")]

    def test_bullet_marker_removed_from_term(self):
        result = analyze(["- Osmosis: movement of water across a membrane"])
        assert result.definitions[0].term == "Osmosis"

    @pytest.mark.parametrize(
        "line",
        [
            "Note:",
            ": orphan definition",
            "x" * 50 + ": too long a term",
            "Term: " + "y" * 100,
        ],
    )
    def test_rejected_lines(self, line):
        assert analyze([line]).definitions == []


class TestBulletsAndPhrases:
    def test_bullet_markers(self):
        lines = ["- dash item", "• dot item", "* star item", "1. numbered item", "**bold line**"]
        assert analyze(lines).bullet_points == [
            "dash item",
            "dot item",
            "star item",
            "numbered item",
        ]

    def test_long_bullets_rejected(self):
        assert analyze(["- " + "word " * 30]).bullet_points == []

    def test_key_phrases_exclude_bullets_and_definitions(self):
        lines = [
            "- a bullet point",
            "Term: its definition",
            "Short",
            "Hey",
            "A plain line of note text",
            "z" * 81,
        ]
        assert analyze(lines).key_phrases == ["Short", "A plain line of note text"]


class TestKeyTerms:
    def test_frequency_and_normalization(self):
        lines = ["Energy flows. Energy, energy!", "Plants need water; plants grow", "water"]
        terms = analyze(lines).key_terms
        assert terms[0] == "energy"
        assert set(terms) == {"energy", "plants", "water"}

    def test_limited_to_top_twenty(self):
        words = [f"term{i:02d}" for i in range(25)]
        lines = [" ".join(words), " ".join(words)]
        assert len(analyze(lines).key_terms) == 20

    def test_custom_settings(self):
        analyzer = ContentAnalyzer(GenerationSettings(key_term_min_frequency=1))
        assert analyzer.extract_key_terms(["single mention"]) == ["single", "mention"]


class TestAnalyzeText:
    def test_deterministic(self, sample_note):
        assert analyze_text(sample_note) == analyze_text(sample_note)

    def test_sample_note_signal(self, sample_note):
        result = analyze_text(sample_note)
        assert [d.term for d in result.definitions] == ["Chlorophyll", "Glucose", "Stomata"]
        assert len(result.bullet_points) == 3
        assert len(result.paragraphs) == 5
        assert "photosynthesis" in result.key_terms
        assert result.topics[0] == (
            "Photosynthesis is the process plants use to turn light into chemical energy"
        )

    def test_is_short(self):
        analyzer = ContentAnalyzer()
        assert analyzer.is_short("Hi")
        assert not analyzer.is_short("x" * 100)


class TestRawContent:
    def test_defaults_and_frozen(self):
        content = RawContent(text="Lecture transcript")
        assert content.source == ContentSource.TEXT
        with pytest.raises(ValidationError):
            content.text = "changed"

    def test_source_from_string(self):
        assert RawContent(text="x", source="pdf").source == ContentSource.PDF


class TestUnicodePunctuation:
    @pytest.mark.parametrize(
        "token,expected",
        [
            ("¿Cuándo", "Cuándo"),
            ("¡Hola!", "Hola"),
            ("„Zitat“", "Zitat"),
            ("·punto·", "punto"),
            ("$100", "100"),
            ("don't", "don't"),
            ("...", ""),
        ],
    )
    def test_strip_punctuation(self, token, expected):
        assert strip_punctuation(token) == expected

    def test_inverted_marks_do_not_split_key_terms(self):
        terms = analyze(["¿Cuándo llega? Cuándo vuelve", "¡Hola! Hola amigos"]).key_terms
        assert set(terms) == {"cuándo", "hola"}
