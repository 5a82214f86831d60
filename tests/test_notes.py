import json

import pytest

from notecraft.cli import main
from notecraft.core.errors import AIServiceError, EmptyContentError
from notecraft.modules.notes import NoteFormatter, detect_optional_sections

from .conftest import FakeClient

SECTIONS = [
    "## Summary",
    "## Key Points",
    "## Important Details",
    "## Notable Quotes",
    "## Tables",
    "## Conclusion",
]


class TestNoteFormatter:
    async def test_returns_response_verbatim(self):
        client = FakeClient(text="## Summary\n\nPlants **need** light.\n")
        out = await NoteFormatter(client).format("plants need light to grow")
        assert out == "## Summary\n\nPlants **need** light.\n"

    async def test_prompt_embeds_transcript_and_sections(self):
        client = FakeClient(text="notes")
        await NoteFormatter(client).format("the transcript body", language="Spanish")

        prompt = client.prompts[0]
        assert prompt.endswith("the transcript body")
        assert "in Spanish" in prompt
        positions = [prompt.index(s) for s in SECTIONS]
        assert positions == sorted(positions)

    async def test_auto_language_detection_instruction(self):
        client = FakeClient(text="notes")
        await NoteFormatter(client).format("some text")
        assert "Detect the language" in client.prompts[0]

    @pytest.mark.parametrize("raw", ["", "  \n "])
    async def test_empty_transcript(self, raw):
        client = FakeClient(text="notes")
        with pytest.raises(EmptyContentError, match="Empty transcript"):
            await NoteFormatter(client).format(raw)
        assert client.prompts == []

    async def test_ai_errors_propagate(self):
        client = FakeClient(error=AIServiceError("API error: down"))
        with pytest.raises(AIServiceError):
            await NoteFormatter(client).format("text")

    async def test_title_is_trimmed(self):
        client = FakeClient(text="  Photosynthesis Basics \n")
        assert await NoteFormatter(client).generate_title("text") == "Photosynthesis Basics"

    async def test_format_note_reports_sections(self):
        md = "## Summary\nText\n\n## Tables\n| a | b |\n|---|---|\n| 1 | 2 |\n"
        note = await NoteFormatter(FakeClient(text=md)).format_note("text")
        assert note.markdown == md
        assert note.has_tables
        assert not note.has_quotes


class TestOptionalSections:
    def test_quotes_detected(self):
        assert detect_optional_sections("> To be or not to be").has_quotes
        assert detect_optional_sections("## Notable Quotes\nNone").has_quotes

    def test_pipe_without_divider_is_not_a_table(self):
        assert not detect_optional_sections("| just a pipe |").has_tables


class TestCli:
    def test_quiz_command(self, capsys, sample_note):
        assert main(["quiz", "--text", sample_note, "--seed", "7"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["provenance"] == "algorithmic"
        assert len(data["items"]) >= 15

    def test_offline_flashcards(self, capsys, sample_note):
        assert main(["flashcards", "--text", sample_note, "--title", "Plants", "--offline"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["provenance"] == "algorithmic"
        assert all(card["front"] and card["back"] for card in data["items"])

    def test_empty_text_exits(self):
        with pytest.raises(SystemExit):
            main(["quiz", "--text", "   "])

    def test_file_input_with_source(self, capsys, tmp_path, sample_note):
        path = tmp_path / "note.txt"
        path.write_text(sample_note, encoding="utf-8")
        assert main(["quiz", "--file", str(path), "--source", "pdf", "--minimum", "20"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data["items"]) >= 20
