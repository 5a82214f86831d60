from __future__ import annotations

import argparse
import asyncio
import json
import random
from pathlib import Path

from notecraft.core.errors import NotecraftError
from notecraft.core.logging import get_logger, setup_logging
from notecraft.modules.ai.client import AIArtifactClient
from notecraft.modules.flashcards.generator import FlashcardSynthesizer
from notecraft.modules.notes.formatter import NoteFormatter
from notecraft.modules.quiz.generator import QuizSynthesizer
from notecraft.modules.text.models import ContentSource, RawContent


logger = get_logger(__name__)


def _load_content(args: argparse.Namespace) -> RawContent:
    if args.text and args.file:
        raise SystemExit("Provide either --text or --file, not both")
    if args.file:
        text = Path(args.file).read_text(encoding="utf-8")
    elif args.text:
        text = args.text
    else:
        raise SystemExit("--text or --file is required")
    return RawContent(text=text, source=ContentSource(args.source))


def _add_source(p: argparse.ArgumentParser) -> None:
    p.add_argument("--text", "-t", help="Note text")
    p.add_argument("--file", help="Path to a file containing the note text")
    p.add_argument(
        "--source",
        choices=[s.value for s in ContentSource],
        default=ContentSource.TEXT.value,
        help="Where the text was extracted from",
    )


def _print_json(result) -> None:
    print(json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="notecraft", description="Study artifact generator CLI"
    )
    parser.add_argument("--log-level", default=None, help="Logging level")
    sub = parser.add_subparsers(dest="cmd", required=True)

    q = sub.add_parser("quiz", help="Generate quiz questions from note text")
    _add_source(q)
    q.add_argument("--minimum", type=int, default=None, help="Minimum question count")
    q.add_argument("--seed", type=int, default=None, help="Seed for shuffling")

    f = sub.add_parser("flashcards", help="Generate flashcards from note text")
    _add_source(f)
    f.add_argument("--title", default="", help="Note title")
    f.add_argument("--minimum", type=int, default=None, help="Minimum card count")
    f.add_argument(
        "--offline", action="store_true", help="Skip the AI tier entirely"
    )

    n = sub.add_parser("format", help="Format a transcript into markdown notes")
    _add_source(n)
    n.add_argument("--language", default=None, help="Output language")

    t = sub.add_parser("title", help="Generate a title for a transcript")
    _add_source(t)
    t.add_argument("--language", default=None, help="Output language")

    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    content = _load_content(args)
    text = content.text
    logger.debug(
        "Loaded %d characters", len(text), extra={"source": content.source.value}
    )

    try:
        if args.cmd == "quiz":
            rng = random.Random(args.seed) if args.seed is not None else None
            _print_json(QuizSynthesizer(rng=rng).generate_quiz(text, args.minimum))
            return 0
        if args.cmd == "flashcards":
            client = None if args.offline else AIArtifactClient()
            svc = FlashcardSynthesizer(client)
            _print_json(
                asyncio.run(svc.generate_flashcards(text, args.title, args.minimum))
            )
            return 0
        if args.cmd == "format":
            formatter = NoteFormatter(AIArtifactClient())
            print(asyncio.run(formatter.format(text, args.language)))
            return 0
        if args.cmd == "title":
            formatter = NoteFormatter(AIArtifactClient())
            print(asyncio.run(formatter.generate_title(text, args.language)))
            return 0
    except NotecraftError as e:
        raise SystemExit(f"error: {e}")

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
