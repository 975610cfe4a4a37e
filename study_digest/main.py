"""Command-line entry point for the study document summarizer."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from .config import SummarizerConfig
from .errors import SummarizerError
from .history import SummaryHistoryStore
from .pdf_loader import DocumentLoader, join_pages
from .summarizer import DocumentSummarizer

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_FILE = Path("data/summary_history.json")


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Study document summarizer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline progress.")
    parser.add_argument("--history-file", type=Path, default=DEFAULT_HISTORY_FILE, help="JSON file storing recent summaries.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    summarize = subparsers.add_parser("summarize", help="Summarize a PDF, Markdown, or text file.")
    summarize.add_argument("path", type=Path, help="File to summarize.")
    summarize.add_argument("--mode", choices=["basic", "enhanced", "both"], default="basic", help="Scoring strategy.")
    summarize.add_argument("--summary-dir", type=Path, default=None, help="Also write the result to <summary-dir>/<stem>.json.")
    summarize.add_argument("--no-history", action="store_true", help="Do not record this run in the history file.")
    summarize.add_argument("--scan-cap", type=int, default=500, help="Maximum number of sentences to score.")
    summarize.add_argument("--keywords", type=int, default=10, help="Number of keywords to report.")
    summarize.add_argument("--key-points", type=int, default=8, help="Maximum number of key points.")
    summarize.add_argument("--topics", type=int, default=5, help="Maximum number of topics.")
    summarize.add_argument("--overview-sentences", type=int, default=5, help="Sentences in the basic overview.")

    history = subparsers.add_parser("history", help="Inspect stored summaries.")
    history_sub = history.add_subparsers(dest="history_command", required=True)
    history_sub.add_parser("list", help="List stored summaries, most recent last.")
    show = history_sub.add_parser("show", help="Print one stored summary.")
    show.add_argument("id", type=str, help="Entry id.")
    delete = history_sub.add_parser("delete", help="Delete one stored summary.")
    delete.add_argument("id", type=str, help="Entry id.")

    return parser.parse_args(argv)


def run_summarize(args: argparse.Namespace) -> int:
    try:
        config = dataclasses.replace(
            SummarizerConfig(),
            sentence_scan_cap=args.scan_cap,
            keyword_count=args.keywords,
            key_point_count=args.key_points,
            topic_count=args.topics,
            overview_sentence_count=args.overview_sentences,
        )
    except ValueError as exc:
        print(f"Invalid option: {exc}", file=sys.stderr)
        return 2
    summarizer = DocumentSummarizer(config)

    def report(stage: str, percent: int) -> None:
        logger.info("%3d%% %s", percent, stage)

    try:
        pages = DocumentLoader(args.path).load(progress=report)
        text = join_pages(pages)
        basic = summarizer.summarize(text, progress=report) if args.mode in ("basic", "both") else None
        enhanced = summarizer.summarize_enhanced(text, progress=report) if args.mode in ("enhanced", "both") else None
    except SummarizerError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    payload: Dict[str, Any] = {"source": args.path.name}
    if basic is not None:
        payload["basic"] = basic.to_dict()
    if enhanced is not None:
        payload["enhanced"] = enhanced.to_dict()
    print(json.dumps(payload, indent=2, ensure_ascii=False))

    if args.summary_dir is not None:
        _save_summary(payload, args.summary_dir / f"{args.path.stem}.json")

    if not args.no_history:
        store = SummaryHistoryStore(args.history_file)
        try:
            entry = store.save(
                args.path.name,
                payload.get("basic"),
                payload.get("enhanced"),
            )
            logger.info("Recorded summary %s in %s", entry.id, args.history_file)
        except OSError as exc:
            logger.warning("Failed to record summary history: %s", exc)
    return 0


def run_history(args: argparse.Namespace) -> int:
    store = SummaryHistoryStore(args.history_file)
    if args.history_command == "list":
        for entry in store.entries():
            print(f"{entry.id}  {entry.date}  {entry.file_name}")
        return 0
    if args.history_command == "show":
        entry = store.load(args.id)
        if entry is None:
            print(f"No stored summary with id {args.id}", file=sys.stderr)
            return 1
        print(json.dumps(entry.model_dump(), indent=2, ensure_ascii=False))
        return 0
    if args.history_command == "delete":
        if not store.delete(args.id):
            print(f"No stored summary with id {args.id}", file=sys.stderr)
            return 1
        print(f"Deleted {args.id}")
        return 0
    raise ValueError(f"Unknown history command: {args.history_command}")


def _save_summary(payload: Dict[str, Any], output_path: Path) -> None:
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    except OSError as exc:
        print(f"Failed to write summary file: {exc}", file=sys.stderr)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        format="%(asctime)s %(levelname)s:%(message)s",
        level=logging.INFO if args.verbose else logging.WARNING,
    )
    if args.command == "summarize":
        return run_summarize(args)
    if args.command == "history":
        return run_history(args)
    raise ValueError(f"Unknown command: {args.command}")


if __name__ == "__main__":
    sys.exit(main())
