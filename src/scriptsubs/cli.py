"""Command line interface for scriptsubs."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, Sequence

from .config import (
    HOURS_POLICIES,
    PipelineConfig,
    apply_overrides,
    load_abbreviations,
    load_config,
    validate_config,
)
from .errors import SubtitleError
from .logging import configure_logging, get_logger
from .pipeline import SubtitlePipeline

LOGGER = get_logger("cli")


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number of seconds, got {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError("length must be a positive number of seconds")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scriptsubs", description="Narration transcript to SRT")
    parser.add_argument("--version", action="version", version="scriptsubs 0.3.0")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Build subtitles from a transcript")
    generate.add_argument("transcript", type=Path, help="Path to the plain-text transcript")
    generate.add_argument("--length", type=_positive_int, required=True, help="Video length in seconds")
    generate.add_argument("--abbr", type=Path, default=None, help="CSV file of abbreviations")
    generate.add_argument("--config", type=Path, default=None)
    generate.add_argument("--output", type=Path, default=None)
    generate.add_argument("--max-words", type=int, dest="max_words")
    generate.add_argument("--min-words", type=int, dest="min_words")
    generate.add_argument("--sorted-abbreviations", action="store_true")
    generate.add_argument("--strict-abbreviations", action="store_true")
    generate.add_argument("--hours", choices=list(HOURS_POLICIES))
    generate.add_argument("-v", "--verbose", action="store_true")
    generate.add_argument("-q", "--quiet", action="store_true")
    return parser


def _apply_cli_overrides(config: PipelineConfig, args: argparse.Namespace) -> PipelineConfig:
    overrides: Dict[str, Any] = {}
    if args.max_words is not None:
        overrides.setdefault("chunking", {})["max_words"] = args.max_words
    if args.min_words is not None:
        overrides.setdefault("chunking", {})["min_words"] = args.min_words
    if args.sorted_abbreviations:
        overrides.setdefault("abbreviations", {})["order"] = "sorted"
    if args.strict_abbreviations:
        overrides.setdefault("abbreviations", {})["strict"] = True
    if args.abbr:
        overrides.setdefault("abbreviations", {})["table_file"] = args.abbr
    if args.hours:
        overrides.setdefault("timecode", {})["hours"] = args.hours
    if overrides:
        config = apply_overrides(config, overrides)
    return config


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=getattr(args, "verbose", False), quiet=getattr(args, "quiet", False))

    if args.command == "generate":
        config = PipelineConfig()
        if args.config is not None:
            if not args.config.exists():
                raise FileNotFoundError(f"Configuration file not found: {args.config}")
            config = load_config(args.config)
        config = _apply_cli_overrides(config, args)
        try:
            validate_config(config)
        except ValueError as exc:
            LOGGER.error("Configuration error: %s", exc)
            return 1

        try:
            abbreviations = load_abbreviations(config.abbreviations.table_file)
        except (FileNotFoundError, ValueError) as exc:
            LOGGER.error("Abbreviation error: %s", exc)
            return 1
        if not args.transcript.exists():
            LOGGER.error("Transcript not found: %s", args.transcript)
            return 1
        with args.transcript.open("r", encoding="utf-8") as handle:
            transcript = handle.read()

        pipeline = SubtitlePipeline(config, abbreviations)
        target = args.output
        if target is None and config.paths.output_dir is not None:
            target = config.paths.output_dir / f"{args.transcript.stem}.srt"
        try:
            if target is None:
                sys.stdout.write(pipeline.run(transcript, args.length))
            else:
                pipeline.write(transcript, args.length, target)
                LOGGER.info("Generated %s", target)
        except SubtitleError as exc:
            LOGGER.error("%s", exc)
            return 1
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
