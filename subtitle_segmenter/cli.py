"""Command-line interface for the Segmented Subtitle Generator.

WHY: Users need a simple way to turn a recognizer's speech-events file
into a subtitle file from the terminal. The CLI wires together the full
pipeline — speech-events loading, remote punctuation, alignment, pluggable
formatter output, and file saving — behind a single command.

HOW: Uses argparse for the input file, the optional source language and
punctuation service id, and output options. Runs the async pipeline via
asyncio.run(). Status messages go to stderr; output files are saved next
to the input (or to --output-dir).

RULES:
- Positionals: FILE [SOURCE] [SERVICE]; SOURCE defaults to "en", SERVICE to 0
- Only English is supported; any other SOURCE exits with status 1
- SERVICE must be a known punctuation service id (0 or 1)
- --punctuated-text skips the remote service entirely
- Output naming: {stem}{suffix}, numeric suffix for conflicts (talk-2.srt)
- Status output goes to stderr (not stdout)
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from subtitle_segmenter.api.client import PunctuationClient
from subtitle_segmenter.config import (
    DEFAULT_MAX_WIDTH,
    DEFAULT_SERVICE_ID,
    DEFAULT_SOURCE_LANGUAGE,
    PUNCTUATION_SERVICES,
    SUPPORTED_SOURCE_LANGUAGES,
)
from subtitle_segmenter.core.events import build_transcript_text, load_speech_events
from subtitle_segmenter.core.pipeline import segment_transcript
from subtitle_segmenter.formatters import FORMATTERS
from subtitle_segmenter.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding a numeric suffix on conflict.

    WHY: Users may run the segmenter several times on the same file.
    Overwriting previous output would lose hand edits.

    RULES:
    - First attempt: {stem}{suffix} (e.g. talk.srt)
    - Conflict: insert "-N" before the extension (talk-2.srt, talk-cues-2.json)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    dot_idx = suffix.rfind(".")
    if dot_idx >= 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(output: FormatterOutput, stem: str, output_dir: Path) -> Path:
    """Write one formatter output as UTF-8 and return where it went."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    _status("Failed to segment subtitles")
    sys.exit(1)


def _parse_service_id(raw: str) -> int:
    try:
        service_id = int(raw)
    except ValueError:
        service_id = -1
    if service_id not in PUNCTUATION_SERVICES:
        _fail("Need input proper segmentation service id (one of: {})".format(
            ", ".join(str(k) for k in sorted(PUNCTUATION_SERVICES))
        ))
    return service_id


async def _punctuate(transcript: str, service_id: int) -> str:
    async with PunctuationClient(service_id=service_id) as client:
        _status("Segmenting subtitles via {}...".format(client.url))
        return await client.punctuate(transcript, on_status=_status)


async def _run_pipeline(args: argparse.Namespace) -> None:
    """Execute the full segmentation pipeline.

    RULES:
    - Validate language, service id, formats and paths before any network call
    - Status messages to stderr at each step
    - Save each formatter's output files with conflict avoidance
    """
    if args.source not in SUPPORTED_SOURCE_LANGUAGES:
        _fail("Only English segmentation is currently supported")

    service_id = _parse_service_id(args.service)

    input_path = Path(args.input_file).resolve()
    if not input_path.is_file():
        _fail("File not found: {}".format(input_path))

    output_dir = Path(args.output_dir).resolve() if args.output_dir else input_path.parent
    if not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    format_keys = [f.strip() for f in args.formats.split(",") if f.strip()]
    for key in format_keys:
        if key not in FORMATTERS:
            _fail("Unknown format '{}'. Available formats: {}".format(
                key, ", ".join(sorted(FORMATTERS.keys()))
            ))

    _status("Reading speech events from {}...".format(input_path.name))
    utterances = load_speech_events(input_path)
    _status("  {} utterances".format(len(utterances)))

    if args.punctuated_text:
        _status("Using punctuated text from {}".format(args.punctuated_text))
        punctuated = Path(args.punctuated_text).read_text(encoding="utf-8")
    else:
        punctuated = await _punctuate(build_transcript_text(utterances), service_id)

    cues = segment_transcript(utterances, punctuated, args.max_width)
    _status("  {} cues".format(len(cues)))

    for key in format_keys:
        formatter = FORMATTERS[key]()
        for output in formatter.format(cues):
            saved_path = _save_output(output, input_path.stem, output_dir)
            _status("  Saved: {}".format(saved_path.name))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="subtitle_segmenter",
        description="Re-segment a word-timed speech-events file into "
                    "width-bounded, punctuated subtitles.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the speech events JSON file.",
    )

    parser.add_argument(
        "source",
        nargs="?",
        default=DEFAULT_SOURCE_LANGUAGE,
        help="BCP source language code (default: %(default)s; only 'en' is supported).",
    )

    parser.add_argument(
        "service",
        nargs="?",
        default=str(DEFAULT_SERVICE_ID),
        help="Punctuation service id: {} (default: %(default)s).".format(
            ", ".join("{}: {}".format(k, v) for k, v in sorted(PUNCTUATION_SERVICES.items()))
        ),
    )

    parser.add_argument(
        "--max-width",
        type=int,
        default=DEFAULT_MAX_WIDTH,
        help="Maximum subtitle line width in characters (default: %(default)s).",
    )

    parser.add_argument(
        "--formats",
        default="srt",
        help="Comma-separated list of output formats. "
             "Available: {}. Default: %(default)s.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as input file).",
    )

    parser.add_argument(
        "--punctuated-text",
        default=None,
        help="Path to already-punctuated transcript text; skips the punctuation service.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log alignment details to stderr.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        asyncio.run(_run_pipeline(args))
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)
    except SystemExit:
        raise
    except Exception as e:
        logger.debug("Pipeline failed", exc_info=True)
        _status("Error: {}".format(e))
        _status("Failed to segment subtitles")
        sys.exit(1)

    _status("Segmented subtitle file created")


if __name__ == "__main__":
    main()
