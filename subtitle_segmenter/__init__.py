"""Segmented Subtitle Generator — re-segment timed transcripts into subtitles.

WHY: Speech recognizers emit word timings grouped into utterances whose
boundaries rarely match readable subtitle lines. This package re-wraps the
punctuated transcript into width-bounded lines and re-attaches timing from
the recognizer's word timeline, producing SRT-ready cues.

HOW: Three-stage pipeline — read (speech events file + punctuation
service), align (core engine: flatten, wrap, align), format (pluggable
cue formatters). Each stage is independently testable.

RULES:
- The core engine is pure: no I/O, no shared state between calls
- All formatters consume the same list of Cue objects
- English only; other source languages are rejected at the CLI
"""

__version__ = "0.1.0"
