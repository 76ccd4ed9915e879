"""Core alignment engine and intermediate representation.

WHY: The core package is the stable heart of the segmenter — the IR
dataclasses and the four engine stages. Readers, the punctuation client,
formatters and the CLI all build on these.

HOW: ir.py defines the data structures, timeline.py flattens utterances,
text.py counts and wraps words, aligner.py times the wrapped fragments,
events.py reads speech-events files, pipeline.py wires it all together.

RULES:
- No network I/O in this package; events.py is the only file reader
- Engine functions raise; the CLI decides what an error means to the user
"""

from subtitle_segmenter.core.aligner import align, format_duration
from subtitle_segmenter.core.errors import (
    AlignmentDriftError,
    MalformedInputError,
    SegmenterError,
)
from subtitle_segmenter.core.ir import Cue, TextFragment, Timeline, TimedWord, Utterance
from subtitle_segmenter.core.text import count_words, normalize_whitespace, wrap
from subtitle_segmenter.core.timeline import flatten

__all__ = [
    "AlignmentDriftError",
    "Cue",
    "MalformedInputError",
    "SegmenterError",
    "TextFragment",
    "TimedWord",
    "Timeline",
    "Utterance",
    "align",
    "count_words",
    "flatten",
    "format_duration",
    "normalize_whitespace",
    "wrap",
]
