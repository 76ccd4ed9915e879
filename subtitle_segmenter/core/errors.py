"""Exception types raised by the alignment engine and its readers.

WHY: Callers (CLI, tests, tooling) need to tell bad input apart from an
alignment that cannot be recovered, and both apart from network or file
errors, so each failure gets an actionable message.

RULES:
- MalformedInputError is also a ValueError so generic callers still catch it
- AlignmentDriftError is only raised when cursor recovery underflows
"""

from __future__ import annotations


class SegmenterError(Exception):
    """Base class for all subtitle segmenter errors."""


class MalformedInputError(SegmenterError, ValueError):
    """Raised for empty or structurally invalid engine input.

    Examples: a speech-events file that fails schema validation, an empty
    fragment list, or an empty timeline paired with non-empty fragments.
    """


class AlignmentDriftError(SegmenterError):
    """Raised when the aligner's cursor steps back past the timeline start.

    WHY: Backward stepping is the sanctioned recovery for drift. Running
    out of entries to step back to means the fragments and the timeline
    are fundamentally incompatible, and no cue can be timed.

    RULES:
    - fragment_index is the 0-based index of the fragment being aligned
    - cursor is the cursor value at the moment recovery gave up
    """

    def __init__(self, fragment_index: int, cursor: int, timeline_length: int) -> None:
        self.fragment_index = fragment_index
        self.cursor = cursor
        self.timeline_length = timeline_length
        super().__init__(
            f"Cannot align fragment {fragment_index + 1}: cursor {cursor} "
            f"underflowed a timeline of {timeline_length} words"
        )
