"""Cue alignment — re-attach timing to wrapped subtitle fragments.

WHY: The wrapper re-tokenizes the *punctuated* transcript independently of
how the recognizer grouped and timed words. To time each wrapped line we
walk the recognizer's flat word timeline, consuming as many entries as
the line has words. The two word counts rarely agree exactly (punctuation
artifacts, merged or split tokens), so the walk has to absorb drift.

HOW: A single cursor starts at 0 and persists across all fragments of one
align() call. For each fragment: read the start time at the cursor,
advance the cursor by count_words(fragment), read the end time of the
entry just before the cursor. A lookup outside the timeline steps the
cursor back one entry at a time until it lands on a valid index.

RULES:
- Exactly one Cue per fragment, ids "1".."n" in fragment order
- Word counts use the fragment as wrapped, before dash removal
- Cue text has every "-" removed
- Backward stepping is the only recovery; an underflow below index 0
  raises AlignmentDriftError
- Empty fragments, or an empty timeline with fragments, raise
  MalformedInputError before any lookup
- Cursor state is local to one call; align() is reentrant
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Sequence, Tuple

from subtitle_segmenter.core.errors import AlignmentDriftError, MalformedInputError
from subtitle_segmenter.core.ir import Cue, TextFragment, Timeline
from subtitle_segmenter.core.text import count_words

logger = logging.getLogger(__name__)


def format_duration(seconds: float) -> str:
    """Format seconds as an untrimmed ``hh:mm:ss,mmm`` duration.

    Milliseconds are rounded half-up to the nearest millisecond. Hours
    are not wrapped at 24.

    Raises:
        ValueError: If seconds is negative.
    """
    if seconds < 0:
        raise ValueError("Cannot format a negative duration: {}".format(seconds))

    # Decimal of the repr, so 1.0005 rounds to 1001 ms rather than 1000
    total_ms = int((Decimal(str(seconds)) * 1000).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    secs, millis = divmod(rest, 1000)
    return "{:02d}:{:02d}:{:02d},{:03d}".format(hours, minutes, secs, millis)


def _resolve(timeline: Timeline, cursor: int, offset: int) -> Optional[int]:
    """Step the cursor back until ``cursor + offset`` indexes the timeline.

    Returns the (possibly decremented) cursor, or None when stepping back
    ran past the start of the timeline.
    """
    while cursor + offset >= len(timeline):
        cursor -= 1
    if cursor + offset < 0:
        return None
    return cursor


def _lookup(
    timeline: Timeline,
    cursor: int,
    offset: int,
    fragment_index: int,
) -> Tuple[int, int]:
    """Return ``(cursor, index)`` for a valid lookup at ``cursor + offset``.

    Raises:
        AlignmentDriftError: If no valid index remains.
    """
    resolved = _resolve(timeline, cursor, offset)
    if resolved is None:
        raise AlignmentDriftError(fragment_index, cursor + offset, len(timeline))
    if resolved != cursor:
        logger.debug(
            "Fragment %d: cursor drifted to %d, recovered to %d",
            fragment_index + 1, cursor, resolved,
        )
    return resolved, resolved + offset


def align(fragments: Sequence[TextFragment], timeline: Timeline) -> List[Cue]:
    """Produce one timed Cue per wrapped fragment.

    WHY: This is the heart of the engine — it turns untimed display lines
    into subtitle cues by mapping word counts onto recognizer timings.

    HOW: See the module docstring. Each out-of-range lookup steps the
    cursor back to the last available word, so a fragment sequence that
    overshoots the timeline reuses the last entry's times instead of
    failing.

    RULES:
    - start time: timeline[cursor].start_s
    - cursor += count_words(fragment)
    - end time: timeline[cursor - 1].end_s
    - Correctness target is display pacing, not exact word timing

    Args:
        fragments: Wrapped fragments from core.text.wrap().
        timeline: Flat word timeline from core.timeline.flatten().

    Returns:
        List of Cue objects, one per fragment, in order.

    Raises:
        MalformedInputError: If fragments is empty, or the timeline is
            empty while fragments are not.
        AlignmentDriftError: If cursor recovery underflows.
    """
    if not fragments:
        raise MalformedInputError("No text fragments to align")
    if not timeline:
        raise MalformedInputError(
            "Cannot align {} fragment(s) against an empty word timeline".format(len(fragments))
        )

    cues: List[Cue] = []
    cursor = 0
    recoveries = 0

    for i, fragment in enumerate(fragments):
        resolved, index = _lookup(timeline, cursor, 0, i)
        recoveries += resolved != cursor
        cursor = resolved
        start_time = format_duration(timeline[index].start_s)

        cursor += count_words(fragment)

        resolved, index = _lookup(timeline, cursor, -1, i)
        recoveries += resolved != cursor
        cursor = resolved
        end_time = format_duration(timeline[index].end_s)

        cues.append(Cue(
            id=str(i + 1),
            start_time=start_time,
            end_time=end_time,
            text=fragment.replace("-", ""),
        ))

    if recoveries:
        logger.warning(
            "Recovered from timeline drift %d time(s) aligning %d fragments to %d words",
            recoveries, len(fragments), len(timeline),
        )

    return cues
