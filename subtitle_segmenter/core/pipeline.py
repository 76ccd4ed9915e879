"""Alignment pipeline — utterances plus punctuated text into cues.

WHY: Callers (CLI, tooling, tests) should not have to remember the order
of the engine stages. This module wires flatten → wrap → align behind one
function and logs the counts that explain drift when it happens.

RULES:
- Empty utterances are rejected before any engine stage runs
- max_width defaults to config.DEFAULT_MAX_WIDTH
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from subtitle_segmenter.config import DEFAULT_MAX_WIDTH
from subtitle_segmenter.core.aligner import align
from subtitle_segmenter.core.errors import MalformedInputError
from subtitle_segmenter.core.ir import Cue, Utterance
from subtitle_segmenter.core.text import count_words, wrap
from subtitle_segmenter.core.timeline import flatten

logger = logging.getLogger(__name__)


def segment_transcript(
    utterances: Sequence[Utterance],
    punctuated_text: str,
    max_width: Optional[int] = None,
) -> List[Cue]:
    """Re-segment a punctuated transcript into timed cues.

    Args:
        utterances: Parsed speech events, in recognition order.
        punctuated_text: The transcript after punctuation/segmentation.
        max_width: Maximum cue width in characters.

    Returns:
        One Cue per wrapped fragment.

    Raises:
        MalformedInputError: If utterances is empty, or alignment input
            is malformed.
        AlignmentDriftError: If alignment cannot recover from drift.
    """
    if not utterances:
        raise MalformedInputError("No utterances to segment")

    width = DEFAULT_MAX_WIDTH if max_width is None else max_width
    fragments = wrap(punctuated_text, width)
    timeline = flatten(utterances)

    logger.info(
        "Aligning %d fragments (%d words) to a timeline of %d words",
        len(fragments),
        sum(count_words(f) for f in fragments),
        len(timeline),
    )
    return align(fragments, timeline)
