"""Timeline flattening — per-utterance word timings into one sequence.

WHY: The recognizer groups words by utterance, but the aligner walks a
single cursor across the whole transcript. It needs one flat, randomly
indexable list of words.

RULES:
- Utterance order and in-utterance word order are preserved exactly
- Timestamps are not checked for monotonicity across utterances
- Empty input gives an empty timeline; no error conditions
"""

from __future__ import annotations

from typing import Iterable

from subtitle_segmenter.core.ir import Timeline, Utterance


def flatten(utterances: Iterable[Utterance]) -> Timeline:
    """Concatenate each utterance's words, in input order, into a timeline."""
    timeline: Timeline = []
    for utterance in utterances:
        timeline.extend(utterance.words)
    return timeline
