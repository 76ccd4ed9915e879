"""JSON cue dump formatter.

WHY: When cue timing looks wrong it helps to inspect the aligner's output
directly, or to feed it to other subtitle tooling that reads the
``{id, startTime, endTime, text}`` cue shape.

RULES:
- Output is a JSON array of Cue.to_dict() objects, in cue order
- Non-ASCII text is written as-is (ensure_ascii=False)
"""

from __future__ import annotations

import json
from typing import List

from subtitle_segmenter.core.ir import Cue
from subtitle_segmenter.formatters.base import BaseFormatter, FormatterOutput


class CueJSONFormatter(BaseFormatter):
    """Formatter that dumps cues as ``-cues.json``."""

    @property
    def name(self) -> str:
        return "Cue JSON"

    def format(self, cues: List[Cue]) -> List[FormatterOutput]:
        content = json.dumps([cue.to_dict() for cue in cues], indent=2, ensure_ascii=False)
        return [
            FormatterOutput(
                suffix="-cues.json",
                content=content,
                media_type="application/json",
            )
        ]
