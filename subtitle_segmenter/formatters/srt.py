"""SubRip (SRT) formatter.

WHY: SRT is the subtitle container every player and editor accepts. The
aligner already produces SRT-style ids and ``hh:mm:ss,mmm`` times, so this
formatter only lays the cues out.

RULES:
- One block per cue: id line, "start --> end" line, text line
- Blocks are separated by a blank line; the file ends with a newline
- An empty cue list produces an empty string
- Cue times and text are written exactly as given
"""

from __future__ import annotations

from typing import List

from subtitle_segmenter.core.ir import Cue
from subtitle_segmenter.formatters.base import BaseFormatter, FormatterOutput


def cues_to_srt(cues: List[Cue]) -> str:
    """Serialize cues into SRT file content."""
    lines = []
    for cue in cues:
        lines.append(cue.id)
        lines.append("{} --> {}".format(cue.start_time, cue.end_time))
        lines.append(cue.text)
        lines.append("")
    return "\n".join(lines)


class SRTFormatter(BaseFormatter):
    """Formatter that produces a single ``.srt`` file."""

    @property
    def name(self) -> str:
        return "SubRip (SRT)"

    def format(self, cues: List[Cue]) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix=".srt",
                content=cues_to_srt(cues),
                media_type="application/x-subrip",
            )
        ]
