"""Intermediate representation dataclasses for the alignment engine.

WHY: The speech-events file is loosely shaped JSON (word timings as
``[text, start, end]`` triples). The engine and formatters need a single,
well-typed form for words, utterances, and output cues, decoupling
parsing from alignment and alignment from serialization.

HOW: Three dataclasses and two aliases:
  TimedWord    — one recognized word with start/end seconds
  Utterance    — a recognizer utterance: its text plus its TimedWords
  Cue          — one output subtitle: id, formatted times, text
  Timeline     — list[TimedWord], built by core.timeline.flatten
  TextFragment — str, one wrapped subtitle line without timing

RULES:
- All times on TimedWord are float seconds
- TimedWord and Cue are frozen once created
- Cue times are already formatted ("hh:mm:ss,mmm"); formatters never re-time
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

from subtitle_segmenter.core.errors import MalformedInputError


@dataclass(frozen=True)
class TimedWord:
    """A single recognized word with its timing.

    RULES:
    - start_s / end_s: float seconds, inclusive
    - end_s >= start_s (checked on construction)
    """

    text: str
    start_s: float
    end_s: float

    def __post_init__(self) -> None:
        if self.end_s < self.start_s:
            raise MalformedInputError(
                "Word {!r} ends ({}) before it starts ({})".format(
                    self.text, self.end_s, self.start_s
                )
            )

    @classmethod
    def from_raw(cls, raw: Any) -> TimedWord:
        """Parse a word from a speech-events entry.

        WHY: Recognizer output stores words as ``["hello", 0.12, 0.48]``
        triples; hand-edited or converted files often use objects instead.

        HOW: Accepts a 3-item sequence or a dict with ``text`` (or
        ``word``), ``start`` and ``end`` keys.

        RULES:
        - Raises MalformedInputError for any other shape
        """
        if isinstance(raw, dict):
            text = raw.get("text", raw.get("word"))
            if text is None or "start" not in raw or "end" not in raw:
                raise MalformedInputError("Word object is missing text/start/end: {!r}".format(raw))
            return cls(text=str(text), start_s=float(raw["start"]), end_s=float(raw["end"]))

        if isinstance(raw, (list, tuple)) and len(raw) == 3:
            return cls(text=str(raw[0]), start_s=float(raw[1]), end_s=float(raw[2]))

        raise MalformedInputError("Unrecognized word entry: {!r}".format(raw))


@dataclass
class Utterance:
    """A contiguous span of recognized speech: its text and timed words."""

    text: str
    words: List[TimedWord] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> Utterance:
        """Parse one speech event (``{"text": ..., "words": [...]}``)."""
        return cls(
            text=data.get("text", ""),
            words=[TimedWord.from_raw(w) for w in data.get("words", [])],
        )


Timeline = List[TimedWord]
TextFragment = str


@dataclass(frozen=True)
class Cue:
    """One timed subtitle entry, created once per wrapped fragment.

    RULES:
    - id: 1-based sequence number as a decimal string
    - start_time / end_time: "hh:mm:ss,mmm" strings
    - text: the wrapped fragment with every "-" removed
    """

    id: str
    start_time: str
    end_time: str
    text: str

    def to_dict(self) -> dict:
        """Return the ``{id, startTime, endTime, text}`` shape used by subtitle JSON tools."""
        return {
            "id": self.id,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "text": self.text,
        }
