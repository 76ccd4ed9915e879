"""Speech-events file loading, schema validation, and transcript text.

WHY: The recognizer's output file is the only source of word timings. A
malformed file (missing words, swapped fields, strings for times) would
otherwise surface much later as a confusing alignment failure. Validating
up front with a JSON Schema gives a precise, actionable error.

HOW: parse_speech_events() validates the decoded JSON against
SPEECH_EVENTS_SCHEMA with jsonschema, then builds Utterance objects.
load_speech_events() adds file reading and JSON decoding.
build_transcript_text() joins the utterance texts into the raw transcript
that is sent to the punctuation service.

RULES:
- The file is a JSON array of {"text": str, "words": [...]} objects
- Each word is a [text, start, end] triple or a {text|word, start, end} object
- Times are non-negative numbers in seconds
- An empty array is rejected (there is nothing to segment)
- Schema and JSON errors are raised as MalformedInputError
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Union

import jsonschema

from subtitle_segmenter.core.errors import MalformedInputError
from subtitle_segmenter.core.ir import Utterance
from subtitle_segmenter.core.text import normalize_whitespace

_TIME = {"type": "number", "minimum": 0}

SPEECH_EVENTS_SCHEMA: dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Speech events",
    "type": "array",
    "items": {
        "type": "object",
        "required": ["text", "words"],
        "properties": {
            "text": {"type": "string"},
            "words": {
                "type": "array",
                "items": {
                    "oneOf": [
                        {
                            "type": "array",
                            "items": [{"type": "string"}, _TIME, _TIME],
                            "minItems": 3,
                            "maxItems": 3,
                        },
                        {
                            "type": "object",
                            "required": ["start", "end"],
                            "anyOf": [
                                {"required": ["text"]},
                                {"required": ["word"]},
                            ],
                            "properties": {
                                "text": {"type": "string"},
                                "word": {"type": "string"},
                                "start": _TIME,
                                "end": _TIME,
                            },
                        },
                    ]
                },
            },
        },
    },
}


def parse_speech_events(data: Any) -> List[Utterance]:
    """Validate decoded speech-events JSON and build Utterance objects.

    Raises:
        MalformedInputError: If the data fails schema validation, is
            empty, or contains a word that ends before it starts.
    """
    try:
        jsonschema.validate(instance=data, schema=SPEECH_EVENTS_SCHEMA)
    except jsonschema.ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise MalformedInputError(
            "Invalid speech events at {}: {}".format(location, e.message)
        ) from e

    if not data:
        raise MalformedInputError("Speech events file contains no speech events")

    return [Utterance.from_dict(event) for event in data]


def load_speech_events(path: Union[str, Path]) -> List[Utterance]:
    """Read, decode, and validate a speech-events JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        MalformedInputError: If the file is not valid speech-events JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedInputError("{} is not valid JSON: {}".format(path, e)) from e
    return parse_speech_events(data)


def build_transcript_text(utterances: List[Utterance]) -> str:
    """Join utterance texts into one whitespace-normalized transcript."""
    return normalize_whitespace(" ".join(u.text for u in utterances))
