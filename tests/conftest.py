"""Shared test fixtures for the subtitle_segmenter test suite.

WHY: Several test modules need the same small speech-events payload and
the utterances/timeline built from it. Centralizing fixtures here avoids
duplication and keeps expected timings in one place.

RULES:
- Word timings are hand-picked round numbers so expected cue times are obvious
- The punctuated text matches the recognizer words one-for-one
"""

import json
from typing import Any, Dict, List

import pytest

from subtitle_segmenter.core.ir import TimedWord, Utterance


SAMPLE_SPEECH_EVENTS: List[Dict[str, Any]] = [
    {
        "text": "hello and welcome to the show ",
        "words": [
            ["hello", 0.5, 0.9],
            ["and", 1.0, 1.2],
            ["welcome", 1.2, 1.8],
            ["to", 1.8, 1.9],
            ["the", 1.9, 2.0],
            ["show", 2.0, 2.5],
        ],
    },
    {
        "text": "today we talk about well-known subtitles ",
        "words": [
            ["today", 3.0, 3.4],
            ["we", 3.5, 3.6],
            ["talk", 3.6, 3.9],
            ["about", 3.9, 4.2],
            ["well-known", 4.3, 4.9],
            ["subtitles", 5.0, 5.75],
        ],
    },
]

SAMPLE_PUNCTUATED = "Hello and welcome to the show. Today we talk about well-known subtitles."


@pytest.fixture
def sample_speech_events():
    """Raw speech-events payload as decoded from JSON."""
    return [dict(event, words=list(event["words"])) for event in SAMPLE_SPEECH_EVENTS]


@pytest.fixture
def sample_utterances():
    """Utterances built from SAMPLE_SPEECH_EVENTS."""
    return [
        Utterance(
            text=event["text"],
            words=[TimedWord(text=w[0], start_s=w[1], end_s=w[2]) for w in event["words"]],
        )
        for event in SAMPLE_SPEECH_EVENTS
    ]


@pytest.fixture
def abc_timeline():
    """Three one-second words: a [0,1], b [1,2], c [2,3]."""
    return [
        TimedWord(text="a", start_s=0.0, end_s=1.0),
        TimedWord(text="b", start_s=1.0, end_s=2.0),
        TimedWord(text="c", start_s=2.0, end_s=3.0),
    ]


@pytest.fixture
def speech_events_file(tmp_path, sample_speech_events):
    """The sample speech events written to talk.json in a temp dir."""
    path = tmp_path / "talk.json"
    path.write_text(json.dumps(sample_speech_events), encoding="utf-8")
    return path


@pytest.fixture
def sample_punctuated():
    """Punctuated text for SAMPLE_SPEECH_EVENTS, as a punctuation service returns it."""
    return SAMPLE_PUNCTUATED
