"""Unit tests for speech-events loading and the alignment pipeline.

WHY: A malformed speech-events file must fail with a message that points
at the bad entry, not as an obscure alignment error later on. The
pipeline must wire the engine stages in the right order.

HOW: Tests validate good and bad payloads against the schema, load files
from tmp_path, build the transcript text, and run segment_transcript on
the shared sample.

RULES:
- All file I/O tests use tmp_path fixtures for isolation
"""

import pytest

from subtitle_segmenter.core.events import (
    build_transcript_text,
    load_speech_events,
    parse_speech_events,
)
from subtitle_segmenter.core.errors import MalformedInputError
from subtitle_segmenter.core.pipeline import segment_transcript


class TestParseSpeechEvents:

    def test_parses_sample(self, sample_speech_events, sample_utterances):
        assert parse_speech_events(sample_speech_events) == sample_utterances

    def test_accepts_word_objects(self):
        data = [{"text": "hi there", "words": [
            {"text": "hi", "start": 0, "end": 0.4},
            {"word": "there", "start": 0.5, "end": 1},
        ]}]
        utterances = parse_speech_events(data)
        assert [w.text for w in utterances[0].words] == ["hi", "there"]
        assert utterances[0].words[1].end_s == 1.0

    def test_rejects_empty_array(self):
        with pytest.raises(MalformedInputError, match="no speech events"):
            parse_speech_events([])

    def test_rejects_non_array(self):
        with pytest.raises(MalformedInputError):
            parse_speech_events({"text": "x", "words": []})

    def test_rejects_missing_words(self):
        with pytest.raises(MalformedInputError):
            parse_speech_events([{"text": "x"}])

    def test_rejects_string_times_with_location(self):
        data = [{"text": "x", "words": [["x", "0.1", 0.2]]}]
        with pytest.raises(MalformedInputError, match="0/words/0"):
            parse_speech_events(data)

    def test_rejects_negative_time(self):
        with pytest.raises(MalformedInputError):
            parse_speech_events([{"text": "x", "words": [["x", -1, 0.2]]}])

    def test_rejects_end_before_start(self):
        with pytest.raises(MalformedInputError):
            parse_speech_events([{"text": "x", "words": [["x", 2, 1]]}])


class TestLoadSpeechEvents:

    def test_loads_file(self, speech_events_file):
        utterances = load_speech_events(speech_events_file)
        assert len(utterances) == 2
        assert utterances[1].words[0].text == "today"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('[{"text": "x", "words": [', encoding="utf-8")
        with pytest.raises(MalformedInputError, match="not valid JSON"):
            load_speech_events(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_speech_events(tmp_path / "missing.json")


class TestBuildTranscriptText:

    def test_joins_and_normalizes(self, sample_utterances):
        assert build_transcript_text(sample_utterances) == (
            "hello and welcome to the show today we talk about well-known subtitles"
        )

    def test_texts_without_trailing_space_stay_separate(self):
        utterances = parse_speech_events([
            {"text": "first", "words": []},
            {"text": "second", "words": []},
        ])
        assert build_transcript_text(utterances) == "first second"


class TestSegmentTranscript:

    def test_sample_pipeline(self, sample_utterances, sample_punctuated):
        cues = segment_transcript(sample_utterances, sample_punctuated, max_width=32)
        assert [c.text for c in cues] == [
            "Hello and welcome to the show.",
            "Today we talk about wellknown",
            "subtitles.",
        ]
        assert [(c.start_time, c.end_time) for c in cues] == [
            ("00:00:00,500", "00:00:02,500"),
            ("00:00:03,000", "00:00:04,900"),
            ("00:00:05,000", "00:00:05,750"),
        ]

    def test_default_width_gives_one_line_per_65_chars(self, sample_utterances, sample_punctuated):
        cues = segment_transcript(sample_utterances, sample_punctuated)
        assert all(len(c.text) <= 65 for c in cues)
        assert cues[0].start_time == "00:00:00,500"
        assert cues[-1].end_time == "00:00:05,750"

    def test_rejects_empty_utterances(self):
        with pytest.raises(MalformedInputError):
            segment_transcript([], "Some text.")
