"""Punctuation service client package.

WHY: The raw recognizer transcript has no punctuation. This package
encapsulates all communication with the remote punctuation service
behind an async client class.

RULES:
- All HTTP calls go through PunctuationClient (no direct httpx usage elsewhere)
"""

from subtitle_segmenter.api.client import PunctuationClient, PunctuationServiceError

__all__ = ["PunctuationClient", "PunctuationServiceError"]
