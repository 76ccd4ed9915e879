"""Configuration constants, punctuation services, and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. The service table and wrap width are plain data —
not buried in logic — so they can be changed without touching the engine.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values with environment overrides. resolve_service_url()
gives a clear error for an unknown service id.

RULES:
- DEFAULT_MAX_WIDTH is 65 characters unless SUBTITLE_MAX_WIDTH overrides it
- Only English ("en") source transcripts are supported
- PUNCTUATION_SERVICES maps service id → endpoint URL (ids 0 and 1)
- PUNCTUATION_SERVICE_URL, when set, replaces the URL of any selected service
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Segmentation
# ---------------------------------------------------------------------------

DEFAULT_MAX_WIDTH = int(os.getenv("SUBTITLE_MAX_WIDTH", "65"))
"""Maximum subtitle line width in characters."""

DEFAULT_SOURCE_LANGUAGE = "en"
SUPPORTED_SOURCE_LANGUAGES: set[str] = {"en"}

# ---------------------------------------------------------------------------
# Punctuation services
# ---------------------------------------------------------------------------

PUNCTUATION_SERVICES: dict[int, str] = {
    0: "http://bark.phon.ioc.ee/punctuator",
    1: "https://punctuationservice.mybluemix.net/api/punctext",
}

DEFAULT_SERVICE_ID = int(os.getenv("PUNCTUATION_SERVICE_ID", "0"))
PUNCTUATION_SERVICE_URL = os.getenv("PUNCTUATION_SERVICE_URL", "").strip() or None
PUNCTUATION_TIMEOUT_S = float(os.getenv("PUNCTUATION_TIMEOUT_S", "60"))


def resolve_service_url(service_id: int) -> str:
    """Return the endpoint URL for a punctuation service id.

    RULES:
    - Raises ValueError for ids not in PUNCTUATION_SERVICES
    - PUNCTUATION_SERVICE_URL overrides the table entry when set
    """
    if service_id not in PUNCTUATION_SERVICES:
        available = ", ".join(str(k) for k in sorted(PUNCTUATION_SERVICES))
        raise ValueError(
            "Unknown punctuation service id {}. Available: {}".format(service_id, available)
        )
    return PUNCTUATION_SERVICE_URL or PUNCTUATION_SERVICES[service_id]
