"""Text utilities: whitespace normalization, word counting, line wrapping.

WHY: The aligner moves its timeline cursor by the number of words in each
wrapped line, so word counting must be deterministic and must agree with
how the wrapper tokenizes. The wrapper itself re-segments the punctuated
transcript into display-width lines, independent of utterance boundaries.

HOW: normalize_whitespace() folds newlines/tabs to spaces, trims, and
collapses repeated spaces. count_words() splits the normalized text on
single spaces. wrap() greedily packs whitespace-separated tokens into
fragments bounded by max_width.

RULES:
- count_words("") == 1 — an empty string splits into one empty token.
  The aligner's cursor arithmetic depends on this; do not "fix" it.
- Only "\\n" and "\\t" are folded to spaces; other inner whitespace
  (e.g. "\\r") is left alone and does not split words
- wrap() never splits a token; a token longer than max_width is a
  fragment of its own
- wrap() always returns at least one fragment (possibly "")
- wrap() emits "" before an oversized first token; keep it, the aligner
  spends one timeline word on it
"""

from __future__ import annotations

import re
from typing import List

from subtitle_segmenter.core.ir import TextFragment

_EDGE_WHITESPACE_RE = re.compile(r"^\s+|\s+$")
_MULTI_SPACE_RE = re.compile(r" {2,}")


def normalize_whitespace(text: str) -> str:
    """Fold newlines/tabs to spaces, trim the ends, collapse runs of spaces."""
    text = text.replace("\n", " ").replace("\t", " ")
    text = _EDGE_WHITESPACE_RE.sub("", text)
    return _MULTI_SPACE_RE.sub(" ", text)


def count_words(text: str) -> int:
    """Count the space-delimited tokens of the normalized text.

    Examples:
        >>> count_words("  a   b\\tc\\n")
        3
        >>> count_words("")
        1
    """
    return len(normalize_whitespace(text).split(" "))


def wrap(text: str, max_width: int) -> List[TextFragment]:
    """Greedily wrap text into fragments of at most max_width characters.

    WHY: Recognizer utterances are often too long or too short to display
    as subtitles. Re-wrapping the whole punctuated transcript gives lines
    of even, readable width.

    HOW: Tokens are appended to the current fragment, each with a leading
    separator space, while ``len(current) + len(token) <= max_width``.
    The separator of the next token is therefore counted before it is
    added. When the next token does not fit, the current fragment is
    finalized (stripped) and a new one starts with that token.

    RULES:
    - Ignores original sentence and utterance boundaries
    - A fragment longer than max_width is always a single oversized token
    - The last in-progress fragment is always appended, even if empty
    - An oversized first token is preceded by an empty fragment; it
      counts as one word and so consumes one timeline entry
    - Pure function of (text, max_width)

    Args:
        text: Punctuated transcript text.
        max_width: Maximum fragment width in characters (>= 1).

    Returns:
        List of wrapped fragments, in text order.

    Raises:
        ValueError: If max_width is less than 1.
    """
    if max_width < 1:
        raise ValueError("max_width must be at least 1, got {}".format(max_width))

    fragments: List[TextFragment] = []
    current = ""

    for token in text.split():
        if len(current) + len(token) <= max_width:
            current += " " + token
        else:
            fragments.append(current.strip())
            current = " " + token

    fragments.append(current.strip())
    return fragments
