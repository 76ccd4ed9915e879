"""Unit tests for whitespace normalization, word counting and wrapping.

WHY: The aligner's cursor moves by count_words() of each wrapped line, so
any change in how words are counted or wrapped shifts every cue after it.

HOW: Tests cover normalization rules, the empty-string counting quirk,
greedy wrapping, width bounds, oversized tokens, and text preservation.
"""

import pytest

from subtitle_segmenter.core.text import count_words, normalize_whitespace, wrap


class TestNormalizeWhitespace:

    def test_newlines_and_tabs_become_spaces(self):
        assert normalize_whitespace("a\nb\tc") == "a b c"

    def test_trims_ends(self):
        assert normalize_whitespace("  \r\n a b \t ") == "a b"

    def test_collapses_space_runs(self):
        assert normalize_whitespace("a    b  c") == "a b c"

    def test_carriage_return_inside_is_kept(self):
        assert normalize_whitespace("a\rb") == "a\rb"


class TestCountWords:

    def test_mixed_whitespace(self):
        assert count_words("  a   b\tc\n") == 3

    def test_single_word(self):
        assert count_words("hello") == 1

    def test_punctuation_attached_to_words(self):
        assert count_words("Hello, world.") == 2

    def test_hyphenated_word_counts_once(self):
        assert count_words("a well-known fact") == 3

    def test_empty_string_counts_as_one(self):
        """An empty string splits into one empty token."""
        assert count_words("") == 1

    def test_whitespace_only_counts_as_one(self):
        assert count_words(" \n\t ") == 1

    @pytest.mark.parametrize("text", [
        "  a   b\tc\n",
        "one\n\ntwo",
        "x",
        "",
        "\tlead and trail  ",
    ])
    def test_idempotent_under_normalization(self, text):
        assert count_words(normalize_whitespace(text)) == count_words(text)


class TestWrap:

    def test_greedy_example(self):
        assert wrap("the quick brown fox jumps", 10) == ["the quick", "brown fox", "jumps"]

    def test_everything_fits_on_one_line(self):
        assert wrap("short text here", 65) == ["short text here"]

    def test_ignores_original_line_breaks(self):
        assert wrap("one.\nTwo\tthree.", 65) == ["one. Two three."]

    def test_empty_text_gives_one_empty_fragment(self):
        assert wrap("", 10) == [""]

    def test_whitespace_only_gives_one_empty_fragment(self):
        assert wrap("   \n ", 10) == [""]

    def test_oversized_token_is_not_split(self):
        assert wrap("a extraordinarily b", 5) == ["a", "extraordinarily", "b"]

    def test_oversized_first_token(self):
        assert wrap("extraordinarily b", 5) == ["", "extraordinarily", "b"]

    def test_oversized_url_first(self):
        assert wrap("https://example.com/long b", 10) == ["", "https://example.com/long", "b"]

    def test_exact_width_fits(self):
        assert wrap("abcd efghi", 10) == ["abcd efghi"]

    def test_one_over_width_breaks(self):
        assert wrap("abcde efghi", 10) == ["abcde", "efghi"]

    def test_later_fragments_respect_width(self):
        """Every fragment, not only the first, is measured with its leading
        separator, so no multi-word line is ever wider than max_width.

        Starting later fragments without that separator would allow a
        one-character overshoot. This deliberately keeps the tighter bound.
        """
        assert wrap("aaaaaaaa bbbbb cccc", 9) == ["aaaaaaaa", "bbbbb", "cccc"]

    def test_rejects_non_positive_width(self):
        with pytest.raises(ValueError):
            wrap("text", 0)

    def test_deterministic(self):
        text = "the quick brown fox jumps over the lazy dog"
        assert wrap(text, 12) == wrap(text, 12)

    @pytest.mark.parametrize("width", [1, 3, 7, 12, 20, 65])
    def test_fragments_within_width_unless_single_token(self, width):
        text = "It was the best of times, it was the worst of times, it was the age of wisdom."
        for fragment in wrap(text, width):
            assert len(fragment) <= width or " " not in fragment

    @pytest.mark.parametrize("width", [9, 15, 30, 65])
    def test_rejoined_fragments_reproduce_text(self, width):
        text = "It was the best\nof times,  it was\tthe worst of times."
        fragments = wrap(text, width)
        assert " ".join(fragments) == " ".join(text.split())
