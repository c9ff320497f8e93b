"""Unit tests for the whitespace tokenizer and stop-word filter."""

import pytest

from search_server.search.analyzers import (
    AnalyzerPipeline,
    StopFilter,
    Token,
    WhitespaceTokenizer,
    has_control_characters,
    make_unique_non_empty_strings,
    split_into_words,
)


@pytest.mark.unit
class TestWhitespaceTokenizer:
    """Tokenizer splits on whitespace runs and reports offsets."""

    def test_emits_tokens_with_offsets(self):
        tokens = list(WhitespaceTokenizer()("cat  in\tthe\ncity"))

        assert [t.text for t in tokens] == ["cat", "in", "the", "city"]
        assert [t.position for t in tokens] == [0, 1, 2, 3]
        assert (tokens[1].start_char, tokens[1].end_char) == (5, 7)

    def test_keeps_case_and_punctuation(self):
        assert split_into_words("Cat, cat! -dog") == ["Cat,", "cat!", "-dog"]

    @pytest.mark.parametrize("text", ["", "   ", "\t\n \r"])
    def test_blank_input_yields_nothing(self, text):
        assert split_into_words(text) == []

    def test_tokenizing_twice_is_identical(self):
        tokenizer = WhitespaceTokenizer()
        text = "белый кот и модный ошейник"

        assert list(tokenizer(text)) == list(tokenizer(text))

    def test_information_separators_stay_inside_terms(self):
        # \x1f is whitespace for str.split() but must reach the validators
        assert split_into_words("a\x1fb c") == ["a\x1fb", "c"]

    def test_is_lazy(self):
        stream = WhitespaceTokenizer()("one two")

        assert next(stream).text == "one"


@pytest.mark.unit
class TestStopFilter:
    def test_drops_exact_matches_only(self):
        tokens = [Token(text=word, position=i, start_char=0, end_char=0) for i, word in enumerate(["in", "In", "cat"])]

        kept = [t.text for t in StopFilter({"in"})(tokens)]

        assert kept == ["In", "cat"]

    def test_membership(self):
        stop_filter = StopFilter(["a", "the"])

        assert "the" in stop_filter
        assert "cat" not in stop_filter

    def test_none_means_no_stop_words(self):
        assert StopFilter(None).stop_words == frozenset()


@pytest.mark.unit
class TestAnalyzerPipeline:
    def test_positions_are_renumbered_after_filtering(self):
        pipeline = AnalyzerPipeline(WhitespaceTokenizer(), [StopFilter({"и"})])

        tokens = pipeline("кот и пёс")

        assert [t.text for t in tokens] == ["кот", "пёс"]
        assert [t.position for t in tokens] == [0, 1]

    def test_terms_helper(self):
        pipeline = AnalyzerPipeline(WhitespaceTokenizer(), [StopFilter({"the"})])

        assert pipeline.terms("the cat the dog") == ["cat", "dog"]


@pytest.mark.unit
class TestHelpers:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("plain text", False),
            ("tab\there", True),
            ("nul\x00", True),
            ("unit\x1f", True),
            ("space is fine", False),
            ("delete\x7f", False),
        ],
    )
    def test_has_control_characters(self, text, expected):
        assert has_control_characters(text) is expected

    def test_make_unique_non_empty_strings(self):
        assert make_unique_non_empty_strings(["a", "", "b", "a"]) == {"a", "b"}
