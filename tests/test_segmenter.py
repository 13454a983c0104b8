"""
Тесты для компонента TextSegmenter.
"""

import pytest
from word_counter.components.segmenter import (
    PARAGRAPH_DELIMITERS,
    SENTENCE_DELIMITERS,
    TextSegmenter,
)


class TestSentences:
    """Подсчёт предложений."""

    def setup_method(self):
        self.segmenter = TextSegmenter()

    def test_reference_text(self, sample_texts):
        """Сегменты: 'Hello world', ' Hello again', '\\n\\nNew paragraph here'."""
        assert self.segmenter.count_sentences(sample_texts["simple"]) == 3

    def test_text_without_delimiters_is_one_sentence(self):
        assert self.segmenter.count_sentences("No delimiter here") == 1

    def test_runs_of_delimiters_count_once(self):
        assert self.segmenter.count_sentences("One... Two?!") == 2

    def test_trailing_empty_segment_dropped(self):
        assert self.segmenter.count_sentences("One. Two") == 2
        assert self.segmenter.count_sentences("One. Two.") == 2

    @pytest.mark.parametrize("text", ["!!!", "  ...  ", ".?!\n", "?"])
    def test_only_delimiters_and_whitespace(self, text):
        assert self.segmenter.count_sentences(text) == 0

    def test_leading_delimiter_keeps_empty_first_segment(self):
        """Пустой первый сегмент учитывается, если есть содержательные сегменты."""
        assert self.segmenter.count_sentences(". Leading") == 2

    def test_whitespace_segment_in_the_middle_counts(self):
        assert self.segmenter.count_sentences("Hi. ! ") == 3

    def test_paragraph_sample(self, sample_texts):
        assert self.segmenter.count_sentences(sample_texts["paragraphs"]) == 5


class TestParagraphs:
    """Подсчёт абзацев."""

    def setup_method(self):
        self.segmenter = TextSegmenter()

    def test_reference_text(self, sample_texts):
        assert self.segmenter.count_paragraphs(sample_texts["simple"]) == 2

    def test_single_newline_does_not_split(self):
        assert self.segmenter.count_paragraphs("a\nb") == 1

    def test_long_newline_runs(self):
        assert self.segmenter.count_paragraphs("a\n\nb\n\n\n\nc") == 3

    def test_trailing_blank_lines(self):
        assert self.segmenter.count_paragraphs("a\n\n") == 1

    def test_only_newlines(self):
        assert self.segmenter.count_paragraphs("\n\n\n") == 0

    def test_crlf_is_not_a_paragraph_break(self):
        assert self.segmenter.count_paragraphs("a\r\n\r\nb") == 1

    def test_paragraph_sample(self, sample_texts):
        assert self.segmenter.count_paragraphs(sample_texts["paragraphs"]) == 3


class TestSplitSegments:
    """Разбиение на сегменты."""

    def test_trailing_empty_segments_removed(self):
        assert TextSegmenter.split_segments(SENTENCE_DELIMITERS, "a.b..") == ["a", "b"]

    def test_leading_empty_segment_kept(self):
        assert TextSegmenter.split_segments(SENTENCE_DELIMITERS, "!a") == ["", "a"]

    def test_empty_text(self):
        assert TextSegmenter.split_segments(PARAGRAPH_DELIMITERS, "") == []
        assert TextSegmenter.count_segments(PARAGRAPH_DELIMITERS, "") == 0
