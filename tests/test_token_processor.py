"""
Тесты для компонента TokenProcessor.
"""

import pytest
from word_counter.components.tokenizer import TokenProcessor


class TestTokenProcessor:
    """Тесты для TokenProcessor."""

    def test_init(self):
        """Тест инициализации."""
        processor = TokenProcessor()
        assert processor.word_delimiters == " \t\n\r\f"
        assert "'" in processor.frequency_delimiters

        processor = TokenProcessor(word_delimiters=",", frequency_delimiters=";")
        assert processor.tokenize_words("a,b,,c") == ["a", "b", "c"]
        assert processor.tokenize_for_frequency("A;B") == ["a", "b"]

    def test_tokenize_empty_text(self):
        """Тест токенизации пустого текста."""
        processor = TokenProcessor()
        assert processor.tokenize_words("") == []
        assert processor.tokenize_words("   \t\n") == []
        assert processor.tokenize_words(None) == []
        assert processor.tokenize_for_frequency("") == []
        assert processor.tokenize_for_frequency(None) == []

    def test_tokenize_words_keeps_punctuation(self):
        """Пунктуация остаётся частью слова при подсчёте слов."""
        processor = TokenProcessor()
        tokens = processor.tokenize_words("Hello world. Hello again!\n\nNew paragraph here.")

        assert tokens == ["Hello", "world.", "Hello", "again!", "New", "paragraph", "here."]

    def test_tokenize_words_ignores_outer_whitespace(self):
        """Пробелы в начале и конце не дают пустых токенов."""
        processor = TokenProcessor()
        assert processor.tokenize_words("  one \t two\r\n\fthree  ") == ["one", "two", "three"]

    def test_vertical_tab_is_not_word_delimiter(self):
        """Вертикальная табуляция не разделяет слова."""
        processor = TokenProcessor()
        assert processor.tokenize_words("a\x0bb") == ["a\x0bb"]

    def test_tokenize_for_frequency_lowercases(self):
        """Токены частотного словаря в нижнем регистре."""
        processor = TokenProcessor()
        tokens = processor.tokenize_for_frequency("HELLO Hello hello")
        assert tokens == ["hello", "hello", "hello"]

    def test_tokenize_for_frequency_splits_contractions(self):
        """Апостроф - разделитель: don't -> don + t."""
        processor = TokenProcessor()
        assert processor.tokenize_for_frequency("Don't") == ["don", "t"]

    def test_tokenize_for_frequency_keeps_hyphen(self):
        """Дефис не входит в набор разделителей."""
        processor = TokenProcessor()
        assert processor.tokenize_for_frequency("A well-known fact.") == ["a", "well-known", "fact"]

    @pytest.mark.parametrize("delimiter", list(" \t\n\r\f.,;:!?\"'()[]{}"))
    def test_every_frequency_delimiter_splits(self, delimiter):
        """Каждый символ набора разделяет слова."""
        processor = TokenProcessor()
        assert processor.tokenize_for_frequency(f"left{delimiter}right") == ["left", "right"]

    def test_tokenize_for_frequency_punctuation_only(self):
        """Текст только из пунктуации не даёт токенов."""
        processor = TokenProcessor()
        assert processor.tokenize_for_frequency("?!. ,;") == []

    def test_count_characters(self):
        """Тест подсчёта символов с пробелами и без."""
        processor = TokenProcessor()
        text = "a b\tc\nd\re\x0bf\x0c"

        assert processor.count_characters(text) == 12
        assert processor.count_characters_no_spaces(text) == 6
        assert processor.count_characters("") == 0
        assert processor.count_characters_no_spaces("") == 0

    def test_count_characters_non_latin(self):
        """Символы считаются по кодовым точкам."""
        processor = TokenProcessor()
        assert processor.count_characters("Привет мир") == 10
        assert processor.count_characters_no_spaces("Привет мир") == 9
