"""
Компонент для токенизации текста.

Отвечает за два независимых разбиения текста:
- по пробельным символам (для подсчёта слов, пунктуация остаётся в токене);
- по пробелам и знакам препинания (для частотного словаря).

Разные наборы разделителей дают разное число токенов - это ожидаемо.
"""

import re
from typing import List
from ..interfaces.text_analyzer import TokenProcessorInterface

# Разделители слов при подсчёте количества слов
WORD_DELIMITERS = " \t\n\r\f"

# Разделители для частотного словаря: пробелы + пунктуация
FREQUENCY_DELIMITERS = " \t\n\r\f.,;:!?\"'()[]{}"

# Пробельный класс для подсчёта символов без пробелов (включает \v)
WHITESPACE_PATTERN = re.compile(r'[ \t\n\r\f\v]')


def _delimiter_pattern(delimiters: str) -> "re.Pattern[str]":
    """Строит регулярное выражение 'одна или больше из разделителей'"""
    return re.compile('[' + re.escape(delimiters) + ']+')


class TokenProcessor(TokenProcessorInterface):
    """Процессор для токенизации текста."""

    def __init__(self,
                 word_delimiters: str = WORD_DELIMITERS,
                 frequency_delimiters: str = FREQUENCY_DELIMITERS):
        """
        Инициализирует процессор токенизации.

        Args:
            word_delimiters: Символы-разделители для подсчёта слов
            frequency_delimiters: Символы-разделители для частотного словаря
        """
        self.word_delimiters = word_delimiters
        self.frequency_delimiters = frequency_delimiters
        self.word_pattern = _delimiter_pattern(word_delimiters)
        self.frequency_pattern = _delimiter_pattern(frequency_delimiters)

    def _split(self, pattern: "re.Pattern[str]", text: str) -> List[str]:
        if not text:
            return []
        return [token for token in pattern.split(text) if token]

    def tokenize_words(self, text: str) -> List[str]:
        """
        Разбивает текст на слова по пробельным символам.

        Пунктуация не отрезается: "world." остаётся одним токеном.

        Args:
            text: Исходный текст

        Returns:
            Список непустых токенов
        """
        return self._split(self.word_pattern, text)

    def tokenize_for_frequency(self, text: str) -> List[str]:
        """
        Разбивает текст на слова для частотного словаря.

        Текст приводится к нижнему регистру, разделителями служат пробелы
        и знаки препинания. Апостроф тоже разделитель: "don't" -> "don", "t".

        Args:
            text: Исходный текст

        Returns:
            Список непустых токенов в нижнем регистре
        """
        if not text:
            return []
        return self._split(self.frequency_pattern, text.lower())

    def count_characters(self, text: str) -> int:
        """Количество символов в тексте, включая пробельные"""
        return len(text) if text else 0

    def count_characters_no_spaces(self, text: str) -> int:
        """Количество символов без пробельных (пробел, \\t, \\n, \\r, \\f, \\v)"""
        if not text:
            return 0
        return len(WHITESPACE_PATTERN.sub('', text))
