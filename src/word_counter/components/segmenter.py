"""
Компонент для подсчёта предложений и абзацев.

Текст режется по разделителям ("." "!" "?" для предложений,
два и более перевода строки для абзацев), затем считаются сегменты.
"""

import re
from typing import List

SENTENCE_DELIMITERS = re.compile(r'[.!?]+')
PARAGRAPH_DELIMITERS = re.compile(r'\n\n+')


class TextSegmenter:
    """Подсчёт предложений и абзацев по разделителям."""

    def __init__(self,
                 sentence_pattern: "re.Pattern[str]" = SENTENCE_DELIMITERS,
                 paragraph_pattern: "re.Pattern[str]" = PARAGRAPH_DELIMITERS):
        self.sentence_pattern = sentence_pattern
        self.paragraph_pattern = paragraph_pattern

    @staticmethod
    def split_segments(pattern: "re.Pattern[str]", text: str) -> List[str]:
        """
        Разбивает текст по шаблону и отбрасывает пустые сегменты в конце.

        Пустой сегмент в начале (текст начинается с разделителя) сохраняется.

        Args:
            pattern: Скомпилированный шаблон разделителя
            text: Исходный текст

        Returns:
            Список сегментов
        """
        if not text:
            return []
        segments = pattern.split(text)
        while segments and segments[-1] == '':
            segments.pop()
        return segments

    @classmethod
    def count_segments(cls, pattern: "re.Pattern[str]", text: str) -> int:
        """
        Считает сегменты. Если ни в одном сегменте нет непробельного
        содержимого, возвращает 0.
        """
        segments = cls.split_segments(pattern, text)
        if not any(segment.strip() for segment in segments):
            return 0
        return len(segments)

    def count_sentences(self, text: str) -> int:
        """Количество предложений (разделители: серии из '.', '!', '?')"""
        return self.count_segments(self.sentence_pattern, text)

    def count_paragraphs(self, text: str) -> int:
        """Количество абзацев (разделитель: два и более '\\n' подряд)"""
        return self.count_segments(self.paragraph_pattern, text)
