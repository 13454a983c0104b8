"""
Модуль для анализа текста

Считает по тексту:
- количество слов, символов (с пробелами и без), предложений и абзацев
- частотный словарь слов (нижний регистр, без пунктуации)

Анализ - чистая функция: нет состояния между вызовами, поэтому
анализатор можно вызывать из любого потока.
"""

import logging
from typing import Optional

from .components.tokenizer import TokenProcessor
from .components.segmenter import TextSegmenter
from .components.frequency_analyzer import FrequencyAnalyzer
from .errors import EmptyInputError
from .interfaces.text_analyzer import AnalysisResult, TextProcessor

logger = logging.getLogger(__name__)


class TextAnalyzer(TextProcessor):
    """Анализатор текста, собранный из компонентов"""

    def __init__(self,
                 tokenizer: Optional[TokenProcessor] = None,
                 segmenter: Optional[TextSegmenter] = None,
                 frequency_analyzer: Optional[FrequencyAnalyzer] = None):
        """Инициализация анализатора (компоненты можно подменить)"""
        self.tokenizer = tokenizer or TokenProcessor()
        self.segmenter = segmenter or TextSegmenter()
        self.frequency_analyzer = frequency_analyzer or FrequencyAnalyzer()

    def analyze(self, text: Optional[str]) -> AnalysisResult:
        """
        Анализирует текст и возвращает результат.

        Args:
            text: Исходный текст

        Returns:
            Новый AnalysisResult

        Raises:
            EmptyInputError: текст None или пуст после strip()
        """
        if text is None or not text.strip():
            raise EmptyInputError()

        frequency_tokens = self.tokenizer.tokenize_for_frequency(text)
        result = AnalysisResult(
            word_count=len(self.tokenizer.tokenize_words(text)),
            character_count=self.tokenizer.count_characters(text),
            character_count_no_spaces=self.tokenizer.count_characters_no_spaces(text),
            sentence_count=self.segmenter.count_sentences(text),
            paragraph_count=self.segmenter.count_paragraphs(text),
            word_frequency=self.frequency_analyzer.count_frequency(frequency_tokens),
        )

        logger.debug(
            f"Анализ завершён: слов={result.word_count}, предложений={result.sentence_count}, "
            f"абзацев={result.paragraph_count}, уникальных={result.unique_word_count}"
        )
        return result


_default_analyzer = TextAnalyzer()


def analyze(text: Optional[str]) -> AnalysisResult:
    """Анализирует текст анализатором по умолчанию"""
    return _default_analyzer.analyze(text)
