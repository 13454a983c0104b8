"""
Компонент для формирования текстового отчёта.

Отчёт - обычный текст. Одна и та же строка выводится на экран
и сохраняется в файл без изменений.
"""

from typing import List, Optional
from ..interfaces.text_analyzer import AnalysisResult, ResultFormatterInterface
from .frequency_analyzer import FrequencyAnalyzer

RESULTS_HEADER = "=== TEXT ANALYSIS RESULTS ==="
TOP_WORDS_HEADER = "=== TOP {n} MOST FREQUENT WORDS ==="


class ReportFormatter(ResultFormatterInterface):
    """Форматирует AnalysisResult в текстовый отчёт."""

    def __init__(self, top_n: int = 10, frequency_analyzer: Optional[FrequencyAnalyzer] = None):
        """
        Args:
            top_n: Сколько слов показывать в рейтинге
            frequency_analyzer: Анализатор, выполняющий ранжирование
        """
        self.top_n = top_n
        self.frequency_analyzer = frequency_analyzer or FrequencyAnalyzer(default_top_n=top_n)

    def format_ranking(self, result: AnalysisResult) -> List[str]:
        """Строки рейтинга вида 'N. слово: K times'"""
        top_words = self.frequency_analyzer.get_most_frequent(result.word_frequency, self.top_n)
        return [
            f"{rank}. {word}: {count} times"
            for rank, (word, count) in enumerate(top_words, 1)
        ]

    def format(self, result: AnalysisResult) -> str:
        """
        Формирует отчёт.

        Args:
            result: Результат анализа

        Returns:
            Текст отчёта, каждая строка заканчивается '\\n'
        """
        lines = [
            RESULTS_HEADER,
            "",
            f"Words: {result.word_count}",
            f"Characters (with spaces): {result.character_count}",
            f"Characters (without spaces): {result.character_count_no_spaces}",
            f"Sentences: {result.sentence_count}",
            f"Paragraphs: {result.paragraph_count}",
            "",
            TOP_WORDS_HEADER.format(n=self.top_n),
        ]
        lines.extend(self.format_ranking(result))
        return "\n".join(lines) + "\n"
