"""
Компонент для анализа частотности слов.

Отвечает за подсчёт частоты появления слов и получение самых
частых слов для отчёта.
"""

from typing import List, Dict, Tuple, Mapping, Optional
from collections import Counter, defaultdict
from ..interfaces.text_analyzer import FrequencyAnalyzerInterface


class FrequencyAnalyzer(FrequencyAnalyzerInterface):
    """Анализатор частотности слов.

    Не хранит состояния между вызовами: каждый подсчёт возвращает
    новый словарь.
    """

    def __init__(self, default_top_n: int = 10):
        """
        Инициализирует анализатор частотности.

        Args:
            default_top_n: Размер рейтинга по умолчанию
        """
        self.default_top_n = default_top_n

    def count_frequency(self, words: List[str]) -> Dict[str, int]:
        """
        Подсчитывает частоту появления слов.

        Порядок ключей - порядок первого появления слова.

        Args:
            words: Список слов для анализа

        Returns:
            Словарь с частотой каждого слова
        """
        if not words:
            return {}
        return dict(Counter(words))

    def get_most_frequent(self, frequency: Mapping[str, int], n: Optional[int] = None) -> List[Tuple[str, int]]:
        """
        Возвращает n самых частых слов.

        Сортировка по убыванию частоты. При равной частоте слова идут
        в порядке первого появления (сортировка устойчивая).

        Args:
            frequency: Словарь частот
            n: Количество слов для возврата (None = default_top_n)

        Returns:
            Список кортежей (слово, частота)
        """
        if not frequency:
            return []
        if n is None:
            n = self.default_top_n
        if n <= 0:
            return []

        ranked = sorted(frequency.items(), key=lambda x: x[1], reverse=True)
        return ranked[:n]

    def get_frequency_distribution(self, frequency: Mapping[str, int]) -> Dict[int, int]:
        """
        Возвращает распределение слов по частоте.

        Returns:
            Словарь {частота: количество слов}
        """
        if not frequency:
            return {}

        distribution = defaultdict(int)
        for freq in frequency.values():
            distribution[freq] += 1

        return dict(distribution)
