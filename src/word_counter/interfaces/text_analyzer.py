"""
Абстрактные интерфейсы для компонентов анализа текста.

Определяет контракты, которые должны реализовывать все компоненты,
и неизменяемый результат анализа, который они передают друг другу.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple, Union


@dataclass(frozen=True)
class AnalysisResult:
    """Результат анализа текста.

    Создаётся заново при каждом вызове анализатора и после создания
    не меняется. Словарь частот хранится как read-only представление,
    порядок ключей - порядок первого появления слова в тексте.
    """
    word_count: int = 0
    character_count: int = 0
    character_count_no_spaces: int = 0
    sentence_count: int = 0
    paragraph_count: int = 0
    word_frequency: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        # Копируем, чтобы вызывающий код не мог изменить результат снаружи
        object.__setattr__(self, 'word_frequency', MappingProxyType(dict(self.word_frequency)))

    def __hash__(self) -> int:
        return hash((
            self.word_count,
            self.character_count,
            self.character_count_no_spaces,
            self.sentence_count,
            self.paragraph_count,
            frozenset(self.word_frequency.items()),
        ))

    @property
    def unique_word_count(self) -> int:
        """Количество различных слов в словаре частот"""
        return len(self.word_frequency)

    @property
    def frequency_token_count(self) -> int:
        """Количество токенов частотного токенизатора (может отличаться от word_count)"""
        return sum(self.word_frequency.values())

    def to_dict(self) -> Dict[str, Any]:
        """Преобразует результат в обычный словарь для экспорта."""
        return {
            'word_count': self.word_count,
            'character_count': self.character_count,
            'character_count_no_spaces': self.character_count_no_spaces,
            'sentence_count': self.sentence_count,
            'paragraph_count': self.paragraph_count,
            'word_frequency': dict(self.word_frequency),
        }


class TokenProcessorInterface(ABC):
    """Интерфейс для токенизации текста."""

    @abstractmethod
    def tokenize_words(self, text: str) -> List[str]:
        """Разбивает текст на слова по пробельным символам."""
        pass

    @abstractmethod
    def tokenize_for_frequency(self, text: str) -> List[str]:
        """Разбивает текст на слова для подсчёта частотности."""
        pass


class FrequencyAnalyzerInterface(ABC):
    """Интерфейс для анализа частотности слов."""

    @abstractmethod
    def count_frequency(self, words: List[str]) -> Dict[str, int]:
        """Подсчитывает частоту появления слов."""
        pass

    @abstractmethod
    def get_most_frequent(self, frequency: Mapping[str, int], n: int = 10) -> List[Tuple[str, int]]:
        """Возвращает n самых частых слов."""
        pass


class ResultFormatterInterface(ABC):
    """Интерфейс для текстового отчёта."""

    @abstractmethod
    def format(self, result: AnalysisResult) -> str:
        """Формирует текстовый отчёт по результату."""
        pass


class ResultExporterInterface(ABC):
    """Интерфейс для экспорта результатов."""

    @abstractmethod
    def export_to_excel(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """Экспортирует результат в Excel формат."""
        pass

    @abstractmethod
    def export_to_csv(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """Экспортирует таблицу частот в CSV."""
        pass

    @abstractmethod
    def export_to_json(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """Экспортирует результат в JSON формат."""
        pass


class TextProcessor(ABC):
    """Основной интерфейс анализатора текста."""

    @abstractmethod
    def analyze(self, text: str) -> AnalysisResult:
        """Анализирует текст и возвращает результат."""
        pass
