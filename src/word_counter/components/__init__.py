"""
Компоненты для анализа текста.

Каждый компонент отвечает за одну конкретную задачу:
- TokenProcessor - токенизация текста и подсчёт символов
- TextSegmenter - подсчёт предложений и абзацев
- FrequencyAnalyzer - подсчёт частотности и рейтинг слов
- ReportFormatter - текстовый отчёт
- ResultExporter - экспорт результатов (JSON, CSV, Excel)
"""

from .tokenizer import TokenProcessor
from .segmenter import TextSegmenter
from .frequency_analyzer import FrequencyAnalyzer
from .report_formatter import ReportFormatter
from .exporter import ResultExporter

__all__ = [
    'TokenProcessor',
    'TextSegmenter',
    'FrequencyAnalyzer',
    'ReportFormatter',
    'ResultExporter',
]
