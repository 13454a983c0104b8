"""
Интерфейсы для компонентов анализа текста.

Определяет абстрактные базовые классы для всех компонентов,
обеспечивая единообразный API и возможность замены реализаций.
"""

from .text_analyzer import (
    AnalysisResult,
    TextProcessor,
    TokenProcessorInterface,
    FrequencyAnalyzerInterface,
    ResultFormatterInterface,
    ResultExporterInterface
)

__all__ = [
    'AnalysisResult',
    'TextProcessor',
    'TokenProcessorInterface',
    'FrequencyAnalyzerInterface',
    'ResultFormatterInterface',
    'ResultExporterInterface'
]
