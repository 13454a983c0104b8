"""
Word Counter - модуль для статистического анализа текста

Этот модуль предоставляет инструменты для:
- Подсчёта слов, символов, предложений и абзацев
- Частотного анализа слов с рейтингом
- Формирования текстового отчёта
- Загрузки текста из .txt файлов и сохранения отчётов
- Экспорта результатов в JSON, CSV и Excel
"""

__version__ = "0.1.0"
__author__ = "Sergey"

from .errors import WordCounterError, EmptyInputError, InvalidFileError
from .interfaces.text_analyzer import AnalysisResult
from .text_analyzer import TextAnalyzer, analyze
from .components.report_formatter import ReportFormatter
from .file_handler import FileHandler
from .session import AnalysisSession, ActionOutcome, ErrorKind
from . import cli

__all__ = [
    "WordCounterError",
    "EmptyInputError",
    "InvalidFileError",
    "AnalysisResult",
    "TextAnalyzer",
    "analyze",
    "ReportFormatter",
    "FileHandler",
    "AnalysisSession",
    "ActionOutcome",
    "ErrorKind",
    "cli",
]
