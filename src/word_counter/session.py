"""
Сессия приложения: текущий текст, текущий результат и действия пользователя.

Действия (открыть файл, анализировать, сохранить, очистить) не бросают
исключений наружу: ошибки превращаются в ActionOutcome с видом ошибки
и сообщением. При ошибке предыдущее состояние сессии не меняется.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .components.report_formatter import ReportFormatter
from .config import config
from .errors import EmptyInputError, InvalidFileError
from .file_handler import FileHandler
from .interfaces.text_analyzer import AnalysisResult
from .text_analyzer import TextAnalyzer

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Виды восстанавливаемых ошибок"""
    EMPTY_INPUT = "empty_input"
    INVALID_FILE = "invalid_file"
    IO_ERROR = "io_error"
    NO_RESULTS = "no_results"


@dataclass(frozen=True)
class ActionOutcome:
    """Итог действия: успех или ошибка определённого вида"""
    ok: bool
    message: str
    error: Optional[ErrorKind] = None

    @classmethod
    def success(cls, message: str) -> "ActionOutcome":
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "ActionOutcome":
        return cls(ok=False, message=message, error=error)


class AnalysisSession:
    """Владеет единственным активным результатом анализа"""

    def __init__(self,
                 analyzer: Optional[TextAnalyzer] = None,
                 file_handler: Optional[FileHandler] = None,
                 formatter: Optional[ReportFormatter] = None):
        self.analyzer = analyzer or TextAnalyzer()
        self.file_handler = file_handler or FileHandler()
        self.formatter = formatter or ReportFormatter(top_n=config.get_top_words())
        self.text: str = ""
        self.current_result: Optional[AnalysisResult] = None
        self.current_report: str = ""
        self.status: str = "Готово"

    def _fail(self, error: ErrorKind, message: str, status: str) -> ActionOutcome:
        logger.warning(message)
        self.status = status
        return ActionOutcome.failure(error, message)

    def open_file(self, path: Union[str, Path]) -> ActionOutcome:
        """Загружает текст из файла в сессию"""
        try:
            content = self.file_handler.read_file(path)
        except InvalidFileError as e:
            return self._fail(ErrorKind.INVALID_FILE, f"Не удалось открыть файл: {e}", "Произошла ошибка")
        except OSError as e:
            return self._fail(ErrorKind.IO_ERROR, f"Не удалось открыть файл: {e}", "Произошла ошибка")

        self.text = content
        self.status = f"Файл загружен: {Path(path).name}"
        return ActionOutcome.success(self.status)

    def set_text(self, text: str) -> None:
        """Текст, введённый пользователем напрямую"""
        self.text = text

    def analyze(self, text: Optional[str] = None) -> ActionOutcome:
        """
        Анализирует текст сессии (или переданный текст).

        При успехе результат и отчёт заменяются целиком.
        """
        if text is not None:
            self.text = text
        try:
            result = self.analyzer.analyze(self.text)
        except EmptyInputError as e:
            return self._fail(ErrorKind.EMPTY_INPUT, str(e), "Анализ не выполнен - пустой текст")

        self.current_result = result
        self.current_report = self.formatter.format(result)
        self.status = "Анализ выполнен успешно"
        return ActionOutcome.success(self.status)

    def save_results(self, path: Optional[Union[str, Path]] = None) -> ActionOutcome:
        """Сохраняет текущий отчёт без изменений"""
        if self.current_result is None:
            return self._fail(
                ErrorKind.NO_RESULTS,
                "Нет результатов для сохранения. Сначала выполните анализ.",
                self.status,
            )
        path = Path(path or config.get_default_results_filename())
        try:
            self.file_handler.save_results(path, self.current_report)
        except OSError as e:
            return self._fail(ErrorKind.IO_ERROR, f"Не удалось сохранить результаты: {e}", "Произошла ошибка")

        self.status = f"Результаты сохранены: {path.name}"
        return ActionOutcome.success(self.status)

    def clear(self) -> ActionOutcome:
        """Сбрасывает текст, результат и отчёт"""
        self.text = ""
        self.current_result = None
        self.current_report = ""
        self.status = "Всё очищено - можно вводить новый текст"
        return ActionOutcome.success(self.status)
