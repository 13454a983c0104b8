"""
Модуль для загрузки текста из файлов и сохранения отчётов.

Загружаются только существующие файлы с расширением .txt
(настраивается через files.allowed_extension). Ошибки чтения и
записи пробрасываются как OSError.
"""

import logging
from pathlib import Path
from typing import Union, Optional

from .config import config
from .errors import InvalidFileError

logger = logging.getLogger(__name__)


class FileHandler:
    """Чтение текстовых файлов и сохранение результатов"""

    def __init__(self, allowed_extension: Optional[str] = None, encoding: Optional[str] = None):
        """
        Args:
            allowed_extension: Допустимое расширение загружаемых файлов
            encoding: Кодировка файлов
        """
        self.allowed_extension = (allowed_extension or config.get_allowed_extension()).lower()
        self.encoding = encoding or config.get_file_encoding()

    def validate_file(self, path: Union[str, Path]) -> Path:
        """
        Проверяет, что файл существует и имеет допустимое расширение.

        Raises:
            InvalidFileError: файл не найден или расширение не подходит
        """
        path = Path(path)
        if not path.exists():
            raise InvalidFileError(f"Файл не существует: {path.name}", path=path)
        if not path.name.lower().endswith(self.allowed_extension):
            raise InvalidFileError(
                f"Поддерживаются только файлы {self.allowed_extension}!", path=path
            )
        return path

    def read_file(self, path: Union[str, Path]) -> str:
        """
        Читает текстовый файл построчно.

        После каждой строки добавляется '\\n', поэтому непустой файл
        всегда возвращается с завершающим переводом строки.

        Args:
            path: Путь к файлу

        Returns:
            Содержимое файла

        Raises:
            InvalidFileError: файл не найден, расширение не подходит
                или содержимое не декодируется
            OSError: ошибка чтения
        """
        path = self.validate_file(path)
        lines = []
        try:
            with open(path, 'r', encoding=self.encoding) as f:
                for line in f:
                    lines.append(line.rstrip('\r\n'))
                    lines.append('\n')
        except UnicodeDecodeError as e:
            raise InvalidFileError(
                f"Файл {path.name} не в кодировке {self.encoding}", path=path
            ) from e
        content = ''.join(lines)
        logger.info(f"Файл загружен: {path.name} ({len(content)} символов)")
        return content

    def save_results(self, path: Union[str, Path], results: str) -> Path:
        """
        Сохраняет отчёт в файл без изменений (файл перезаписывается).

        Args:
            path: Путь к файлу (расширение не проверяется)
            results: Текст отчёта

        Returns:
            Путь к сохранённому файлу

        Raises:
            OSError: ошибка записи
        """
        path = Path(path)
        with open(path, 'w', encoding=self.encoding, newline='') as f:
            f.write(results)
        logger.info(f"Результаты сохранены: {path}")
        return path
