"""
Исключения пакета word_counter.

Все ошибки восстанавливаемые: их перехватывают на границе действия
(открыть файл / анализировать / сохранить) и показывают пользователю.
Ошибки ввода-вывода не оборачиваются - это обычный OSError (IOError).
"""


class WordCounterError(Exception):
    """Базовая ошибка пакета"""


class EmptyInputError(WordCounterError, ValueError):
    """Текст отсутствует или состоит только из пробельных символов"""

    def __init__(self, message: str = "Текст не может быть пустым!"):
        super().__init__(message)


class InvalidFileError(WordCounterError):
    """Файл не существует или имеет неподдерживаемое расширение"""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path
