import sys
from pathlib import Path

import pytest

# В тестах явно добавляем путь к src, чтобы импортировать пакет без установки
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def temp_directory(tmp_path: Path) -> Path:
    """Временная директория для тестов.

    Возвращает уникальную директорию для каждого теста.
    """
    return tmp_path


@pytest.fixture(scope="session")
def sample_texts():
    """Наборы текстов для тестирования."""
    from .fixtures.sample_texts import (
        SAMPLE_SIMPLE_TEXT,
        SAMPLE_PARAGRAPHS_TEXT,
        SAMPLE_REPEATED_TEXT,
        SAMPLE_PUNCTUATION_TEXT,
    )

    return {
        "simple": SAMPLE_SIMPLE_TEXT,
        "paragraphs": SAMPLE_PARAGRAPHS_TEXT,
        "repeated": SAMPLE_REPEATED_TEXT,
        "punctuation": SAMPLE_PUNCTUATION_TEXT,
    }


@pytest.fixture
def txt_file(tmp_path: Path):
    """Фабрика .txt файлов с заданным содержимым."""
    def _make(content: str, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _make


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
    config.addinivalue_line("markers", "performance: тесты производительности")
