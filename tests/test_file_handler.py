"""
Тесты для модуля file_handler
"""

import pytest

from word_counter.errors import InvalidFileError
from word_counter.file_handler import FileHandler


class TestReadFile:
    """Загрузка текста из файла."""

    def test_read_appends_newline_after_each_line(self, txt_file):
        handler = FileHandler()
        assert handler.read_file(txt_file("first\nsecond")) == "first\nsecond\n"

    def test_read_normalizes_crlf(self, txt_file):
        handler = FileHandler()
        assert handler.read_file(txt_file("a\r\nb\r\n")) == "a\nb\n"

    def test_read_keeps_blank_lines(self, txt_file):
        handler = FileHandler()
        assert handler.read_file(txt_file("p1\n\np2\n")) == "p1\n\np2\n"

    def test_read_empty_file(self, txt_file):
        handler = FileHandler()
        assert handler.read_file(txt_file("")) == ""

    def test_read_unicode(self, txt_file):
        handler = FileHandler()
        assert handler.read_file(txt_file("Привет, мир")) == "Привет, мир\n"

    def test_extension_is_case_insensitive(self, txt_file):
        handler = FileHandler()
        assert handler.read_file(txt_file("x", name="UPPER.TXT")) == "x\n"

    def test_missing_file(self, tmp_path):
        handler = FileHandler()
        with pytest.raises(InvalidFileError) as exc_info:
            handler.read_file(tmp_path / "missing.txt")
        assert "missing.txt" in str(exc_info.value)
        assert exc_info.value.path == tmp_path / "missing.txt"

    def test_wrong_extension(self, txt_file):
        handler = FileHandler()
        path = txt_file("text", name="notes.md")
        with pytest.raises(InvalidFileError):
            handler.read_file(path)

    def test_custom_extension(self, txt_file):
        handler = FileHandler(allowed_extension=".md")
        assert handler.read_file(txt_file("text", name="notes.md")) == "text\n"

    def test_read_error_is_os_error(self, tmp_path):
        """Каталог с именем *.txt проходит проверку, но не читается"""
        folder = tmp_path / "folder.txt"
        folder.mkdir()
        handler = FileHandler()
        with pytest.raises(OSError):
            handler.read_file(folder)

    def test_undecodable_bytes(self, tmp_path):
        """Файл не в UTF-8 отклоняется как некорректный"""
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"caf\xe9 au lait\n")
        handler = FileHandler()
        with pytest.raises(InvalidFileError) as exc_info:
            handler.read_file(path)
        assert "latin1.txt" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


class TestSaveResults:
    """Сохранение отчёта."""

    def test_save_writes_verbatim(self, tmp_path):
        handler = FileHandler()
        path = handler.save_results(tmp_path / "report", "line 1\nline 2\n")

        assert path == tmp_path / "report"
        assert path.read_bytes() == b"line 1\nline 2\n"

    def test_save_overwrites(self, tmp_path):
        handler = FileHandler()
        target = tmp_path / "out.txt"
        handler.save_results(target, "old content that is longer\n")
        handler.save_results(target, "new\n")
        assert target.read_text(encoding="utf-8") == "new\n"

    def test_save_into_missing_directory(self, tmp_path):
        handler = FileHandler()
        with pytest.raises(OSError):
            handler.save_results(tmp_path / "no" / "such" / "dir.txt", "x")

    def test_round_trip(self, tmp_path):
        """Сохранённый и загруженный отчёт совпадает с исходным"""
        handler = FileHandler()
        report = "=== HEADER ===\n\nWords: 2\n\n1. a: 1 times\n"
        path = handler.save_results(tmp_path / "round.txt", report)
        assert handler.read_file(path) == report
