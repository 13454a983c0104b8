"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс WORD_COUNTER_, вложенность через __)
- Валидация значений
- Настройка логирования
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, List
from dotenv import load_dotenv
import logging
from datetime import datetime

logger = logging.getLogger(__name__)

ENV_PREFIX = 'WORD_COUNTER_'


class Config:
    """Класс для работы с конфигурацией проекта"""

    def __init__(self, config_path: str = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в текущей директории и выше
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"

            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"

            self.config_path = config_path

        self.config_data = {}
        self.env_data = {}

        self._load_config()
        self._load_env()
        self._apply_env_overrides()
        self._validate()
        self._configure_logging_if_needed()

    def _resolve_config_path(self) -> Path:
        env = os.getenv('WORD_COUNTER_ENV', '').lower().strip()
        root = self.config_path.parent
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            return self.config_path
        if candidate.exists():
            return candidate
        return self.config_path

    def _load_config(self):
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        self.config_data = self._get_default_config()
        self.config_path = self._resolve_config_path()
        if not self.config_path.exists():
            logger.debug(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
            return
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Ошибка загрузки конфигурации: {e}")
            return
        self._merge(self.config_data, loaded)
        logger.debug(f"Конфигурация загружена: {self.config_path}")

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _load_env(self):
        """Загружает переменные окружения из .env файла"""
        load_dotenv()
        self.env_data = {
            key: value for key, value in os.environ.items() if key.startswith(ENV_PREFIX)
        }

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    @staticmethod
    def _parse_env_value(val: str) -> Any:
        if val.lower() in ('true', 'false'):
            return val.lower() == 'true'
        try:
            if '.' in val:
                return float(val)
            return int(val)
        except ValueError:
            return val

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (WORD_COUNTER_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            # Служебные переменные
            if key in ('WORD_COUNTER_ENV', 'WORD_COUNTER_DEBUG'):
                continue
            dotted = key[len(ENV_PREFIX):].replace('__', '.').lower()
            self._set_nested(self.config_data, dotted, self._parse_env_value(val))
        if os.getenv('WORD_COUNTER_ENV'):
            logger.info(f"Активирован профиль: {os.getenv('WORD_COUNTER_ENV')}")

    def _validate(self) -> None:
        """Проверяет диапазоны значений."""
        try:
            top = int(self.get('analysis.top_words', 10))
        except (TypeError, ValueError):
            logger.warning("analysis.top_words не число - используется 10")
            top = 10
        if top < 1:
            logger.warning("analysis.top_words < 1 - принудительно установлено в 1")
            top = 1
        self._set_nested(self.config_data, 'analysis.top_words', top)

        ext = str(self.get('files.allowed_extension', '.txt')).lower()
        if not ext.startswith('.'):
            ext = '.' + ext
        self._set_nested(self.config_data, 'files.allowed_extension', ext)

    def _logging_signature(self) -> tuple:
        """Параметры, при изменении которых логирование настраивается заново"""
        log_dir = self.get_log_dir() if self.is_logging_to_file_enabled() else None
        return (
            str(self.get_console_logging_level()).upper(),
            str(self.get_file_logging_level()).upper(),
            self.get_logging_format(),
            log_dir,
        )

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Настраивает корневой логгер: консоль и, по желанию, файл в log_dir.

        Повторно настраивает только при force=True или если изменились
        уровни, формат или каталог логов.
        """
        root = logging.getLogger()
        signature = self._logging_signature()
        if not force and getattr(root, "_word_counter_logging", None) == signature:
            return

        console_level_name, file_level_name, fmt, log_dir = signature
        console_level = getattr(logging, console_level_name, logging.INFO)
        file_level = getattr(logging, file_level_name, logging.DEBUG)

        console = logging.StreamHandler()
        console.setLevel(console_level)
        handlers: List[logging.Handler] = [console]
        root_level = console_level

        if log_dir is not None:
            self.cleanup_old_log_files()
            log_file = Path(self.get_logging_file())
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(file_level)
                handlers.append(fh)
                root_level = min(console_level, file_level)
            except OSError as e:
                logger.warning(f"Не удалось открыть файл лога: {e}")

        logging.basicConfig(level=root_level, handlers=handlers, format=fmt, force=True)
        setattr(root, "_word_counter_logging", signature)

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return {
            'analysis': {
                'top_words': 10,
            },
            'files': {
                'allowed_extension': ".txt",
                'encoding': "utf-8",
                'results_folder': "data/results",
                'default_results_filename': "analysis_results.txt",
            },
            'export': {
                'summary_sheet_name': "Summary",
                'frequency_sheet_name': "Frequency",
            },
            'logging': {
                'level': "INFO",
                'format': "%(asctime)s - %(levelname)s - %(message)s",
                'log_to_file': False,
                'log_dir': "logs",
                'max_log_files': 10,
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            value = self.config_data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_env(self, key: str, default: Any = None) -> Any:
        """Получает значение переменной окружения WORD_COUNTER_*"""
        return self.env_data.get(key, default)

    def get_analysis_config(self) -> Dict[str, Any]:
        """Получает конфигурацию анализа"""
        return self.config_data.get('analysis', {})

    def get_files_config(self) -> Dict[str, Any]:
        """Получает конфигурацию файлов"""
        return self.config_data.get('files', {})

    def get_logging_config(self) -> Dict[str, Any]:
        """Получает конфигурацию логирования"""
        return self.config_data.get('logging', {})

    def get_top_words(self) -> int:
        """Сколько слов показывать в рейтинге"""
        return self.get('analysis.top_words', 10)

    def get_allowed_extension(self) -> str:
        """Расширение файлов, которые можно открыть"""
        return self.get('files.allowed_extension', ".txt")

    def get_file_encoding(self) -> str:
        return self.get('files.encoding', "utf-8")

    def get_results_folder(self) -> str:
        """Получает папку для результатов экспорта"""
        return self.get('files.results_folder', "data/results")

    def get_default_results_filename(self) -> str:
        return self.get('files.default_results_filename', "analysis_results.txt")

    def get_summary_sheet_name(self) -> str:
        return self.get('export.summary_sheet_name', "Summary")

    def get_frequency_sheet_name(self) -> str:
        return self.get('export.frequency_sheet_name', "Frequency")

    def get_console_logging_level(self) -> str:
        """Получает уровень логирования для консоли"""
        # logging.level поддерживается для обратной совместимости
        return self.get('logging.console_level', self.get('logging.level', "INFO"))

    def get_file_logging_level(self) -> str:
        """Получает уровень логирования для файла"""
        return self.get('logging.file_level', "DEBUG")

    def get_logging_level(self) -> str:
        return self.get_console_logging_level()

    def get_logging_format(self) -> str:
        """Получает формат логов"""
        return self.get('logging.format', "%(asctime)s - %(levelname)s - %(message)s")

    def is_logging_to_file_enabled(self) -> bool:
        """Проверяет, включено ли логирование в файл"""
        return bool(self.get('logging.log_to_file', False))

    def get_log_dir(self) -> str:
        return self.get('logging.log_dir', "logs")

    def get_logging_file(self) -> str:
        """Генерирует имя файла лога для текущей сессии с временной меткой"""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return str(Path(self.get_log_dir()) / f"word_counter_{timestamp}.log")

    def get_max_log_files(self) -> int:
        """Получает максимальное количество файлов логов для хранения"""
        return self.get('logging.max_log_files', 10)

    def cleanup_old_log_files(self) -> None:
        """Удаляет старые файлы логов, оставляя только последние max_log_files"""
        logs_dir = Path(self.get_log_dir())
        if not logs_dir.exists():
            return

        log_files = list(logs_dir.glob("word_counter_*.log"))
        max_files = max(int(self.get_max_log_files()), 0)
        if len(log_files) <= max_files:
            return

        # Самые новые - последними
        log_files.sort(key=lambda f: f.stat().st_mtime)
        for old_file in log_files[:len(log_files) - max_files]:
            try:
                old_file.unlink()
                logger.debug(f"Удален старый лог файл: {old_file}")
            except OSError as e:
                logger.debug(f"Не удалось удалить лог файл {old_file}: {e}")


# Глобальный экземпляр конфигурации
config = Config()
