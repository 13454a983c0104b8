"""
Компонент для экспорта результатов анализа.

Отвечает за экспорт результатов в структурированные форматы:
Excel (сводка + частотность), CSV с рейтингом слов, JSON с временной меткой.
Текстовый отчёт сохраняется через FileHandler, а не здесь.
"""

import json
import csv
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Union, Any
import pandas as pd
from ..interfaces.text_analyzer import ResultExporterInterface, AnalysisResult
from .frequency_analyzer import FrequencyAnalyzer
import logging

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ('json', 'csv', 'xlsx')


class ResultExporter(ResultExporterInterface):
    """Экспортёр результатов анализа."""

    def __init__(self,
                 output_dir: str = "data/results",
                 summary_sheet_name: str = "Summary",
                 frequency_sheet_name: str = "Frequency"):
        """
        Инициализирует экспортёр.

        Args:
            output_dir: Папка для сохранения результатов (используется в export_all_formats)
            summary_sheet_name: Название листа Excel со сводкой
            frequency_sheet_name: Название листа Excel с частотностью
        """
        self.output_dir = Path(output_dir)
        self.summary_sheet_name = summary_sheet_name
        self.frequency_sheet_name = frequency_sheet_name
        self.frequency_analyzer = FrequencyAnalyzer()

    def _ranked_rows(self, result: AnalysisResult) -> List[Dict[str, Any]]:
        """Полный рейтинг слов (все слова, без ограничения top-N)"""
        ranked = self.frequency_analyzer.get_most_frequent(result.word_frequency, len(result.word_frequency))
        return [
            {'rank': rank, 'word': word, 'count': count}
            for rank, (word, count) in enumerate(ranked, 1)
        ]

    def _summary_rows(self, result: AnalysisResult) -> Dict[str, List[Any]]:
        return {
            'Metric': [
                'Words',
                'Characters (with spaces)',
                'Characters (without spaces)',
                'Sentences',
                'Paragraphs',
                'Unique words',
            ],
            'Value': [
                result.word_count,
                result.character_count,
                result.character_count_no_spaces,
                result.sentence_count,
                result.paragraph_count,
                result.unique_word_count,
            ],
        }

    @staticmethod
    def _prepare_path(filepath: Union[str, Path], suffix: str) -> Path:
        filepath = Path(filepath)
        if not filepath.suffix:
            filepath = filepath.with_suffix(suffix)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        return filepath

    def export_to_excel(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует результат в Excel формат.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        filepath = self._prepare_path(filepath, '.xlsx')

        summary_df = pd.DataFrame(self._summary_rows(result))
        freq_df = pd.DataFrame(self._ranked_rows(result), columns=['rank', 'word', 'count'])

        with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
            summary_df.to_excel(writer, sheet_name=self.summary_sheet_name, index=False)
            freq_df.to_excel(writer, sheet_name=self.frequency_sheet_name, index=False)

        logger.info(f"Результат экспортирован в Excel: {filepath}")
        return filepath

    def export_to_csv(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует рейтинг слов в CSV.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        filepath = self._prepare_path(filepath, '.csv')
        rows = self._ranked_rows(result)

        with open(filepath, 'w', newline='', encoding='utf-8') as csvfile:
            writer = csv.DictWriter(csvfile, fieldnames=['rank', 'word', 'count'])
            writer.writeheader()
            writer.writerows(rows)

        logger.info(f"Результат экспортирован в CSV: {filepath} ({len(rows)} слов)")
        return filepath

    def export_to_json(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует результат в JSON формат.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        filepath = self._prepare_path(filepath, '.json')

        json_data = {
            'metadata': {
                'timestamp': datetime.now().isoformat(),
                'unique_words': result.unique_word_count,
                'frequency_tokens': result.frequency_token_count,
            },
            'statistics': result.to_dict(),
            'ranking': self._ranked_rows(result),
            'frequency_distribution': {
                str(freq): words
                for freq, words in self.frequency_analyzer.get_frequency_distribution(result.word_frequency).items()
            },
        }

        with open(filepath, 'w', encoding='utf-8') as jsonfile:
            json.dump(json_data, jsonfile, ensure_ascii=False, indent=2)

        logger.info(f"Результат экспортирован в JSON: {filepath}")
        return filepath

    def export(self, result: AnalysisResult, filepath: Union[str, Path], fmt: str) -> Path:
        """Экспорт в формат по имени ('json', 'csv', 'xlsx')"""
        fmt = fmt.lower().lstrip('.')
        if fmt == 'json':
            return self.export_to_json(result, filepath)
        if fmt == 'csv':
            return self.export_to_csv(result, filepath)
        if fmt in ('xlsx', 'excel'):
            return self.export_to_excel(result, filepath)
        raise ValueError(f"Неизвестный формат экспорта: {fmt}")

    def export_all_formats(self, result: AnalysisResult, base_filename: str) -> Dict[str, Path]:
        """
        Экспортирует результат во все доступные форматы в output_dir.

        Args:
            result: Результат анализа
            base_filename: Базовое имя файла без расширения

        Returns:
            Словарь с путями к экспортированным файлам
        """
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        base_filename = f"{base_filename}_{timestamp}"

        exported_files = {
            'excel': self.export_to_excel(result, self.output_dir / f"{base_filename}.xlsx"),
            'csv': self.export_to_csv(result, self.output_dir / f"{base_filename}.csv"),
            'json': self.export_to_json(result, self.output_dir / f"{base_filename}.json"),
        }

        logger.info(f"Результат экспортирован во все форматы в папку: {self.output_dir}")
        return exported_files
