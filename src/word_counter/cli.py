#!/usr/bin/env python3
"""
Интерфейс командной строки для Word Counter

Режимы:
1. Анализ файла или текста из аргументов/stdin с выводом отчёта
2. Сохранение отчёта и экспорт в JSON/CSV/Excel
3. Интерактивный режим (открыть файл, ввести текст, анализ, сохранение, очистка)
"""

import os
import sys
import argparse
from typing import List, Optional

from .components.exporter import EXPORT_FORMATS, ResultExporter
from .components.report_formatter import ReportFormatter
from .config import config
from .session import ActionOutcome, AnalysisSession


def _print_outcome(outcome: ActionOutcome) -> None:
    if outcome.ok:
        print(f"✅ {outcome.message}")
    else:
        print(f"❌ {outcome.message}", file=sys.stderr)


def _build_session(top_n: Optional[int] = None) -> AnalysisSession:
    formatter = ReportFormatter(top_n=top_n or config.get_top_words())
    return AnalysisSession(formatter=formatter)


def _build_exporter() -> ResultExporter:
    return ResultExporter(
        output_dir=config.get_results_folder(),
        summary_sheet_name=config.get_summary_sheet_name(),
        frequency_sheet_name=config.get_frequency_sheet_name(),
    )


def _read_multiline_input() -> str:
    """Читает многострочный текст до строки из одной точки"""
    print("Введите текст. Для завершения введите строку из одной точки '.'")
    lines = []
    while True:
        try:
            line = input()
        except EOFError:
            break
        if line == '.':
            break
        lines.append(line)
    return "\n".join(lines)


def run_interactive(session: AnalysisSession) -> int:
    """Интерактивный режим, повторяющий кнопки оконного приложения"""
    while True:
        print(f"\n📌 Статус: {session.status}")
        print("📋 Доступные действия:")
        print("1. 📂 Открыть файл")
        print("2. ✏️  Ввести текст")
        print("3. 📊 Анализировать текст")
        print("4. 💾 Сохранить результаты")
        print("5. 🧹 Очистить всё")
        print("6. 🚪 Выход")

        try:
            choice = input("\nВыберите действие (1-6): ").strip()
        except EOFError:
            choice = '6'

        if choice == '1':
            try:
                path = input("Путь к файлу: ").strip()
            except EOFError:
                continue
            _print_outcome(session.open_file(path))
        elif choice == '2':
            session.set_text(_read_multiline_input())
            print(f"📝 Текст обновлён ({len(session.text)} символов)")
        elif choice == '3':
            outcome = session.analyze()
            _print_outcome(outcome)
            if outcome.ok:
                print()
                print(session.current_report, end='')
        elif choice == '4':
            default_name = config.get_default_results_filename()
            try:
                path = input(f"Файл для сохранения [{default_name}]: ").strip() or default_name
            except EOFError:
                continue
            _print_outcome(session.save_results(path))
        elif choice == '5':
            _print_outcome(session.clear())
        elif choice == '6':
            print("👋 До свидания!")
            return 0
        else:
            print("❌ Неверный выбор. Попробуйте снова.")


def run_batch(args: argparse.Namespace, session: AnalysisSession) -> int:
    """Неинтерактивный анализ: файл, --text или stdin"""
    if args.text is not None:
        session.set_text(args.text)
    elif args.file == '-':
        session.set_text(sys.stdin.read())
    else:
        outcome = session.open_file(args.file)
        if not outcome.ok:
            _print_outcome(outcome)
            return 1

    outcome = session.analyze()
    if not outcome.ok:
        _print_outcome(outcome)
        return 1

    print(session.current_report, end='')

    if args.save:
        outcome = session.save_results(args.save)
        _print_outcome(outcome)
        if not outcome.ok:
            return 1

    if args.export:
        try:
            path = _build_exporter().export(session.current_result, args.export, args.format)
        except OSError as e:
            print(f"❌ Не удалось выполнить экспорт: {e}", file=sys.stderr)
            return 1
        print(f"✅ Экспорт выполнен: {path}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="word-counter",
        description="Word Counter - статистика по тексту: слова, символы, предложения, абзацы, частотность",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  python -m word_counter.cli notes.txt                       # Отчёт по файлу
  python -m word_counter.cli --text "a a b"                  # Отчёт по тексту
  cat notes.txt | python -m word_counter.cli -               # Текст из stdin
  python -m word_counter.cli notes.txt --save report.txt     # Сохранить отчёт
  python -m word_counter.cli notes.txt --export out --format xlsx
  python -m word_counter.cli                                 # Интерактивный режим
        """
    )

    parser.add_argument('file', nargs='?', help="Файл .txt для анализа ('-' для stdin)")
    parser.add_argument('--text', help='Текст для анализа')
    parser.add_argument('--top', type=int, default=None, help='Сколько слов показывать в рейтинге')
    parser.add_argument('--save', help='Сохранить отчёт в файл')
    parser.add_argument('--export', help='Экспортировать результат в файл')
    parser.add_argument('--format', choices=EXPORT_FORMATS, default='json', help='Формат экспорта')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Основная функция CLI"""
    if os.environ.get('WORD_COUNTER_DEBUG') == '1':
        config._set_nested(config.config_data, 'logging.level', 'DEBUG')
    config._configure_logging_if_needed(force=True)

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.top is not None and args.top < 1:
        parser.error("--top должен быть не меньше 1")

    session = _build_session(args.top)

    if args.file is None and args.text is None:
        print("🔤 Word Counter - анализ текста")
        print("=" * 50)
        return run_interactive(session)

    return run_batch(args, session)


if __name__ == "__main__":
    sys.exit(main())
