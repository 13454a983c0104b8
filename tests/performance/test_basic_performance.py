import time

import pytest

from word_counter.text_analyzer import TextAnalyzer


@pytest.mark.performance
def test_analyze_basic_performance(sample_texts):
    """Проверяет, что анализ большого текста работает достаточно быстро."""
    analyzer = TextAnalyzer()
    text = (sample_texts["paragraphs"] + "\n\n") * 5000  # ~1 млн символов

    start = time.perf_counter()
    result = analyzer.analyze(text)
    duration = time.perf_counter() - start

    assert result.paragraph_count == 3 * 5000
    # Базовый грубый порог, чтобы ловить регрессии
    assert duration < 5.0, f"Слишком медленно: {duration:.3f}s"
