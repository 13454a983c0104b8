"""Наборы текстов для тестирования.

Содержит простой текст, текст с абзацами, текст с повторами
и текст с пунктуацией внутри слов.
"""

SAMPLE_SIMPLE_TEXT = "Hello world. Hello again!\n\nNew paragraph here."


SAMPLE_PARAGRAPHS_TEXT = (
    "The first paragraph has two sentences. This is the second one.\n"
    "\n"
    "The second paragraph asks a question? It does!\n"
    "\n"
    "\n"
    "Third paragraph, no terminator"
)


SAMPLE_REPEATED_TEXT = "a a a b b c"


SAMPLE_PUNCTUATION_TEXT = (
    "Don't stop (now)! \"Well-known\" [items]; {braces}: 'quoted', yes?"
)
