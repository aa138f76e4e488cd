"""
aggregator/normalizer.py — normalizacja tekstu reguł i tytułów sekcji.

normalize_rule_text():  klucz deduplikacji (whitespace zwinięty, casefold)
clean_item_text():      treść reguły z elementu listy (bez pola zadania)
normalize_title():      tytuł nagłówka do dopasowania kategorii
"""

from __future__ import annotations

import re

from md_parser.patterns import TASK_BOX_RE, WHITESPACE_RE

# "1.", "2.3", "2.3.", "IV.", "A)" na początku tytułu
_ENUMERATOR_RE = re.compile(r"^(?:\d+(?:\.\d+)*[.)]?|[A-Za-z][.)]|[IVXLCDM]+\.)\s+")

# Znaczniki wyróżnienia i kodu inline
_EMPHASIS_RE = re.compile(r"[*_`]+")


def collapse_ws(s: str) -> str:
    return WHITESPACE_RE.sub(" ", s).strip()


def normalize_rule_text(text: str) -> str:
    """Klucz deduplikacji: tekst różniący się tylko białymi znakami lub
    wielkością liter daje ten sam klucz."""
    return collapse_ws(text).casefold()


def clean_item_text(text: str) -> str:
    """Treść reguły: bez pola listy zadań, whitespace zwinięty.
    Formatowanie inline (`kod`, **wyróżnienia**) zostaje bez zmian."""
    return collapse_ws(TASK_BOX_RE.sub("", text.strip()))


def normalize_title(title: str) -> str:
    """
    Tytuł nagłówka sprowadzony do postaci porównywalnej z nazwą kategorii.

      "3. Error Handling:"   → "error handling"
      "**Security**"         → "security"
      "A) Memory  Management" → "memory management"
    """
    text = collapse_ws(title)
    text = _ENUMERATOR_RE.sub("", text)
    text = _EMPHASIS_RE.sub("", text)
    text = text.rstrip(":").strip()
    return collapse_ws(text).casefold()
