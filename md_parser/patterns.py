"""
md_parser/patterns.py — wzorce regex do rozpoznawania struktur Markdown.

Wszystkie wzorce działają na pojedynczej linii (po rozwinięciu tabulatorów).
Rozpoznawane są tylko konstrukcje potrzebne walidatorowi i agregatorowi:

  HEADING_RE        — nagłówek ATX: "## Tytuł", opcjonalne zamykające '#'
  FENCE_RE          — otwarcie/zamknięcie bloku kodu: ``` lub ~~~
  LIST_ITEM_RE      — element listy: "-", "*", "+", "1.", "1)"
  THEMATIC_BREAK_RE — linia pozioma: "---", "***", "___"
  LINK_RE           — odnośnik inline [etykieta](cel "tytuł"), bez obrazków
  CODE_SPAN_RE      — kod inline `...` (odnośniki w nim nie są odnośnikami)
  TASK_BOX_RE       — pole listy zadań: "[ ]", "[x]"
"""

from __future__ import annotations

import re

# -------------------------------------------------------------------------
# Bloki
# -------------------------------------------------------------------------

# Do 3 spacji wcięcia, 1–6 znaków '#', co najmniej jedna spacja, tekst.
# Zamykająca sekwencja '#' musi być poprzedzona spacją ("C#" zostaje).
HEADING_RE = re.compile(r"^ {0,3}(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$")

# Wcięcie nie jest tu ograniczone: dopuszczalną głębokość (do 3 spacji poza
# listą, do kolumny treści elementu + 3 w liście) sprawdza iter_lines.
FENCE_RE = re.compile(r"^(?P<indent>[ ]*)(?P<fence>`{3,}|~{3,})")

LIST_ITEM_RE = re.compile(
    r"^(?P<indent>[ ]*)(?P<marker>[-*+]|\d{1,9}[.)])(?:[ \t]+(?P<text>.*))?$"
)

THEMATIC_BREAK_RE = re.compile(r"^ {0,3}([-*_])(?:[ \t]*\1){2,}[ \t]*$")

# -------------------------------------------------------------------------
# Inline
# -------------------------------------------------------------------------

# Etykieta: jeden poziom zagnieżdżonych nawiasów kwadratowych ("[the [C] guide]").
_LABEL = r"(?:[^\[\]]|\[[^\[\]]*\])*"

# Cel bez spacji: jeden poziom zrównoważonych nawiasów ("notes_(draft).md").
_TARGET = r"(?:[^()\s]|\([^()\s]*\))*"

LINK_RE = re.compile(
    rf"(?<!!)\[(?P<label>{_LABEL})\]"
    rf"\(\s*(?P<target><[^>]*>|{_TARGET})"
    r"(?:\s+(?:\"[^\"]*\"|'[^']*'))?\s*\)"
)

# Obrazki i odnośniki, do wyznaczania tekstu nagłówka dla sluga.
INLINE_LINK_OR_IMAGE_RE = re.compile(rf"!?\[({_LABEL})\]\((?:<[^>]*>|{_TARGET})[^)]*\)")

CODE_SPAN_RE = re.compile(r"(`+)(.+?)\1")

TASK_BOX_RE = re.compile(r"^\[[ xX]\](?:[ \t]+|$)")

# Znaki usuwane przy budowie sluga (wszystko poza literami, cyframi, '_',
# '-' i spacją).
SLUG_STRIP_RE = re.compile(r"[^\w\- ]", re.UNICODE)

WHITESPACE_RE = re.compile(r"\s+")
