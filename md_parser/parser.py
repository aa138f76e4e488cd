"""md_parser/parser.py — liniowe skanowanie dokumentu Markdown."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterator

from data_model.documents import Heading, LinkReference

from md_parser.patterns import (
    CODE_SPAN_RE,
    FENCE_RE,
    HEADING_RE,
    INLINE_LINK_OR_IMAGE_RE,
    LINK_RE,
    LIST_ITEM_RE,
    SLUG_STRIP_RE,
    THEMATIC_BREAK_RE,
    WHITESPACE_RE,
)

# Szerokość tabulatora przy wyznaczaniu wcięć.
_TAB_SIZE = 4


class BlockKind(StrEnum):
    HEADING = "heading"
    ITEM    = "item"
    TEXT    = "text"
    BLANK   = "blank"


@dataclass(frozen=True, slots=True)
class Block:
    """
    Jedna linia dokumentu poza blokami kodu, sklasyfikowana.

    - kind:   rodzaj linii
    - line:   1-based numer linii
    - text:   treść bez markerów (tytuł nagłówka, tekst elementu listy)
    - level:  poziom nagłówka (0 dla pozostałych)
    - indent: wcięcie w spacjach (dla elementów listy i tekstu)
    """
    kind: BlockKind
    line: int
    text: str = ""
    level: int = 0
    indent: int = 0


# ---------------------------------------------------------------------------
# Bloki kodu
# ---------------------------------------------------------------------------

def iter_lines(text: str) -> Iterator[tuple[int, str, bool]]:
    """
    Zwraca (numer_linii, linia, w_kodzie) dla każdej linii tekstu.

    Linie otwierające i zamykające blok kodu też mają w_kodzie=True.
    Blok zamyka ten sam znak (` lub ~) w co najmniej tej samej liczbie;
    niezamknięty blok trwa do końca dokumentu.

    Ogrodzenie może mieć do 3 spacji wcięcia względem kolumny treści
    bieżącego elementu listy (poza listą: względem początku linii), więc
    bloki kodu zagnieżdżone w elementach listy też są rozpoznawane.
    """
    fence: str | None = None
    # Kolumna treści bieżącego elementu listy (0 poza listą).
    item_column = 0
    for lineno, raw in enumerate(text.split("\n"), start=1):
        line = raw.expandtabs(_TAB_SIZE)
        m = FENCE_RE.match(line)
        fence_ok = m is not None and len(m.group("indent")) <= item_column + 3
        if fence is None:
            if fence_ok:
                fence = m.group("fence")
                yield lineno, line, True
                continue
            item_column = _item_column(line, item_column)
            yield lineno, line, False
        else:
            if (
                fence_ok
                and m.group("fence")[0] == fence[0]
                and len(m.group("fence")) >= len(fence)
                and not line[m.end():].strip()
            ):
                fence = None
            yield lineno, line, True


def _item_column(line: str, current: int) -> int:
    """Kolumna treści elementu listy po linii spoza bloku kodu."""
    if not line.strip():
        return current
    if HEADING_RE.match(line) or THEMATIC_BREAK_RE.match(line):
        return 0
    item = LIST_ITEM_RE.match(line)
    if item:
        if item.group("text") is None:
            return item.end() + 1
        return item.start("text")
    # Tekst bez wcięcia kończy listę; wcięty jest kontynuacją elementu.
    return current if line.startswith(" ") else 0


# ---------------------------------------------------------------------------
# Nagłówki
# ---------------------------------------------------------------------------

def heading_text(title: str) -> str:
    """Tekst nagłówka tak jak po wyrenderowaniu: odnośniki → etykiety."""
    text = INLINE_LINK_OR_IMAGE_RE.sub(r"\1", title)
    return WHITESPACE_RE.sub(" ", text).strip()


def slugify(title: str) -> str:
    """
    Zamienia tytuł nagłówka na kotwicę w stylu GitHub.

      "Error Handling"           → "error-handling"
      "C++ Best Practices"       → "c-best-practices"
      "Naming & Layout"          → "naming--layout"
      "`malloc()` usage"         → "malloc-usage"
    """
    text = heading_text(title).lower()
    text = SLUG_STRIP_RE.sub("", text)
    return text.replace(" ", "-")


def extract_headings(text: str) -> tuple[Heading, ...]:
    """Nagłówki ATX poza blokami kodu, ze slugami unikalnymi w dokumencie."""
    headings: list[Heading] = []
    slug_seen: dict[str, int] = {}

    def make_slug(title: str) -> str:
        base = slugify(title)
        n = slug_seen.get(base, 0)
        slug_seen[base] = n + 1
        return base if n == 0 else f"{base}-{n}"

    for lineno, line, in_code in iter_lines(text):
        if in_code:
            continue
        m = HEADING_RE.match(line)
        if not m:
            continue
        title = m.group(2).strip()
        headings.append(Heading(
            level=len(m.group(1)),
            title=title,
            line=lineno,
            slug=make_slug(title),
        ))

    return tuple(headings)


# ---------------------------------------------------------------------------
# Odnośniki
# ---------------------------------------------------------------------------

def _blank_code_spans(line: str) -> str:
    # Zachowuje długość linii: pozycje dopasowań się nie przesuwają.
    return CODE_SPAN_RE.sub(lambda m: " " * len(m.group(0)), line)


def extract_links(source: str, text: str) -> list[LinkReference]:
    """
    Odnośniki inline `[etykieta](cel)` w kolejności występowania.

    Pomijane są: obrazki, odnośniki w blokach kodu i w kodzie inline,
    odnośniki z pustym celem.
    """
    links: list[LinkReference] = []
    for lineno, line, in_code in iter_lines(text):
        if in_code or "](" not in line:
            continue
        for m in LINK_RE.finditer(_blank_code_spans(line)):
            target = m.group("target").strip()
            if target.startswith("<") and target.endswith(">"):
                target = target[1:-1].strip()
            if not target:
                continue
            links.append(LinkReference(
                source=source,
                target=target,
                line=lineno,
                label=m.group("label").strip(),
            ))
    return links


# ---------------------------------------------------------------------------
# Bloki (nagłówki, elementy listy, tekst)
# ---------------------------------------------------------------------------

def scan_blocks(text: str) -> list[Block]:
    """
    Spłaszczona lista sklasyfikowanych linii dokumentu.

    Linie bloków kodu są pomijane w całości. Linia pozioma ("---") jest
    zwracana jako TEXT bez wcięcia (kończy listę).
    """
    blocks: list[Block] = []
    for lineno, line, in_code in iter_lines(text):
        if in_code:
            continue
        if not line.strip():
            blocks.append(Block(BlockKind.BLANK, lineno))
            continue
        if THEMATIC_BREAK_RE.match(line):
            blocks.append(Block(BlockKind.TEXT, lineno, line.strip()))
            continue
        m = HEADING_RE.match(line)
        if m:
            blocks.append(Block(
                BlockKind.HEADING, lineno, m.group(2).strip(), level=len(m.group(1)),
            ))
            continue
        m = LIST_ITEM_RE.match(line)
        if m:
            blocks.append(Block(
                BlockKind.ITEM,
                lineno,
                (m.group("text") or "").strip(),
                indent=len(m.group("indent")),
            ))
            continue
        stripped = line.lstrip(" ")
        blocks.append(Block(
            BlockKind.TEXT, lineno, stripped.strip(), indent=len(line) - len(stripped),
        ))
    return blocks
