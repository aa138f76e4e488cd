"""
aggregator/aggregator.py — scalanie wytycznych w tabelę reguł.

Aggregator.aggregate(documents) -> RuleTable

Przebieg:
  1. Dla każdego dokumentu: bloki (nagłówki, elementy listy, tekst)
     z md_parser.scan_blocks.
  2. Stos nagłówków wyznacza bieżącą kategorię: nagłówek pasujący do
     CategorySet otwiera sekcję, która trwa do nagłówka tego samego lub
     wyższego poziomu; głębsze podnagłówki dziedziczą kategorię.
  3. Elementy listy w sekcji kategorii → kandydaci na reguły.
  4. Deduplikacja w obrębie języka po normalize_rule_text: pierwsze
     wystąpienie zostaje, kolejne źródła dopisywane do provenance. Ta sama
     reguła w dwóch językach daje dwa wpisy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from data_model.common import LanguageTag, RuleSource
from data_model.documents import Document
from data_model.rules import RuleEntry, RuleTable
from md_parser.parser import Block, BlockKind, scan_blocks

from .categories import CategorySet
from .normalizer import clean_item_text, normalize_rule_text

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Struktury robocze
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class _Candidate:
    source: RuleSource
    text: str
    category: str
    language: LanguageTag


@dataclass(slots=True)
class _Merged:
    first: _Candidate
    sources: list[RuleSource] = field(default_factory=list)

    def freeze(self) -> RuleEntry:
        return RuleEntry(
            source=self.first.source,
            section=self.first.source.section,
            text=self.first.text,
            category=self.first.category,
            language=self.first.language,
            provenance=tuple(self.sources),
        )


@dataclass(slots=True)
class _Section:
    level: int
    title: str
    category: str | None


# ---------------------------------------------------------------------------
# Aggregator
# ---------------------------------------------------------------------------

class Aggregator:
    """
    Zbiera reguły z list pod nagłówkami kategorii i deduplikuje je.

    Użycie:
        table = Aggregator(CategorySet.default()).aggregate(docs)
        for language, entries in table.items():
            print(language, len(entries))
    """

    def __init__(self, categories: CategorySet | None = None) -> None:
        self._categories = categories if categories is not None else CategorySet.default()

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def aggregate(self, documents: Iterable[Document]) -> RuleTable:
        merged: dict[tuple[LanguageTag, str], _Merged] = {}
        order: dict[LanguageTag, list[tuple[LanguageTag, str]]] = {}
        candidates_total = 0

        for doc in documents:
            for cand in self.collect(doc):
                candidates_total += 1
                key = (cand.language, normalize_rule_text(cand.text))
                entry = merged.get(key)
                if entry is None:
                    entry = merged[key] = _Merged(first=cand)
                    order.setdefault(cand.language, []).append(key)
                entry.sources.append(cand.source)

        table: RuleTable = {
            language: [merged[k].freeze() for k in keys]
            for language, keys in order.items()
        }
        logger.info(
            "Agregacja: %d kandydat(ów), %d unikalnych reguł",
            candidates_total, len(merged),
        )
        return table

    def collect(self, doc: Document) -> list[_Candidate]:
        """Kandydaci na reguły z jednego dokumentu, w kolejności linii."""
        out: list[_Candidate] = []
        language = doc.language
        stack: list[_Section] = []

        # bieżący element listy: (blok początkowy, części tekstu)
        item: tuple[Block, list[str]] | None = None

        def flush() -> None:
            nonlocal item
            if item is None:
                return
            start, parts = item
            item = None
            section = stack[-1] if stack else None
            if section is None or section.category is None:
                return
            text = clean_item_text(" ".join(parts))
            if not text:
                return
            out.append(_Candidate(
                source=RuleSource(path=doc.path, section=section.title, line=start.line),
                text=text,
                category=section.category,
                language=language,
            ))

        for block in scan_blocks(doc.text):
            match block.kind:
                case BlockKind.HEADING:
                    flush()
                    # Zdejmuj ze stosu sekcje na tym samym lub głębszym poziomie
                    while stack and stack[-1].level >= block.level:
                        stack.pop()
                    cat = self._categories.match(block.text)
                    if cat is not None:
                        category = cat.tag
                    else:
                        category = stack[-1].category if stack else None
                    stack.append(_Section(block.level, block.text, category))
                case BlockKind.ITEM:
                    flush()
                    if stack and stack[-1].category is not None:
                        item = (block, [block.text])
                case BlockKind.TEXT:
                    if item is not None and block.indent > 0:
                        item[1].append(block.text)
                    else:
                        flush()
                case BlockKind.BLANK:
                    pass

        flush()
        logger.debug("%s: %d kandydat(ów) [%s]", doc.path, len(out), language)
        return out
