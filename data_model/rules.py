"""
Struktury danych dla reguł wytycznych (rules).

RuleEntry to jedna znormalizowana, zdeduplikowana wskazówka wyciągnięta z
elementu listy pod rozpoznanym nagłówkiem kategorii.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from .common import LanguageTag, RuleSource

# ---------------------------------------------------------------------------
# Aliasy typów
# ---------------------------------------------------------------------------

# Znacznik kategorii, np. "security", "error-handling"
CategoryTag: TypeAlias = str


# ---------------------------------------------------------------------------
# RuleEntry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RuleEntry:
    """
    Reguła wytycznych po deduplikacji.

    - source:     pierwsze wystąpienie reguły
    - section:    tytuł sekcji pierwszego wystąpienia
    - text:       treść reguły (pierwsze wystąpienie, whitespace zwinięty)
    - category:   znacznik kategorii nagłówka, pod którym ją znaleziono
    - language:   znacznik języka dokumentu pierwszego wystąpienia
    - provenance: wszystkie wystąpienia w kolejności wczytania
                  (pierwsze włącznie)
    """
    source: RuleSource
    section: str
    text: str
    category: CategoryTag
    language: LanguageTag
    provenance: tuple[RuleSource, ...]

    @property
    def is_duplicated(self) -> bool:
        """True gdy reguła wystąpiła więcej niż raz."""
        return len(self.provenance) > 1


# Wynik agregatora: język → reguły w kolejności wstawienia.
RuleTable: TypeAlias = dict[LanguageTag, list[RuleEntry]]
