"""
aggregator — zbieranie i deduplikacja reguł wytycznych.

Interfejs publiczny:
    Aggregator          — dokumenty → RuleTable (język → list[RuleEntry])
    CategorySet         — rozpoznawane kategorie sekcji
    Category            — pojedyncza kategoria (nazwa, znacznik, aliasy)
    CategoryConfigError — niepoprawna konfiguracja kategorii
    DEFAULT_CATEGORIES  — domyślny zbiór kategorii
    normalize_rule_text — klucz deduplikacji
"""

from .categories import (
    DEFAULT_CATEGORIES,
    Category,
    CategoryConfigError,
    CategorySet,
)
from .normalizer import normalize_rule_text
from .aggregator import Aggregator

__all__ = [
    "Aggregator",
    "Category",
    "CategoryConfigError",
    "CategorySet",
    "DEFAULT_CATEGORIES",
    "normalize_rule_text",
]
