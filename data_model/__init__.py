"""
data_model — struktury danych styleguide-lint.

Użycie:
  from data_model import Document, Heading, LinkReference, RuleEntry, ...

Moduły:
  common    — DocPath, LanguageTag, RuleSource, infer_language,
              normalize_language
  documents — Document, Heading, LinkReference, DocumentSet
  rules     — RuleEntry, CategoryTag, RuleTable

Wszystkie rekordy są niemutowalne (frozen dataclass) — po utworzeniu nie
są zmieniane ani współdzielone między wynikami.
"""

from .common import (
    DocPath,
    LanguageTag,
    GENERAL_LANGUAGE,
    LANGUAGE_ALIASES,
    RuleSource,
    infer_language,
    normalize_language,
)
from .documents import (
    Heading,
    Document,
    DocumentSet,
    LinkReference,
)
from .rules import (
    CategoryTag,
    RuleEntry,
    RuleTable,
)

__all__ = [
    # common
    "DocPath",
    "LanguageTag",
    "GENERAL_LANGUAGE",
    "LANGUAGE_ALIASES",
    "RuleSource",
    "infer_language",
    "normalize_language",
    # documents
    "Heading",
    "Document",
    "DocumentSet",
    "LinkReference",
    # rules
    "CategoryTag",
    "RuleEntry",
    "RuleTable",
]
