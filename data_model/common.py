"""
Wspólne typy pierwotne używane przez documents i rules.

  DocPath         — względna ścieżka POSIX dokumentu (klucz unikalny)
  LanguageTag     — znacznik języka, np. "python", "cpp", "general"
  RuleSource      — jedno wystąpienie reguły w dokumencie (provenance)
  infer_language  — znacznik języka z pierwszego segmentu ścieżki
  normalize_language — nazwa lub alias języka → znacznik
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

# ---------------------------------------------------------------------------
# Aliasy typów
# ---------------------------------------------------------------------------

# np. "python/best-practices.md", "README.md"
DocPath: TypeAlias = str

# np. "python", "cpp", "general"
LanguageTag: TypeAlias = str


# Dokumenty leżące bezpośrednio w katalogu głównym treści.
GENERAL_LANGUAGE: LanguageTag = "general"

# Segment katalogu (lower-case) → znacznik języka.
LANGUAGE_ALIASES: dict[str, LanguageTag] = {
    "c":           "c",
    "cpp":         "cpp",
    "c++":         "cpp",
    "cplusplus":   "cpp",
    "cxx":         "cpp",
    "java":        "java",
    "javascript":  "javascript",
    "js":          "javascript",
    "typescript":  "typescript",
    "ts":          "typescript",
    "python":      "python",
    "py":          "python",
}


def infer_language(path: DocPath) -> LanguageTag:
    """
    Wyznacza znacznik języka z pierwszego segmentu ścieżki dokumentu.

      "python/style-guide.md"  → "python"
      "C++/best-practices.md"  → "cpp"
      "rust/style.md"          → "rust"   (nieznany katalog: segment lower-case)
      "README.md"              → "general"
    """
    parts = path.split("/")
    if len(parts) < 2:
        return GENERAL_LANGUAGE
    return normalize_language(parts[0])


def normalize_language(name: str) -> LanguageTag:
    """Nazwa języka (segment ścieżki, opcja CLI) → znacznik: "C++" → "cpp"."""
    key = name.strip().lower()
    return LANGUAGE_ALIASES.get(key, key)


# ---------------------------------------------------------------------------
# RuleSource
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RuleSource:
    """
    Ślad źródła reguły: dokument, sekcja i linia elementu listy.

    - path:    ścieżka dokumentu, np. "c/best-practices.md"
    - section: tytuł najbliższego nagłówka nad elementem listy
    - line:    1-based numer linii elementu listy
    """
    path: DocPath
    section: str
    line: int

    def __str__(self) -> str:
        return f"{self.path}:{self.line}"
