"""
data_model/documents.py — model wczytanego dokumentu Markdown.

Document odpowiada jednemu plikowi tekstowemu spod katalogu treści; jego
nagłówki (Heading) są wyznaczane raz, przy wczytaniu. LinkReference to
odnośnik inline `[etykieta](cel)` wyciągnięty z treści dokumentu.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TypeAlias
from urllib.parse import unquote

from .common import DocPath, LanguageTag, infer_language

# Schemat URL: "http:", "https:", "mailto:", "ftp:" ... (RFC 3986, sekcja 3.1)
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")


@dataclass(frozen=True, slots=True)
class Heading:
    level: int      # 1..6 (liczba znaków '#')
    title: str      # tekst nagłówka bez markerów
    line: int       # 1-based
    slug: str       # kotwica w stylu GitHub, unikalna w obrębie dokumentu


@dataclass(frozen=True, slots=True)
class Document:
    """
    Wczytany dokument i jego metadane strukturalne.

    - path:     względna ścieżka POSIX (klucz unikalny w zbiorze)
    - text:     surowa treść (znaki końca linii znormalizowane do \\n)
    - headings: nagłówki w kolejności dokumentu
    """
    path: DocPath
    text: str
    headings: tuple[Heading, ...] = field(default=())

    @property
    def language(self) -> LanguageTag:
        return infer_language(self.path)

    @property
    def anchors(self) -> frozenset[str]:
        """Slugi nagłówków (lower-case) — cele odnośników '#sekcja'."""
        return frozenset(h.slug.lower() for h in self.headings)

    @property
    def directory(self) -> str:
        """Katalog dokumentu względem katalogu treści ("" dla korzenia)."""
        head, _, _ = self.path.rpartition("/")
        return head


@dataclass(frozen=True, slots=True)
class LinkReference:
    """
    Odnośnik inline wyciągnięty z dokumentu.

    - source: ścieżka dokumentu zawierającego odnośnik
    - target: cel w postaci dosłownej, np. "../c/style.md#naming"
    - line:   1-based numer linii
    - label:  tekst etykiety
    """
    source: DocPath
    target: str
    line: int
    label: str = ""

    @property
    def is_external(self) -> bool:
        """True dla celów ze schematem URL lub zaczynających się od '//'."""
        return bool(_SCHEME_RE.match(self.target)) or self.target.startswith("//")

    @property
    def path_part(self) -> str:
        """Część ścieżkowa celu (bez '#kotwicy' i '?zapytania'), zdekodowana."""
        path = self.target.split("#", 1)[0].split("?", 1)[0]
        return unquote(path)

    @property
    def anchor(self) -> str | None:
        """Kotwica bez '#', None gdy cel jej nie ma."""
        if "#" not in self.target:
            return None
        return unquote(self.target.split("#", 1)[1])


# Kolekcja dokumentów w kolejności wczytania.
DocumentSet: TypeAlias = list[Document]
