"""
validator/document_index.py — indeks ścieżek dokumentów do rozwiązywania odnośników.

DocumentIndex buduje:
  _paths: frozenset względnych ścieżek POSIX wczytanych dokumentów

Rozwiązywanie celu względnego:
  - względem katalogu dokumentu źródłowego ("/..." — względem korzenia),
  - normalizacja "." i "..", wyjście ponad korzeń → nierozwiązany,
  - cel-katalog jest rozwiązany, gdy zawiera README.md lub index.md.
"""

from __future__ import annotations

import posixpath
from typing import Iterable

from data_model.documents import Document

# Dokumenty pełniące rolę indeksu katalogu.
DIRECTORY_INDEX_NAMES: tuple[str, ...] = ("README.md", "index.md")


class DocumentIndex:
    """Zbiór ścieżek dokumentów z wyszukiwaniem celów odnośników."""

    def __init__(self, documents: Iterable[Document]) -> None:
        self._paths: frozenset[str] = frozenset(d.path for d in documents)

    # ------------------------------------------------------------------
    # Rozwiązywanie celów
    # ------------------------------------------------------------------

    @staticmethod
    def join(source_dir: str, target_path: str) -> str | None:
        """
        Składa cel względny z katalogiem dokumentu źródłowego.

        Zwraca znormalizowaną ścieżkę względną albo None, gdy cel wychodzi
        ponad katalog treści.
        """
        if target_path.startswith("/"):
            joined = target_path.lstrip("/")
        else:
            joined = posixpath.join(source_dir, target_path)
        normalized = posixpath.normpath(joined) if joined else "."
        if normalized == ".." or normalized.startswith("../"):
            return None
        return normalized

    def resolve(self, source_dir: str, target_path: str) -> str | None:
        """Ścieżka dokumentu, na który wskazuje cel, albo None."""
        candidate = self.join(source_dir, target_path)
        if candidate is None:
            return None
        if candidate in self._paths:
            return candidate

        directory = "" if candidate == "." else candidate
        for name in DIRECTORY_INDEX_NAMES:
            index_path = posixpath.join(directory, name) if directory else name
            if index_path in self._paths:
                return index_path
        return None
