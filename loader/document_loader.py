"""
loader/document_loader.py — wczytywanie dokumentów z katalogu treści.

Publiczne API:
  DocumentLoader(root, extensions)   iterowalny, leniwy, wielokrotnego użytku
  load_documents(root, extensions)   → list[Document]
  DEFAULT_EXTENSIONS                 rozpoznawane rozszerzenia plików
"""

from __future__ import annotations

import logging
import pathlib
from typing import Iterable, Iterator

from data_model.documents import Document, DocumentSet
from md_parser.parser import extract_headings

from .errors import NotFoundError, ReadError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".md", ".markdown")

_BOM = "\ufeff"


def _normalize_extensions(extensions: Iterable[str]) -> frozenset[str]:
    out: set[str] = set()
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext:
            continue
        out.add(ext if ext.startswith(".") else f".{ext}")
    return frozenset(out)


def _is_hidden(rel: pathlib.PurePosixPath) -> bool:
    return any(part.startswith(".") for part in rel.parts)


class DocumentLoader:
    """
    Leniwa sekwencja dokumentów spod katalogu treści.

    Każde wywołanie iter() przechodzi katalog od nowa, więc kolejne
    przebiegi po niezmienionym katalogu dają identyczne wyniki. Kolejność:
    leksykograficzna po względnej ścieżce POSIX.

    Użycie:
        loader = DocumentLoader("docs")
        for doc in loader:
            print(doc.path, len(doc.headings))
    """

    def __init__(
        self,
        root: str | pathlib.Path,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    ) -> None:
        self.root = pathlib.Path(root)
        self.extensions = _normalize_extensions(extensions)

    def __iter__(self) -> Iterator[Document]:
        if not self.root.is_dir():
            raise NotFoundError(self.root)

        count = 0
        for rel in self._discover():
            yield self._read(rel)
            count += 1
        logger.info("Wczytano %d dokument(ów) z %s", count, self.root)

    # ------------------------------------------------------------------
    # Pomocnicze
    # ------------------------------------------------------------------

    def _discover(self) -> list[str]:
        paths: list[str] = []
        for p in self.root.rglob("*"):
            if p.suffix.lower() not in self.extensions or not p.is_file():
                continue
            rel = pathlib.PurePosixPath(p.relative_to(self.root).as_posix())
            if _is_hidden(rel):
                continue
            paths.append(str(rel))
        return sorted(paths)

    def _read(self, rel: str) -> Document:
        try:
            raw = (self.root / rel).read_bytes()
        except OSError as e:
            raise ReadError(rel, e.strerror or str(e)) from e
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ReadError(rel, f"niepoprawne UTF-8 (bajt {e.start})") from e

        if text.startswith(_BOM):
            text = text[len(_BOM):]
        text = text.replace("\r\n", "\n").replace("\r", "\n")

        doc = Document(path=rel, text=text, headings=extract_headings(text))
        logger.debug("%s: %d nagłówk(ów)", rel, len(doc.headings))
        return doc


def load_documents(
    root: str | pathlib.Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> DocumentSet:
    """Wczytuje wszystkie dokumenty naraz (NotFoundError / ReadError jak w iter)."""
    return list(DocumentLoader(root, extensions))
