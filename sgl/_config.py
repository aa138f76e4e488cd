"""Konfiguracja sgl — zmienne środowiskowe z wartościami domyślnymi."""

from __future__ import annotations

import logging
import os
import pathlib

from aggregator import CategorySet
from loader import DEFAULT_EXTENSIONS


def content_root() -> pathlib.Path:
    return pathlib.Path(os.getenv("SGL_ROOT", "."))


def extensions() -> tuple[str, ...]:
    raw = os.getenv("SGL_EXTENSIONS", ",".join(DEFAULT_EXTENSIONS))
    exts = tuple(e.strip() for e in raw.split(",") if e.strip())
    return exts or DEFAULT_EXTENSIONS


def log_level() -> int:
    """Poziom logowania z SGL_LOG_LEVEL (nazwa, np. "INFO")."""
    name = os.getenv("SGL_LOG_LEVEL", "WARNING").strip().upper()
    levels = logging.getLevelNamesMapping()
    if name not in levels:
        raise ValueError(
            f"Niepoprawny SGL_LOG_LEVEL={name!r}; dozwolone: "
            f"{', '.join(sorted(levels))}"
        )
    return levels[name]


def category_set(path: str | None = None) -> CategorySet:
    """
    Zbiór kategorii, w kolejności pierwszeństwa:
      1. jawna ścieżka (opcja --categories),
      2. SGL_CATEGORIES_FILE (plik JSON),
      3. SGL_CATEGORIES (nazwy po przecinku),
      4. DEFAULT_CATEGORIES.
    """
    path = path or os.getenv("SGL_CATEGORIES_FILE")
    if path:
        return CategorySet.from_file(path)
    names = os.getenv("SGL_CATEGORIES")
    if names and names.strip():
        return CategorySet.from_names(names)
    return CategorySet.default()
