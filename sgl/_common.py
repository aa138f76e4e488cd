"""Wspólne opcje i wczytywanie dokumentów dla komend sgl."""

from __future__ import annotations

import argparse
import pathlib

from rich.console import Console

from aggregator import CategoryConfigError, CategorySet
from data_model.documents import DocumentSet
from loader import AccessError, DocumentLoader, NotFoundError, ReadError
from sgl import _config

# Kod wyjścia dla błędów dostępu i konfiguracji (znaleziska → 1).
EXIT_ACCESS_ERROR = 2

console = Console()


def add_source_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "root",
        nargs="?",
        default=None,
        metavar="KATALOG",
        help="Katalog treści (domyślnie: SGL_ROOT lub bieżący katalog).",
    )
    p.add_argument(
        "--ext",
        nargs="+",
        default=None,
        metavar="ROZSZERZENIE",
        help="Rozpoznawane rozszerzenia plików (domyślnie: SGL_EXTENSIONS lub .md .markdown).",
    )


def add_categories_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--categories", "-c",
        default=None,
        metavar="PLIK",
        help="Plik JSON z kategoriami sekcji (domyślnie: SGL_CATEGORIES_FILE / SGL_CATEGORIES).",
    )


def load_documents_or_exit(args: argparse.Namespace) -> DocumentSet:
    root = pathlib.Path(args.root) if args.root else _config.content_root()
    exts = tuple(args.ext) if args.ext else _config.extensions()
    try:
        return list(DocumentLoader(root, exts))
    except NotFoundError as e:
        console.print(f"[red]Brak katalogu treści:[/red] {e.root}")
        raise SystemExit(EXIT_ACCESS_ERROR)
    except ReadError as e:
        console.print(f"[red]Błąd odczytu:[/red] {e.path} — {e.reason}")
        raise SystemExit(EXIT_ACCESS_ERROR)
    except AccessError as e:
        console.print(f"[red]Błąd dostępu:[/red] {e}")
        raise SystemExit(EXIT_ACCESS_ERROR)


def categories_or_exit(args: argparse.Namespace) -> CategorySet:
    try:
        return _config.category_set(getattr(args, "categories", None))
    except CategoryConfigError as e:
        console.print("[red]Błąd konfiguracji kategorii:[/red]")
        console.print(str(e), markup=False)
        raise SystemExit(EXIT_ACCESS_ERROR)
