"""
sgl — narzędzie CLI dla styleguide-lint.

Użycie:
  sgl [-v] <komenda> [opcje]

Komendy:
  check     Walidacja + agregacja + raport pass/fail (kod wyjścia 1 przy wadach).
  validate  Sprawdza hierarchię nagłówków i odnośniki względne.
  rules     Listuje reguły zebrane z list pod nagłówkami kategorii.
  outline   Wyświetla drzewo nagłówków każdego dokumentu.

Konfiguracja (zmienne środowiskowe):
  SGL_ROOT, SGL_EXTENSIONS, SGL_CATEGORIES, SGL_CATEGORIES_FILE, SGL_LOG_LEVEL
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console

from sgl import _config
from sgl._logging import configure_logging
from sgl.commands import check as cmd_check
from sgl.commands import validate as cmd_validate
from sgl.commands import rules as cmd_rules
from sgl.commands import outline as cmd_outline

__version__ = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sgl",
        description="styleguide-lint — walidacja i agregacja przewodników stylu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"sgl {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Logowanie na poziomie DEBUG (nadpisuje SGL_LOG_LEVEL).",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_check.add_parser(subparsers)
    cmd_validate.add_parser(subparsers)
    cmd_rules.add_parser(subparsers)
    cmd_outline.add_parser(subparsers)

    return parser


def _force_utf8() -> None:
    # Windows: terminal może używać cp1252, więc wymuszamy UTF-8, żeby polskie
    # znaki w tekstach pomocy i komunikatach były wypisywane poprawnie.
    for stream in (sys.stdout, sys.stderr):
        encoding = (getattr(stream, "encoding", None) or "").lower()
        if hasattr(stream, "reconfigure") and encoding not in ("utf-8", "utf8"):
            stream.reconfigure(encoding="utf-8", errors="replace")


def main(argv: list[str] | None = None) -> None:
    _force_utf8()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = logging.DEBUG if args.verbose else _config.log_level()
    except ValueError as e:
        Console(stderr=True).print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(2)
    configure_logging(level)

    args.func(args)


if __name__ == "__main__":
    main()
