"""Konfiguracja logowania CLI — RichHandler na stderr, instalowany raz."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_CONFIGURED = False


def configure_logging(level: int = logging.WARNING) -> None:
    """
    Instaluje RichHandler na loggerze głównym.

    Kolejne wywołania zmieniają tylko poziom — handler nie jest dublowany.
    """
    global _LOGGER_CONFIGURED

    root = logging.getLogger()
    root.setLevel(level)
    if _LOGGER_CONFIGURED:
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        show_time=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    _LOGGER_CONFIGURED = True
