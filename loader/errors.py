"""
loader/errors.py — błędy dostępu do zbioru dokumentów.

Błędy dostępu są krytyczne: bez pełnego zbioru dokumentów walidacja ani
agregacja nie mają sensu, więc przerywają przebieg i trafiają wprost do
wywołującego.
"""

from __future__ import annotations

import pathlib


class AccessError(Exception):
    """Bazowa klasa błędów materializacji zbioru dokumentów."""


class NotFoundError(AccessError):
    """Katalog treści nie istnieje lub nie jest katalogiem."""

    def __init__(self, root: str | pathlib.Path) -> None:
        self.root = pathlib.Path(root)
        super().__init__(f"Katalog treści nie istnieje: {self.root}")


class ReadError(AccessError):
    """Plik nie daje się odczytać lub zdekodować jako tekst UTF-8."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Nie można odczytać {path}: {reason}")
