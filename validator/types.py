"""
validator/types.py — kody znalezisk i struktury wyniku walidacji.

Finding — pojedyncza wada strukturalna dokumentu z kodem, ścieżką,
    numerem linii, komunikatem i mechaniczną instrukcją naprawy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class FindingCode(StrEnum):
    """Rodzaje wad strukturalnych (błędy treści — niekrytyczne)."""

    HEADING_SKIP = "HeadingSkipError"
    BROKEN_LINK  = "BrokenLinkError"


@dataclass(frozen=True, slots=True)
class Finding:
    """
    Pojedyncze znalezisko walidatora.

    - code:         rodzaj wady (FindingCode)
    - path:         ścieżka dokumentu, np. "c/style-guide.md"
    - line:         1-based numer linii nagłówka lub odnośnika
    - message:      czytelny opis wady
    - expected_fix: krótka mechaniczna instrukcja naprawy
    - target:       cel odnośnika (tylko BROKEN_LINK)
    - details:      opcjonalny słownik z dodatkowymi danymi
    """

    code: FindingCode
    path: str
    line: int
    message: str
    expected_fix: str
    target: str | None = None
    details: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def location(self) -> str:
        return f"{self.path}:{self.line}"
