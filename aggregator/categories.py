"""
aggregator/categories.py — zbiór rozpoznawanych kategorii sekcji.

CategorySet mapuje nazwy kategorii (i ich aliasy) na znaczniki:
  _by_key: znormalizowana nazwa → Category

Dopasowanie tytułu nagłówka to proste wyszukiwanie po kluczu
(normalize_title), bez hierarchii klas.
"""

from __future__ import annotations

import json
import pathlib
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

import jsonschema

from md_parser.parser import slugify

from .normalizer import normalize_title
from .schema import CATEGORY_CONFIG_SCHEMA


class CategoryConfigError(ValueError):
    """Niepoprawna konfiguracja kategorii (plik, schemat, duplikaty)."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        self.errors = errors or []
        detail = "".join(f"\n  - {e}" for e in self.errors)
        super().__init__(message + detail)


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Category:
    """
    Rozpoznawana kategoria sekcji.

    - name:    nazwa kanoniczna, np. "Error Handling"
    - tag:     znacznik w RuleEntry, np. "error-handling"
    - aliases: alternatywne tytuły nagłówków
    """

    name: str
    tag: str
    aliases: tuple[str, ...] = ()

    @property
    def titles(self) -> tuple[str, ...]:
        return (self.name, *self.aliases)


def _tag_for(name: str) -> str:
    return slugify(name).strip("-") or "category"


# Domyślny zbiór: sekcje spotykane w przewodnikach stylu C, C++, Java,
# JavaScript, TypeScript i Python.
DEFAULT_CATEGORIES: tuple[Category, ...] = (
    Category("Naming Conventions", "naming", ("Naming",)),
    Category("Formatting", "formatting", ("Code Formatting", "Code Style", "Layout")),
    Category("Comments", "comments", ("Commenting",)),
    Category("Documentation", "documentation", ("Docstrings",)),
    Category("Error Handling", "error-handling", ("Exception Handling", "Exceptions")),
    Category("Memory Management", "memory-management", ("Resource Management",)),
    Category("Security", "security", ("Security Practices",)),
    Category("Performance", "performance", ("Optimization",)),
    Category("Testing", "testing", ("Unit Testing", "Tests")),
    Category("Concurrency", "concurrency", ("Multithreading", "Threading")),
    Category("Code Organization", "organization", ("Project Structure", "Modules")),
    Category("Best Practices", "best-practices", ("General Best Practices",)),
)


# ---------------------------------------------------------------------------
# CategorySet
# ---------------------------------------------------------------------------

class CategorySet:
    """
    Indeks kategorii do dopasowywania tytułów nagłówków.

    Użycie:
        categories = CategorySet.from_file("categories.json")
        cat = categories.match("3. Error Handling:")
        if cat is not None:
            print(cat.tag)
    """

    def __init__(self, categories: Iterable[Category]) -> None:
        self._categories: list[Category] = []
        self._by_key: dict[str, Category] = {}

        duplicates: list[str] = []
        for cat in categories:
            self._categories.append(cat)
            for title in cat.titles:
                key = normalize_title(title)
                if key in self._by_key and self._by_key[key] is not cat:
                    duplicates.append(
                        f"'{title}' ({cat.name}) koliduje z "
                        f"'{self._by_key[key].name}'"
                    )
                    continue
                self._by_key[key] = cat

        if duplicates:
            raise CategoryConfigError("Powtórzone nazwy kategorii:", duplicates)

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    @property
    def tags(self) -> list[str]:
        return [c.tag for c in self._categories]

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def match(self, title: str) -> Category | None:
        """Kategoria, której nazwa lub alias odpowiada tytułowi nagłówka."""
        return self._by_key.get(normalize_title(title))

    # ------------------------------------------------------------------
    # Konstruktory fabryczne
    # ------------------------------------------------------------------

    @classmethod
    def default(cls) -> "CategorySet":
        return cls(DEFAULT_CATEGORIES)

    @classmethod
    def from_names(cls, names: str | Iterable[str]) -> "CategorySet":
        """Buduje zbiór z listy nazw ("Security, Error Handling" lub lista)."""
        if isinstance(names, str):
            names = names.split(",")
        cats = [Category(n.strip(), _tag_for(n.strip())) for n in names if n.strip()]
        if not cats:
            raise CategoryConfigError("Pusta lista kategorii.")
        return cls(cats)

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "CategorySet":
        """Buduje zbiór z konfiguracji zgodnej z CATEGORY_CONFIG_SCHEMA."""
        validator = jsonschema.Draft202012Validator(CATEGORY_CONFIG_SCHEMA)
        errors: list[str] = []
        violations = sorted(
            validator.iter_errors(config),
            key=lambda e: [str(p) for p in e.absolute_path],
        )
        for e in violations:
            path = (
                "/" + "/".join(str(p) for p in e.absolute_path)
                if e.absolute_path
                else "/"
            )
            errors.append(f"{path}: {e.message}")
        if errors:
            raise CategoryConfigError("Konfiguracja kategorii narusza schemat:", errors)

        return cls(
            Category(
                name=c["name"],
                tag=c.get("tag") or _tag_for(c["name"]),
                aliases=tuple(c.get("aliases", [])),
            )
            for c in config["categories"]
        )

    @classmethod
    def from_file(cls, path: str | pathlib.Path) -> "CategorySet":
        """Ładuje konfigurację kategorii z pliku JSON."""
        path = pathlib.Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise CategoryConfigError(f"Nie można odczytać {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise CategoryConfigError(f"Błąd parsowania JSON w {path}: {e}") from e
        return cls.from_dict(data)
