from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from data_model.documents import Document
from md_parser.parser import extract_headings


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str | bytes]], Path]:
    """Tworzy katalog treści z mapy ścieżka → zawartość."""

    def _make(files: dict[str, str | bytes]) -> Path:
        root = tmp_path / "content"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def make_doc() -> Callable[[str, str], Document]:
    def _make(path: str, text: str) -> Document:
        return Document(path=path, text=text, headings=extract_headings(text))

    return _make


STYLEGUIDE_FILES: dict[str, str] = {
    "README.md": (
        "# Coding Guidelines\n"
        "\n"
        "Index of the per-language guides.\n"
        "\n"
        "## Languages\n"
        "\n"
        "- [C style guide](c/style-guide.md)\n"
        "- [C best practices](c/best-practices.md)\n"
        "- [Python](python/)\n"
        "- [Git conventions](https://git-scm.com/docs)\n"
    ),
    "c/style-guide.md": (
        "# C Style Guide\n"
        "\n"
        "## Naming Conventions\n"
        "\n"
        "- Use `snake_case` for functions.\n"
        "- Prefix globals with `g_`.\n"
        "\n"
        "## Formatting\n"
        "\n"
        "1. Indent with four spaces.\n"
        "2. Keep lines under 80 characters.\n"
        "\n"
        "See [best practices](best-practices.md#memory-management).\n"
    ),
    "c/best-practices.md": (
        "# C Best Practices\n"
        "\n"
        "## Memory Management\n"
        "\n"
        "- Free every allocation exactly once.\n"
        "- Check the result of `malloc`.\n"
        "\n"
        "## Security\n"
        "\n"
        "- Validate all external input.\n"
        "\n"
        "Back to [top](#c-best-practices).\n"
    ),
    "python/README.md": (
        "# Python\n"
        "\n"
        "- [Best practices](best-practices.md)\n"
    ),
    "python/best-practices.md": (
        "# Python Best Practices\n"
        "\n"
        "## Security\n"
        "\n"
        "- Validate  all external input.\n"
        "- Never call `eval` on untrusted data.\n"
        "\n"
        "## Testing\n"
        "\n"
        "- Write tests with pytest.\n"
    ),
}


@pytest.fixture
def styleguide_root(make_tree: Callable[[dict[str, str | bytes]], Path]) -> Path:
    return make_tree(STYLEGUIDE_FILES)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Zmienne SGL_* ze środowiska nie wpływają na testy."""
    for name in (
        "SGL_ROOT",
        "SGL_EXTENSIONS",
        "SGL_CATEGORIES",
        "SGL_CATEGORIES_FILE",
        "SGL_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
