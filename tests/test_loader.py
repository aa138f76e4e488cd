from __future__ import annotations

from pathlib import Path

import pytest

from loader import DocumentLoader, NotFoundError, ReadError, load_documents


def test_missing_root_raises_not_found(tmp_path: Path) -> None:
    missing = tmp_path / "nope"

    with pytest.raises(NotFoundError) as exc:
        list(DocumentLoader(missing))
    assert exc.value.root == missing

    with pytest.raises(NotFoundError):
        load_documents(missing)


def test_root_that_is_a_file_raises_not_found(tmp_path: Path) -> None:
    f = tmp_path / "file.md"
    f.write_text("# x\n", encoding="utf-8")
    with pytest.raises(NotFoundError):
        load_documents(f)


def test_empty_root_yields_nothing(make_tree) -> None:
    root = make_tree({})
    assert load_documents(root) == []


def test_documents_in_lexicographic_path_order(make_tree) -> None:
    root = make_tree({
        "c/a.md": "# ca\n",
        "b.md": "# b\n",
        "c.md": "# c\n",
        "a.md": "# a\n",
    })
    assert [d.path for d in load_documents(root)] == ["a.md", "b.md", "c.md", "c/a.md"]


def test_only_recognized_extensions_and_no_hidden_files(make_tree) -> None:
    root = make_tree({
        "guide.md": "# g\n",
        "notes.MARKDOWN": "# n\n",
        "script.py": "print()\n",
        ".hidden.md": "# h\n",
        ".git/info.md": "# i\n",
        "image.png": b"\x89PNG",
    })
    assert [d.path for d in load_documents(root)] == ["guide.md", "notes.MARKDOWN"]


def test_custom_extensions_without_dot(make_tree) -> None:
    root = make_tree({"a.txt": "# a\n", "b.md": "# b\n"})
    assert [d.path for d in load_documents(root, ["txt"])] == ["a.txt"]


def test_undecodable_file_raises_read_error_with_path(make_tree) -> None:
    root = make_tree({"ok.md": "# ok\n", "sub/bad.md": b"# bad \xff\xfe\n"})

    with pytest.raises(ReadError) as exc:
        load_documents(root)
    assert exc.value.path == "sub/bad.md"


def test_loader_reads_lazily(make_tree) -> None:
    root = make_tree({"a.md": "# a\n", "z.md": b"# z \xff\n"})
    documents = iter(DocumentLoader(root))

    assert next(documents).path == "a.md"
    with pytest.raises(ReadError) as exc:
        next(documents)
    assert exc.value.path == "z.md"


def test_bom_and_crlf_are_normalized(make_tree) -> None:
    root = make_tree({"a.md": "\ufeff# Title\r\n\r\n## Next\r\n".encode("utf-8")})
    (doc,) = load_documents(root)

    assert doc.text == "# Title\n\n## Next\n"
    assert [(h.level, h.title, h.line) for h in doc.headings] == [
        (1, "Title", 1),
        (2, "Next", 3),
    ]


def test_loader_is_restartable(make_tree) -> None:
    root = make_tree({"a.md": "# a\n", "x/b.md": "# b\n## c\n"})
    loader = DocumentLoader(root)

    first = list(loader)
    second = list(loader)

    assert first == second
    assert len(first) == 2


def test_documents_are_immutable(make_tree) -> None:
    root = make_tree({"a.md": "# a\n"})
    (doc,) = load_documents(root)
    with pytest.raises(AttributeError):
        doc.text = "changed"  # type: ignore[misc]


def test_language_inferred_from_path(make_tree) -> None:
    root = make_tree({
        "README.md": "# index\n",
        "C++/style.md": "# s\n",
        "python/best.md": "# b\n",
        "rust/style.md": "# r\n",
    })
    langs = {d.path: d.language for d in load_documents(root)}
    assert langs == {
        "C++/style.md": "cpp",
        "README.md": "general",
        "python/best.md": "python",
        "rust/style.md": "rust",
    }
