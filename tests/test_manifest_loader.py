from __future__ import annotations

from pathlib import Path

import pytest

from manifest_tools.manifest_loader import RawDocument, iter_documents


def test_missing_root_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        iter_documents(tmp_path / "nope")


def test_file_root_raises_not_a_directory(tmp_path: Path) -> None:
    target = tmp_path / "single.yaml"
    target.write_text("kind: Secret\n", encoding="utf-8")
    with pytest.raises(NotADirectoryError):
        iter_documents(target)


def test_root_errors_are_raised_before_iteration(tmp_path: Path) -> None:
    # no next() call: the check must not be deferred to the generator body
    with pytest.raises(FileNotFoundError):
        iter_documents(str(tmp_path / "missing"))


def test_walk_is_recursive_sorted_and_skips_directories(manifests) -> None:
    manifests("b.yaml", "kind: B\n")
    manifests("a/z.yaml", "kind: Z\n")
    manifests("a/nested/y.yaml", "kind: Y\n")
    manifests("c.txt", "not yaml at all")
    (manifests.root / "empty-dir").mkdir()

    documents = list(iter_documents(manifests.root))

    rel = [doc.path.relative_to(manifests.root).as_posix() for doc in documents]
    assert rel == ["a/nested/y.yaml", "a/z.yaml", "b.yaml", "c.txt"]
    assert all(isinstance(doc, RawDocument) for doc in documents)
    assert documents[2].content == b"kind: B\n"
    assert documents[2].name == "b.yaml"


def test_iteration_is_lazy(manifests) -> None:
    manifests("one.yaml", "kind: One\n")
    manifests("two.yaml", "kind: Two\n")

    documents = iter_documents(manifests.root)
    first = next(documents)

    assert first.name == "one.yaml"
    assert next(documents).name == "two.yaml"
    with pytest.raises(StopIteration):
        next(documents)


def test_read_failure_aborts_with_offending_path(manifests, monkeypatch: pytest.MonkeyPatch) -> None:
    manifests("ok.yaml", "kind: Secret\n")
    broken = manifests("zz-broken.yaml", "kind: Secret\n")
    original = Path.read_bytes

    def flaky_read(self: Path) -> bytes:
        if self.name == broken.name:
            raise PermissionError(13, "Permission denied")
        return original(self)

    monkeypatch.setattr(Path, "read_bytes", flaky_read)

    documents = iter_documents(manifests.root)
    assert next(documents).name == "ok.yaml"
    with pytest.raises(OSError) as exc_info:
        next(documents)
    assert exc_info.value.filename == str(broken)


def test_rescan_is_deterministic(valid_cluster: Path) -> None:
    first = [(doc.path, doc.content) for doc in iter_documents(valid_cluster)]
    second = [(doc.path, doc.content) for doc in iter_documents(valid_cluster)]
    assert first == second
