"""
Manifest Loader - directory walker and YAML helpers for manifest trees.
Produces raw documents for the classifier; never writes anything.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Union

import yaml


@dataclass(frozen=True)
class RawDocument:
    """A file found under the manifest root, read but not yet decoded."""

    path: Path
    content: bytes

    @property
    def name(self) -> str:
        return self.path.name


def _iter_files_sorted(directory: Path) -> Iterator[Path]:
    """Yield files depth-first, entries sorted by name inside each directory."""
    for entry in sorted(directory.iterdir(), key=lambda item: item.name):
        if entry.is_dir():
            if entry.is_symlink():
                continue
            yield from _iter_files_sorted(entry)
            continue
        yield entry


def _read_documents(root: Path) -> Iterator[RawDocument]:
    for path in _iter_files_sorted(root):
        try:
            content = path.read_bytes()
        except OSError as exc:
            if exc.filename is None:
                exc.filename = str(path)
            raise
        yield RawDocument(path=path, content=content)


def iter_documents(root: Union[str, Path]) -> Iterator[RawDocument]:
    """
    Walk a manifest directory and lazily yield every regular file in it.

    Args:
        root: Path to the manifest root directory

    Returns:
        Iterator of RawDocument in deterministic per-run order

    Raises:
        FileNotFoundError: If root does not exist
        NotADirectoryError: If root is not a directory
        OSError: When any file cannot be read (raised during iteration,
            ``filename`` names the offending file)
    """
    root_path = Path(root)

    if not root_path.exists():
        raise FileNotFoundError(f"path '{root}' does not exist")
    if not root_path.is_dir():
        raise NotADirectoryError(f"path '{root}' is not a directory")

    return _read_documents(root_path)


def load_yaml_bytes(content: bytes) -> Any:
    """Parse the first YAML document from raw bytes (``None`` when empty).

    Later documents in the same stream are not read.
    """
    return next(yaml.safe_load_all(content), None)


if __name__ == '__main__':
    import sys

    manifests_path = sys.argv[1] if len(sys.argv) > 1 else '.'

    print(f"Listing manifests under: {manifests_path}")

    try:
        for document in iter_documents(manifests_path):
            print(f"  - {document.path} ({len(document.content)} bytes)")
    except OSError as e:
        print(f"ERROR Error reading manifests: {e}")
        sys.exit(1)
