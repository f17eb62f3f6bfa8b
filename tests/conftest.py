from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from helpers import host_yaml, secret_yaml


@pytest.fixture
def manifests(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a manifest file relative to a fresh manifest root (``manifests.root``)."""
    root = tmp_path / "manifests"
    root.mkdir()

    def write(relpath: str, text: str) -> Path:
        target = root / relpath
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
        return target

    write.root = root  # type: ignore[attr-defined]
    return write


@pytest.fixture
def valid_cluster(manifests: Callable[[str, str], Path]) -> Path:
    """One bootstrap, three masters, one worker, all with credentials."""
    manifests("secrets/bootstrap-bmc.yaml", secret_yaml("bootstrap-bmc"))
    manifests("secrets/master-bmc.yaml", secret_yaml("master-bmc", "admin", "hunter2"))
    manifests("hosts/bootstrap.yaml", host_yaml("bootstrap-0", "bootstrap", "bootstrap-bmc"))
    for idx in range(3):
        manifests(f"hosts/master-{idx}.yaml", host_yaml(f"master-{idx}", "master", "master-bmc"))
    manifests("hosts/worker-0.yaml", host_yaml("worker-0", "worker", "master-bmc"))
    return manifests.root  # type: ignore[attr-defined]
