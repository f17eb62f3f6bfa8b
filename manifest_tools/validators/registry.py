"""Typed manifest records and the per-run registry that indexes them."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

KIND_SECRET = 'Secret'
KIND_BAREMETALHOST = 'BareMetalHost'

ROLE_BOOTSTRAP = 'bootstrap'
ROLE_MASTER = 'master'


@dataclass(frozen=True)
class CredentialRecord:
    """BMC credentials decoded from a ``Secret`` manifest."""

    name: str
    username: str = ''
    password: str = ''
    source: Optional[Path] = None

    kind = KIND_SECRET


@dataclass(frozen=True)
class HostRecord:
    """Bare-metal host decoded from a ``BareMetalHost`` manifest."""

    name: str
    role: str = ''
    credential_ref: str = ''
    source: Optional[Path] = None

    kind = KIND_BAREMETALHOST


@dataclass(frozen=True)
class AggregateConfig:
    """Untyped cluster-wide configuration (``install-config.yaml``)."""

    data: Dict[str, Any]
    source: Optional[Path] = None


@dataclass(frozen=True)
class UnknownDocument:
    """Document whose kind is not handled; kept only long enough to warn."""

    kind: str
    source: Optional[Path] = None


Record = Union[CredentialRecord, HostRecord]


@dataclass
class ManifestRegistry:
    """
    Name-keyed index of decoded records, one mapping per kind.

    Writes overwrite silently (last write wins); reporting duplicates is the
    caller's concern. Not thread-safe: fill it from one writer, then read.
    """

    records: Dict[str, Dict[str, Record]] = field(
        default_factory=lambda: {KIND_SECRET: {}, KIND_BAREMETALHOST: {}}
    )
    aggregate_config: Optional[AggregateConfig] = None

    def _bucket(self, kind: str) -> Dict[str, Record]:
        try:
            return self.records[kind]
        except KeyError:
            raise KeyError(f"Unsupported kind '{kind}'") from None

    def kinds(self) -> List[str]:
        return list(self.records)

    def put(self, kind: str, record: Record) -> Optional[Record]:
        """Store record under its name, returning the record it replaced."""
        bucket = self._bucket(kind)
        previous = bucket.get(record.name)
        bucket[record.name] = record
        return previous

    def get(self, kind: str, name: str) -> Optional[Record]:
        return self._bucket(kind).get(name)

    def all(self, kind: str) -> List[Tuple[str, Record]]:
        return list(self._bucket(kind).items())

    def counts(self) -> Dict[str, int]:
        return {kind: len(bucket) for kind, bucket in self.records.items()}

    def credentials(self) -> List[Tuple[str, CredentialRecord]]:
        return self.all(KIND_SECRET)  # type: ignore[return-value]

    def hosts(self) -> List[Tuple[str, HostRecord]]:
        return self.all(KIND_BAREMETALHOST)  # type: ignore[return-value]
