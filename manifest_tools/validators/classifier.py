"""Kind sniffing and typed decode of raw manifest documents.

Every document is first decoded into a minimal envelope (kind, name). The
envelope's kind selects one of a closed set of variants:

- ``CredentialRecord`` for ``Secret``
- ``HostRecord`` for ``BareMetalHost``
- ``AggregateConfig`` for the reserved cluster configuration file
- ``UnknownDocument`` for everything else (warned about and dropped)

Decode failures raise ``ManifestDecodeError`` and abort the scan.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import yaml

from ..errors import ManifestDecodeError
from ..manifest_loader import RawDocument, iter_documents, load_yaml_bytes
from .policy import policy_get
from .registry import (
    KIND_BAREMETALHOST,
    KIND_SECRET,
    AggregateConfig,
    CredentialRecord,
    HostRecord,
    ManifestRegistry,
    UnknownDocument,
)
from .schema import BAREMETALHOST_SCHEMA, ENVELOPE_SCHEMA, SECRET_SCHEMA, first_schema_error

DEFAULT_AGGREGATE_CONFIG_NAME = 'install-config.yaml'

Classified = Union[CredentialRecord, HostRecord, AggregateConfig, UnknownDocument]


@dataclass(frozen=True)
class Envelope:
    kind: str
    name: Optional[str] = None
    api_version: Optional[str] = None


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ''


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def _parse_mapping(document: RawDocument) -> Dict[str, Any]:
    try:
        loaded = load_yaml_bytes(document.content)
    except yaml.YAMLError as e:
        raise ManifestDecodeError(document.path, f"YAML parse error: {e}") from e
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ManifestDecodeError(
            document.path, f"expected a mapping at top level, got {type(loaded).__name__}"
        )
    return loaded


def _check_shape(document: RawDocument, schema_name: str, data: Dict[str, Any]) -> None:
    error = first_schema_error(schema_name, data)
    if error:
        raise ManifestDecodeError(document.path, error)


def decode_envelope(document: RawDocument, data: Optional[Dict[str, Any]] = None) -> Envelope:
    """Decode only the kind discriminator and resource name."""
    if data is None:
        data = _parse_mapping(document)
    _check_shape(document, ENVELOPE_SCHEMA, data)
    metadata = _section(data, 'metadata')
    return Envelope(
        kind=_as_str(data.get('kind')),
        name=metadata.get('name'),
        api_version=data.get('apiVersion'),
    )


def decode_credential(document: RawDocument, envelope: Envelope, data: Dict[str, Any]) -> CredentialRecord:
    """Decode a Secret; only ``stringData`` counts, base64 ``data`` is ignored."""
    _check_shape(document, SECRET_SCHEMA, data)
    string_data = _section(data, 'stringData')
    return CredentialRecord(
        name=envelope.name or '',
        username=_as_str(string_data.get('username')),
        password=_as_str(string_data.get('password')),
        source=document.path,
    )


def decode_host(document: RawDocument, envelope: Envelope, data: Dict[str, Any]) -> HostRecord:
    _check_shape(document, BAREMETALHOST_SCHEMA, data)
    spec = _section(data, 'spec')
    bmc = _section(spec, 'bmc')
    return HostRecord(
        name=envelope.name or '',
        role=_as_str(spec.get('hardwareProfile')),
        credential_ref=_as_str(bmc.get('credentialsName')),
        source=document.path,
    )


def classify_document(
    document: RawDocument,
    *,
    aggregate_config_name: str = DEFAULT_AGGREGATE_CONFIG_NAME,
) -> Classified:
    """Decode document into the variant selected by its declared kind."""
    data = _parse_mapping(document)

    if document.name == aggregate_config_name:
        return AggregateConfig(data=data, source=document.path)

    envelope = decode_envelope(document, data)
    if envelope.kind == KIND_SECRET:
        return decode_credential(document, envelope, data)
    if envelope.kind == KIND_BAREMETALHOST:
        return decode_host(document, envelope, data)
    return UnknownDocument(kind=envelope.kind, source=document.path)


class ManifestClassifier:
    """Feed raw documents into a registry, collecting non-fatal findings."""

    def __init__(self, registry: Optional[ManifestRegistry] = None, policy: Optional[Dict[str, Any]] = None):
        self.registry = registry if registry is not None else ManifestRegistry()
        self.policy = policy
        self.errors: List[str] = []
        self.warnings: List[str] = []
        self.aggregate_config_name = policy_get(
            policy, ['aggregate_config_name'], DEFAULT_AGGREGATE_CONFIG_NAME
        )

    def _emit(self, check: str, message: str) -> None:
        """Route classifier finding by the severity configured for check."""
        severity = policy_get(self.policy, ['checks', check, 'severity'], 'warning')
        if severity == 'error':
            self.errors.append(message)
            print(f"ERROR {message}")
        else:
            self.warnings.append(message)
            print(f"WARN  {message}")

    def ingest(self, document: RawDocument) -> Classified:
        item = classify_document(document, aggregate_config_name=self.aggregate_config_name)

        if isinstance(item, AggregateConfig):
            print(f"OK Found '{document.name}'")
            self.registry.aggregate_config = item
            return item

        if isinstance(item, UnknownDocument):
            self._emit(
                'unknown_kind',
                f"Unknown kind '{item.kind}' encountered in {document.name}. Skipping.",
            )
            return item

        print(f"OK Found '{item.kind}' in {document.name}")
        previous = self.registry.put(item.kind, item)
        if previous is not None:
            self._emit(
                'duplicate_name',
                f"{item.kind} '{item.name}' from {document.path} replaces the one from {previous.source}",
            )
        return item

    def ingest_all(self, documents: Iterable[RawDocument]) -> ManifestRegistry:
        for document in documents:
            self.ingest(document)
        return self.registry


def scan_directory(
    root: Union[str, Path],
    registry: Optional[ManifestRegistry] = None,
    policy: Optional[Dict[str, Any]] = None,
) -> ManifestRegistry:
    """
    Classify every file under root into a registry.

    Raises:
        FileNotFoundError: root does not exist.
        NotADirectoryError: root is not a directory.
        OSError: a file could not be read.
        ManifestDecodeError: a manifest could not be decoded.
    """
    return ManifestClassifier(registry, policy).ingest_all(iter_documents(root))
