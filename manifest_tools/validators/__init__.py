"""Validation domain package for manifest-tools.

- classifier: envelope sniffing and typed decode into the registry
- registry: record types and the per-run name index
- checks: cross-record invariant checks
- verify: ordered check runner (fail-fast or collect-all)

Usage:
    from manifest_tools.validators import scan_directory, verify
"""

from .classifier import ManifestClassifier, classify_document, decode_envelope, scan_directory
from .policy import load_validator_policy
from .registry import ManifestRegistry
from .verify import collect_violations, verify

__all__ = [
    "ManifestClassifier",
    "ManifestRegistry",
    "classify_document",
    "collect_violations",
    "decode_envelope",
    "load_validator_policy",
    "scan_directory",
    "verify",
]
