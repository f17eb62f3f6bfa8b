"""Credential checks: completeness and host-to-secret references."""

from typing import Dict, List

from ...errors import InvalidCredentialError, ManifestValidationError, MissingCredentialError
from ..registry import KIND_SECRET, ROLE_BOOTSTRAP, ROLE_MASTER, ManifestRegistry


def check_credential_completeness(
    registry: ManifestRegistry,
    *,
    errors: List[ManifestValidationError],
) -> None:
    """Every Secret needs a non-empty username and password."""
    for name, credential in registry.credentials():
        if not credential.username or not credential.password:
            errors.append(InvalidCredentialError(name))


def check_credential_refs(
    registry: ManifestRegistry,
    *,
    errors: List[ManifestValidationError],
    role_counts: Dict[str, int],
) -> None:
    """
    Every BareMetalHost must name an existing Secret.

    The same pass tallies bootstrap and master hosts into role_counts;
    any other role is left uncounted.
    """
    role_counts.setdefault(ROLE_BOOTSTRAP, 0)
    role_counts.setdefault(ROLE_MASTER, 0)

    for name, host in registry.hosts():
        if host.role in (ROLE_BOOTSTRAP, ROLE_MASTER):
            role_counts[host.role] += 1

        if registry.get(KIND_SECRET, host.credential_ref) is None:
            errors.append(MissingCredentialError(name, host.credential_ref))
