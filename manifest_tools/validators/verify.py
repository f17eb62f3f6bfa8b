"""Run the cross-record checks over a filled registry."""

from typing import Any, Dict, List, Optional

from ..errors import ManifestValidationError
from .checks import (
    check_bootstrap_count,
    check_credential_completeness,
    check_credential_refs,
    check_master_count,
)
from .registry import ManifestRegistry


def collect_violations(
    registry: ManifestRegistry,
    policy: Optional[Dict[str, Any]] = None,
) -> List[ManifestValidationError]:
    """Run every check in order and return all violations found."""
    errors: List[ManifestValidationError] = []
    role_counts: Dict[str, int] = {}

    check_credential_completeness(registry, errors=errors)
    check_credential_refs(registry, errors=errors, role_counts=role_counts)
    check_bootstrap_count(role_counts, errors=errors, policy=policy)
    check_master_count(role_counts, errors=errors, policy=policy)

    return errors


def verify(registry: ManifestRegistry, policy: Optional[Dict[str, Any]] = None) -> None:
    """
    Fail fast on the first violated invariant.

    Checks run in a fixed order (credential completeness, credential
    references, bootstrap count, master count) so the first collected
    violation is the one a short-circuiting run would stop at.

    Raises:
        ManifestValidationError: the first violation.
    """
    violations = collect_violations(registry, policy)
    if violations:
        raise violations[0]
