"""Cross-record validation checks.

- credentials: Secret completeness, BareMetalHost credential references
- roles: bootstrap and master host counts
"""

from .credentials import check_credential_completeness, check_credential_refs
from .roles import check_bootstrap_count, check_master_count

__all__ = [
    # Credential checks
    "check_credential_completeness",
    "check_credential_refs",
    # Role checks
    "check_bootstrap_count",
    "check_master_count",
]
