"""Node-role cardinality checks."""

from typing import Any, Dict, List, Optional

from ...errors import BootstrapCardinalityError, ManifestValidationError, MasterCardinalityError
from ..policy import role_bounds
from ..registry import ROLE_BOOTSTRAP, ROLE_MASTER


def check_bootstrap_count(
    role_counts: Dict[str, int],
    *,
    errors: List[ManifestValidationError],
    policy: Optional[Dict[str, Any]] = None,
) -> None:
    minimum, maximum = role_bounds(policy, ROLE_BOOTSTRAP)
    count = role_counts.get(ROLE_BOOTSTRAP, 0)
    if not minimum <= count <= maximum:
        errors.append(BootstrapCardinalityError(count, minimum, maximum))


def check_master_count(
    role_counts: Dict[str, int],
    *,
    errors: List[ManifestValidationError],
    policy: Optional[Dict[str, Any]] = None,
) -> None:
    minimum, maximum = role_bounds(policy, ROLE_MASTER)
    count = role_counts.get(ROLE_MASTER, 0)
    if not minimum <= count <= maximum:
        errors.append(MasterCardinalityError(count, minimum, maximum))
