"""Validator policy: built-in defaults, YAML overrides, nested lookups."""

import copy
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

DEFAULT_VALIDATOR_POLICY_PATH = Path(__file__).resolve().parent.parent / "schemas" / "validator-policy.yaml"

_DEFAULT_POLICY: Dict[str, Any] = {
    'aggregate_config_name': 'install-config.yaml',
    'roles': {
        'bootstrap': {'min': 1, 'max': 1},
        'master': {'min': 1, 'max': 3},
    },
    'checks': {
        'unknown_kind': {'severity': 'warning'},
        'duplicate_name': {'severity': 'warning'},
    },
}


def default_validator_policy() -> Dict[str, Any]:
    """Built-in validator policy defaults (used if policy file is absent)."""
    return copy.deepcopy(_DEFAULT_POLICY)


def load_validator_policy(
    policy_path: Optional[Union[str, Path]] = None,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Load validator policy YAML over the built-in defaults.

    The loaded document overrides defaults by top-level key (shallow merge).
    Problems with the policy file are reported as warnings, never raised.

    Returns:
        (policy, warnings)
    """
    path = Path(policy_path) if policy_path else DEFAULT_VALIDATOR_POLICY_PATH
    policy = default_validator_policy()
    warnings: List[str] = []

    if not path.exists():
        warnings.append(f"Validator policy file not found: {path} (using built-in defaults)")
        return policy, warnings

    try:
        with open(path, 'r', encoding='utf-8') as f:
            loaded = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        warnings.append(f"Validator policy load warning ({path}): {e}")
        return policy, warnings

    if isinstance(loaded, dict):
        policy.update(loaded)
    else:
        warnings.append(f"Validator policy ignored ({path}): top level must be a mapping")
        return policy, warnings

    for role, defaults in _DEFAULT_POLICY['roles'].items():
        for bound in ('min', 'max'):
            value = policy_get(policy, ['roles', role, bound], defaults[bound])
            if not _is_count(value):
                warnings.append(
                    f"Validator policy roles.{role}.{bound} must be a non-negative integer, "
                    f"got {value!r} ({path}); using built-in role bounds"
                )
                policy['roles'] = copy.deepcopy(_DEFAULT_POLICY['roles'])
                return policy, warnings
    return policy, warnings


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def policy_get(policy: Optional[Dict[str, Any]], keys: List[str], default: Any = None) -> Any:
    """Safely read nested keys from validator policy."""
    current: Any = policy if policy is not None else _DEFAULT_POLICY
    for key in keys:
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current


def role_bounds(policy: Optional[Dict[str, Any]], role: str) -> Tuple[int, int]:
    """Return (min, max) host count allowed for role."""
    defaults = _DEFAULT_POLICY['roles'][role]
    minimum = policy_get(policy, ['roles', role, 'min'], defaults['min'])
    maximum = policy_get(policy, ['roles', role, 'max'], defaults['max'])
    if not (_is_count(minimum) and _is_count(maximum)):
        return defaults['min'], defaults['max']
    return minimum, maximum
