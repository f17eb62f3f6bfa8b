from __future__ import annotations

from pathlib import Path

from manifest_tools.validators.policy import (
    DEFAULT_VALIDATOR_POLICY_PATH,
    default_validator_policy,
    load_validator_policy,
    policy_get,
    role_bounds,
)


def test_bundled_policy_matches_defaults() -> None:
    assert DEFAULT_VALIDATOR_POLICY_PATH.is_file()
    policy, warnings = load_validator_policy()
    assert warnings == []
    assert policy == default_validator_policy()


def test_missing_policy_file_warns_and_uses_defaults(tmp_path: Path) -> None:
    policy, warnings = load_validator_policy(tmp_path / "absent.yaml")
    assert policy == default_validator_policy()
    assert len(warnings) == 1
    assert "not found" in warnings[0]


def test_policy_file_overrides_top_level_keys(tmp_path: Path) -> None:
    path = tmp_path / "policy.yaml"
    path.write_text("roles:\n  master:\n    min: 3\n    max: 5\n", encoding="utf-8")

    policy, warnings = load_validator_policy(path)

    assert warnings == []
    assert role_bounds(policy, "master") == (3, 5)
    # shallow merge: bootstrap bounds fall back to built-ins
    assert role_bounds(policy, "bootstrap") == (1, 1)
    assert policy["aggregate_config_name"] == "install-config.yaml"


def test_broken_policy_file_is_a_warning(tmp_path: Path) -> None:
    path = tmp_path / "policy.yaml"
    path.write_text("roles: [unclosed\n", encoding="utf-8")
    policy, warnings = load_validator_policy(path)
    assert policy == default_validator_policy()
    assert "Validator policy load warning" in warnings[0]


def test_non_mapping_policy_is_ignored(tmp_path: Path) -> None:
    path = tmp_path / "policy.yaml"
    path.write_text("- a\n", encoding="utf-8")
    policy, warnings = load_validator_policy(path)
    assert policy == default_validator_policy()
    assert "must be a mapping" in warnings[0]


def test_policy_get_walks_nested_keys() -> None:
    policy = {"checks": {"unknown_kind": {"severity": "error"}}}
    assert policy_get(policy, ["checks", "unknown_kind", "severity"]) == "error"
    assert policy_get(policy, ["checks", "duplicate_name", "severity"], "warning") == "warning"
    assert policy_get(None, ["roles", "master", "max"]) == 3


def test_non_numeric_role_bound_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "policy.yaml"
    path.write_text("roles:\n  master:\n    min: one\n    max: 5\n", encoding="utf-8")

    policy, warnings = load_validator_policy(path)

    assert role_bounds(policy, "master") == (1, 3)
    assert role_bounds(policy, "bootstrap") == (1, 1)
    assert len(warnings) == 1
    assert "roles.master.min" in warnings[0]


def test_role_bounds_ignore_invalid_values_passed_directly() -> None:
    policy = {"roles": {"master": {"min": "x", "max": True}}}
    assert role_bounds(policy, "master") == (1, 3)
