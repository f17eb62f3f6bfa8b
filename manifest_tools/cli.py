#!/usr/bin/env python3
"""
Verify a directory of bare-metal cluster manifests before provisioning.

Usage:
    verify-manifests DIRECTORY [--validator-policy PATH] [--strict] [--all-errors]

Requirements:
    pip install jsonschema pyyaml
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from manifest_tools.errors import ManifestDecodeError
from manifest_tools.manifest_loader import iter_documents
from manifest_tools.validators.classifier import ManifestClassifier
from manifest_tools.validators.policy import DEFAULT_VALIDATOR_POLICY_PATH, load_validator_policy
from manifest_tools.validators.registry import ManifestRegistry
from manifest_tools.validators.verify import collect_violations


class ManifestValidator:
    """Scan a manifest directory and verify cross-record invariants"""

    def __init__(
        self,
        manifests_path: str,
        validator_policy_path: Optional[str] = None,
        strict_mode: bool = False,
        collect_all: bool = False,
    ):
        self.manifests_path = Path(manifests_path)
        self.validator_policy_path = validator_policy_path
        self.strict_mode = strict_mode
        self.collect_all = collect_all
        self.policy: Dict[str, Any] = {}
        self.registry = ManifestRegistry()
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def load_policy(self) -> None:
        self.policy, policy_warnings = load_validator_policy(self.validator_policy_path)
        self.warnings.extend(policy_warnings)
        if not policy_warnings:
            print(f"OK Loaded validator policy: {self.validator_policy_path or DEFAULT_VALIDATOR_POLICY_PATH}")

    def scan(self) -> bool:
        """Classify every manifest into the registry; False on a fatal error."""
        try:
            documents = iter_documents(self.manifests_path)
        except FileNotFoundError:
            self.errors.append(f"path '{self.manifests_path}' does not exist!")
            return False
        except NotADirectoryError:
            self.errors.append(f"path '{self.manifests_path}' is not a directory!")
            return False

        classifier = ManifestClassifier(self.registry, self.policy)
        try:
            classifier.ingest_all(documents)
        except ManifestDecodeError as e:
            self.errors.append(str(e))
            return False
        except OSError as e:
            self.errors.append(f"Failed to read '{e.filename}': {e.strerror or e}")
            return False
        finally:
            self.errors.extend(classifier.errors)
            self.warnings.extend(classifier.warnings)

        counts = ", ".join(f"{kind}: {count}" for kind, count in self.registry.counts().items())
        print(f"OK Scan complete ({counts})")
        return True

    def check_invariants(self) -> None:
        violations = collect_violations(self.registry, self.policy)
        if not self.collect_all:
            violations = violations[:1]
        self.errors.extend(str(violation) for violation in violations)

    def print_results(self) -> None:
        """Print validation results"""
        print("\n" + "=" * 70)

        if self.errors:
            print(f"ERROR Verification FAILED - {len(self.errors)} error(s) found")
            print("=" * 70)
            print("\nErrors:")
            for i, error in enumerate(self.errors, 1):
                print(f"  {i}. Error: {error}")
        else:
            print("OK Verification passed.")
            print("=" * 70)

        if self.warnings:
            print(f"\nWARN  {len(self.warnings)} warning(s):")
            for warning in self.warnings:
                print(f"  - {warning}")

    def validate(self) -> bool:
        """Run full verification"""
        print("=" * 70)
        print("Bare-metal Manifest Verification")
        print("=" * 70)
        print()
        print(f"MODE Verification mode: {'strict' if self.strict_mode else 'compat'}")

        self.load_policy()

        print(f"\nSCAN Step 1: Classifying manifests in {self.manifests_path}...")
        if not self.scan():
            return False

        print("\nREF  Step 2: Checking credentials and node roles...")
        errors_before = len(self.errors)
        self.check_invariants()
        if len(self.errors) == errors_before:
            print("OK All invariants hold")
        else:
            print(f"X Invariant check failed ({len(self.errors) - errors_before} errors)")

        if self.strict_mode and self.warnings:
            escalated = [f"[STRICT] {warning}" for warning in self.warnings]
            self.errors.extend(escalated)
            self.warnings.clear()
            print(f"\nSTRICT Strict mode enabled: escalated {len(escalated)} warning(s) to error(s)")

        return len(self.errors) == 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Verify bare-metal cluster manifests (Secrets, BareMetalHosts) before provisioning"
    )
    parser.add_argument(
        "directory",
        help="Root directory of manifest files",
    )
    parser.add_argument(
        "--validator-policy",
        default=None,
        help=f"Path to validator policy YAML file (default: {DEFAULT_VALIDATOR_POLICY_PATH})",
    )
    parser.add_argument(
        "--strict",
        dest="strict_mode",
        action="store_true",
        help="Treat warnings (unknown kinds, duplicate names) as errors",
    )
    parser.add_argument(
        "--all-errors",
        dest="collect_all",
        action="store_true",
        help="Report every invariant violation instead of stopping at the first",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    validator = ManifestValidator(
        args.directory,
        args.validator_policy,
        strict_mode=args.strict_mode,
        collect_all=args.collect_all,
    )
    valid = validator.validate()
    validator.print_results()

    return 0 if valid else 1


if __name__ == "__main__":
    sys.exit(main())
