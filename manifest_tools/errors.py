"""Exceptions raised while decoding and verifying manifests."""

from pathlib import Path
from typing import Union


class ManifestError(Exception):
    """Base class for manifest-tools failures."""


class ManifestDecodeError(ManifestError, ValueError):
    """A manifest could not be decoded; fatal for the whole scan."""

    def __init__(self, path: Union[str, Path], detail: str) -> None:
        self.path = Path(path)
        self.detail = detail
        super().__init__(f"Failed to decode '{self.path}': {detail}")


class ManifestValidationError(ManifestError):
    """A cross-record invariant does not hold for the scanned manifests."""


class InvalidCredentialError(ManifestValidationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Secret '{name}' requires username and password StringData")


class MissingCredentialError(ManifestValidationError):
    def __init__(self, host_name: str, credential_ref: str) -> None:
        self.host_name = host_name
        self.credential_ref = credential_ref
        super().__init__(f"No Secret named '{credential_ref}' found for {host_name}")


def _cardinality_phrase(role: str, minimum: int, maximum: int) -> str:
    if minimum == maximum == 1:
        return f"One and only one {role} node required"
    if minimum == maximum:
        return f"Exactly {minimum} {role} nodes required"
    return f"{minimum} to {maximum} {role} nodes required"


class RoleCardinalityError(ManifestValidationError):
    """Number of hosts carrying a role is outside its allowed range."""

    role = ''

    def __init__(self, count: int, minimum: int, maximum: int) -> None:
        self.count = count
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"{_cardinality_phrase(self.role, minimum, maximum)} (found {count})"
        )


class BootstrapCardinalityError(RoleCardinalityError):
    role = 'bootstrap'

    def __init__(self, count: int, minimum: int = 1, maximum: int = 1) -> None:
        super().__init__(count, minimum, maximum)


class MasterCardinalityError(RoleCardinalityError):
    role = 'master'

    def __init__(self, count: int, minimum: int = 1, maximum: int = 3) -> None:
        super().__init__(count, minimum, maximum)
