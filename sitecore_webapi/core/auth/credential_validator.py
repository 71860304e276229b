"""Credential validation."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a credential check."""
    is_valid: bool
    reason: str = ''

    def __bool__(self) -> bool:
        return self.is_valid


class CredentialValidator:
    """Checks that a username/password pair can be sent to the server."""

    @staticmethod
    def validate(username: Optional[str], password: Optional[str]) -> ValidationResult:
        """
        Validates a username/password pair.

        Args:
            username: User name, including the domain (e.g. ``sitecore\\admin``)
            password: Password

        Returns:
            ValidationResult with a human-readable reason when invalid
        """
        if not username:
            return ValidationResult(False, "username cannot be None or empty")
        if not password:
            return ValidationResult(False, "password cannot be None or empty")
        return ValidationResult(True)
