"""User credentials for authenticated data contexts."""
from dataclasses import dataclass, field
from typing import Optional

from ..auth.credential_validator import CredentialValidator, ValidationResult


@dataclass
class SitecoreCredentials:
    """
    Credentials sent as custom headers on every authenticated request.

    Attributes:
        username: User name including domain, e.g. ``extranet\\editor``
        password: Password
        encrypt_headers: Encrypt both values with the server's RSA public key
    """
    username: Optional[str]
    password: Optional[str] = field(repr=False)
    encrypt_headers: bool = False

    def validate(self) -> bool:
        """True when the credentials can be used."""
        return self.check().is_valid

    def check(self) -> ValidationResult:
        """Validates and returns the reason for a failure."""
        return CredentialValidator.validate(self.username, self.password)

    @property
    def error_message(self) -> str:
        """Reason the credentials are invalid, empty when valid."""
        return self.check().reason
