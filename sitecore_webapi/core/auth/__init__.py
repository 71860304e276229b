"""Authentication helpers."""
from .credential_validator import CredentialValidator, ValidationResult

__all__ = [
    'CredentialValidator',
    'ValidationResult',
]
