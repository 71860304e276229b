"""RSA header encryption module."""
from .rsa_service import RSAService, encrypt_header_value

__all__ = [
    'RSAService',
    'encrypt_header_value',
]
