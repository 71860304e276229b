"""Crypto module: credential header encryption."""
from .utils import Base64Encoder
from .rsa import RSAService, encrypt_header_value

__all__ = [
    'Base64Encoder',
    'RSAService',
    'encrypt_header_value',
]
