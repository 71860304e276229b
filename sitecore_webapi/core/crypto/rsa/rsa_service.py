"""RSA header encryption service."""
from typing import Optional

from Crypto.Cipher import PKCS1_v1_5
from Crypto.PublicKey import RSA

from ..utils.encoding import Base64Encoder
from ...exceptions import InvalidArgumentError
from ...logging import get_logger
from ...models.response import PublicKeyResponse

logger = get_logger(__name__)


class RSAService:
    """Encrypts credential header values with the server's public key."""

    def __init__(self, encoder: Base64Encoder = None):
        """Initializes RSA service."""
        self.encoder = encoder or Base64Encoder()

    @staticmethod
    def import_public_key(key: PublicKeyResponse) -> RSA.RsaKey:
        """
        Builds an RSA public key from a ``getpublickey`` response.

        The modulus and exponent are taken as the UTF-8 bytes of their
        string form, read big-endian. The server decrypts with the
        matching key material, so the strings are not base64-decoded.

        Args:
            key: Public key response with modulus and exponent

        Returns:
            RsaKey holding only the public part
        """
        modulus = int.from_bytes(key.modulus.encode('utf-8'), byteorder='big')
        exponent = int.from_bytes(key.exponent.encode('utf-8'), byteorder='big')
        logger.debug(f"Imported public key: modulus_bytes={len(key.modulus.encode('utf-8'))}")
        # The byte-encoded parts are not a textbook key pair; skip the checks.
        return RSA.construct((modulus, exponent), consistency_check=False)

    def encrypt_with_rsa_key(self, value: str, rsa_key: RSA.RsaKey) -> str:
        """
        Encrypts a value with PKCS#1 v1.5 padding.

        Args:
            value: Plaintext header value
            rsa_key: Public key

        Returns:
            Base64 ciphertext
        """
        cipher = PKCS1_v1_5.new(rsa_key)
        encrypted = cipher.encrypt(value.encode('utf-8'))
        return self.encoder.encode(encrypted)

    def encrypt_header_value(self, value: Optional[str], key: Optional[PublicKeyResponse]) -> str:
        """
        Encrypts a header value with the server's public key.

        Args:
            value: Plaintext header value
            key: Public key response from the server

        Returns:
            Base64 ciphertext

        Raises:
            InvalidArgumentError: If value is empty or key is None
        """
        if value is None or not value.strip():
            raise InvalidArgumentError(
                "value cannot be None or empty when encrypting headers",
                argument='value'
            )
        if key is None:
            raise InvalidArgumentError(
                "key cannot be None when encrypting headers",
                argument='key'
            )
        if not key.validate():
            raise InvalidArgumentError(
                "key must have a modulus and an exponent",
                argument='key'
            )

        return self.encrypt_with_rsa_key(value, self.import_public_key(key))


_rsa_service = RSAService()


def encrypt_header_value(value: Optional[str], key: Optional[PublicKeyResponse]) -> str:
    """Encrypts a header value with the server's public key."""
    return _rsa_service.encrypt_header_value(value, key)
