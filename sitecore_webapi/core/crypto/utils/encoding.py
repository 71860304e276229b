"""Encoding utilities."""
import base64


class Base64Encoder:
    """Standard Base64 encoder (``+``, ``/`` and ``=`` padding)."""

    @staticmethod
    def encode(data: bytes) -> str:
        """Encodes bytes to padded standard Base64."""
        return base64.b64encode(data).decode('ascii')

