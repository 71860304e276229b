"""Tests for RSA header encryption."""
import base64

import pytest
from Crypto.Cipher import PKCS1_v1_5
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding

from sitecore_webapi import PublicKeyResponse, InvalidArgumentError, encrypt_header_value
from sitecore_webapi.core.crypto import RSAService, Base64Encoder


class TestRSAServiceRoundTrip:
    """Encrypted values must be recoverable with the private key."""

    def test_pycryptodome_decrypts(self, rsa_key_pair):
        """Test PKCS#1 v1.5 ciphertext decrypts to the plaintext."""
        service = RSAService()
        encrypted = service.encrypt_with_rsa_key('sitecore\\admin', rsa_key_pair.publickey())

        cipher = PKCS1_v1_5.new(rsa_key_pair)
        decrypted = cipher.decrypt(base64.b64decode(encrypted), None)

        assert decrypted == b'sitecore\\admin'

    def test_cryptography_decrypts(self, rsa_key_pair):
        """Test an independent implementation recovers the plaintext."""
        private_key = serialization.load_pem_private_key(
            rsa_key_pair.export_key(), password=None
        )
        service = RSAService()
        encrypted = service.encrypt_with_rsa_key('p@ssw0rd', rsa_key_pair.publickey())

        decrypted = private_key.decrypt(base64.b64decode(encrypted), padding.PKCS1v15())

        assert decrypted == b'p@ssw0rd'

    def test_unicode_value(self, rsa_key_pair):
        """Test non-ASCII values are encrypted as UTF-8."""
        service = RSAService()
        encrypted = service.encrypt_with_rsa_key('pässwörd', rsa_key_pair.publickey())

        decrypted = PKCS1_v1_5.new(rsa_key_pair).decrypt(base64.b64decode(encrypted), None)

        assert decrypted.decode('utf-8') == 'pässwörd'

    def test_ciphertext_is_padded_base64(self, rsa_key_pair):
        """Test output is standard base64 of a modulus-sized block."""
        encrypted = RSAService().encrypt_with_rsa_key('admin', rsa_key_pair.publickey())

        assert len(base64.b64decode(encrypted, validate=True)) == 256


class TestImportPublicKey:
    """Key parts are taken as the UTF-8 bytes of their strings."""

    def test_modulus_and_exponent_are_string_bytes(self):
        """Test the strings are not base64-decoded."""
        key = PublicKeyResponse(modulus='xyzModulus==', exponent='AQAB')

        rsa_key = RSAService.import_public_key(key)

        assert rsa_key.n == int.from_bytes(b'xyzModulus==', 'big')
        assert rsa_key.e == int.from_bytes(b'AQAB', 'big')
        assert not rsa_key.has_private()

    def test_encrypt_header_value_block_size(self, public_key_xml):
        """Test ciphertext length follows the byte length of the modulus string."""
        modulus = public_key_xml.split('<Modulus>')[1].split('</Modulus>')[0]
        key = PublicKeyResponse(modulus=modulus, exponent='AQAB')

        encrypted = encrypt_header_value('sitecore\\admin', key)

        assert len(base64.b64decode(encrypted)) == len(modulus.encode('utf-8'))


class TestEncryptHeaderValueArguments:
    """Argument checks run before any crypto."""

    @pytest.fixture
    def key(self):
        return PublicKeyResponse(modulus='m' * 64, exponent='AQAB')

    @pytest.mark.parametrize('value', [None, '', '   '])
    def test_empty_value(self, value, key):
        """Test empty values are rejected."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            encrypt_header_value(value, key)

        assert exc_info.value.argument == 'value'

    def test_none_key(self):
        """Test a missing key is rejected."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            encrypt_header_value('admin', None)

        assert exc_info.value.argument == 'key'

    def test_incomplete_key(self):
        """Test a key without exponent is rejected."""
        with pytest.raises(InvalidArgumentError):
            encrypt_header_value('admin', PublicKeyResponse(modulus='abc'))

    def test_is_value_error(self, key):
        """Test argument errors are ValueErrors."""
        with pytest.raises(ValueError):
            encrypt_header_value('', key)


class TestBase64Encoder:
    """Test suite for Base64Encoder."""

    def test_encode_keeps_padding(self):
        """Test standard alphabet with padding."""
        assert Base64Encoder.encode(b'\xfb\xff') == '+/8='

