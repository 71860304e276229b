"""Tests for the exception hierarchy."""
import pytest

from sitecore_webapi import (
    SitecoreException,
    ConfigurationError,
    InvalidArgumentError,
    InvalidOperationError,
    InvalidHostNameError,
    InvalidCredentialsError,
    EncryptionConflictError,
    PublicKeyError,
)


class TestExceptionHierarchy:
    """Configuration errors keep their argument or operation flavour."""

    @pytest.mark.parametrize('error,bases', [
        (InvalidHostNameError('x y'), (ConfigurationError, InvalidArgumentError, ValueError)),
        (InvalidCredentialsError('password cannot be None or empty'),
         (ConfigurationError, InvalidArgumentError, ValueError)),
        (EncryptionConflictError(), (ConfigurationError, InvalidOperationError, RuntimeError)),
        (PublicKeyError('no key'), (SitecoreException,)),
    ])
    def test_bases(self, error, bases):
        """Test each error is catchable by its bases."""
        for base in bases:
            assert isinstance(error, base)
        assert isinstance(error, SitecoreException)

    def test_host_name_kept(self):
        """Test the rejected host is available."""
        error = InvalidHostNameError('bad host')

        assert error.host_name == 'bad host'
        assert error.argument == 'host_name'

    def test_credentials_reason(self):
        """Test the validation reason is the message."""
        error = InvalidCredentialsError('username cannot be None or empty')

        assert str(error) == 'username cannot be None or empty'
        assert error.argument == 'credentials'


    def test_message_kept(self):
        """Test the message is available as an attribute."""
        error = PublicKeyError('no key')

        assert error.message == 'no key'
        assert str(error) == 'no key'
