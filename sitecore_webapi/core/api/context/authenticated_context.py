"""Authenticated Sitecore data context."""
from typing import Optional

import requests

from .data_context import SitecoreDataContext
from ..config import ContextConfig
from ..request import AuthenticatedRequestStrategy
from ...crypto.rsa import RSAService
from ...exceptions import EncryptionConflictError, InvalidArgumentError, InvalidCredentialsError
from ...logging import get_logger
from ...models.credentials import SitecoreCredentials
from ...models.response import PublicKeyResponse

logger = get_logger(__name__)


class AuthenticatedSitecoreDataContext(SitecoreDataContext):
    """
    Data context that sends credentials with every request.

    Credentials go out as plaintext headers, or RSA-encrypted with the
    server's public key when ``credentials.encrypt_headers`` is set.
    Encrypted headers cannot be combined with ``is_secure``: over TLS the
    server handles the encryption itself.
    """

    def __init__(self, host_name: str, credentials: SitecoreCredentials, is_secure: bool = False,
                 config: ContextConfig = None, session: requests.Session = None,
                 rsa_service: RSAService = None):
        """
        Initializes the authenticated data context.

        No network call is made here; the public key is fetched per
        request when headers are encrypted.

        Raises:
            InvalidArgumentError: If credentials is None
            EncryptionConflictError: If is_secure and encrypted headers are both set
            InvalidCredentialsError: If the credentials fail validation
            InvalidHostNameError: If the host name is invalid
        """
        if credentials is None:
            raise InvalidArgumentError(
                "credentials cannot be None when creating an authenticated data context",
                argument='credentials'
            )

        if is_secure and credentials.encrypt_headers:
            raise EncryptionConflictError()

        result = credentials.check()
        if not result.is_valid:
            raise InvalidCredentialsError(result.reason)

        super().__init__(host_name, is_secure=is_secure, config=config, session=session)

        self._credentials = credentials
        self._strategy = AuthenticatedRequestStrategy(
            credentials,
            public_key_provider=self.get_public_key,
            rsa_service=rsa_service
        )

    @property
    def credentials(self) -> SitecoreCredentials:
        """Credentials sent with every request."""
        return self._credentials

    def apply_headers(self, request: requests.Request) -> None:
        """Adds credential headers to a request."""
        self._strategy.apply_headers(request)

    def apply_encrypted_headers(self, request: requests.Request) -> None:
        """Adds RSA-encrypted credential headers to a request."""
        self._strategy.apply_encrypted_headers(request)

    def get_public_key(self) -> Optional[PublicKeyResponse]:
        """
        Fetches the server's public key through an unauthenticated context.

        Authenticating this call would need the public key again to build
        its own headers.
        """
        logger.debug(f"Fetching public key from {self.host_name} without credentials")
        anonymous = SitecoreDataContext(
            self.host_name,
            is_secure=self.is_secure,
            config=self.config,
            session=self.session
        )
        return anonymous.get_public_key()
