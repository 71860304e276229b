"""
Request builders using Strategy pattern.

Both strategies start from ``build_base_request``; the authenticated one
adds credential headers and the form body for mutating queries.
"""
from abc import ABC, abstractmethod
from typing import Callable, Optional

import requests

from ...crypto.rsa import RSAService
from ...exceptions import InvalidOperationError, PublicKeyError
from ...logging import get_logger
from ...models.credentials import SitecoreCredentials
from ...models.query import QueryType
from ...models.response import PublicKeyResponse

logger = get_logger(__name__)

FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'


class AuthenticationHeaders:
    """Header names the server reads credentials from."""
    USER_NAME = 'X-Scitemwebapi-Username'
    PASSWORD = 'X-Scitemwebapi-Password'
    ENCRYPTED = 'X-Scitemwebapi-Encrypted'

    ALL = (USER_NAME, PASSWORD, ENCRYPTED)


def build_base_request(uri: str, query_type: QueryType) -> requests.Request:
    """Builds an unauthenticated request with persistent connections disabled."""
    return requests.Request(
        method=query_type.http_method,
        url=uri,
        headers={'Connection': 'close'}
    )


class RequestStrategy(ABC):
    """Builds the requests a data context sends."""

    @abstractmethod
    def supports(self, query_type: QueryType) -> bool:
        """Whether queries of this type can be sent."""

    @abstractmethod
    def build_request(self, uri: str, query_type: QueryType,
                      body: Optional[str] = None) -> requests.Request:
        """Builds a request for the given URI and query type."""


class AnonymousRequestStrategy(RequestStrategy):
    """Unauthenticated requests: reads and deletes only."""

    def supports(self, query_type: QueryType) -> bool:
        return not query_type.is_mutating

    def build_request(self, uri: str, query_type: QueryType,
                      body: Optional[str] = None) -> requests.Request:
        if body is not None:
            raise InvalidOperationError(
                "A request body can only be sent with an authenticated data context"
            )
        return build_base_request(uri, query_type)


class AuthenticatedRequestStrategy(RequestStrategy):
    """
    Requests carrying credential headers.

    ``public_key_provider`` is only called when the credentials ask for
    encrypted headers. It must not authenticate its own request.
    """

    def __init__(self, credentials: SitecoreCredentials,
                 public_key_provider: Callable[[], Optional[PublicKeyResponse]],
                 rsa_service: RSAService = None):
        self.credentials = credentials
        self.public_key_provider = public_key_provider
        self.rsa_service = rsa_service or RSAService()

    def supports(self, query_type: QueryType) -> bool:
        return True

    def apply_headers(self, request: requests.Request) -> None:
        """Adds username and password headers, encrypted if configured."""
        if request is None:
            return

        if self.credentials.encrypt_headers:
            self.apply_encrypted_headers(request)
            return

        request.headers[AuthenticationHeaders.USER_NAME] = self.credentials.username
        request.headers[AuthenticationHeaders.PASSWORD] = self.credentials.password

    def apply_encrypted_headers(self, request: requests.Request) -> None:
        """Adds RSA-encrypted credential headers and the encrypted flag."""
        if request is None:
            return

        key = self.public_key_provider()
        if key is None:
            raise PublicKeyError("Server did not return a valid public key for header encryption")

        request.headers[AuthenticationHeaders.USER_NAME] = \
            self.rsa_service.encrypt_header_value(self.credentials.username, key)
        request.headers[AuthenticationHeaders.PASSWORD] = \
            self.rsa_service.encrypt_header_value(self.credentials.password, key)
        request.headers[AuthenticationHeaders.ENCRYPTED] = '1'
        logger.debug("Applied encrypted credential headers")

    def build_request(self, uri: str, query_type: QueryType,
                      body: Optional[str] = None) -> requests.Request:
        request = build_base_request(uri, query_type)

        self.apply_headers(request)

        if request.method in ('POST', 'PUT'):
            request.headers['Content-Type'] = FORM_CONTENT_TYPE

        if body is not None:
            data = body.encode('utf-8')
            request.data = data
            request.headers['Content-Length'] = str(len(data))

        return request
