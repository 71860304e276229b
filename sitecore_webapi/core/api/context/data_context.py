"""Unauthenticated Sitecore data context."""
import ipaddress
import re
import time
from typing import Optional, Type, TypeVar

import requests

from ..config import ContextConfig
from ..request import AnonymousRequestStrategy, RequestStrategy, ResponseHandler
from ..session import SessionFactory
from ...exceptions import InvalidArgumentError, InvalidHostNameError, InvalidOperationError
from ...logging import get_logger
from ...models.query import ActionQuery, BaseQuery, QueryType, ResponseFormat
from ...models.response import BaseResponse, ItemsResponse, PublicKeyResponse, ResponseInfo

logger = get_logger(__name__)

T = TypeVar('T', bound=BaseResponse)

PUBLIC_KEY_ACTION = 'getpublickey'

_SCHEMES = ('https://', 'http://')
_DNS_LABEL = re.compile(r'^(?!-)[A-Za-z0-9_-]{1,63}(?<!-)$')


def _is_valid_port(port: str) -> bool:
    return port.isdigit() and 0 < int(port) < 65536


def _is_valid_dns_name(host: str) -> bool:
    if not host or len(host) > 255:
        return False
    return all(_DNS_LABEL.match(label) for label in host.split('.'))


def _is_valid_host(value: str) -> bool:
    """DNS name, IPv4 or IPv6 address, with an optional port."""
    if value.startswith('['):
        end = value.find(']')
        if end == -1:
            return False
        host, rest = value[1:end], value[end + 1:]
        if rest and not (rest.startswith(':') and _is_valid_port(rest[1:])):
            return False
        try:
            ipaddress.IPv6Address(host)
        except ValueError:
            return False
        return True

    if value.count(':') > 1:
        try:
            ipaddress.IPv6Address(value)
        except ValueError:
            return False
        return True

    host = value
    if ':' in value:
        host, port = value.split(':', 1)
        if not _is_valid_port(port):
            return False

    try:
        ipaddress.IPv4Address(host)
        return True
    except ValueError:
        return _is_valid_dns_name(host)


def normalize_host_name(host_name: str, is_secure: bool = False) -> str:
    """
    Normalizes a host name to ``scheme://host[:port]``.

    An explicit scheme is kept unless ``is_secure`` forces ``https://``;
    hosts without one get ``http://``. Trailing slashes are removed.

    Raises:
        InvalidHostNameError: If the host is empty or malformed
    """
    if not isinstance(host_name, str) or not host_name.strip():
        raise InvalidHostNameError(host_name)

    bare = host_name.strip()
    scheme = None
    for prefix in _SCHEMES:
        if bare.lower().startswith(prefix):
            scheme = prefix
            bare = bare[len(prefix):]
            break

    bare = bare.rstrip('/')
    if not _is_valid_host(bare):
        raise InvalidHostNameError(host_name)

    if is_secure:
        scheme = 'https://'
    elif scheme is None:
        scheme = 'http://'

    return f"{scheme}{bare}"


class SitecoreDataContext:
    """
    Unauthenticated data context for one Sitecore host.

    Sends one synchronous request per call and never raises for network,
    HTTP status or parse failures; those are recorded on the returned
    response. The host name is fixed at construction.
    """

    def __init__(self, host_name: str, is_secure: bool = False,
                 config: ContextConfig = None, session: requests.Session = None):
        """
        Initializes the data context.

        Args:
            host_name: Host with or without scheme and trailing slash
            is_secure: Force ``https://``
            config: HTTP configuration
            session: Pre-built session; the context does not close it

        Raises:
            InvalidHostNameError: If the host name is invalid
        """
        self._host_name = normalize_host_name(host_name, is_secure)
        self._is_secure = is_secure
        self.config = config or ContextConfig.default()
        if self.config.log_level is not None:
            logger.setLevel(self.config.log_level)
        self._owns_session = session is None
        self._session = session or SessionFactory.create_sync_session(self.config)
        self._strategy: RequestStrategy = AnonymousRequestStrategy()

    @property
    def host_name(self) -> str:
        """Normalized host name."""
        return self._host_name

    @property
    def is_secure(self) -> bool:
        """Whether the context was created for TLS."""
        return self._is_secure

    @property
    def session(self) -> requests.Session:
        """HTTP session used to send requests."""
        return self._session

    def build_request(self, uri: str, query_type: QueryType,
                      body: Optional[str] = None) -> requests.Request:
        """Builds the request for a URI and query type."""
        return self._strategy.build_request(uri, query_type, body)

    def get_response(self, query: BaseQuery, response_type: Type[T] = ItemsResponse) -> T:
        """
        Sends a query and returns its typed response.

        Args:
            query: Query to send
            response_type: BaseResponse subclass to deserialize into

        Returns:
            Response whose status fields tell whether the call succeeded

        Raises:
            InvalidArgumentError: If query is None
            InvalidOperationError: If the query type needs authentication
        """
        if query is None:
            raise InvalidArgumentError("query cannot be None", argument='query')

        if not self._strategy.supports(query.query_type):
            raise InvalidOperationError(
                "A create or update query must be used with an authenticated data context"
            )

        uri = query.build_uri(self._host_name)

        if query.query_type.is_mutating:
            request = self.build_request(uri, query.query_type, query.fields_query_string())
        else:
            request = self.build_request(uri, query.query_type)

        return self.execute(request, query.response_format, response_type())

    def execute(self, request: requests.Request, response_format: ResponseFormat, response: T) -> T:
        """
        Sends a request and deserializes its body into ``response``.

        Every status code is parsed as a normal response. Failures are
        captured into the status fields and ``response.info``.

        Args:
            request: Request to send
            response_format: Body format
            response: Default result, returned as is for empty bodies

        Returns:
            Populated response, never None

        Raises:
            InvalidArgumentError: If request or response is None
        """
        if response is None:
            raise InvalidArgumentError("response cannot be None", argument='response')
        if request is None:
            raise InvalidArgumentError("request cannot be None", argument='request')

        uri = request.url
        started = time.perf_counter()
        elapsed = None

        try:
            prepared = self._session.prepare_request(request)
            uri = prepared.url
            logger.debug(f"{prepared.method} {uri}")
            started = time.perf_counter()

            with self._session.send(prepared, **self.config.get_send_kwargs()) as http_response:
                content = http_response.text
                elapsed = time.perf_counter() - started

                parsed = ResponseHandler.deserialize(
                    content, response_format, type(response), http_response
                )
                if parsed is not None:
                    response = parsed

                response.info = ResponseInfo(uri=uri, response_time=elapsed)
                response.status_code = http_response.status_code
                response.status_description = http_response.reason

            logger.debug(f"{prepared.method} {uri} -> {response.status_code} in {elapsed:.3f}s")
        except Exception as e:
            if elapsed is None:
                elapsed = time.perf_counter() - started
            return ResponseHandler.capture_failure(response, e, uri, elapsed)

        return response

    def get_public_key(self) -> Optional[PublicKeyResponse]:
        """Fetches the server's RSA public key; None if the response is invalid."""
        query = ActionQuery(action=PUBLIC_KEY_ACTION)
        response = self.get_response(query, PublicKeyResponse)
        if not response.validate():
            logger.warning(f"No valid public key from {self._host_name}: {response.status_code}")
            return None
        return response

    def close(self):
        """Closes the HTTP session if the context created it."""
        if self._owns_session and self._session is not None:
            self._session.close()

    def __enter__(self) -> 'SitecoreDataContext':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(host_name={self._host_name!r})"
