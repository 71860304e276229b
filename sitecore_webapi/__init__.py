"""
sitecore_webapi - Python client for the Sitecore Item Web API.

Usage:
    >>> from sitecore_webapi import SitecoreDataContext, ItemQuery
    >>>
    >>> with SitecoreDataContext("cms.example.com") as context:
    ...     response = context.get_response(ItemQuery(item_path="/sitecore/content/Home"))
    ...     if response.succeeded:
    ...         for item in response.items:
    ...             print(item.path)
"""
import logging

from .core.api import (
    SitecoreDataContext,
    AuthenticatedSitecoreDataContext,
    AuthenticationHeaders,
    ContextConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
)
from .core.models import (
    QueryType,
    ResponseFormat,
    ItemScope,
    BaseQuery,
    ItemQuery,
    ActionQuery,
    FailureKind,
    ResponseInfo,
    BaseResponse,
    Item,
    ItemField,
    ItemsResponse,
    PublicKeyResponse,
    SitecoreCredentials,
)
from .core.auth import CredentialValidator, ValidationResult
from .core.crypto import encrypt_header_value
from .core.exceptions import (
    SitecoreException,
    ConfigurationError,
    InvalidArgumentError,
    InvalidOperationError,
    InvalidHostNameError,
    InvalidCredentialsError,
    EncryptionConflictError,
    PublicKeyError,
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for sitecore_webapi modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'sitecore_webapi',
        'sitecore_webapi.core.api',
        'sitecore_webapi.core.crypto',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'SitecoreDataContext',
    'AuthenticatedSitecoreDataContext',
    'AuthenticationHeaders',
    'ContextConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'QueryType',
    'ResponseFormat',
    'ItemScope',
    'BaseQuery',
    'ItemQuery',
    'ActionQuery',
    'FailureKind',
    'ResponseInfo',
    'BaseResponse',
    'Item',
    'ItemField',
    'ItemsResponse',
    'PublicKeyResponse',
    'SitecoreCredentials',
    'CredentialValidator',
    'ValidationResult',
    'encrypt_header_value',
    'SitecoreException',
    'ConfigurationError',
    'InvalidArgumentError',
    'InvalidOperationError',
    'InvalidHostNameError',
    'InvalidCredentialsError',
    'EncryptionConflictError',
    'PublicKeyError',
    'setup_logging',
]
