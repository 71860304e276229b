"""Sitecore Item Web API module."""
from .config import ContextConfig, ProxyConfig, SSLConfig, TimeoutConfig
from .session import SessionFactory
from .request import (
    AuthenticationHeaders,
    AnonymousRequestStrategy,
    AuthenticatedRequestStrategy,
    ResponseHandler,
)
from .context import (
    SitecoreDataContext,
    AuthenticatedSitecoreDataContext,
    normalize_host_name,
)

__all__ = [
    # Contexts
    'SitecoreDataContext',
    'AuthenticatedSitecoreDataContext',
    'normalize_host_name',

    # Request handling
    'AuthenticationHeaders',
    'AnonymousRequestStrategy',
    'AuthenticatedRequestStrategy',
    'ResponseHandler',
    'SessionFactory',

    # Configuration
    'ContextConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
]
