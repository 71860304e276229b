"""Data contexts: one per Sitecore host."""
from .data_context import SitecoreDataContext, normalize_host_name, PUBLIC_KEY_ACTION
from .authenticated_context import AuthenticatedSitecoreDataContext

__all__ = [
    'SitecoreDataContext',
    'AuthenticatedSitecoreDataContext',
    'normalize_host_name',
    'PUBLIC_KEY_ACTION',
]
