"""Query, response and credential models."""
from .query import (
    QueryType,
    ResponseFormat,
    ItemScope,
    BaseQuery,
    ItemQuery,
    ActionQuery,
)
from .response import (
    FailureKind,
    ResponseInfo,
    BaseResponse,
    ItemField,
    Item,
    ItemsResponse,
    PublicKeyResponse,
)
from .credentials import SitecoreCredentials

__all__ = [
    'QueryType',
    'ResponseFormat',
    'ItemScope',
    'BaseQuery',
    'ItemQuery',
    'ActionQuery',
    'FailureKind',
    'ResponseInfo',
    'BaseResponse',
    'ItemField',
    'Item',
    'ItemsResponse',
    'PublicKeyResponse',
    'SitecoreCredentials',
]
