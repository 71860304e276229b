"""
Query models for the Sitecore Item Web API.

A query describes one API operation: its type (and therefore HTTP verb),
the URI it targets, the format the response should be parsed as and,
for mutating queries, the fields to send in the request body.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, List
from urllib.parse import urlencode, quote

API_PATH = '/-/item/v1'
ACTIONS_PATH = '/-/actions'


class QueryType(Enum):
    """Query types understood by the Item Web API."""
    READ = 'read'
    CREATE = 'create'
    UPDATE = 'update'
    DELETE = 'delete'

    @property
    def http_method(self) -> str:
        """HTTP verb used for this query type."""
        return _HTTP_METHODS[self]

    @property
    def is_mutating(self) -> bool:
        """True for queries that carry a field body."""
        return self in (QueryType.CREATE, QueryType.UPDATE)


_HTTP_METHODS = {
    QueryType.READ: 'GET',
    QueryType.CREATE: 'POST',
    QueryType.UPDATE: 'PUT',
    QueryType.DELETE: 'DELETE',
}


class ResponseFormat(Enum):
    """Body formats a response can be deserialized from."""
    JSON = 'json'
    XML = 'xml'


class ItemScope(Enum):
    """Scope of items returned relative to the target item."""
    SELF = 's'
    PARENT = 'p'
    CHILDREN = 'c'


class BaseQuery(ABC):
    """Capability every query passed to a data context must provide."""

    query_type: QueryType = QueryType.READ
    response_format: ResponseFormat = ResponseFormat.JSON

    @abstractmethod
    def build_uri(self, host_name: str) -> str:
        """Builds the absolute request URI for the given host."""

    def fields_query_string(self) -> str:
        """URL-encoded body for mutating queries."""
        return ''


@dataclass
class ItemQuery(BaseQuery):
    """
    Query against the item endpoint.

    Items can be addressed by ID, by content path or by a Sitecore query.
    ``fields_to_update`` is sent as a form body for Create and Update.
    """
    query_type: QueryType = QueryType.READ
    item_id: Optional[str] = None
    item_path: Optional[str] = None
    query: Optional[str] = None
    database: Optional[str] = None
    language: Optional[str] = None
    version: Optional[int] = None
    payload: Optional[str] = None
    scope: List[ItemScope] = field(default_factory=list)
    fields: List[str] = field(default_factory=list)
    item_name: Optional[str] = None
    template: Optional[str] = None
    fields_to_update: Dict[str, str] = field(default_factory=dict)
    response_format: ResponseFormat = ResponseFormat.JSON

    def build_uri(self, host_name: str) -> str:
        path = API_PATH
        if self.item_path:
            path += quote('/' + self.item_path.strip('/'))

        params = []
        if self.item_id:
            params.append(('sc_itemid', self.item_id))
        if self.query:
            params.append(('query', self.query))
        if self.database:
            params.append(('sc_database', self.database))
        if self.language:
            params.append(('language', self.language))
        if self.version is not None:
            params.append(('sc_itemversion', str(self.version)))
        if self.payload:
            params.append(('payload', self.payload))
        if self.scope:
            params.append(('scope', '|'.join(s.value for s in self.scope)))
        if self.fields:
            params.append(('fields', '|'.join(self.fields)))
        if self.query_type == QueryType.CREATE:
            if self.item_name:
                params.append(('name', self.item_name))
            if self.template:
                params.append(('template', self.template))

        uri = f"{host_name.rstrip('/')}{path}"
        if params:
            uri += '?' + urlencode(params)
        return uri

    def fields_query_string(self) -> str:
        """Serializes ``fields_to_update`` as ``application/x-www-form-urlencoded``."""
        return urlencode(self.fields_to_update)


@dataclass
class ActionQuery(BaseQuery):
    """Query that invokes a named server action, e.g. ``getpublickey``."""
    action: str = ''
    response_format: ResponseFormat = ResponseFormat.XML
    query_type: QueryType = QueryType.READ

    def build_uri(self, host_name: str) -> str:
        return f"{host_name.rstrip('/')}{API_PATH}{ACTIONS_PATH}/{quote(self.action)}"
