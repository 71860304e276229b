"""
Response models.

Every response carries a status code, a status description and a
``ResponseInfo`` block. The data context fills the info block on every
path, successful or not, so callers inspect status rather than catch
exceptions.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class FailureKind(Enum):
    """Why a call did not produce a normal response."""
    RESPONSE_ERROR = 'response_error'
    TRANSPORT_ERROR = 'transport_error'
    UNEXPECTED_ERROR = 'unexpected_error'


@dataclass
class ResponseInfo:
    """
    Metadata attached to a response.

    Attributes:
        uri: Request URI
        response_time: Seconds from sending the request to reading the body
        error_message: Message of the captured failure, if any
        stack_trace: Formatted traceback of the captured failure, if any
        failure_kind: Category of the captured failure, if any
    """
    uri: Optional[str] = None
    response_time: Optional[float] = None
    error_message: Optional[str] = None
    stack_trace: Optional[str] = None
    failure_kind: Optional[FailureKind] = None


def _first(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Returns the first present key; JSON and XML bodies differ in casing."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _to_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    if value is None or value == '':
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1', 'yes')
    return bool(value)


def _as_list(value: Any) -> List[Any]:
    """XML bodies yield a dict for one child and a list for several."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


@dataclass
class BaseResponse:
    """Base class for typed responses."""
    status_code: Optional[int] = None
    status_description: Optional[str] = None
    info: Optional[ResponseInfo] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseResponse':
        """Creates a response from a deserialized body."""
        return cls(status_code=_to_int(_first(data, 'statusCode', 'StatusCode')))

    @property
    def succeeded(self) -> bool:
        """True when no failure was captured and the status is 2xx."""
        if self.info is not None and self.info.failure_kind is not None:
            return False
        return self.status_code is not None and 200 <= self.status_code < 300


@dataclass
class ItemField:
    """Single field of an item."""
    field_id: str
    name: Optional[str] = None
    value: Optional[str] = None

    @classmethod
    def from_dict(cls, field_id: str, data: Dict[str, Any]) -> 'ItemField':
        return cls(
            field_id=field_id,
            name=_first(data, 'Name', 'name'),
            value=_first(data, 'Value', 'value')
        )


@dataclass
class Item:
    """Item returned by the item endpoint."""
    item_id: Optional[str] = None
    long_id: Optional[str] = None
    path: Optional[str] = None
    display_name: Optional[str] = None
    database: Optional[str] = None
    language: Optional[str] = None
    template: Optional[str] = None
    version: Optional[int] = None
    has_children: bool = False
    fields: Dict[str, ItemField] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Item':
        raw_fields = _first(data, 'Fields', 'fields', default={}) or {}
        fields = {}
        if isinstance(raw_fields, dict):
            for field_id, field_data in raw_fields.items():
                if isinstance(field_data, dict):
                    fields[field_id] = ItemField.from_dict(field_id, field_data)

        return cls(
            item_id=_first(data, 'ID', 'Id', 'id'),
            long_id=_first(data, 'LongID', 'LongId', 'longId'),
            path=_first(data, 'Path', 'path'),
            display_name=_first(data, 'DisplayName', 'Displayname', 'displayName'),
            database=_first(data, 'Database', 'database'),
            language=_first(data, 'Language', 'language'),
            template=_first(data, 'Template', 'template'),
            version=_to_int(_first(data, 'Version', 'version')),
            has_children=_to_bool(_first(data, 'HasChildren', 'hasChildren', default=False)),
            fields=fields
        )

    def get_field_value(self, name: str) -> Optional[str]:
        """Looks a field up by name (case-insensitive) or by ID."""
        if name in self.fields:
            return self.fields[name].value
        for item_field in self.fields.values():
            if item_field.name and item_field.name.lower() == name.lower():
                return item_field.value
        return None


@dataclass
class ItemsResponse(BaseResponse):
    """Response of the item endpoint."""
    total_count: int = 0
    result_count: int = 0
    items: List[Item] = field(default_factory=list)
    error_message: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ItemsResponse':
        result = _first(data, 'result', 'Result', default={}) or {}
        error = _first(data, 'error', 'Error', default={}) or {}

        raw_items = _first(result, 'items', 'Items')
        if isinstance(raw_items, dict) and len(raw_items) == 1:
            # XML: <items><item/>...</items>
            raw_items = next(iter(raw_items.values()))

        return cls(
            status_code=_to_int(_first(data, 'statusCode', 'StatusCode')),
            total_count=_to_int(_first(result, 'totalCount', 'TotalCount'), 0),
            result_count=_to_int(_first(result, 'resultCount', 'ResultCount'), 0),
            items=[Item.from_dict(i) for i in _as_list(raw_items) if isinstance(i, dict)],
            error_message=_first(error, 'message', 'Message') if isinstance(error, dict) else None
        )


@dataclass
class PublicKeyResponse(BaseResponse):
    """RSA public key parts returned by the ``getpublickey`` action."""
    modulus: Optional[str] = None
    exponent: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PublicKeyResponse':
        return cls(
            status_code=_to_int(_first(data, 'statusCode', 'StatusCode')),
            modulus=_first(data, 'Modulus', 'modulus'),
            exponent=_first(data, 'Exponent', 'exponent')
        )

    def validate(self) -> bool:
        """True when both key parts are present."""
        return bool(self.modulus and self.modulus.strip()
                    and self.exponent and self.exponent.strip())
