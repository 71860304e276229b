"""Request handling using Strategy pattern."""
from .request_builder import (
    AuthenticationHeaders,
    RequestStrategy,
    AnonymousRequestStrategy,
    AuthenticatedRequestStrategy,
    build_base_request,
    FORM_CONTENT_TYPE,
)
from .response_handler import ResponseHandler, xml_to_dict

__all__ = [
    'AuthenticationHeaders',
    'RequestStrategy',
    'AnonymousRequestStrategy',
    'AuthenticatedRequestStrategy',
    'build_base_request',
    'FORM_CONTENT_TYPE',
    'ResponseHandler',
    'xml_to_dict',
]
