"""Response handler: body deserialization and failure capture."""
import json
import traceback
from http import HTTPStatus
from typing import Any, Optional, Type, TypeVar

import requests
from defusedxml import DefusedXmlException
from defusedxml import ElementTree

from ...exceptions import ResponseParseError
from ...logging import get_logger
from ...models.query import ResponseFormat
from ...models.response import BaseResponse, FailureKind, ResponseInfo

logger = get_logger(__name__)

T = TypeVar('T', bound=BaseResponse)


def _local_name(tag: str) -> str:
    """Strips an ``{namespace}`` prefix from an element tag."""
    return tag.rsplit('}', 1)[-1] if tag.startswith('{') else tag


def xml_to_dict(element) -> Any:
    """
    Converts an element tree into nested dicts.

    Leaf elements become their stripped text, repeated child tags become
    lists and attributes of non-leaf elements are merged into the dict.
    """
    children = list(element)
    if not children:
        return (element.text or '').strip()

    result = dict(element.attrib)
    for child in children:
        tag = _local_name(child.tag)
        value = xml_to_dict(child)
        if tag in result:
            if not isinstance(result[tag], list):
                result[tag] = [result[tag]]
            result[tag].append(value)
        else:
            result[tag] = value
    return result


class ResponseHandler:
    """Handles API responses."""

    @staticmethod
    def parse_json(content: str) -> Any:
        """Parses a JSON body."""
        return json.loads(content)

    @staticmethod
    def parse_xml(content: str) -> Any:
        """Parses an XML body; the root element is unwrapped."""
        return xml_to_dict(ElementTree.fromstring(content))

    @staticmethod
    def deserialize(content: Optional[str], response_format: ResponseFormat,
                    response_type: Type[T], http_response: requests.Response = None) -> Optional[T]:
        """
        Deserializes a response body into ``response_type``.

        Args:
            content: Body text
            response_format: JSON or XML
            response_type: BaseResponse subclass to build
            http_response: Response the body came from, kept on parse errors

        Returns:
            Parsed response, or None for an empty or whitespace body

        Raises:
            ResponseParseError: If the body is not valid for the format
        """
        if content is None or not content.strip():
            return None

        try:
            if response_format == ResponseFormat.XML:
                data = ResponseHandler.parse_xml(content)
            else:
                data = ResponseHandler.parse_json(content)
        except (ValueError, ElementTree.ParseError, DefusedXmlException) as e:
            raise ResponseParseError(
                f"Could not deserialize {response_format.value} response: {e}",
                response=http_response
            ) from e

        if not isinstance(data, dict):
            raise ResponseParseError(
                f"Expected a {response_format.value} object, got {type(data).__name__}",
                response=http_response
            )

        return response_type.from_dict(data)

    @staticmethod
    def capture_failure(response: T, error: BaseException, uri: Optional[str] = None,
                        response_time: Optional[float] = None) -> T:
        """
        Records a failed call on the response instead of raising.

        Failures carrying an HTTP response keep its status. Transport
        failures without one and any other error become 500.
        """
        http_response = getattr(error, 'response', None)

        if http_response is not None:
            kind = FailureKind.RESPONSE_ERROR
            response.status_code = http_response.status_code
            response.status_description = http_response.reason
        else:
            if isinstance(error, requests.RequestException):
                kind = FailureKind.TRANSPORT_ERROR
            else:
                kind = FailureKind.UNEXPECTED_ERROR
            response.status_code = HTTPStatus.INTERNAL_SERVER_ERROR.value
            response.status_description = HTTPStatus.INTERNAL_SERVER_ERROR.phrase

        if response.info is None:
            response.info = ResponseInfo()

        info = response.info
        info.uri = info.uri or uri
        if info.response_time is None:
            info.response_time = response_time
        info.error_message = str(error)
        info.stack_trace = ''.join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
        info.failure_kind = kind

        logger.warning(f"Request to {uri} failed ({kind.value}): {error}")
        return response
