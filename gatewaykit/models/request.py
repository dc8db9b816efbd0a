"""
Pydantic models for HTTP API (payload v2.0) Lambda events.

Reference: https://docs.aws.amazon.com/apigateway/latest/developerguide/http-api-develop-integrations-lambda.html

BaseRequest holds the fields and derived accessors shared by both event
shapes. AuthorizationRequest adds the authorizer-only fields; HttpRequest adds
the body and its encoding flag. Wire names that collide with accessor names
(cookies, headers, body) are stored as raw_cookies, raw_headers and raw_body.
"""

import json
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from ..core.body_codec import decode_base64, decode_utf8
from .context import EventModel, HttpRequestContext, RequestContext

logger = logging.getLogger("gatewaykit.request")

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
# 9999-12-31T23:59:59.999Z, the last millisecond a datetime can hold.
MAX_DATETIME_MILLIS = 253402300799999


class BaseRequest(EventModel):
    """Fields common to authorizer and proxy integration events."""

    version: str = ""
    route_key: str = ""
    raw_path: str = ""
    raw_query_string: str = ""
    raw_cookies: Optional[List[str]] = Field(default=None, alias="cookies")
    raw_headers: Dict[str, str] = Field(default_factory=dict, alias="headers")
    query_string_parameters: Optional[Dict[str, str]] = None
    request_context: RequestContext = Field(default_factory=RequestContext)
    path_parameters: Optional[Dict[str, str]] = None
    stage_variables: Optional[Dict[str, str]] = None

    @classmethod
    def from_event(cls, event: Dict[str, Any]):
        """Decode an event dict as delivered by the Lambda runtime."""
        request = cls.model_validate(event)
        logger.debug(
            "Decoded %s",
            cls.__name__,
            extra={"route_key": request.route_key, "path": request.path()},
        )
        return request

    @classmethod
    def from_json(cls, data: Union[str, bytes]):
        """Decode a raw JSON event."""
        return cls.from_event(json.loads(data))

    def to_event(self) -> Dict[str, Any]:
        """Encode back to the wire dict (camelCase keys)."""
        return self.model_dump(by_alias=True)

    def path(self) -> str:
        return self.request_context.http.path

    def cookies(self) -> Optional[Dict[str, str]]:
        """
        Parse the cookie list into a name -> value map.

        Entries that do not split into exactly two parts on "=" are dropped,
        so "a=1=2" and "flag" are both ignored. Returns None when the event
        has no cookie list.
        """
        if self.raw_cookies is None:
            return None

        result = {}
        for cookie in self.raw_cookies:
            parts = cookie.split("=")
            if len(parts) != 2:
                continue
            result[parts[0]] = parts[1]
        return result

    def headers(self) -> Dict[str, str]:
        # Keys keep the case they arrived with.
        return dict(self.raw_headers)

    def queries(self) -> Optional[Dict[str, str]]:
        return _copy(self.query_string_parameters)

    def params(self) -> Optional[Dict[str, str]]:
        return _copy(self.path_parameters)

    def stage(self) -> str:
        return self.request_context.stage

    def time(self) -> datetime:
        """
        Request time as an aware UTC datetime, from requestContext.timeEpoch.

        Values past the datetime range saturate to 9999-12-31T23:59:59.999Z.
        """
        return UNIX_EPOCH + timedelta(milliseconds=self._epoch_millis())

    def time_chrono(self) -> datetime:
        """
        Calendar conversion of requestContext.timeEpoch.

        Same instant as time(), built from a POSIX timestamp.
        """
        seconds, millis = divmod(self._epoch_millis(), 1000)
        return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=millis * 1000)

    def _epoch_millis(self) -> int:
        return min(self.request_context.time_epoch, MAX_DATETIME_MILLIS)

    def method(self) -> str:
        return self.request_context.http.method

    def ip(self) -> str:
        return self.request_context.http.source_ip

    def ua(self) -> str:
        return self.request_context.http.user_agent

    def protocol(self) -> str:
        return self.request_context.http.protocol


class AuthorizationRequest(BaseRequest):
    """
    Lambda authorizer event (payload format 2.0).

    Carries the route ARN and identity sources; never has a body.
    """

    type_: str = Field(default="", alias="type")
    route_arn: str = ""
    identity_source: List[str] = Field(default_factory=list)


class HttpRequest(BaseRequest):
    """
    Proxy integration event (payload format 2.0).

    When raw_body is None the encoding flag is ignored; otherwise
    is_base64encoded decides how body() and body_binary() decode it.
    """

    request_context: HttpRequestContext = Field(default_factory=HttpRequestContext)
    raw_body: Optional[str] = Field(default=None, alias="body")
    is_base64encoded: bool = Field(default=False, alias="isBase64Encoded")

    def body(self) -> Optional[str]:
        """
        Body as text.

        Raises:
            Base64DecodeError: the body is flagged as base64 but is not valid base64
            Utf8DecodeError: the decoded bytes are not valid UTF-8
        """
        if self.raw_body is None:
            return None
        if not self.is_base64encoded:
            return self.raw_body
        return decode_utf8(decode_base64(self.raw_body))

    def body_binary(self) -> Optional[bytes]:
        """
        Body as bytes. Text bodies are returned as their UTF-8 encoding.

        Raises:
            Base64DecodeError: the body is flagged as base64 but is not valid base64
        """
        if self.raw_body is None:
            return None
        if not self.is_base64encoded:
            return self.raw_body.encode("utf-8")
        return decode_base64(self.raw_body)


def _copy(mapping: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
    return dict(mapping) if mapping is not None else None
