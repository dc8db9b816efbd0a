"""
Pydantic models for the requestContext block of HTTP API (payload v2.0) events.

Reference: https://docs.aws.amazon.com/apigateway/latest/developerguide/http-api-develop-integrations-lambda.html

Shared by the authorizer and proxy integration request models.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# timeEpoch is an unsigned 64-bit integer on the wire.
MAX_WIRE_EPOCH_MILLIS = 2**64 - 1


class EventModel(BaseModel):
    """Base for wire records: camelCase aliases, immutable, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class HttpLineInfo(EventModel):
    """requestContext.http object."""

    method: str = ""
    path: str = ""
    protocol: str = ""
    source_ip: str = ""
    user_agent: str = ""


class Validity(EventModel):
    """Client certificate validity window. Dates are passed through unparsed."""

    not_before: str = ""
    not_after: str = ""


class ClientCertificate(EventModel):
    """Client certificate presented on a mutual TLS connection."""

    client_cert_pem: str = ""
    subject_dn: str = Field(default="", alias="subjectDN")
    issuer_dn: str = Field(default="", alias="issuerDN")
    serial_number: str = ""
    validity: Validity = Field(default_factory=Validity)


class Authentication(EventModel):
    """requestContext.authentication object."""

    client_cert: ClientCertificate = Field(default_factory=ClientCertificate)


class AuthorizerResult(EventModel):
    """requestContext.authorizer object (proxy integration events only)."""

    # Output of a Lambda authorizer.
    lambda_: Optional[Dict[str, str]] = Field(default=None, alias="lambda")
    jwt: Optional[Dict[str, str]] = None


class RequestContext(EventModel):
    """
    requestContext object of an authorizer event.

    time and time_epoch are independent passthrough fields; they are not
    checked against each other.
    """

    account_id: str = ""
    api_id: str = ""
    authentication: Optional[Authentication] = None
    domain_name: str = ""
    domain_prefix: str = ""
    http: HttpLineInfo = Field(default_factory=HttpLineInfo)
    request_id: str = ""
    route_key: str = ""
    stage: str = ""
    time: str = ""
    time_epoch: int = Field(
        default=0,
        ge=0,
        le=MAX_WIRE_EPOCH_MILLIS,
        description="Milliseconds since the Unix epoch",
    )


class HttpRequestContext(RequestContext):
    """requestContext object of a proxy integration event."""

    authorizer: Optional[AuthorizerResult] = None
