"""
Shared fixtures for gatewaykit tests.

Events follow the payload format 2.0 examples from the API Gateway documentation.
"""

import copy
import logging

import pytest

from gatewaykit.config import get_config
from gatewaykit.core import logging_config, request_context

REQUEST_CONTEXT = {
    "accountId": "123456789012",
    "apiId": "api-id",
    "authentication": {
        "clientCert": {
            "clientCertPem": "CERT_CONTENT",
            "subjectDN": "www.example.com",
            "issuerDN": "Example issuer",
            "serialNumber": "a1:a1:a1:a1:a1:a1:a1:a1:a1:a1:a1:a1:a1:a1:a1:a1",
            "validity": {
                "notBefore": "May 28 12:30:02 2019 GMT",
                "notAfter": "Aug  5 09:36:04 2021 GMT",
            },
        }
    },
    "domainName": "id.execute-api.us-east-1.amazonaws.com",
    "domainPrefix": "id",
    "http": {
        "method": "POST",
        "path": "/my/path",
        "protocol": "HTTP/1.1",
        "sourceIp": "192.0.2.1",
        "userAgent": "agent",
    },
    "requestId": "id",
    "routeKey": "$default",
    "stage": "$default",
    "time": "12/Mar/2020:19:03:58 +0000",
    "timeEpoch": 1583348638390,
}

HTTP_EVENT = {
    "version": "2.0",
    "routeKey": "$default",
    "rawPath": "/my/path",
    "rawQueryString": "parameter1=value1&parameter1=value2&parameter2=value",
    "cookies": ["cookie1=value1", "cookie2=value2"],
    "headers": {"Header1": "value1", "header2": "value1,value2"},
    "queryStringParameters": {"parameter1": "value1,value2", "parameter2": "value"},
    "requestContext": {
        **REQUEST_CONTEXT,
        "authorizer": {
            "jwt": {"sub": "user-1", "scope": "read"},
            "lambda": {"user_type": "admin"},
        },
    },
    "body": "Hello from Lambda",
    "pathParameters": {"parameter1": "value1"},
    "isBase64Encoded": False,
    "stageVariables": {"stageVariable1": "value1", "stageVariable2": "value2"},
}

AUTHORIZER_EVENT = {
    "version": "2.0",
    "type": "REQUEST",
    "routeArn": "arn:aws:execute-api:us-east-1:123456789012:abcdef123/test/GET/request",
    "identitySource": ["user1", "123"],
    "routeKey": "$default",
    "rawPath": "/my/path",
    "rawQueryString": "parameter1=value1&parameter1=value2&parameter2=value",
    "cookies": ["cookie1=value1", "cookie2=value2"],
    "headers": {"Header1": "value1", "header2": "value2"},
    "queryStringParameters": {"parameter1": "value1,value2", "parameter2": "value"},
    "requestContext": REQUEST_CONTEXT,
    "pathParameters": {"parameter1": "value1"},
    "stageVariables": {"stageVariable1": "value1", "stageVariable2": "value2"},
}


@pytest.fixture
def http_event():
    return copy.deepcopy(HTTP_EVENT)


@pytest.fixture
def authorizer_event():
    return copy.deepcopy(AUTHORIZER_EVENT)


@pytest.fixture(autouse=True)
def _reset_state():
    """Config is cached and the request id lives in a ContextVar; reset both per test."""
    get_config.cache_clear()
    request_context.clear_request_id()
    yield
    get_config.cache_clear()
    request_context.clear_request_id()


@pytest.fixture(autouse=True)
def _skip_logging_setup(monkeypatch):
    """Entry points would replace pytest's root handlers; treat logging as configured."""
    monkeypatch.setattr(logging_config, "_logging_configured", True)


@pytest.fixture
def restore_logging():
    """setup_logging reconfigures the package and root loggers; undo it after the test."""
    package_logger = logging.getLogger("gatewaykit")
    root = logging.getLogger()
    saved = (package_logger.level, package_logger.propagate, list(package_logger.handlers))
    saved_root = (root.level, list(root.handlers))
    yield package_logger
    package_logger.setLevel(saved[0])
    package_logger.propagate = saved[1]
    package_logger.handlers[:] = saved[2]
    root.setLevel(saved_root[0])
    root.handlers[:] = saved_root[1]
