"""
Lambda entry points.

gateway_handler decodes the raw event into a request model, binds the request
id for log correlation, and encodes whatever the wrapped function returns.
http_echo and authorizer_example are ready-to-deploy handlers built on it.

Usage:
    @gateway_handler(HttpRequest)
    def lambda_handler(request, context):
        return Response.new_text(f"hello {request.ip()}")
"""

import functools
import json
import logging
from typing import Any, Callable, Dict, Type

from .config import get_config
from .core.logging_config import ensure_logging
from .core.request_context import clear_request_id, set_request_id
from .exceptions import ParseBodyError
from .models import AuthorizationRequest, AuthorizerResponse, BaseRequest, HttpRequest, Response

logger = logging.getLogger("gatewaykit.handlers")

ErrorResponseFactory = Callable[[int], Any]


def gateway_handler(
    request_model: Type[BaseRequest],
    error_response: ErrorResponseFactory = Response.new_status,
):
    """
    Decorator for Lambda handlers taking a decoded request.

    The wrapped function returns a model with to_payload(). Body decoding
    errors become error_response(400); any other exception, including a
    result that cannot be encoded, becomes error_response(500). Events that
    do not match request_model raise pydantic.ValidationError to the runtime.
    Logging is configured on the first call.
    """

    def decorator(func: Callable[[BaseRequest, Any], Any]):
        @functools.wraps(func)
        def wrapper(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
            ensure_logging()
            config = get_config()
            if config.LOG_EVENTS:
                logger.info("Received event", extra={"event": event})

            try:
                request = request_model.from_event(event)
            except Exception:
                logger.error(
                    "Failed to decode event as %s", request_model.__name__, exc_info=True
                )
                raise

            set_request_id(request.request_context.request_id)
            try:
                try:
                    payload = func(request, context).to_payload()
                except ParseBodyError as e:
                    logger.warning(
                        "Failed to decode request body: %s",
                        e,
                        extra={"error_type": type(e).__name__, "path": request.path()},
                    )
                    payload = error_response(400).to_payload()
                except Exception:
                    logger.exception("Unhandled exception in %s", func.__name__)
                    payload = error_response(500).to_payload()

                logger.debug("Returning payload", extra={"keys": sorted(payload)})
                return payload
            finally:
                clear_request_id()

        return wrapper

    return decorator


def _deny(_status_code: int) -> AuthorizerResponse:
    return AuthorizerResponse.new_nc(False)


@gateway_handler(HttpRequest)
def http_echo(request: HttpRequest, context: Any) -> Response:
    """Echo the decoded request back as JSON."""
    body = request.raw_body or ""
    logger.info(
        "%s %s",
        request.method(),
        request.path(),
        extra={"body": body[: get_config().ECHO_MAX_BODY_LOG]},
    )
    try:
        encoded = json.dumps(request.to_event())
    except (TypeError, ValueError):
        logger.error("Can not encode request as json", exc_info=True)
        return Response.new_status(500).with_body_text("Can not encode as json")
    return Response.new_json(encoded)


_AUTHORIZER_ROUTES: Dict[str, AuthorizerResponse] = {
    "/": AuthorizerResponse.new_nc(True),
    "/pass": AuthorizerResponse.new_nc(True),
    "/pass_with_context": AuthorizerResponse.new(True, {"type": "sudo", "user_type": "admin"}),
    "/deny": AuthorizerResponse.new_nc(False),
    # Authorized despite the route name.
    "/deny_with_context": AuthorizerResponse.new(
        True, {"type": "failed", "user_type": "visitor"}
    ),
}


@gateway_handler(AuthorizationRequest, error_response=_deny)
def authorizer_example(request: AuthorizationRequest, context: Any) -> AuthorizerResponse:
    """Authorize by request path; unknown paths are allowed."""
    path = request.path()
    response = _AUTHORIZER_ROUTES.get(path, AuthorizerResponse.new_nc(True))
    logger.info(
        "Authorizer decision for %s",
        path,
        extra={"is_authorized": response.is_authorized, "route_arn": request.route_arn},
    )
    return response
