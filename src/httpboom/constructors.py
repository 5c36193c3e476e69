"""Status-specific error constructors.

Each constructor accepts either a message or an existing exception as its
first argument. An exception is decorated in place and returned, so its
type, message and attributes survive.
"""

from typing import Any, Optional, Sequence, Union

from .core import build, get_message, server_error
from .headers import AttributesType, allow_header, www_authenticate


# 4xx


def bad_request(message: Any = None, data: Any = None) -> BaseException:
    """400 Bad Request."""
    return build(400, message, data, bad_request)


def unauthorized(
    message: Any = None,
    scheme: Optional[Union[str, Sequence[str]]] = None,
    attributes: Optional[AttributesType] = None,
) -> BaseException:
    """
    401 Unauthorized, optionally with a WWW-Authenticate challenge.

    Args:
        message: Error message, also sent as the challenge ``error`` parameter
        scheme: Authentication scheme name, or a list of full challenges
            joined verbatim into the header
        attributes: Token string or mapping of challenge parameters, only
            used with a scheme name

    When a scheme name is given without a message the error is flagged with
    ``is_missing`` (credentials were absent rather than wrong).
    """
    error = build(401, message, None, unauthorized)
    if not scheme:
        return error

    if isinstance(message, BaseException):
        message = get_message(message)
    elif message is not None:
        message = str(message)

    header, payload_attributes, missing = www_authenticate(scheme, attributes, message)
    if payload_attributes is not None:
        error.output.payload.attributes = payload_attributes  # type: ignore[attr-defined]
    if missing:
        error.is_missing = True  # type: ignore[attr-defined]
    error.output.headers["WWW-Authenticate"] = header  # type: ignore[attr-defined]
    return error


def payment_required(message: Any = None, data: Any = None) -> BaseException:
    """402 Payment Required."""
    return build(402, message, data, payment_required)


def forbidden(message: Any = None, data: Any = None) -> BaseException:
    """403 Forbidden."""
    return build(403, message, data, forbidden)


def not_found(message: Any = None, data: Any = None) -> BaseException:
    """404 Not Found."""
    return build(404, message, data, not_found)


def method_not_allowed(
    message: Any = None,
    data: Any = None,
    allow: Optional[Union[str, Sequence[str]]] = None,
) -> BaseException:
    """405 Method Not Allowed, with an Allow header when methods are given."""
    error = build(405, message, data, method_not_allowed)
    if allow is not None:
        error.output.headers["Allow"] = allow_header(allow)  # type: ignore[attr-defined]
    return error


def not_acceptable(message: Any = None, data: Any = None) -> BaseException:
    """406 Not Acceptable."""
    return build(406, message, data, not_acceptable)


def proxy_auth_required(message: Any = None, data: Any = None) -> BaseException:
    """407 Proxy Authentication Required."""
    return build(407, message, data, proxy_auth_required)


def client_timeout(message: Any = None, data: Any = None) -> BaseException:
    """408 Request Timeout."""
    return build(408, message, data, client_timeout)


def conflict(message: Any = None, data: Any = None) -> BaseException:
    """409 Conflict."""
    return build(409, message, data, conflict)


def resource_gone(message: Any = None, data: Any = None) -> BaseException:
    """410 Gone."""
    return build(410, message, data, resource_gone)


def length_required(message: Any = None, data: Any = None) -> BaseException:
    """411 Length Required."""
    return build(411, message, data, length_required)


def precondition_failed(message: Any = None, data: Any = None) -> BaseException:
    """412 Precondition Failed."""
    return build(412, message, data, precondition_failed)


def entity_too_large(message: Any = None, data: Any = None) -> BaseException:
    """413 Payload Too Large."""
    return build(413, message, data, entity_too_large)


def uri_too_long(message: Any = None, data: Any = None) -> BaseException:
    """414 URI Too Long."""
    return build(414, message, data, uri_too_long)


def unsupported_media_type(message: Any = None, data: Any = None) -> BaseException:
    """415 Unsupported Media Type."""
    return build(415, message, data, unsupported_media_type)


def range_not_satisfiable(message: Any = None, data: Any = None) -> BaseException:
    """416 Range Not Satisfiable."""
    return build(416, message, data, range_not_satisfiable)


def expectation_failed(message: Any = None, data: Any = None) -> BaseException:
    """417 Expectation Failed."""
    return build(417, message, data, expectation_failed)


def teapot(message: Any = None, data: Any = None) -> BaseException:
    """418 I'm a teapot."""
    return build(418, message, data, teapot)


def bad_data(message: Any = None, data: Any = None) -> BaseException:
    """422 Unprocessable Entity."""
    return build(422, message, data, bad_data)


def locked(message: Any = None, data: Any = None) -> BaseException:
    """423 Locked."""
    return build(423, message, data, locked)


def precondition_required(message: Any = None, data: Any = None) -> BaseException:
    """428 Precondition Required."""
    return build(428, message, data, precondition_required)


def too_many_requests(message: Any = None, data: Any = None) -> BaseException:
    """429 Too Many Requests."""
    return build(429, message, data, too_many_requests)


def illegal(message: Any = None, data: Any = None) -> BaseException:
    """451 Unavailable For Legal Reasons."""
    return build(451, message, data, illegal)


# 5xx


def internal(message: Any = None, data: Any = None, status_code: Any = 500) -> BaseException:
    """500 Internal Server Error, or another server status code."""
    return server_error(message, data, status_code, internal)


def not_implemented(message: Any = None, data: Any = None) -> BaseException:
    """501 Not Implemented."""
    return server_error(message, data, 501, not_implemented)


def bad_gateway(message: Any = None, data: Any = None) -> BaseException:
    """502 Bad Gateway."""
    return server_error(message, data, 502, bad_gateway)


def server_unavailable(message: Any = None, data: Any = None) -> BaseException:
    """503 Service Unavailable."""
    return server_error(message, data, 503, server_unavailable)


def gateway_timeout(message: Any = None, data: Any = None) -> BaseException:
    """504 Gateway Timeout."""
    return server_error(message, data, 504, gateway_timeout)


def bad_implementation(message: Any = None, data: Any = None) -> BaseException:
    """500 caused by a programming error; flagged with ``is_developer_error``."""
    error = server_error(message, data, 500, bad_implementation)
    error.is_developer_error = True  # type: ignore[attr-defined]
    return error
