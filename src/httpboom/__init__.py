"""HTTP-friendly error objects."""

from .constructors import (
    bad_data,
    bad_gateway,
    bad_implementation,
    bad_request,
    client_timeout,
    conflict,
    entity_too_large,
    expectation_failed,
    forbidden,
    gateway_timeout,
    illegal,
    internal,
    length_required,
    locked,
    method_not_allowed,
    not_acceptable,
    not_found,
    not_implemented,
    payment_required,
    precondition_failed,
    precondition_required,
    proxy_auth_required,
    range_not_satisfiable,
    resource_gone,
    server_unavailable,
    teapot,
    too_many_requests,
    unauthorized,
    unsupported_media_type,
    uri_too_long,
)
from .core import boomify, create, is_boom, wrap
from .exceptions import Boom
from .models import ErrorOutput, ErrorPayload

__version__ = "0.1.0"

__all__ = [
    "Boom",
    "ErrorOutput",
    "ErrorPayload",
    "bad_data",
    "bad_gateway",
    "bad_implementation",
    "bad_request",
    "boomify",
    "client_timeout",
    "conflict",
    "create",
    "entity_too_large",
    "expectation_failed",
    "forbidden",
    "gateway_timeout",
    "illegal",
    "internal",
    "is_boom",
    "length_required",
    "locked",
    "method_not_allowed",
    "not_acceptable",
    "not_found",
    "not_implemented",
    "payment_required",
    "precondition_failed",
    "precondition_required",
    "proxy_auth_required",
    "range_not_satisfiable",
    "resource_gone",
    "server_unavailable",
    "teapot",
    "too_many_requests",
    "unauthorized",
    "unsupported_media_type",
    "uri_too_long",
    "wrap",
]
