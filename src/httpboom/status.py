"""HTTP status code table and coarse client/server classification."""

import math
import re
from typing import Any, Dict

from .config import get_config

STATUS_CODES: Dict[int, str] = {
    100: "Continue",
    101: "Switching Protocols",
    102: "Processing",
    200: "OK",
    201: "Created",
    202: "Accepted",
    203: "Non-Authoritative Information",
    204: "No Content",
    205: "Reset Content",
    206: "Partial Content",
    207: "Multi-Status",
    208: "Already Reported",
    226: "IM Used",
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    305: "Use Proxy",
    307: "Temporary Redirect",
    308: "Permanent Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Payload Too Large",
    414: "URI Too Long",
    415: "Unsupported Media Type",
    416: "Range Not Satisfiable",
    417: "Expectation Failed",
    418: "I'm a teapot",
    421: "Misdirected Request",
    422: "Unprocessable Entity",
    423: "Locked",
    424: "Failed Dependency",
    425: "Unordered Collection",
    426: "Upgrade Required",
    428: "Precondition Required",
    429: "Too Many Requests",
    431: "Request Header Fields Too Large",
    451: "Unavailable For Legal Reasons",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
    506: "Variant Also Negotiates",
    507: "Insufficient Storage",
    508: "Loop Detected",
    509: "Bandwidth Limit Exceeded",
    510: "Not Extended",
    511: "Network Authentication Required",
}

MIN_ERROR_CODE = 400
MIN_SERVER_ERROR_CODE = 500

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _to_int(value: Any) -> int:
    # bool is an int subclass but never a meaningful status code
    if isinstance(value, bool):
        raise ValueError(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(value)
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match is None:
            raise ValueError(value)
        return int(match.group(1))
    raise ValueError(value)


def parse_status_code(value: Any) -> int:
    """
    Coerce a status code argument to an integer error code.

    Accepts ints, finite floats (truncated) and strings starting with an
    integer ("404.1" -> 404). Anything else, or a result below 400, raises
    ValueError.
    """
    try:
        code = _to_int(value)
    except ValueError:
        code = None

    if code is None or code < MIN_ERROR_CODE:
        raise ValueError(f"First argument must be a number (400+): {value!r}")
    return code


def reason_phrase(code: int) -> str:
    """Return the reason phrase for a status code, or the unknown label."""
    phrase = STATUS_CODES.get(code)
    if phrase is None:
        return get_config().unknown_error_label
    return phrase


def is_client_error(code: int) -> bool:
    """True for 4xx codes."""
    return MIN_ERROR_CODE <= code < MIN_SERVER_ERROR_CODE


def is_server_error(code: int) -> bool:
    """True for 5xx codes and anything above."""
    return code >= MIN_SERVER_ERROR_CODE
