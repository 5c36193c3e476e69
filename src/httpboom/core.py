"""Error construction and normalization engine.

Every public constructor funnels through ``initialize``, which decorates an
exception in place with the HTTP response shape (``output``) plus the
classification flags a serving layer needs to render it.
"""

import logging
from functools import partial
from typing import Any, Callable, Optional

from .config import get_config
from .exceptions import Boom
from .models import ErrorOutput
from .status import is_server_error, parse_status_code, reason_phrase

logger = logging.getLogger(__name__)

DEFAULT_STATUS_CODE = 500


def is_boom(error: Any) -> bool:
    """Return True if the object has been decorated with an HTTP response."""
    return isinstance(error, BaseException) and getattr(error, "is_boom", False) is True


def get_message(error: BaseException) -> str:
    """Read an exception's message, whether or not it was decorated."""
    message = getattr(error, "message", None)
    if isinstance(message, str):
        return message
    if not error.args:
        return ""
    return str(error)


def _set_message(error: BaseException, message: str) -> None:
    error.message = message  # type: ignore[attr-defined]
    # Multi-argument args (e.g. OSError errno, strerror) keep their meaning.
    if len(error.args) <= 1:
        error.args = (message,)


def reformat(error: BaseException) -> None:
    """Rebuild an error's payload from its current status code and message."""
    output: ErrorOutput = error.output  # type: ignore[attr-defined]
    payload = output.payload
    payload.status_code = output.status_code
    payload.error = reason_phrase(output.status_code)

    # Hide the actual 500 error from the user
    if output.status_code == DEFAULT_STATUS_CODE:
        payload.message = get_config().internal_error_message
        return

    message = get_message(error)
    if message:
        payload.message = message


def initialize(
    error: BaseException, status_code: Any, message: Optional[str] = None
) -> BaseException:
    """
    Decorate an exception in place with an HTTP response shape.

    Args:
        error: Exception to decorate; returned as the same object
        status_code: Status code (400+), coerced with parse_status_code
        message: Optional message prefixed to the existing error message

    Returns:
        The decorated exception
    """
    code = parse_status_code(status_code)

    error.is_boom = True  # type: ignore[attr-defined]
    error.is_server = is_server_error(code)  # type: ignore[attr-defined]

    if not hasattr(error, "data"):
        error.data = None  # type: ignore[attr-defined]

    error.output = ErrorOutput(status_code=code)  # type: ignore[attr-defined]

    if not isinstance(error, Boom):
        error.reformat = partial(reformat, error)  # type: ignore[attr-defined]

    current = get_message(error)
    if not message and not current:
        reformat(error)
        message = error.output.payload.error  # type: ignore[attr-defined]

    if message:
        _set_message(error, f"{message}: {current}" if current else str(message))
    else:
        error.message = current  # type: ignore[attr-defined]

    reformat(error)
    logger.debug("Decorated %s as HTTP %d", type(error).__name__, code)
    return error


def wrap(
    error: BaseException,
    status_code: Any = None,
    message: Optional[str] = None,
) -> BaseException:
    """
    Decorate an exception, returning already decorated ones untouched.

    Raises:
        TypeError: error is not an exception
        ValueError: error is already decorated and a status code or message
            was supplied
    """
    if not isinstance(error, BaseException):
        raise TypeError("Cannot wrap non-exception object")

    if is_boom(error):
        if status_code or message:
            raise ValueError("Cannot provide status_code or message with boom error")
        return error

    return initialize(error, status_code or DEFAULT_STATUS_CODE, message)


def boomify(
    error: BaseException,
    status_code: Any = None,
    message: Optional[str] = None,
    override: bool = True,
) -> BaseException:
    """
    Decorate an exception, re-initializing decorated ones when asked to.

    Unlike ``wrap``, a decorated error given a new status code or message is
    re-initialized (keeping its current code when only a message is given)
    unless ``override`` is False.
    """
    if not isinstance(error, BaseException):
        raise TypeError("Cannot boomify non-exception object")

    if not is_boom(error):
        return initialize(error, status_code or DEFAULT_STATUS_CODE, message)

    if override is False or (not status_code and not message):
        return error

    current_code = error.output.status_code  # type: ignore[attr-defined]
    return initialize(error, status_code or current_code, message)


def build(
    status_code: Any,
    message: Any,
    data: Any,
    ctor: Optional[Callable[..., Any]],
) -> BaseException:
    """Shared body of ``create`` and the status constructors."""
    if isinstance(message, BaseException):
        if data is not None:
            message.data = data  # type: ignore[attr-defined]
        return wrap(message, status_code)

    error = Boom(message if message else None, data=data)
    initialize(error, status_code)
    error.typeof = ctor
    return error


def server_error(
    message: Any,
    data: Any,
    status_code: Any,
    ctor: Optional[Callable[..., Any]],
) -> BaseException:
    """
    Shared body of the 5xx constructors.

    An undecorated exception passed as data is decorated itself, with the
    message prefixed to its own. Anything else becomes the new error's data.
    """
    if isinstance(data, BaseException) and not is_boom(data):
        return wrap(data, status_code, message)

    error = build(status_code or DEFAULT_STATUS_CODE, message, None, ctor)
    if data is not None:
        error.data = data  # type: ignore[attr-defined]
    return error


def create(status_code: Any, message: Any = None, data: Any = None) -> BaseException:
    """Create an error for any status code of 400 or above."""
    return build(status_code, message, data, create)
