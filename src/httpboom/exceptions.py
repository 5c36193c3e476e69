"""Exception type for errors built by the HTTP error factory."""

from typing import Any, Callable, Optional

from .models import ErrorOutput


class Boom(Exception):
    """Error that carries the HTTP response a serving layer should render.

    Instances are normally built through ``httpboom.create`` or one of the
    status constructors, which attach ``output`` and the classification
    flags. Foreign exceptions decorated by ``wrap`` carry the same
    attributes without being instances of this class; use ``is_boom`` to
    test for either.
    """

    is_boom: bool = False
    is_server: bool = False
    is_missing: bool = False
    is_developer_error: bool = False
    output: Optional[ErrorOutput] = None
    typeof: Optional[Callable[..., Any]] = None

    def __init__(self, message: Any = None, data: Any = None) -> None:
        if message is not None:
            message = str(message)
        if message:
            super().__init__(message)
        else:
            super().__init__()
        self.message = message or ""
        self.data = data

    def __str__(self) -> str:
        return self.message

    def reformat(self) -> None:
        """Rebuild the payload from the current status code and message."""
        from .core import reformat

        reformat(self)
