"""Protocol header synthesis for status-specific errors."""

import re
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

# Printable ASCII allowed inside a quoted header attribute value
_ATTRIBUTE_VALUE = re.compile(
    r"^[ \w!#$%&'()*+,\-./:;<=>?@\[\]^`{|}~\"\\]*$", re.ASCII
)

AttributesType = Union[str, Mapping[str, Any]]


def escape_header_attribute(value: str) -> str:
    """Validate and escape a value for use inside a quoted header attribute."""
    if not _ATTRIBUTE_VALUE.match(value):
        raise ValueError(f"Bad attribute value ({value})")
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _attribute_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def www_authenticate(
    scheme: Union[str, Sequence[str]],
    attributes: Optional[AttributesType] = None,
    message: Optional[str] = None,
) -> Tuple[str, Optional[AttributesType], bool]:
    """
    Build a WWW-Authenticate challenge.

    Args:
        scheme: Authentication scheme, or a list of complete challenges
        attributes: Token string or mapping of challenge parameters
        message: Error description added as the ``error`` parameter

    Returns:
        (header value, payload attributes or None, missing credentials flag)
    """
    if not isinstance(scheme, str):
        return ", ".join(scheme), None, False

    header = scheme
    payload_attributes: Optional[AttributesType] = None
    # An empty mapping still counts as attributes; an empty token does not.
    has_attributes = attributes is not None and (
        not isinstance(attributes, str) or bool(attributes)
    )
    if has_attributes or message:
        payload_attributes = {}

    if has_attributes:
        if isinstance(attributes, str):
            header = f"{header} {escape_header_attribute(attributes)}"
            payload_attributes = attributes
        else:
            rendered: Dict[str, Any] = {}
            pairs = []
            for name, value in attributes.items():
                if value is None:
                    value = ""
                pairs.append(
                    f'{name}="{escape_header_attribute(_attribute_text(value))}"'
                )
                rendered[name] = value
            if pairs:
                header = f"{header} {', '.join(pairs)}"
            payload_attributes = rendered

    if not message:
        return header, payload_attributes, True

    if has_attributes:
        header = f"{header},"
    header = f'{header} error="{escape_header_attribute(message)}"'
    if isinstance(payload_attributes, dict):
        payload_attributes["error"] = message
    return header, payload_attributes, False


def allow_header(methods: Union[str, Sequence[str]]) -> str:
    """Build an Allow header value from one method or a list of methods."""
    if isinstance(methods, str):
        methods = [methods]
    return ", ".join(methods)
