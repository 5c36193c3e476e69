"""Tests for status code parsing and classification."""

import pytest

from httpboom.config import reload_config
from httpboom.status import (
    STATUS_CODES,
    is_client_error,
    is_server_error,
    parse_status_code,
    reason_phrase,
)


@pytest.mark.parametrize(
    "value, expected",
    [(404, 404), ("404", 404), (" 410 ", 410), ("404.1", 404), ("503abc", 503), (400.9, 400)],
)
def test_parse_status_code(value, expected):
    """Leading integer digits are used, like parseInt."""
    assert parse_status_code(value) == expected


@pytest.mark.parametrize("value", ["", "x404", 302, "-404", False, [404], float("inf")])
def test_parse_status_code_rejects(value):
    """Non-numbers and codes below 400 raise ValueError."""
    with pytest.raises(ValueError, match="First argument must be a number"):
        parse_status_code(value)


def test_reason_phrase_known():
    """Known codes map to their phrase."""
    assert reason_phrase(404) == "Not Found"
    assert reason_phrase(418) == "I'm a teapot"


def test_reason_phrase_unknown_label(monkeypatch):
    """Unknown codes use the configured label."""
    assert reason_phrase(599) == "Unknown"
    monkeypatch.setenv("HTTPBOOM_UNKNOWN_ERROR_LABEL", "Unassigned")
    reload_config()
    assert reason_phrase(599) == "Unassigned"


def test_classification():
    """The split is coarse: 4xx client, 5xx and above server."""
    assert is_client_error(400)
    assert is_client_error(499)
    assert not is_client_error(500)
    assert is_server_error(500)
    assert is_server_error(999)
    assert not is_server_error(404)


def test_table_has_error_codes():
    """Every code the constructors use has a phrase."""
    for code in (400, 401, 405, 418, 422, 429, 451, 500, 503, 504):
        assert code in STATUS_CODES
