"""Tests for response classification and error normalization."""

import pytest

from putput.errors import PutPutError
from putput.responses import ResponseKind, classify_response, error_from_envelope, resolve_outcome


@pytest.mark.parametrize('status,content,kind', [
    (204, b'', ResponseKind.NO_CONTENT),
    (204, b'{"ignored": true}', ResponseKind.NO_CONTENT),
    (200, b'', ResponseKind.EMPTY_SUCCESS),
    (201, b'OK', ResponseKind.EMPTY_SUCCESS),
    (200, b'{"files": []}', ResponseKind.SUCCESS),
    (400, b'{"error": {"code": "BAD"}}', ResponseKind.ERROR_ENVELOPE),
    (500, b'<html>oops</html>', ResponseKind.UNPARSEABLE_ERROR),
    (502, b'\xff\xfe', ResponseKind.UNPARSEABLE_ERROR),
])
def test_classify_response(status, content, kind):
    """Test each status and body combination maps to one kind."""
    assert classify_response(status, content).kind is kind


def test_success_returns_body_verbatim():
    body = {'files': [], 'cursor': None, 'has_more': False, 'extra': 1}
    outcome = classify_response(200, b'{"files": [], "cursor": null, "has_more": false, "extra": 1}')

    assert resolve_outcome(outcome) == body


@pytest.mark.parametrize('status,content', [(204, b''), (200, b''), (200, b'not json')])
def test_empty_results_resolve_to_none(status, content):
    assert resolve_outcome(classify_response(status, content)) is None


def test_error_envelope_fields():
    """Test code, message and hint come from the envelope."""
    outcome = classify_response(
        429, b'{"error": {"code": "RATE_LIMITED", "message": "Slow down", "hint": "Retry in 60s"}}'
    )

    with pytest.raises(PutPutError) as exc_info:
        resolve_outcome(outcome)

    err = exc_info.value
    assert (err.status, err.code, err.message, err.hint) == (429, 'RATE_LIMITED', 'Slow down', 'Retry in 60s')


@pytest.mark.parametrize('body', [{}, {'error': None}, {'error': 'text'}, ['not', 'a', 'dict'], 'string'])
def test_envelope_without_error_object_uses_placeholders(body):
    err = error_from_envelope(418, body)

    assert err.code == 'UNKNOWN_ERROR'
    assert err.message == 'Request failed with status 418'
    assert err.hint is None


def test_envelope_with_partial_error_keeps_code():
    err = error_from_envelope(400, {'error': {'code': 'INVALID_URL'}})

    assert err.code == 'INVALID_URL'
    assert err.message == 'Request failed with status 400'


def test_unparseable_error_raises_unknown_error():
    with pytest.raises(PutPutError) as exc_info:
        resolve_outcome(classify_response(503, b'Service Unavailable'))

    assert exc_info.value.code == 'UNKNOWN_ERROR'
    assert exc_info.value.status == 503
