"""Classification of raw HTTP responses into success values or PutPutError."""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from putput.errors import UNKNOWN_ERROR, PutPutError


class ResponseKind(Enum):
    NO_CONTENT = "no_content"
    EMPTY_SUCCESS = "empty_success"
    SUCCESS = "success"
    ERROR_ENVELOPE = "error_envelope"
    UNPARSEABLE_ERROR = "unparseable_error"


@dataclass(frozen=True)
class ResponseOutcome:
    """
    Result of classifying one API response.

    ``body`` holds the decoded JSON for SUCCESS and ERROR_ENVELOPE, None otherwise.
    """
    kind: ResponseKind
    status: int
    body: Any = None


def is_success(status: int) -> bool:
    return 200 <= status < 300


def classify_response(status: int, content: bytes) -> ResponseOutcome:
    """
    Classify a response by status code and whether its body decodes as JSON.

    Args:
        status: HTTP status code
        content: Raw response body

    Returns:
        ResponseOutcome tagged with exactly one ResponseKind
    """
    if status == 204:
        return ResponseOutcome(ResponseKind.NO_CONTENT, status)

    try:
        body = json.loads(content)
    except ValueError:
        if is_success(status):
            return ResponseOutcome(ResponseKind.EMPTY_SUCCESS, status)
        return ResponseOutcome(ResponseKind.UNPARSEABLE_ERROR, status)

    if is_success(status):
        return ResponseOutcome(ResponseKind.SUCCESS, status, body)
    return ResponseOutcome(ResponseKind.ERROR_ENVELOPE, status, body)


def error_from_envelope(status: int, body: Any) -> PutPutError:
    """
    Build a PutPutError from an ``{"error": {...}}`` envelope.

    Missing code or message fall back to generic placeholders.
    """
    error = body.get('error') if isinstance(body, dict) else None
    if not isinstance(error, dict):
        error = {}

    code = error.get('code')
    message = error.get('message')
    return PutPutError(
        status,
        code if code is not None else UNKNOWN_ERROR,
        message if message is not None else f"Request failed with status {status}",
        hint=error.get('hint'),
    )


def resolve_outcome(outcome: ResponseOutcome) -> Any:
    """
    Turn a classified outcome into the call's return value.

    Returns:
        Parsed JSON body, or None for empty successful responses

    Raises:
        PutPutError: For ERROR_ENVELOPE and UNPARSEABLE_ERROR outcomes
    """
    kind = outcome.kind
    if kind is ResponseKind.NO_CONTENT or kind is ResponseKind.EMPTY_SUCCESS:
        return None
    if kind is ResponseKind.SUCCESS:
        return outcome.body
    if kind is ResponseKind.ERROR_ENVELOPE:
        raise error_from_envelope(outcome.status, outcome.body)
    if kind is ResponseKind.UNPARSEABLE_ERROR:
        raise PutPutError(outcome.status, UNKNOWN_ERROR, f"Request failed with status {outcome.status}")
    raise ValueError(f"Unhandled response kind: {kind}")
