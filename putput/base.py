"""State and request composition shared by the blocking and async clients."""

from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from common.logging_config import get_logger
from putput.constants import DEFAULT_BASE_URL, FILES_PATH, PROJECTS_PATH, WEBHOOKS_PATH
from putput.errors import no_token_error, transfer_failed_error
from putput.models import RequestModel
from putput.responses import classify_response, is_success, resolve_outcome

logger = get_logger(__name__)


def normalize_base_url(base_url: Optional[str]) -> str:
    """Apply the default origin and strip trailing slashes."""
    return (base_url or DEFAULT_BASE_URL).rstrip('/')


def file_path(file_id: str, action: Optional[str] = None) -> str:
    path = f"{FILES_PATH}/{quote(file_id, safe='')}"
    return f"{path}/{action}" if action else path


def webhook_path(webhook_id: str) -> str:
    return f"{WEBHOOKS_PATH}/{quote(webhook_id, safe='')}"


def project_path(project_id: str) -> str:
    return f"{PROJECTS_PATH}/{quote(project_id, safe='')}"


class BaseClient:
    """Holds the base URL and bearer token; builds requests and reads responses."""

    def __init__(self, token: Optional[str] = None, base_url: Optional[str] = None):
        self._base_url = normalize_base_url(base_url)
        self._token = token

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token(self) -> Optional[str]:
        return self._token

    def set_token(self, token: str) -> None:
        """
        Set or replace the bearer token used by subsequent calls.

        Args:
            token: API bearer token (starts with ``pp_``)
        """
        self._token = token
        logger.debug("Bearer token updated")

    def clear_token(self) -> None:
        """Forget the bearer token; authenticated calls fail until a new one is set."""
        self._token = None
        logger.debug("Bearer token cleared")

    def _require_token(self) -> str:
        """Return the current token, failing before any request when none is set."""
        if not self._token:
            raise no_token_error()
        return self._token

    def _build_request_kwargs(
        self,
        body: Optional[RequestModel] = None,
        params: Optional[RequestModel] = None,
        token: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Build httpx request keyword arguments.

        The bearer header is attached whenever a token is held; the JSON
        content type only when a body is sent. A token captured by the
        caller takes precedence over the one currently held.
        """
        token = token or self._token
        headers = {}
        if token:
            headers['Authorization'] = f'Bearer {token}'

        kwargs: Dict[str, Any] = {'headers': headers}
        if body is not None:
            headers['Content-Type'] = 'application/json'
            kwargs['json'] = body.to_payload()
        if params is not None:
            query = params.to_payload()
            if query:
                kwargs['params'] = query
        return kwargs

    def _handle_response(self, method: str, path: str, response: httpx.Response) -> Any:
        logger.debug(f"Response received: {method} {path} status={response.status_code}")
        if not is_success(response.status_code):
            logger.warning(f"Request failed: {method} {path} status={response.status_code}")
        return resolve_outcome(classify_response(response.status_code, response.content))

    def _check_transfer(self, response: httpx.Response) -> None:
        if not is_success(response.status_code):
            logger.warning(f"Direct upload failed with status {response.status_code}")
            raise transfer_failed_error(response.status_code)
