"""Blocking HTTP client for the PutPut file storage API."""

from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union
from urllib.parse import unquote, urlparse

import httpx

from common.logging_config import get_logger
from putput.base import BaseClient, file_path, project_path, webhook_path
from putput.constants import (
    ACCOUNT_PATH,
    ACTIVITY_PATH,
    CONFIRM_PATH,
    DEFAULT_CONTENT_TYPE,
    DEFAULT_TIMEOUT,
    EXPORT_PATH,
    FILES_PATH,
    GUEST_PATH,
    PRESIGN_PATH,
    PROJECTS_PATH,
    UPLOAD_URL_PATH,
    WEBHOOKS_PATH,
)
from putput.errors import DOWNLOAD_FAILED, PutPutError
from putput.models import (
    AccountExport,
    ActivityQuery,
    ActivityResponse,
    ConfirmUploadRequest,
    CreateProjectRequest,
    CreateWebhookRequest,
    DownloadResult,
    FileItem,
    FileListResponse,
    FileResponse,
    FileStats,
    GuestTokenResponse,
    ListFilesQuery,
    PresignRequest,
    PresignResponse,
    ProjectListResponse,
    ProjectResponse,
    RequestModel,
    UploadFromUrlRequest,
    UploadResult,
    WebhookListResponse,
    WebhookResponse,
)
from putput.responses import is_success

logger = get_logger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def download_name(url: str, fallback: str) -> str:
    """Local filename for a download URL: the decoded last path segment, reduced to a bare name."""
    name = Path(unquote(urlparse(url).path)).name
    if name in ('', '.', '..'):
        return fallback
    return name


class PutPutClient(BaseClient):
    """
    HTTP client for the PutPut API.

    Every method issues its request(s) on the calling thread and either
    returns a typed result or raises. Nothing is retried.

    Example:
        client = PutPutClient()
        guest = client.create_guest_token()
        client.set_token(guest.token)
        result = client.upload(b"hello", "hello.txt", "text/plain")
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            token: API bearer token; can also be set later with set_token()
            base_url: API origin, defaults to https://putput.io
            timeout: Timeout in seconds passed to the underlying httpx client
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        super().__init__(token=token, base_url=base_url)
        self.session = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)
        logger.info(f"Initialized PutPutClient [base_url={self.base_url}]")

    def _request(
        self,
        method: str,
        path: str,
        body: Optional[RequestModel] = None,
        params: Optional[RequestModel] = None,
        token: Optional[str] = None,
    ) -> Any:
        """
        Send one API request and normalize its response.

        Args:
            method: HTTP method (GET, POST, DELETE)
            path: API path relative to the base URL
            body: Optional JSON body
            params: Optional query parameters
            token: Token captured by the calling operation; defaults to the current one

        Returns:
            Parsed JSON body, or None for empty successful responses

        Raises:
            PutPutError: If the API reports a failure
            httpx.HTTPError: If the transport fails before a response arrives
        """
        logger.debug(f"Making request: {method} {path}")
        response = self.session.request(method, path, **self._build_request_kwargs(body, params, token))
        return self._handle_response(method, path, response)

    def create_guest_token(self) -> GuestTokenResponse:
        """
        Create a guest account token. No authentication required.

        Returns:
            Guest token, claim URL, and account limits
        """
        data = self._request('POST', GUEST_PATH)
        logger.info("Guest token created")
        return GuestTokenResponse.model_validate(data)

    def upload(
        self,
        data: BytesLike,
        filename: str,
        content_type: Optional[str] = None,
        *,
        visibility: Optional[str] = None,
        prefix: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
        tags: Optional[List[str]] = None,
        expires_at: Optional[str] = None,
    ) -> UploadResult:
        """
        Upload bytes through the presign, direct transfer, confirm sequence.

        The bytes go straight to the presigned storage URL; only the presign
        and confirm calls hit the API.

        Args:
            data: File contents
            filename: Desired filename (e.g. "photo.jpg")
            content_type: MIME type, defaults to application/octet-stream
            visibility: "public" or "private"
            prefix: Path prefix for organizing files
            metadata: Key-value metadata attached to the file
            tags: Tags for categorization and filtering
            expires_at: ISO 8601 datetime when the file should be deleted

        Returns:
            UploadResult for the confirmed file

        Raises:
            PutPutError: NO_TOKEN, R2_UPLOAD_FAILED, or any server-reported error
        """
        token = self._require_token()

        payload = data if isinstance(data, bytes) else bytes(data)
        resolved_content_type = content_type or DEFAULT_CONTENT_TYPE

        presign_request = PresignRequest(
            filename=filename,
            content_type=resolved_content_type,
            size_bytes=len(payload),
            visibility=visibility,
            prefix=prefix,
            metadata=metadata,
            tags=tags,
            expires_at=expires_at,
        )
        logger.info(f"Requesting upload target for {filename} ({len(payload)} bytes)")
        presign = PresignResponse.model_validate(
            self._request('POST', PRESIGN_PATH, body=presign_request, token=token)
        )

        logger.debug(f"Uploading {filename} directly to storage [upload_id={presign.upload_id}]")
        transfer = self.session.put(
            presign.presigned_url,
            content=payload,
            headers={'Content-Type': resolved_content_type},
        )
        self._check_transfer(transfer)

        confirm_request = ConfirmUploadRequest(upload_id=presign.upload_id)
        confirm = FileResponse.model_validate(
            self._request('POST', CONFIRM_PATH, body=confirm_request, token=token)
        )
        logger.info(f"Upload confirmed: {confirm.file.public_name} [id={confirm.file.id}]")
        return UploadResult.from_file(confirm.file)

    def upload_from_url(
        self,
        url: str,
        *,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
        visibility: Optional[str] = None,
        prefix: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
        tags: Optional[List[str]] = None,
        expires_at: Optional[str] = None,
    ) -> UploadResult:
        """
        Have the server fetch a file from a URL and store it.

        Args:
            url: Source URL to fetch
            filename: Override the filename inferred from the URL
            content_type: Override the MIME type inferred by the server

        Returns:
            UploadResult for the stored file
        """
        self._require_token()
        request = UploadFromUrlRequest(
            url=url,
            filename=filename,
            content_type=content_type,
            visibility=visibility,
            prefix=prefix,
            metadata=metadata,
            tags=tags,
            expires_at=expires_at,
        )
        result = FileResponse.model_validate(self._request('POST', UPLOAD_URL_PATH, body=request))
        return UploadResult.from_file(result.file)

    def download_file(self, file_id: str) -> DownloadResult:
        """
        Get a download URL for a file.

        Public files return their CDN URL; private files a time-limited
        presigned URL with an expiry.
        """
        self._require_token()
        return DownloadResult.model_validate(self._request('GET', file_path(file_id, 'download')))

    def get_file_stats(self, file_id: str) -> FileStats:
        self._require_token()
        return FileStats.model_validate(self._request('GET', file_path(file_id, 'stats')))

    def list_files(
        self,
        *,
        cursor: Optional[str] = None,
        prefix: Optional[str] = None,
        project_id: Optional[str] = None,
        tag: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> FileListResponse:
        """
        List one page of files.

        Args:
            cursor: Opaque cursor from a previous page
            prefix: Filter by path prefix
            project_id: Filter by project
            tag: Filter by tag
            limit: Page size (server default 50, max 100)

        Returns:
            FileListResponse with files, next cursor and has_more flag
        """
        self._require_token()
        query = ListFilesQuery(cursor=cursor, prefix=prefix, project_id=project_id, tag=tag, limit=limit)
        return FileListResponse.model_validate(self._request('GET', FILES_PATH, params=query))

    def iter_files(
        self,
        *,
        prefix: Optional[str] = None,
        project_id: Optional[str] = None,
        tag: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Iterator[FileItem]:
        """Yield every file matching the filters, following cursors page by page."""
        cursor = None
        while True:
            page = self.list_files(cursor=cursor, prefix=prefix, project_id=project_id, tag=tag, limit=limit)
            yield from page.files
            if not page.has_more or not page.cursor:
                return
            cursor = page.cursor

    def delete_file(self, file_id: str) -> None:
        """Permanently delete a file."""
        self._require_token()
        self._request('DELETE', file_path(file_id))

    def save_file(self, file_id: str, destination: Union[str, Path]) -> Path:
        """
        Download a file's bytes to a local path.

        Resolves the download URL first, then streams the content from it.
        If destination is an existing directory the name is taken from the URL.

        Returns:
            Path of the written file
        """
        link = self.download_file(file_id)

        output_file = Path(destination)
        if output_file.is_dir():
            directory = output_file
            output_file = directory / download_name(link.download_url, file_id)
            if output_file.resolve().parent != directory.resolve():
                raise PutPutError(
                    0,
                    DOWNLOAD_FAILED,
                    f"Refusing to write {file_id} outside {directory}",
                )

        with self.session.stream('GET', link.download_url) as response:
            if not is_success(response.status_code):
                response.read()
                raise PutPutError(
                    response.status_code,
                    DOWNLOAD_FAILED,
                    f"Download failed with status {response.status_code}",
                    hint="Presigned download URLs expire. Request a new one and try again.",
                )
            output_file.parent.mkdir(parents=True, exist_ok=True)
            try:
                with open(output_file, 'wb') as f:
                    for chunk in response.iter_bytes(chunk_size=8192):
                        f.write(chunk)
            except (httpx.HTTPError, OSError):
                output_file.unlink(missing_ok=True)
                raise

        logger.info(f"Saved file {file_id} to {output_file}")
        return output_file

    def get_activity(self, *, cursor: Optional[str] = None, limit: Optional[int] = None) -> ActivityResponse:
        """List account activity, newest first."""
        self._require_token()
        query = ActivityQuery(cursor=cursor, limit=limit)
        return ActivityResponse.model_validate(self._request('GET', ACTIVITY_PATH, params=query))

    def list_webhooks(self) -> WebhookListResponse:
        self._require_token()
        return WebhookListResponse.model_validate(self._request('GET', WEBHOOKS_PATH))

    def create_webhook(self, url: str, events: Optional[List[str]] = None) -> WebhookResponse:
        """
        Register a webhook.

        Args:
            url: HTTPS URL receiving event POSTs
            events: Event types to subscribe to; all events when omitted
        """
        self._require_token()
        request = CreateWebhookRequest(url=url, events=events)
        return WebhookResponse.model_validate(self._request('POST', WEBHOOKS_PATH, body=request))

    def delete_webhook(self, webhook_id: str) -> None:
        self._require_token()
        self._request('DELETE', webhook_path(webhook_id))

    def list_projects(self) -> ProjectListResponse:
        self._require_token()
        return ProjectListResponse.model_validate(self._request('GET', PROJECTS_PATH))

    def create_project(self, name: str) -> ProjectResponse:
        self._require_token()
        request = CreateProjectRequest(name=name)
        return ProjectResponse.model_validate(self._request('POST', PROJECTS_PATH, body=request))

    def delete_project(self, project_id: str) -> None:
        """Delete a project. Its files are kept."""
        self._require_token()
        self._request('DELETE', project_path(project_id))

    def export_data(self) -> AccountExport:
        """Export the profile, tokens and files of the account."""
        self._require_token()
        return AccountExport.model_validate(self._request('GET', EXPORT_PATH))

    def delete_account(self) -> None:
        """Permanently delete the account and everything it owns. Cannot be undone."""
        self._require_token()
        self._request('DELETE', ACCOUNT_PATH)
        logger.warning("Account deleted")

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()

    def __enter__(self) -> 'PutPutClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
