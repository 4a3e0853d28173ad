"""Async HTTP client for the PutPut file storage API."""

from typing import Any, AsyncIterator, Dict, List, Optional

import httpx

from common.logging_config import get_logger
from putput.base import BaseClient, file_path, project_path, webhook_path
from putput.client import BytesLike
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

logger = get_logger(__name__)


class AsyncPutPutClient(BaseClient):
    """
    Async variant of PutPutClient built on httpx.AsyncClient.

    Each operation captures the token once when it starts, so a set_token
    call made mid-upload only affects later operations. The methods mirror
    PutPutClient one for one.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(token=token, base_url=base_url)
        self.session = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)
        logger.info(f"Initialized AsyncPutPutClient [base_url={self.base_url}]")

    async def _request(
        self,
        method: str,
        path: str,
        body: Optional[RequestModel] = None,
        params: Optional[RequestModel] = None,
        token: Optional[str] = None,
    ) -> Any:
        logger.debug(f"Making request: {method} {path}")
        response = await self.session.request(method, path, **self._build_request_kwargs(body, params, token))
        return self._handle_response(method, path, response)

    async def create_guest_token(self) -> GuestTokenResponse:
        data = await self._request('POST', GUEST_PATH)
        logger.info("Guest token created")
        return GuestTokenResponse.model_validate(data)

    async def upload(
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

        See PutPutClient.upload for the arguments.
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
            await self._request('POST', PRESIGN_PATH, body=presign_request, token=token)
        )

        logger.debug(f"Uploading {filename} directly to storage [upload_id={presign.upload_id}]")
        transfer = await self.session.put(
            presign.presigned_url,
            content=payload,
            headers={'Content-Type': resolved_content_type},
        )
        self._check_transfer(transfer)

        confirm_request = ConfirmUploadRequest(upload_id=presign.upload_id)
        confirm = FileResponse.model_validate(
            await self._request('POST', CONFIRM_PATH, body=confirm_request, token=token)
        )
        logger.info(f"Upload confirmed: {confirm.file.public_name} [id={confirm.file.id}]")
        return UploadResult.from_file(confirm.file)

    async def upload_from_url(
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
        result = FileResponse.model_validate(await self._request('POST', UPLOAD_URL_PATH, body=request))
        return UploadResult.from_file(result.file)

    async def download_file(self, file_id: str) -> DownloadResult:
        self._require_token()
        return DownloadResult.model_validate(await self._request('GET', file_path(file_id, 'download')))

    async def get_file_stats(self, file_id: str) -> FileStats:
        self._require_token()
        return FileStats.model_validate(await self._request('GET', file_path(file_id, 'stats')))

    async def list_files(
        self,
        *,
        cursor: Optional[str] = None,
        prefix: Optional[str] = None,
        project_id: Optional[str] = None,
        tag: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> FileListResponse:
        self._require_token()
        query = ListFilesQuery(cursor=cursor, prefix=prefix, project_id=project_id, tag=tag, limit=limit)
        return FileListResponse.model_validate(await self._request('GET', FILES_PATH, params=query))

    async def iter_files(
        self,
        *,
        prefix: Optional[str] = None,
        project_id: Optional[str] = None,
        tag: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> AsyncIterator[FileItem]:
        """Yield every file matching the filters, following cursors page by page."""
        cursor = None
        while True:
            page = await self.list_files(cursor=cursor, prefix=prefix, project_id=project_id, tag=tag, limit=limit)
            for item in page.files:
                yield item
            if not page.has_more or not page.cursor:
                return
            cursor = page.cursor

    async def delete_file(self, file_id: str) -> None:
        self._require_token()
        await self._request('DELETE', file_path(file_id))

    async def get_activity(self, *, cursor: Optional[str] = None, limit: Optional[int] = None) -> ActivityResponse:
        self._require_token()
        query = ActivityQuery(cursor=cursor, limit=limit)
        return ActivityResponse.model_validate(await self._request('GET', ACTIVITY_PATH, params=query))

    async def list_webhooks(self) -> WebhookListResponse:
        self._require_token()
        return WebhookListResponse.model_validate(await self._request('GET', WEBHOOKS_PATH))

    async def create_webhook(self, url: str, events: Optional[List[str]] = None) -> WebhookResponse:
        self._require_token()
        request = CreateWebhookRequest(url=url, events=events)
        return WebhookResponse.model_validate(await self._request('POST', WEBHOOKS_PATH, body=request))

    async def delete_webhook(self, webhook_id: str) -> None:
        self._require_token()
        await self._request('DELETE', webhook_path(webhook_id))

    async def list_projects(self) -> ProjectListResponse:
        self._require_token()
        return ProjectListResponse.model_validate(await self._request('GET', PROJECTS_PATH))

    async def create_project(self, name: str) -> ProjectResponse:
        self._require_token()
        request = CreateProjectRequest(name=name)
        return ProjectResponse.model_validate(await self._request('POST', PROJECTS_PATH, body=request))

    async def delete_project(self, project_id: str) -> None:
        self._require_token()
        await self._request('DELETE', project_path(project_id))

    async def export_data(self) -> AccountExport:
        self._require_token()
        return AccountExport.model_validate(await self._request('GET', EXPORT_PATH))

    async def delete_account(self) -> None:
        self._require_token()
        await self._request('DELETE', ACCOUNT_PATH)
        logger.warning("Account deleted")

    async def aclose(self) -> None:
        """Close the HTTP session."""
        await self.session.aclose()

    async def __aenter__(self) -> 'AsyncPutPutClient':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
