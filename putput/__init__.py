"""Python client for the PutPut file storage API."""

from putput.async_client import AsyncPutPutClient
from putput.client import PutPutClient
from putput.errors import PutPutError
from putput.models import (
    AccountExport,
    ActivityItem,
    ActivityResponse,
    DownloadResult,
    FileItem,
    FileListResponse,
    FileStats,
    GuestTokenResponse,
    ProjectItem,
    UploadResult,
    WebhookItem,
)

__all__ = [
    "PutPutClient",
    "AsyncPutPutClient",
    "PutPutError",
    "AccountExport",
    "ActivityItem",
    "ActivityResponse",
    "DownloadResult",
    "FileItem",
    "FileListResponse",
    "FileStats",
    "GuestTokenResponse",
    "ProjectItem",
    "UploadResult",
    "WebhookItem",
]
