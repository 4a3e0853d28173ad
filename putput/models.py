"""Pydantic models for API requests and responses."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict


Visibility = Literal["public", "private"]


class RequestModel(BaseModel):
    """Base for request bodies and query strings; unset optional fields are never sent."""

    def to_payload(self) -> Dict[str, Any]:
        """
        Dump the fields to send.

        Optional fields left as None or "" are dropped. Required fields are
        always sent as given, even when empty.
        """
        fields = type(self).model_fields
        return {
            key: value
            for key, value in self.model_dump().items()
            if fields[key].is_required() or value not in (None, "")
        }


class ResponseModel(BaseModel):
    """Base for server responses; unknown fields are kept as sent."""
    model_config = ConfigDict(extra="allow")


# --- Requests ---

class PresignRequest(RequestModel):
    """Request model for ``POST /api/v1/upload/presign``."""
    filename: str
    content_type: str
    size_bytes: int
    visibility: Optional[Visibility] = None
    prefix: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None
    tags: Optional[List[str]] = None
    expires_at: Optional[str] = None


class ConfirmUploadRequest(RequestModel):
    """Request model for ``POST /api/v1/upload/confirm``."""
    upload_id: str


class UploadFromUrlRequest(RequestModel):
    """Request model for ``POST /api/v1/upload/url``."""
    url: str
    filename: Optional[str] = None
    content_type: Optional[str] = None
    visibility: Optional[Visibility] = None
    prefix: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None
    tags: Optional[List[str]] = None
    expires_at: Optional[str] = None


class ListFilesQuery(RequestModel):
    """Query parameters for ``GET /api/v1/files``."""
    cursor: Optional[str] = None
    prefix: Optional[str] = None
    project_id: Optional[str] = None
    tag: Optional[str] = None
    limit: Optional[int] = None

    def to_payload(self) -> Dict[str, Any]:
        params = super().to_payload()
        if not params.get('limit'):
            params.pop('limit', None)
        return params


class ActivityQuery(RequestModel):
    """Query parameters for ``GET /api/v1/dashboard/activity``."""
    cursor: Optional[str] = None
    limit: Optional[int] = None

    def to_payload(self) -> Dict[str, Any]:
        params = super().to_payload()
        if not params.get('limit'):
            params.pop('limit', None)
        return params


class CreateWebhookRequest(RequestModel):
    url: str
    events: Optional[List[str]] = None


class CreateProjectRequest(RequestModel):
    name: str


# --- Responses ---

class GuestLimits(ResponseModel):
    storage_bytes: int
    max_file_size_bytes: int
    max_files: int
    expires_at: str


class GuestTokenResponse(ResponseModel):
    """Response model for guest token creation."""
    token: str
    claim_url: Optional[str] = None
    limits: GuestLimits


class PresignResponse(ResponseModel):
    upload_id: str
    presigned_url: str
    public_name: str
    expires_at: Optional[str] = None


class FileItem(ResponseModel):
    """A file record as stored by the server."""
    id: str
    original_name: str
    public_name: str
    public_url: Optional[str] = None
    content_type: str
    size_bytes: int
    visibility: str
    prefix: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None
    tags: Optional[List[str]] = None
    download_count: int = 0
    short_url: Optional[str] = None
    expires_at: Optional[str] = None
    created_at: Optional[str] = None


class FileResponse(ResponseModel):
    """Envelope returned by upload confirmation and upload-from-URL."""
    file: FileItem


class UploadResult(BaseModel):
    """Narrowed view of a freshly uploaded file."""
    id: str
    url: Optional[str] = None
    original_name: str
    public_name: str
    content_type: str
    size_bytes: int
    visibility: str
    short_url: Optional[str] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, str]] = None

    @classmethod
    def from_file(cls, file: FileItem) -> "UploadResult":
        return cls(
            id=file.id,
            url=file.public_url,
            original_name=file.original_name,
            public_name=file.public_name,
            content_type=file.content_type,
            size_bytes=file.size_bytes,
            visibility=file.visibility,
            short_url=file.short_url,
            tags=file.tags,
            metadata=file.metadata,
        )


class FileListResponse(ResponseModel):
    """Paginated response for ``GET /api/v1/files``."""
    files: List[FileItem] = []
    cursor: Optional[str] = None
    has_more: bool = False


class DownloadResult(ResponseModel):
    download_url: str
    expires_at: Optional[str] = None


class FileStats(ResponseModel):
    id: str
    download_count: int
    size_bytes: int
    visibility: str
    created_at: str


class ActivityItem(ResponseModel):
    id: str
    action: str
    resource_id: Optional[str] = None
    ip_address: Optional[str] = None
    created_at: str


class ActivityResponse(ResponseModel):
    """Paginated response for ``GET /api/v1/dashboard/activity``."""
    activity: List[ActivityItem] = []
    cursor: Optional[str] = None
    has_more: bool = False


class WebhookItem(ResponseModel):
    id: str
    url: str
    events: List[str] = []
    active: bool = True
    created_at: str


class WebhookListResponse(ResponseModel):
    webhooks: List[WebhookItem] = []


class WebhookResponse(ResponseModel):
    webhook: WebhookItem


class ProjectItem(ResponseModel):
    id: str
    name: str
    created_at: str


class ProjectListResponse(ResponseModel):
    projects: List[ProjectItem] = []


class ProjectResponse(ResponseModel):
    project: ProjectItem


class AccountExport(ResponseModel):
    """Full account snapshot for data portability requests."""
    user: Dict[str, Any]
    tokens: List[Dict[str, Any]] = []
    files: List[Dict[str, Any]] = []
