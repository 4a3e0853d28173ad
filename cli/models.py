"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal, Optional


@dataclass(frozen=True)
class GuestCommand:
    """Create a guest account."""

    command: Literal["guest"] = "guest"


@dataclass(frozen=True)
class TokenCommand:
    """Save an existing API token."""

    token: str
    command: Literal["token"] = "token"


@dataclass(frozen=True)
class UploadCommand:
    """Upload a local file."""

    file_path: str
    tags: tuple[str, ...] = ()
    private: bool = False
    prefix: Optional[str] = None
    content_type: Optional[str] = None
    expires_at: Optional[str] = None
    command: Literal["upload"] = "upload"


@dataclass(frozen=True)
class UploadUrlCommand:
    """Upload a file fetched by the server from a URL."""

    url: str
    tags: tuple[str, ...] = ()
    private: bool = False
    prefix: Optional[str] = None
    filename: Optional[str] = None
    command: Literal["upload-url"] = "upload-url"


@dataclass(frozen=True)
class ListCommand:
    """List files with optional filters."""

    tag: Optional[str] = None
    prefix: Optional[str] = None
    project_id: Optional[str] = None
    limit: Optional[int] = None
    cursor: Optional[str] = None
    command: Literal["list"] = "list"


@dataclass(frozen=True)
class DownloadCommand:
    """Show a download URL or save the file locally."""

    file_id: str
    output_path: Optional[str] = None
    command: Literal["download"] = "download"


@dataclass(frozen=True)
class StatsCommand:
    file_id: str
    command: Literal["stats"] = "stats"


@dataclass(frozen=True)
class DeleteCommand:
    file_id: str
    command: Literal["delete"] = "delete"


@dataclass(frozen=True)
class ActivityCommand:
    limit: Optional[int] = None
    cursor: Optional[str] = None
    command: Literal["activity"] = "activity"


@dataclass(frozen=True)
class WebhooksCommand:
    command: Literal["webhooks"] = "webhooks"


@dataclass(frozen=True)
class AddWebhookCommand:
    url: str
    events: tuple[str, ...] = ()
    command: Literal["add-webhook"] = "add-webhook"


@dataclass(frozen=True)
class DeleteWebhookCommand:
    webhook_id: str
    command: Literal["delete-webhook"] = "delete-webhook"


@dataclass(frozen=True)
class ProjectsCommand:
    command: Literal["projects"] = "projects"


@dataclass(frozen=True)
class AddProjectCommand:
    name: str
    command: Literal["add-project"] = "add-project"


@dataclass(frozen=True)
class DeleteProjectCommand:
    project_id: str
    command: Literal["delete-project"] = "delete-project"


@dataclass(frozen=True)
class ExportCommand:
    command: Literal["export"] = "export"


@dataclass(frozen=True)
class DeleteAccountCommand:
    command: Literal["delete-account"] = "delete-account"


CommandRequest = (
    GuestCommand
    | TokenCommand
    | UploadCommand
    | UploadUrlCommand
    | ListCommand
    | DownloadCommand
    | StatsCommand
    | DeleteCommand
    | ActivityCommand
    | WebhooksCommand
    | AddWebhookCommand
    | DeleteWebhookCommand
    | ProjectsCommand
    | AddProjectCommand
    | DeleteProjectCommand
    | ExportCommand
    | DeleteAccountCommand
)
