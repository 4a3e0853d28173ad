"""Command handler functions for CLI operations."""

import functools
import json
import mimetypes
import os
from pathlib import Path
from typing import Callable, Optional

import httpx
from pydantic import ValidationError

from common.logging_config import get_logger
from cli.config import Config
from cli.models import (
    ActivityCommand,
    AddProjectCommand,
    AddWebhookCommand,
    DeleteAccountCommand,
    DeleteCommand,
    DeleteProjectCommand,
    DeleteWebhookCommand,
    DownloadCommand,
    ExportCommand,
    GuestCommand,
    ListCommand,
    ProjectsCommand,
    StatsCommand,
    TokenCommand,
    UploadCommand,
    UploadUrlCommand,
    WebhooksCommand,
)
from cli.utils import format_error, format_file_line, format_file_size, format_transport_error
from putput.client import PutPutClient
from putput.errors import PutPutError

logger = get_logger(__name__)


_config: Optional[Config] = None
_client: Optional[PutPutClient] = None


def get_config() -> Config:
    """Get or create the global Config loaded from ~/.putput/config.json."""
    global _config
    if _config is None:
        _config = Config(Path.home() / '.putput' / 'config.json')
    return _config


def get_client() -> PutPutClient:
    """
    Get or create global PutPutClient instance.

    Returns:
        PutPutClient configured from the CLI config file
    """
    global _client
    if _client is None:
        logger.debug("Creating new PutPutClient instance")
        config = get_config()
        _client = PutPutClient(
            token=config.get_token(),
            base_url=config.get_base_url(),
            timeout=config.get_timeout(),
        )
    return _client


def reports_errors(handler: Callable[..., str]) -> Callable[..., str]:
    """Turn API and network failures raised by a handler into error messages."""

    @functools.wraps(handler)
    def wrapper(*args, **kwargs) -> str:
        try:
            return handler(*args, **kwargs)
        except PutPutError as e:
            logger.warning(f"{handler.__name__} failed: code={e.code} status={e.status}")
            return f"Error: {format_error(e)}"
        except httpx.HTTPError as e:
            logger.error(f"{handler.__name__} network error: {e}")
            return f"Error: {format_transport_error(e)}"
        except ValidationError as e:
            logger.error(f"{handler.__name__} got an unexpected response shape: {e}")
            return "Error: Unexpected response from server."

    return wrapper


@reports_errors
def handle_guest(
    cmd: GuestCommand,
    client: Optional[PutPutClient] = None,
    config: Optional[Config] = None,
) -> str:
    """
    Handle 'guest' command.

    Args:
        cmd: GuestCommand
        client: Optional PutPutClient for dependency injection (testing)
        config: Optional Config for dependency injection (testing)

    Returns:
        Token details and guest limits
    """
    client = client or get_client()
    config = config or get_config()

    guest = client.create_guest_token()
    client.set_token(guest.token)
    config.set_token(guest.token)

    limits = guest.limits
    lines = [
        "Guest account created. Token saved to config.",
        f"Storage: {format_file_size(limits.storage_bytes)}",
        f"Max file size: {format_file_size(limits.max_file_size_bytes)}",
        f"Max files: {limits.max_files}",
        f"Expires: {limits.expires_at}",
    ]
    if guest.claim_url:
        lines.append(f"Claim your account: {guest.claim_url}")
    return '\n'.join(lines)


def handle_token(
    cmd: TokenCommand,
    client: Optional[PutPutClient] = None,
    config: Optional[Config] = None,
) -> str:
    """Handle 'token' command: store the token and use it from now on."""
    client = client or get_client()
    config = config or get_config()
    client.set_token(cmd.token)
    config.set_token(cmd.token)
    return "Token saved to config."


@reports_errors
def handle_upload(cmd: UploadCommand, client: Optional[PutPutClient] = None) -> str:
    """
    Handle 'upload' command.

    Args:
        cmd: UploadCommand with file path, tags and options
        client: Optional PutPutClient for dependency injection (testing)

    Returns:
        Success or error message with upload result
    """
    logger.info(f"Executing upload command: file={cmd.file_path} tags={list(cmd.tags)}")
    client = client or get_client()

    path = Path(cmd.file_path).expanduser()
    if not path.exists():
        return f"Error: File not found: {cmd.file_path}"
    if not path.is_file():
        return f"Error: Not a file: {cmd.file_path}"

    content_type = cmd.content_type or mimetypes.guess_type(path.name)[0]
    try:
        data = path.read_bytes()
    except OSError as e:
        return f"Error reading {cmd.file_path}: {e}"

    result = client.upload(
        data,
        path.name,
        content_type,
        visibility="private" if cmd.private else None,
        prefix=cmd.prefix,
        tags=list(cmd.tags) or None,
        expires_at=cmd.expires_at,
    )

    lines = [
        f"Uploaded: {result.original_name} (ID: {result.id}, Size: {format_file_size(result.size_bytes)})",
        f"URL: {result.url or '(private - use download <id>)'}",
    ]
    if result.short_url:
        lines.append(f"Short URL: {result.short_url}")
    if result.tags:
        lines.append(f"Tags: {', '.join(result.tags)}")
    return '\n'.join(lines)


@reports_errors
def handle_upload_url(cmd: UploadUrlCommand, client: Optional[PutPutClient] = None) -> str:
    logger.info(f"Executing upload-url command: url={cmd.url}")
    client = client or get_client()
    result = client.upload_from_url(
        cmd.url,
        filename=cmd.filename,
        visibility="private" if cmd.private else None,
        prefix=cmd.prefix,
        tags=list(cmd.tags) or None,
    )
    return (
        f"Uploaded: {result.original_name} (ID: {result.id}, Size: {format_file_size(result.size_bytes)})\n"
        f"URL: {result.url or '(private - use download <id>)'}"
    )


@reports_errors
def handle_list(cmd: ListCommand, client: Optional[PutPutClient] = None) -> str:
    """
    Handle 'list' command.

    Args:
        cmd: ListCommand with filters and pagination options
        client: Optional PutPutClient for dependency injection (testing)

    Returns:
        Formatted list of files
    """
    client = client or get_client()
    page = client.list_files(
        cursor=cmd.cursor,
        prefix=cmd.prefix,
        project_id=cmd.project_id,
        tag=cmd.tag,
        limit=cmd.limit,
    )

    if not page.files:
        return "No files found."

    output = [f"Found {len(page.files)} file(s):\n"]
    output.extend(format_file_line(file) for file in page.files)
    if page.has_more and page.cursor:
        output.append(f"\nMore files available: list --cursor {page.cursor}")
    return '\n'.join(output)


@reports_errors
def handle_download(cmd: DownloadCommand, client: Optional[PutPutClient] = None) -> str:
    """
    Handle 'download' command.

    Without an output path only the download URL is shown.
    """
    logger.info(f"Executing download command: id={cmd.file_id} output_path={cmd.output_path}")
    client = client or get_client()

    if cmd.output_path is None:
        link = client.download_file(cmd.file_id)
        message = f"Download URL: {link.download_url}"
        if link.expires_at:
            message += f"\nExpires: {link.expires_at}"
        return message

    try:
        saved = client.save_file(cmd.file_id, cmd.output_path)
    except OSError as e:
        return f"Error writing file: {e}"
    return f"Downloaded: {saved.name} ({format_file_size(os.path.getsize(saved))})\nSaved to: {saved.absolute()}"


@reports_errors
def handle_stats(cmd: StatsCommand, client: Optional[PutPutClient] = None) -> str:
    client = client or get_client()
    stats = client.get_file_stats(cmd.file_id)
    return (
        f"File {stats.id}\n"
        f"  Downloads: {stats.download_count}\n"
        f"  Size: {format_file_size(stats.size_bytes)}\n"
        f"  Visibility: {stats.visibility}\n"
        f"  Created: {stats.created_at}"
    )


@reports_errors
def handle_delete(cmd: DeleteCommand, client: Optional[PutPutClient] = None) -> str:
    client = client or get_client()
    client.delete_file(cmd.file_id)
    return f"Deleted file {cmd.file_id}."


@reports_errors
def handle_activity(cmd: ActivityCommand, client: Optional[PutPutClient] = None) -> str:
    client = client or get_client()
    page = client.get_activity(cursor=cmd.cursor, limit=cmd.limit)

    if not page.activity:
        return "No activity recorded."

    output = [
        f"  {item.created_at}  {item.action}" + (f"  {item.resource_id}" if item.resource_id else "")
        for item in page.activity
    ]
    if page.has_more and page.cursor:
        output.append(f"\nMore entries available: activity --cursor {page.cursor}")
    return '\n'.join(output)


@reports_errors
def handle_webhooks(cmd: WebhooksCommand, client: Optional[PutPutClient] = None) -> str:
    client = client or get_client()
    webhooks = client.list_webhooks().webhooks
    if not webhooks:
        return "No webhooks configured."
    return '\n'.join(
        f"  - {hook.url} (ID: {hook.id}, events: {', '.join(hook.events) or 'all'}"
        f"{'' if hook.active else ', inactive'})"
        for hook in webhooks
    )


@reports_errors
def handle_add_webhook(cmd: AddWebhookCommand, client: Optional[PutPutClient] = None) -> str:
    client = client or get_client()
    hook = client.create_webhook(cmd.url, list(cmd.events) or None).webhook
    return f"Created webhook {hook.id} for {hook.url}"


@reports_errors
def handle_delete_webhook(cmd: DeleteWebhookCommand, client: Optional[PutPutClient] = None) -> str:
    client = client or get_client()
    client.delete_webhook(cmd.webhook_id)
    return f"Deleted webhook {cmd.webhook_id}."


@reports_errors
def handle_projects(cmd: ProjectsCommand, client: Optional[PutPutClient] = None) -> str:
    client = client or get_client()
    projects = client.list_projects().projects
    if not projects:
        return "No projects."
    return '\n'.join(f"  - {project.name} (ID: {project.id})" for project in projects)


@reports_errors
def handle_add_project(cmd: AddProjectCommand, client: Optional[PutPutClient] = None) -> str:
    client = client or get_client()
    project = client.create_project(cmd.name).project
    return f"Created project '{project.name}' (ID: {project.id})"


@reports_errors
def handle_delete_project(cmd: DeleteProjectCommand, client: Optional[PutPutClient] = None) -> str:
    client = client or get_client()
    client.delete_project(cmd.project_id)
    return f"Deleted project {cmd.project_id}."


@reports_errors
def handle_export(cmd: ExportCommand, client: Optional[PutPutClient] = None) -> str:
    client = client or get_client()
    export = client.export_data()
    return json.dumps(export.model_dump(), indent=2)


@reports_errors
def handle_delete_account(
    cmd: DeleteAccountCommand,
    client: Optional[PutPutClient] = None,
    config: Optional[Config] = None,
) -> str:
    """Handle 'delete-account' command and forget the stored token."""
    client = client or get_client()
    config = config or get_config()
    client.delete_account()
    client.clear_token()
    config.clear_token()
    return "Account deleted. Token removed from config."
