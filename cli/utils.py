"""Utility functions for CLI output."""

import httpx

from putput.errors import PutPutError
from putput.models import FileItem


ERROR_MESSAGES = {
    'NO_TOKEN': "Not authenticated. Run 'guest' or 'token <token>' first.",
    'INVALID_TOKEN': "Token rejected by the server. Run 'guest' or 'token <token>' again.",
    'NOT_FOUND': 'Not found on server.',
    'FILE_TOO_LARGE': 'File exceeds the maximum size allowed for this account.',
    'QUOTA_EXCEEDED': 'Storage quota exceeded. Please delete some files.',
    'RATE_LIMITED': 'Too many requests. Please wait and try again.',
    'INVALID_URL': 'The URL is invalid or unreachable.',
    'R2_UPLOAD_FAILED': 'Direct upload to storage failed.',
    'DOWNLOAD_FAILED': 'Downloading the file content failed.',
}


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in bytes to human-readable format with appropriate unit.

    Uses binary units (1024-based) and automatically selects the most
    appropriate unit (B, KiB, MiB, GiB, TiB).

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string with size and unit (e.g., "1.50 MiB", "512 B")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    units = ['KiB', 'MiB', 'GiB', 'TiB']
    size = size_bytes / 1024.0

    for unit in units:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0

    return f"{size:.2f} PiB"


def format_error(error: PutPutError) -> str:
    """
    Map an API error to a user-friendly message.

    Known codes get a fixed message; anything else shows the server message.
    The server hint is appended when present.
    """
    message = ERROR_MESSAGES.get(error.code, error.message)
    if error.code not in ERROR_MESSAGES:
        message = f"{message} (Code: {error.code})"
    if error.status:
        message = f"{message} [HTTP {error.status}]"
    if error.hint:
        message = f"{message}\nHint: {error.hint}"
    return message


def format_transport_error(error: httpx.HTTPError) -> str:
    if isinstance(error, httpx.ConnectError):
        return "Cannot connect to the PutPut server. Check the base_url in your config."
    if isinstance(error, httpx.TimeoutException):
        return "Request timed out. Server may be overloaded."
    return f"Network error: {error}"


def format_file_line(file: FileItem) -> str:
    """Render one file entry for list output."""
    lines = [
        f"  - {file.original_name} (ID: {file.id})",
        f"    Size: {format_file_size(file.size_bytes)}  Visibility: {file.visibility}",
    ]
    if file.public_url:
        lines.append(f"    URL: {file.public_url}")
    if file.tags:
        lines.append(f"    Tags: {', '.join(file.tags)}")
    if file.created_at:
        lines.append(f"    Created: {file.created_at}")
    return '\n'.join(lines)
