"""Command parser for CLI input."""

import shlex
from typing import Optional

from cli.models import (
    ActivityCommand,
    AddProjectCommand,
    AddWebhookCommand,
    CommandRequest,
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


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        CommandRequest object

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0]
    parser = _PARSERS.get(command_name)
    if parser is None:
        raise ParseError(f"Unknown command: {command_name}")
    return parser(tokens[1:])


def _split_options(
    args: list[str],
    flags: tuple[str, ...] = (),
    value_options: tuple[str, ...] = (),
) -> tuple[list[str], dict]:
    """
    Separate positional arguments from --flag and --option <value> arguments.

    Returns:
        Tuple of (positionals, options); flags map to True
    """
    positionals = []
    options: dict = {}
    i = 0
    while i < len(args):
        arg = args[i]
        if arg.startswith("--"):
            name = arg[2:]
            if name in flags:
                options[name] = True
            elif name in value_options:
                if i + 1 >= len(args):
                    raise ParseError(f"{arg} requires a value")
                options[name] = args[i + 1]
                i += 1
            else:
                raise ParseError(f"Unknown option: {arg}")
        else:
            positionals.append(arg)
        i += 1
    return positionals, options


def _parse_int(value: Optional[str], option: str) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise ParseError(f"--{option} must be an integer")


def _expect_exactly(args: list[str], count: int, usage: str) -> None:
    if len(args) != count:
        raise ParseError(f"usage: {usage}")


def _parse_guest(args: list[str]) -> GuestCommand:
    _expect_exactly(args, 0, "guest")
    return GuestCommand()


def _parse_token(args: list[str]) -> TokenCommand:
    _expect_exactly(args, 1, "token <token>")
    return TokenCommand(token=args[0])


def _parse_upload(args: list[str]) -> UploadCommand:
    """Parse 'upload <file> [tag ...] [options]' command."""
    positionals, options = _split_options(
        args, flags=("private",), value_options=("prefix", "type", "expires")
    )
    if not positionals:
        raise ParseError("upload requires a file path")

    return UploadCommand(
        file_path=positionals[0],
        tags=tuple(positionals[1:]),
        private=options.get("private", False),
        prefix=options.get("prefix"),
        content_type=options.get("type"),
        expires_at=options.get("expires"),
    )


def _parse_upload_url(args: list[str]) -> UploadUrlCommand:
    """Parse 'upload-url <url> [tag ...] [options]' command."""
    positionals, options = _split_options(
        args, flags=("private",), value_options=("prefix", "name")
    )
    if not positionals:
        raise ParseError("upload-url requires a URL")

    return UploadUrlCommand(
        url=positionals[0],
        tags=tuple(positionals[1:]),
        private=options.get("private", False),
        prefix=options.get("prefix"),
        filename=options.get("name"),
    )


def _parse_list(args: list[str]) -> ListCommand:
    positionals, options = _split_options(
        args, value_options=("tag", "prefix", "project", "limit", "cursor")
    )
    if positionals:
        raise ParseError("list takes only options: --tag --prefix --project --limit --cursor")

    return ListCommand(
        tag=options.get("tag"),
        prefix=options.get("prefix"),
        project_id=options.get("project"),
        limit=_parse_int(options.get("limit"), "limit"),
        cursor=options.get("cursor"),
    )


def _parse_download(args: list[str]) -> DownloadCommand:
    """Parse 'download <id> [output_path]' command."""
    if len(args) not in (1, 2):
        raise ParseError("usage: download <id> [output_path]")

    output_path = args[1] if len(args) > 1 else None
    return DownloadCommand(file_id=args[0], output_path=output_path)


def _parse_stats(args: list[str]) -> StatsCommand:
    _expect_exactly(args, 1, "stats <id>")
    return StatsCommand(file_id=args[0])


def _parse_delete(args: list[str]) -> DeleteCommand:
    _expect_exactly(args, 1, "delete <id>")
    return DeleteCommand(file_id=args[0])


def _parse_activity(args: list[str]) -> ActivityCommand:
    positionals, options = _split_options(args, value_options=("limit", "cursor"))
    if positionals:
        raise ParseError("activity takes only options: --limit --cursor")
    return ActivityCommand(limit=_parse_int(options.get("limit"), "limit"), cursor=options.get("cursor"))


def _parse_webhooks(args: list[str]) -> WebhooksCommand:
    _expect_exactly(args, 0, "webhooks")
    return WebhooksCommand()


def _parse_add_webhook(args: list[str]) -> AddWebhookCommand:
    if not args:
        raise ParseError("usage: add-webhook <url> [event ...]")
    return AddWebhookCommand(url=args[0], events=tuple(args[1:]))


def _parse_delete_webhook(args: list[str]) -> DeleteWebhookCommand:
    _expect_exactly(args, 1, "delete-webhook <id>")
    return DeleteWebhookCommand(webhook_id=args[0])


def _parse_projects(args: list[str]) -> ProjectsCommand:
    _expect_exactly(args, 0, "projects")
    return ProjectsCommand()


def _parse_add_project(args: list[str]) -> AddProjectCommand:
    if not args:
        raise ParseError("usage: add-project <name>")
    return AddProjectCommand(name=" ".join(args))


def _parse_delete_project(args: list[str]) -> DeleteProjectCommand:
    _expect_exactly(args, 1, "delete-project <id>")
    return DeleteProjectCommand(project_id=args[0])


def _parse_export(args: list[str]) -> ExportCommand:
    _expect_exactly(args, 0, "export")
    return ExportCommand()


def _parse_delete_account(args: list[str]) -> DeleteAccountCommand:
    if args != ["--yes"]:
        raise ParseError("delete-account is permanent; confirm with: delete-account --yes")
    return DeleteAccountCommand()


_PARSERS = {
    "guest": _parse_guest,
    "token": _parse_token,
    "upload": _parse_upload,
    "upload-url": _parse_upload_url,
    "list": _parse_list,
    "download": _parse_download,
    "stats": _parse_stats,
    "delete": _parse_delete,
    "activity": _parse_activity,
    "webhooks": _parse_webhooks,
    "add-webhook": _parse_add_webhook,
    "delete-webhook": _parse_delete_webhook,
    "projects": _parse_projects,
    "add-project": _parse_add_project,
    "delete-project": _parse_delete_project,
    "export": _parse_export,
    "delete-account": _parse_delete_account,
}
