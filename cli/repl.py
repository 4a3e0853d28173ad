"""REPL with prompt_toolkit for user interaction."""

import os
import sys
from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from cli.commands import (
    handle_activity,
    handle_add_project,
    handle_add_webhook,
    handle_delete,
    handle_delete_account,
    handle_delete_project,
    handle_delete_webhook,
    handle_download,
    handle_export,
    handle_guest,
    handle_list,
    handle_projects,
    handle_stats,
    handle_token,
    handle_upload,
    handle_upload_url,
    handle_webhooks,
)
from cli.completer import PutPutCompleter
from cli.constants import (
    HELP_TEXT,
    LOGO,
    PROMPT_TEXT,
    STYLE,
    WELCOME_HELP,
    WELCOME_TITLE,
)
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
from cli.parser import ParseError, parse_command


HANDLERS = {
    GuestCommand: handle_guest,
    TokenCommand: handle_token,
    UploadCommand: handle_upload,
    UploadUrlCommand: handle_upload_url,
    ListCommand: handle_list,
    DownloadCommand: handle_download,
    StatsCommand: handle_stats,
    DeleteCommand: handle_delete,
    ActivityCommand: handle_activity,
    WebhooksCommand: handle_webhooks,
    AddWebhookCommand: handle_add_webhook,
    DeleteWebhookCommand: handle_delete_webhook,
    ProjectsCommand: handle_projects,
    AddProjectCommand: handle_add_project,
    DeleteProjectCommand: handle_delete_project,
    ExportCommand: handle_export,
    DeleteAccountCommand: handle_delete_account,
}


def clear_screen() -> None:
    """Clear the terminal screen (cross-platform)."""
    if sys.platform == "win32":
        os.system("cls")
    else:
        os.system("clear")


def show_welcome() -> None:
    print(LOGO)
    print(WELCOME_TITLE)
    print(WELCOME_HELP)


def dispatch_command(cmd_obj) -> str:
    """Dispatch parsed command to appropriate handler."""
    handler = HANDLERS.get(type(cmd_obj))
    if handler is None:
        return f"Unknown command type: {type(cmd_obj)}"
    return handler(cmd_obj)


def repl_loop() -> None:
    """Start interactive REPL with prompt_toolkit."""
    session: PromptSession = PromptSession(
        completer=PutPutCompleter(), history=InMemoryHistory(), style=STYLE
    )

    clear_screen()
    show_welcome()

    while True:
        try:
            user_input = session.prompt([("class:prompt", PROMPT_TEXT)])
            command = user_input.strip()

            if not command:
                continue

            if command == "exit":
                print("Goodbye!")
                break

            if command == "help":
                print(HELP_TEXT)
                continue

            if command == "clear":
                clear_screen()
                show_welcome()
                continue

            cmd_obj = parse_command(user_input)
            print(dispatch_command(cmd_obj))

        except ParseError as e:
            print(f"Error: {e}")
        except KeyboardInterrupt:
            continue
        except EOFError:
            print("\nGoodbye!")
            break
