"""Tests for CLI command parsing."""

import pytest

from cli.models import (
    ActivityCommand,
    AddProjectCommand,
    AddWebhookCommand,
    DeleteAccountCommand,
    DeleteCommand,
    DownloadCommand,
    GuestCommand,
    ListCommand,
    TokenCommand,
    UploadCommand,
    UploadUrlCommand,
)
from cli.parser import ParseError, parse_command


def test_parse_guest():
    assert parse_command("guest") == GuestCommand()


def test_parse_token():
    assert parse_command("token pp_abc123") == TokenCommand(token="pp_abc123")


def test_parse_upload_with_tags_and_options():
    """Test upload positionals become file and tags, options are extracted anywhere."""
    cmd = parse_command('upload "my photo.jpg" avatars --private --prefix users user-upload --type image/jpeg')

    assert cmd == UploadCommand(
        file_path="my photo.jpg",
        tags=("avatars", "user-upload"),
        private=True,
        prefix="users",
        content_type="image/jpeg",
    )


def test_parse_upload_expires():
    cmd = parse_command("upload a.txt --expires 2026-12-31T00:00:00Z")

    assert cmd.expires_at == "2026-12-31T00:00:00Z"
    assert cmd.tags == ()
    assert cmd.private is False


def test_parse_upload_requires_file():
    with pytest.raises(ParseError, match="requires a file"):
        parse_command("upload --private")


def test_parse_option_missing_value():
    with pytest.raises(ParseError, match="--prefix requires a value"):
        parse_command("upload a.txt --prefix")


def test_parse_unknown_option():
    with pytest.raises(ParseError, match="Unknown option"):
        parse_command("upload a.txt --public")


def test_parse_upload_url():
    cmd = parse_command("upload-url https://example.com/a.png imported --name a.png")

    assert cmd == UploadUrlCommand(url="https://example.com/a.png", tags=("imported",), filename="a.png")


def test_parse_list_filters():
    cmd = parse_command("list --tag avatars --prefix users --project p1 --limit 20 --cursor abc")

    assert cmd == ListCommand(tag="avatars", prefix="users", project_id="p1", limit=20, cursor="abc")


def test_parse_list_no_filters():
    assert parse_command("list") == ListCommand()


def test_parse_list_rejects_bad_limit():
    with pytest.raises(ParseError, match="integer"):
        parse_command("list --limit many")


def test_parse_list_rejects_positionals():
    with pytest.raises(ParseError):
        parse_command("list avatars")


def test_parse_download():
    assert parse_command("download f1") == DownloadCommand(file_id="f1")
    assert parse_command("download f1 out/file.txt") == DownloadCommand(file_id="f1", output_path="out/file.txt")


def test_parse_delete_requires_single_id():
    assert parse_command("delete f1") == DeleteCommand(file_id="f1")
    with pytest.raises(ParseError, match="usage: delete <id>"):
        parse_command("delete")


def test_parse_activity():
    assert parse_command("activity --limit 5") == ActivityCommand(limit=5)


def test_parse_add_webhook_events():
    cmd = parse_command("add-webhook https://example.com/hook upload delete")

    assert cmd == AddWebhookCommand(url="https://example.com/hook", events=("upload", "delete"))


def test_parse_add_project_joins_words():
    assert parse_command("add-project Marketing Assets") == AddProjectCommand(name="Marketing Assets")


def test_parse_delete_account_requires_confirmation():
    with pytest.raises(ParseError, match="--yes"):
        parse_command("delete-account")
    assert parse_command("delete-account --yes") == DeleteAccountCommand()


def test_parse_empty_and_unknown():
    with pytest.raises(ParseError, match="Empty command"):
        parse_command("   ")
    with pytest.raises(ParseError, match="Unknown command"):
        parse_command("frobnicate")


def test_parse_unbalanced_quotes():
    with pytest.raises(ParseError, match="Invalid syntax"):
        parse_command('upload "unterminated')
