"""Tests for PutPutCompleter."""

import pytest
from pathlib import Path
from unittest.mock import patch

from prompt_toolkit.document import Document

from cli.completer import PutPutCompleter
from cli.constants import COMMANDS


@pytest.fixture
def completer():
    """Create a PutPutCompleter instance."""
    return PutPutCompleter()


@pytest.fixture
def work_dir(tmp_path):
    """
    Create a temporary working directory with files to upload.

    Returns:
        Path to the temporary directory
    """
    (tmp_path / "document.txt").write_text("content")
    (tmp_path / "data.csv").write_text("content")
    (tmp_path / ".hidden").write_text("content")
    photos = tmp_path / "photos"
    photos.mkdir()
    (photos / "cat.jpg").write_text("content")
    return tmp_path


def get_completions_list(completer, text):
    """Helper to get list of completion texts from completer."""
    doc = Document(text, len(text))
    return [c.text for c in completer.get_completions(doc, None)]


class TestCommandCompletion:
    """Tests for command name completion."""

    def test_empty_input_shows_all_commands(self, completer):
        completions = get_completions_list(completer, "")
        for cmd in COMMANDS:
            assert cmd in completions

    def test_partial_command_filters(self, completer):
        completions = get_completions_list(completer, "upl")
        assert completions == ["upload", "upload-url"]

    def test_command_completion_case_insensitive(self, completer):
        completions = get_completions_list(completer, "DEL")
        assert "delete" in completions
        assert "delete-webhook" in completions
        assert "list" not in completions


class TestFileCompletion:
    """Tests for local file completion in upload command."""

    def test_upload_shows_working_directory(self, completer, work_dir):
        with patch.object(Path, "cwd", return_value=work_dir):
            completions = get_completions_list(completer, "upload ")
        assert "document.txt" in completions
        assert "data.csv" in completions
        assert "photos/" in completions
        assert ".hidden" not in completions

    def test_partial_name_filters(self, completer, work_dir):
        with patch.object(Path, "cwd", return_value=work_dir):
            completions = get_completions_list(completer, "upload d")
        assert sorted(completions) == ["data.csv", "document.txt"]

    def test_completes_inside_directory(self, completer, work_dir):
        with patch.object(Path, "cwd", return_value=work_dir):
            completions = get_completions_list(completer, "upload photos/c")
        assert completions == ["photos/cat.jpg"]

    def test_only_first_argument_completes_files(self, completer, work_dir):
        with patch.object(Path, "cwd", return_value=work_dir):
            completions = get_completions_list(completer, "upload document.txt ")
        assert completions == []

    def test_other_commands_no_file_completion(self, completer, work_dir):
        with patch.object(Path, "cwd", return_value=work_dir):
            completions = get_completions_list(completer, "delete ")
        assert completions == []

    def test_missing_directory_yields_nothing(self, completer, work_dir):
        with patch.object(Path, "cwd", return_value=work_dir):
            completions = get_completions_list(completer, "upload nope/x")
        assert completions == []
