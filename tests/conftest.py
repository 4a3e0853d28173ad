"""Shared pytest fixtures for all tests."""

import pytest
from cli.config import Config


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to temporary .putput directory
    """
    config_dir = tmp_path / '.putput'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir, monkeypatch):
    """
    Create temporary config instance.

    Returns:
        Config instance with temp config file and no PUTPUT_TOKEN override
    """
    monkeypatch.delenv('PUTPUT_TOKEN', raising=False)
    return Config(temp_config_dir / 'config.json')


@pytest.fixture
def sample_file(tmp_path):
    """
    Create a sample file for testing file uploads.

    Returns:
        Path to sample text file
    """
    file_path = tmp_path / 'test.txt'
    file_path.write_text('Sample content for testing')
    return file_path


@pytest.fixture
def file_record():
    """
    Build a server-side file record as returned by the API.

    Returns:
        Function accepting field overrides and returning a dict
    """
    def build(**overrides):
        record = {
            'id': 'file-123',
            'original_name': 'test.txt',
            'public_name': 'abc123_test.txt',
            'public_url': 'https://cdn.putput.io/abc123/test.txt',
            'content_type': 'text/plain',
            'size_bytes': 26,
            'visibility': 'public',
            'prefix': None,
            'metadata': None,
            'tags': None,
            'download_count': 0,
            'short_url': 'https://putput.io/s/abc',
            'expires_at': None,
            'created_at': '2026-01-01T00:00:00Z',
        }
        record.update(overrides)
        return record

    return build


@pytest.fixture
def guest_payload():
    """Response body of POST /api/v1/auth/guest."""
    return {
        'token': 'pp_guest_abc123',
        'claim_url': 'https://putput.io/claim/xyz',
        'limits': {
            'storage_bytes': 1073741824,
            'max_file_size_bytes': 104857600,
            'max_files': 1000,
            'expires_at': '2026-02-01T00:00:00Z',
        },
    }
