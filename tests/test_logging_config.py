"""Tests for logging setup and sensitive data masking."""

import logging

import pytest

from common.logging_config import SensitiveDataFilter, setup_logging


def make_record(msg, args=()):
    return logging.LogRecord('putput.client', logging.INFO, __file__, 1, msg, args, None)


@pytest.mark.parametrize('message', [
    'Authorization: Bearer pp_live_secret',
    'token=pp_live_secret',
    'using pp_guest_secret123 for upload',
])
def test_filter_masks_tokens(message):
    record = make_record(message)

    SensitiveDataFilter().filter(record)

    assert 'secret' not in record.getMessage()
    assert 'MASKED' in record.getMessage()


def test_filter_masks_args():
    record = make_record('set %s', ('pp_abcdef',))

    SensitiveDataFilter().filter(record)

    assert record.getMessage() == 'set pp_***MASKED***'


def test_filter_leaves_plain_messages():
    record = make_record('Making request: GET /api/v1/files')

    assert SensitiveDataFilter().filter(record) is True
    assert record.getMessage() == 'Making request: GET /api/v1/files'


def test_setup_logging_is_idempotent():
    logger = setup_logging('putput-test-component', log_level='DEBUG')
    again = setup_logging('putput-test-component', log_level='WARNING')

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert any(isinstance(f, SensitiveDataFilter) for f in logger.handlers[0].filters)
