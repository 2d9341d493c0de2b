"""Log scrubbing tests."""

from __future__ import annotations

import logging

import pytest

from app.security.logging_filters import SensitiveFilter, mask_phone


@pytest.mark.parametrize(
    "value, expected",
    [(None, None), ("", ""), ("608", "***"), ("6085551023", "***1023")],
)
def test_mask_phone(value: str | None, expected: str | None) -> None:
    assert mask_phone(value) == expected


def test_filter_masks_telephone_in_message() -> None:
    record = logging.LogRecord(
        name="app",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg='payload {"firstName": "George", "telephone": "6085551023"}',
        args=None,
        exc_info=None,
    )

    assert SensitiveFilter().filter(record) is True
    assert "6085551023" not in record.msg
    assert '"telephone": "***1023"' in record.msg
    assert "George" in record.msg
