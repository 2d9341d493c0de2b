"""Logging filters that scrub sensitive content."""

from __future__ import annotations

import logging
import re

_SENSITIVE_PATTERN = re.compile(
    r"(telephone\"?\s*[:=]\s*\"?)(\d+)",
    re.IGNORECASE,
)


def mask_phone(value: str | None) -> str | None:
    """Keep only the last four digits of a telephone number."""
    if not value:
        return value
    digits = [ch for ch in value if ch.isdigit()]
    if len(digits) < 4:
        return "***"
    return f"***{''.join(digits[-4:])}"


class SensitiveFilter(logging.Filter):
    """Mask owner telephone numbers in log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = _SENSITIVE_PATTERN.sub(
                lambda match: match.group(1) + (mask_phone(match.group(2)) or ""),
                record.msg,
            )
        return True


__all__ = ["SensitiveFilter", "mask_phone"]
