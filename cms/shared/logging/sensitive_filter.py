# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Redaction applied to every log line before it reaches a sink."""

from __future__ import annotations

import re
from typing import Any

_REDACTED = "***REDACTED***"

_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    # Signed tokens go first so the key=value rules below never see them whole.
    (re.compile(r"\beyJ[\w-]+\.[\w-]+\.[\w-]*"), "***JWT***"),
    (re.compile(r"(bearer\s+)[\w.\-]{8,}", re.IGNORECASE), rf"\1{_REDACTED}"),
    (
        re.compile(r"((?:access|refresh)_token_secret_key\s*[:=]\s*['\"]?)[^'\"\s,}]+", re.IGNORECASE),
        rf"\1{_REDACTED}",
    ),
    (
        re.compile(r"((?:access_|refresh_)?token\s*[:=]\s*['\"]?)[\w.\-]{16,}", re.IGNORECASE),
        rf"\1{_REDACTED}",
    ),
    (re.compile(r"(password\s*[:=]\s*['\"]?)[^'\"\s,}]+", re.IGNORECASE), rf"\1{_REDACTED}"),
    # Stored bcrypt hashes.
    (re.compile(r"\$2[aby]\$\d{2}\$[./A-Za-z0-9]{53}"), "***BCRYPT***"),
    (re.compile(r"(postgres(?:ql)?(?:\+\w+)?://[^:/@\s]+):[^@\s]+@"), rf"\1:{_REDACTED}@"),
    (re.compile(r"(authorization\s*:\s*['\"]?)[^'\"]{6,}", re.IGNORECASE), rf"\1{_REDACTED}"),
)


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """Loguru ``filter`` hook: rewrites the message in place, never drops it."""
    record["message"] = sanitize_message(record["message"])
    return True
