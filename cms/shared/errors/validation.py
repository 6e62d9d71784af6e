# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def _field_path(loc: Sequence[int | str]) -> str:
    return ".".join(str(part) for part in loc) or "body"


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    """Reduce pydantic's report to field names and error types; inputs are never echoed."""
    errors = [
        {"field": _field_path(error["loc"]), "type": error["type"]}
        for error in exc.errors(include_input=False, include_url=False)
    ]
    return {
        "fields": sorted({error["field"] for error in errors}),
        "errors": errors,
    }


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    raise ValidationError(context=format_pydantic_errors(exc)) from exc


__all__ = ["format_pydantic_errors", "raise_validation_error"]
