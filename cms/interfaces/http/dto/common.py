# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Annotated, TypeVar

from flask import request
from pydantic import BaseModel, StringConstraints, ValidationError

from cms.shared.errors.validation import raise_validation_error

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

RequestModel = TypeVar("RequestModel", bound=BaseModel)


def parse_json_body(model: type[RequestModel]) -> RequestModel:
    try:
        return model.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)
