# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import NonBlankStr


class CommentRequestDTO(BaseModel):
    name: NonBlankStr = Field(max_length=255)
    comment: NonBlankStr


class CommentResponseDTO(BaseModel):
    id: str
    news_id: str
    name: str
    comment: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
