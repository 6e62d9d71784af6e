# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from cms.domain.content.entities import CustomPageDraft

from .common import NonBlankStr


class CustomPageRequestDTO(BaseModel):
    custom_url: NonBlankStr = Field(max_length=255)
    content: NonBlankStr

    def to_draft(self) -> CustomPageDraft:
        return CustomPageDraft(custom_url=self.custom_url, content=self.content)


class CustomPageResponseDTO(BaseModel):
    id: str
    custom_url: str
    content: str
    author_id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
