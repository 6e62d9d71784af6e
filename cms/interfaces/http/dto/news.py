# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from cms.domain.content.entities import NewsDraft

from .common import NonBlankStr


class NewsRequestDTO(BaseModel):
    category_id: NonBlankStr
    title: NonBlankStr = Field(max_length=255)
    content: NonBlankStr

    def to_draft(self) -> NewsDraft:
        return NewsDraft(category_id=self.category_id, title=self.title, content=self.content)


class NewsResponseDTO(BaseModel):
    id: str
    category_id: str
    author_id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
