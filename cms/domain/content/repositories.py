# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import (
    Category,
    Comment,
    CommentDraft,
    CustomPage,
    CustomPageDraft,
    News,
    NewsDraft,
)


class CategoryRepository(Protocol):
    def create(self, name: str) -> Category: ...
    def get_by_id(self, category_id: str) -> Category | None: ...
    def list_all(self) -> Sequence[Category]: ...
    def update(self, category_id: str, name: str) -> bool: ...
    def delete(self, category_id: str) -> bool: ...


class NewsRepository(Protocol):
    def create(self, author_id: str, draft: NewsDraft) -> News: ...
    def get_by_id(self, news_id: str) -> News | None: ...
    def list_all(self) -> Sequence[News]: ...
    def update(self, news_id: str, draft: NewsDraft) -> bool: ...
    def delete(self, news_id: str) -> bool: ...


class CommentRepository(Protocol):
    def create(self, draft: CommentDraft) -> Comment: ...
    def list_for_news(self, news_id: str) -> Sequence[Comment]: ...


class CustomPageRepository(Protocol):
    def create(self, author_id: str, draft: CustomPageDraft) -> CustomPage: ...
    def get_by_id(self, page_id: str) -> CustomPage | None: ...
    def list_all(self) -> Sequence[CustomPage]: ...
    def update(self, page_id: str, draft: CustomPageDraft) -> bool: ...
    def delete(self, page_id: str) -> bool: ...
