# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Category:

    id: str
    name: str
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class News:

    id: str
    category_id: str
    author_id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class Comment:

    id: str
    news_id: str
    name: str
    comment: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class CustomPage:

    id: str
    custom_url: str
    content: str
    author_id: str
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class NewsDraft:
    """Fields a caller supplies when creating or editing an article."""

    category_id: str
    title: str
    content: str


@dataclass(slots=True, frozen=True)
class CustomPageDraft:

    custom_url: str
    content: str


@dataclass(slots=True, frozen=True)
class CommentDraft:

    news_id: str
    name: str
    comment: str
