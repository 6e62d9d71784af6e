# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from cms.domain.content.entities import Comment as DomainComment
from cms.domain.content.entities import CommentDraft
from cms.domain.content.exceptions import NewsNotFoundError
from cms.domain.content.repositories import CommentRepository
from cms.infrastructure.db.models import Comment, News
from cms.infrastructure.repositories._time import as_utc
from cms.infrastructure.unit_of_work import SessionFactory, unit_of_work_scope


def _to_domain(row: Comment) -> DomainComment:
    return DomainComment(
        id=row.id,
        news_id=row.news_id,
        name=row.name,
        comment=row.comment,
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyCommentRepository(CommentRepository):
    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def create(self, draft: CommentDraft) -> DomainComment:
        with unit_of_work_scope(self._session_factory, "comments") as session:
            if session.get(News, draft.news_id) is None:
                raise NewsNotFoundError()
            row = Comment(news_id=draft.news_id, name=draft.name, comment=draft.comment)
            session.add(row)
            session.flush()
            return _to_domain(row)

    def list_for_news(self, news_id: str) -> Sequence[DomainComment]:
        with unit_of_work_scope(self._session_factory, "comments") as session:
            rows = (
                session.query(Comment)
                .filter(Comment.news_id == news_id)
                .order_by(Comment.created_at.asc(), Comment.id.asc())
                .all()
            )
            return [_to_domain(row) for row in rows]
