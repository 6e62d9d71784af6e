# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from cms.domain.content.entities import News as DomainNews
from cms.domain.content.entities import NewsDraft
from cms.domain.content.repositories import NewsRepository
from cms.infrastructure.db.models import News
from cms.infrastructure.repositories._time import as_utc
from cms.infrastructure.unit_of_work import SessionFactory, unit_of_work_scope


def _to_domain(row: News) -> DomainNews:
    return DomainNews(
        id=row.id,
        category_id=row.category_id,
        author_id=row.author_id,
        title=row.title,
        content=row.content,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlAlchemyNewsRepository(NewsRepository):
    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def create(self, author_id: str, draft: NewsDraft) -> DomainNews:
        with unit_of_work_scope(self._session_factory, "news") as session:
            row = News(
                category_id=draft.category_id,
                author_id=author_id,
                title=draft.title,
                content=draft.content,
            )
            session.add(row)
            session.flush()
            return _to_domain(row)

    def get_by_id(self, news_id: str) -> DomainNews | None:
        with unit_of_work_scope(self._session_factory, "news") as session:
            row = session.get(News, news_id)
            return _to_domain(row) if row else None

    def list_all(self) -> Sequence[DomainNews]:
        with unit_of_work_scope(self._session_factory, "news") as session:
            rows = session.query(News).order_by(News.created_at.desc(), News.id.asc()).all()
            return [_to_domain(row) for row in rows]

    def update(self, news_id: str, draft: NewsDraft) -> bool:
        with unit_of_work_scope(self._session_factory, "news") as session:
            matched = (
                session.query(News)
                .filter(News.id == news_id)
                .update(
                    {
                        "category_id": draft.category_id,
                        "title": draft.title,
                        "content": draft.content,
                        "updated_at": datetime.now(UTC),
                    }
                )
            )
            return matched > 0

    def delete(self, news_id: str) -> bool:
        with unit_of_work_scope(self._session_factory, "news") as session:
            row = session.get(News, news_id)
            if row is None:
                return False
            session.delete(row)
            return True
