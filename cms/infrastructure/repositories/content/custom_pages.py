# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError

from cms.domain.content.entities import CustomPage as DomainCustomPage
from cms.domain.content.entities import CustomPageDraft
from cms.domain.content.exceptions import DuplicateCustomUrlError
from cms.domain.content.repositories import CustomPageRepository
from cms.infrastructure.db.models import CustomPage
from cms.infrastructure.repositories._time import as_utc
from cms.infrastructure.unit_of_work import SessionFactory, unit_of_work_scope
from cms.shared.logging import logger


def _to_domain(row: CustomPage) -> DomainCustomPage:
    return DomainCustomPage(
        id=row.id,
        custom_url=row.custom_url,
        content=row.content,
        author_id=row.author_id,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlAlchemyCustomPageRepository(CustomPageRepository):
    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def create(self, author_id: str, draft: CustomPageDraft) -> DomainCustomPage:
        try:
            with unit_of_work_scope(self._session_factory, "pages") as session:
                row = CustomPage(
                    custom_url=draft.custom_url,
                    content=draft.content,
                    author_id=author_id,
                )
                session.add(row)
                session.flush()
                page = _to_domain(row)
        except IntegrityError as exc:
            logger.warning(f"pages.create: duplicate custom_url={draft.custom_url!r}")
            raise DuplicateCustomUrlError() from exc
        return page

    def get_by_id(self, page_id: str) -> DomainCustomPage | None:
        with unit_of_work_scope(self._session_factory, "pages") as session:
            row = session.get(CustomPage, page_id)
            return _to_domain(row) if row else None

    def list_all(self) -> Sequence[DomainCustomPage]:
        with unit_of_work_scope(self._session_factory, "pages") as session:
            rows = (
                session.query(CustomPage)
                .order_by(CustomPage.created_at.desc(), CustomPage.id.asc())
                .all()
            )
            return [_to_domain(row) for row in rows]

    def update(self, page_id: str, draft: CustomPageDraft) -> bool:
        try:
            with unit_of_work_scope(self._session_factory, "pages") as session:
                matched = (
                    session.query(CustomPage)
                    .filter(CustomPage.id == page_id)
                    .update(
                        {
                            "custom_url": draft.custom_url,
                            "content": draft.content,
                            "updated_at": datetime.now(UTC),
                        }
                    )
                )
        except IntegrityError as exc:
            logger.warning(f"pages.update: duplicate custom_url={draft.custom_url!r}")
            raise DuplicateCustomUrlError() from exc
        return matched > 0

    def delete(self, page_id: str) -> bool:
        with unit_of_work_scope(self._session_factory, "pages") as session:
            row = session.get(CustomPage, page_id)
            if row is None:
                return False
            session.delete(row)
            return True
