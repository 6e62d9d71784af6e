# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from cms.domain.content.entities import Category as DomainCategory
from cms.domain.content.repositories import CategoryRepository
from cms.infrastructure.db.models import Category
from cms.infrastructure.repositories._time import as_utc
from cms.infrastructure.unit_of_work import SessionFactory, unit_of_work_scope


def _to_domain(row: Category) -> DomainCategory:
    return DomainCategory(
        id=row.id,
        name=row.name,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlAlchemyCategoryRepository(CategoryRepository):
    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def create(self, name: str) -> DomainCategory:
        with unit_of_work_scope(self._session_factory, "categories") as session:
            row = Category(name=name)
            session.add(row)
            session.flush()
            return _to_domain(row)

    def get_by_id(self, category_id: str) -> DomainCategory | None:
        with unit_of_work_scope(self._session_factory, "categories") as session:
            row = session.get(Category, category_id)
            return _to_domain(row) if row else None

    def list_all(self) -> Sequence[DomainCategory]:
        with unit_of_work_scope(self._session_factory, "categories") as session:
            rows = session.query(Category).order_by(Category.name.asc(), Category.id.asc()).all()
            return [_to_domain(row) for row in rows]

    def update(self, category_id: str, name: str) -> bool:
        with unit_of_work_scope(self._session_factory, "categories") as session:
            matched = (
                session.query(Category)
                .filter(Category.id == category_id)
                .update({"name": name, "updated_at": datetime.now(UTC)})
            )
            return matched > 0

    def delete(self, category_id: str) -> bool:
        with unit_of_work_scope(self._session_factory, "categories") as session:
            row = session.get(Category, category_id)
            if row is None:
                return False
            session.delete(row)
            return True
