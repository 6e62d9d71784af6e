# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from cms.domain.content.entities import Category
from cms.domain.content.exceptions import CategoryNotFoundError
from cms.domain.content.repositories import CategoryRepository
from cms.shared.logging import logger


class CategoryUseCase:
    def __init__(self, *, categories: CategoryRepository) -> None:
        self._categories = categories

    def list_categories(self) -> Sequence[Category]:
        return self._categories.list_all()

    def get_category(self, category_id: str) -> Category:
        category = self._categories.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError()
        return category

    def create_category(self, name: str) -> Category:
        category = self._categories.create(name)
        logger.info(f"categories.create: ok category_id={category.id}")
        return category

    def update_category(self, category_id: str, name: str) -> None:
        if not self._categories.update(category_id, name):
            raise CategoryNotFoundError()
        logger.info(f"categories.update: ok category_id={category_id}")

    def delete_category(self, category_id: str) -> None:
        if not self._categories.delete(category_id):
            raise CategoryNotFoundError()
        logger.info(f"categories.delete: ok category_id={category_id}")
