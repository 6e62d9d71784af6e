# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from cms.domain.content.entities import CustomPage, CustomPageDraft
from cms.domain.content.exceptions import CustomPageNotFoundError
from cms.domain.content.repositories import CustomPageRepository
from cms.shared.logging import logger


class CustomPageUseCase:
    def __init__(self, *, pages: CustomPageRepository) -> None:
        self._pages = pages

    def list_pages(self) -> Sequence[CustomPage]:
        return self._pages.list_all()

    def get_page(self, page_id: str) -> CustomPage:
        page = self._pages.get_by_id(page_id)
        if page is None:
            raise CustomPageNotFoundError()
        return page

    def create_page(self, author_id: str, draft: CustomPageDraft) -> CustomPage:
        page = self._pages.create(author_id, draft)
        logger.info(f"pages.create: ok page_id={page.id} url={page.custom_url!r}")
        return page

    def update_page(self, page_id: str, draft: CustomPageDraft) -> None:
        if not self._pages.update(page_id, draft):
            raise CustomPageNotFoundError()
        logger.info(f"pages.update: ok page_id={page_id}")

    def delete_page(self, page_id: str) -> None:
        if not self._pages.delete(page_id):
            raise CustomPageNotFoundError()
        logger.info(f"pages.delete: ok page_id={page_id}")
