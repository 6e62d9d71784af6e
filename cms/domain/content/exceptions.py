# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from cms.shared.errors.base import DomainError


class CategoryNotFoundError(DomainError):
    code = "category_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Category not found"


class NewsNotFoundError(DomainError):
    code = "news_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "News not found"


class CustomPageNotFoundError(DomainError):
    code = "custom_page_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Page not found"


class DuplicateCustomUrlError(DomainError):
    code = "duplicate_custom_url"
    status = HTTPStatus.CONFLICT
    message = "Custom URL is already in use"
