# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property, partial

from sqlalchemy.engine import Engine

from cms.application.services.password_hashing import BcryptPasswordHasher
from cms.application.services.token_manager import JwtTokenManager
from cms.application.use_cases.content.categories import CategoryUseCase
from cms.application.use_cases.content.comments import CommentUseCase
from cms.application.use_cases.content.custom_pages import CustomPageUseCase
from cms.application.use_cases.content.news import NewsUseCase
from cms.application.use_cases.users.login_user import LoginUserUseCase
from cms.application.use_cases.users.refresh_tokens import RefreshTokensUseCase
from cms.infrastructure.db import create_db_engine, create_session_factory, ping_database
from cms.infrastructure.repositories.content.categories import SqlAlchemyCategoryRepository
from cms.infrastructure.repositories.content.comments import SqlAlchemyCommentRepository
from cms.infrastructure.repositories.content.custom_pages import SqlAlchemyCustomPageRepository
from cms.infrastructure.repositories.content.news import SqlAlchemyNewsRepository
from cms.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from cms.infrastructure.unit_of_work import SessionFactory
from cms.interfaces.http.controllers.auth_controller import AuthController
from cms.interfaces.http.controllers.category_controller import CategoryController
from cms.interfaces.http.controllers.comment_controller import CommentController
from cms.interfaces.http.controllers.custom_page_controller import CustomPageController
from cms.interfaces.http.controllers.misc_controller import MiscController
from cms.interfaces.http.controllers.news_controller import NewsController
from cms.shared.config import AppConfig, load_config


class Container:
    def __init__(
        self,
        config: AppConfig | None = None,
        session_factory: SessionFactory | None = None,
    ) -> None:
        self.config = config or load_config()
        self._session_factory = session_factory

    @cached_property
    def engine(self) -> Engine:
        return create_db_engine(self.config.database)

    @cached_property
    def session_factory(self) -> SessionFactory:
        return self._session_factory or create_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(rounds=self.config.security.bcrypt_rounds)

    @cached_property
    def token_manager(self) -> JwtTokenManager:
        return JwtTokenManager(self.config.jwt)

    # Repositories

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def category_repository(self) -> SqlAlchemyCategoryRepository:
        return SqlAlchemyCategoryRepository(self.session_factory)

    @cached_property
    def news_repository(self) -> SqlAlchemyNewsRepository:
        return SqlAlchemyNewsRepository(self.session_factory)

    @cached_property
    def comment_repository(self) -> SqlAlchemyCommentRepository:
        return SqlAlchemyCommentRepository(self.session_factory)

    @cached_property
    def custom_page_repository(self) -> SqlAlchemyCustomPageRepository:
        return SqlAlchemyCustomPageRepository(self.session_factory)

    # Use cases

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_manager,
        )

    @cached_property
    def refresh_tokens_use_case(self) -> RefreshTokensUseCase:
        return RefreshTokensUseCase(tokens=self.token_manager)

    @cached_property
    def category_use_case(self) -> CategoryUseCase:
        return CategoryUseCase(categories=self.category_repository)

    @cached_property
    def news_use_case(self) -> NewsUseCase:
        return NewsUseCase(news=self.news_repository, categories=self.category_repository)

    @cached_property
    def comment_use_case(self) -> CommentUseCase:
        return CommentUseCase(comments=self.comment_repository, news=self.news_repository)

    @cached_property
    def custom_page_use_case(self) -> CustomPageUseCase:
        return CustomPageUseCase(pages=self.custom_page_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        security = self.config.security
        return AuthController(
            login_use_case=self.login_user_use_case,
            refresh_use_case=self.refresh_tokens_use_case,
            rate_limit_requests=security.rate_limit_requests,
            rate_limit_window=security.rate_limit_window,
            rate_limit_enabled=security.enable_rate_limit,
        )

    @cached_property
    def category_controller(self) -> CategoryController:
        return CategoryController(categories=self.category_use_case, tokens=self.token_manager)

    @cached_property
    def news_controller(self) -> NewsController:
        return NewsController(news=self.news_use_case, tokens=self.token_manager)

    @cached_property
    def comment_controller(self) -> CommentController:
        return CommentController(comments=self.comment_use_case)

    @cached_property
    def custom_page_controller(self) -> CustomPageController:
        return CustomPageController(pages=self.custom_page_use_case, tokens=self.token_manager)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(check_database=partial(ping_database, self.engine))

    def controllers(self) -> list:
        return [
            self.misc_controller,
            self.auth_controller,
            self.category_controller,
            self.news_controller,
            self.comment_controller,
            self.custom_page_controller,
        ]
