from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime
from pathlib import Path

import pytest
from sqlalchemy.orm import sessionmaker

from cms.domain.content.entities import CommentDraft, CustomPageDraft, NewsDraft
from cms.domain.content.exceptions import DuplicateCustomUrlError, NewsNotFoundError
from cms.domain.users.entities import User
from cms.domain.users.exceptions import UserAlreadyExistsError
from cms.infrastructure.db import Base, create_db_engine
from cms.infrastructure.db import models  # noqa: F401
from cms.infrastructure.repositories.content.categories import SqlAlchemyCategoryRepository
from cms.infrastructure.repositories.content.comments import SqlAlchemyCommentRepository
from cms.infrastructure.repositories.content.custom_pages import SqlAlchemyCustomPageRepository
from cms.infrastructure.repositories.content.news import SqlAlchemyNewsRepository
from cms.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from cms.shared.config import DatabaseConfig


@pytest.fixture()
def session_factory(tmp_path: Path) -> Iterator[sessionmaker]:
    engine = create_db_engine(DatabaseConfig(url=f"sqlite:///{tmp_path / 'repo.sqlite3'}"))
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    engine.dispose()


@pytest.fixture()
def author_id(session_factory: sessionmaker) -> str:
    users = SqlAlchemyUserRepository(session_factory)
    return users.add(User(id="", username="author", password_hash="$2b$04$hash")).id


def test_user_repository(session_factory: sessionmaker) -> None:
    users = SqlAlchemyUserRepository(session_factory)
    created = users.add(
        User(id="u-1", username="admin", password_hash="hash", created_at=datetime.now(UTC))
    )

    assert created.id == "u-1"
    assert users.find_by_username("admin") == created
    assert users.find_by_username("nobody") is None
    assert created.created_at is not None and created.created_at.tzinfo is not None

    with pytest.raises(UserAlreadyExistsError):
        users.add(User(id="u-2", username="admin", password_hash="other"))


def test_user_repository_generates_ids(session_factory: sessionmaker) -> None:
    user = SqlAlchemyUserRepository(session_factory).add(
        User(id="", username="bob", password_hash="hash")
    )

    assert len(user.id) == 36


def test_category_repository(session_factory: sessionmaker) -> None:
    repo = SqlAlchemyCategoryRepository(session_factory)
    sport = repo.create("Sport")
    repo.create("Art")

    assert [c.name for c in repo.list_all()] == ["Art", "Sport"]
    assert repo.update(sport.id, "Sports") is True
    assert repo.get_by_id(sport.id).name == "Sports"
    assert repo.update("missing", "x") is False
    assert repo.delete(sport.id) is True
    assert repo.delete(sport.id) is False
    assert repo.get_by_id(sport.id) is None


def test_news_and_comments(session_factory: sessionmaker, author_id: str) -> None:
    category = SqlAlchemyCategoryRepository(session_factory).create("World")
    news = SqlAlchemyNewsRepository(session_factory)
    comments = SqlAlchemyCommentRepository(session_factory)

    article = news.create(author_id, NewsDraft(category.id, "Title", "Body"))
    comment = comments.create(CommentDraft(news_id=article.id, name="Ann", comment="Nice"))

    assert article.author_id == author_id
    assert news.get_by_id(article.id) == article
    assert comments.list_for_news(article.id) == [comment]
    with pytest.raises(NewsNotFoundError):
        comments.create(CommentDraft(news_id="missing", name="Bob", comment="?"))

    assert news.update(article.id, NewsDraft(category.id, "New", "Body")) is True
    assert news.get_by_id(article.id).title == "New"
    assert news.update("missing", NewsDraft(category.id, "x", "y")) is False

    assert news.delete(article.id) is True
    assert news.get_by_id(article.id) is None
    assert comments.list_for_news(article.id) == []


def test_news_listed_newest_first(session_factory: sessionmaker, author_id: str) -> None:
    category = SqlAlchemyCategoryRepository(session_factory).create("World")
    news = SqlAlchemyNewsRepository(session_factory)

    first = news.create(author_id, NewsDraft(category.id, "First", "..."))
    second = news.create(author_id, NewsDraft(category.id, "Second", "..."))

    assert [n.id for n in news.list_all()] == [second.id, first.id]


def test_custom_page_repository(session_factory: sessionmaker, author_id: str) -> None:
    pages = SqlAlchemyCustomPageRepository(session_factory)
    about = pages.create(author_id, CustomPageDraft("/about", "<h1>About</h1>"))
    contact = pages.create(author_id, CustomPageDraft("/contact", "<h1>Contact</h1>"))

    with pytest.raises(DuplicateCustomUrlError):
        pages.create(author_id, CustomPageDraft("/about", "again"))
    with pytest.raises(DuplicateCustomUrlError):
        pages.update(contact.id, CustomPageDraft("/about", "clash"))

    assert pages.update(about.id, CustomPageDraft("/about-us", "new")) is True
    assert pages.get_by_id(about.id).custom_url == "/about-us"
    assert pages.delete(about.id) is True
    assert [p.id for p in pages.list_all()] == [contact.id]
