# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Transactional session handling for the repositories."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from types import TracebackType

from sqlalchemy.orm import Session

from cms.shared.logging import logger

SessionFactory = Callable[[], Session]


class SqlAlchemyUnitOfWork:
    """One session per ``with`` block: commit on success, rollback on error."""

    def __init__(self, session_factory: SessionFactory, *, label: str = "uow") -> None:
        self._session_factory = session_factory
        self._label = label
        self._session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self._session_factory()
        logger.debug(f"{self._label}: session opened")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        session = self.session
        try:
            if exc is not None:
                logger.debug(f"{self._label}: rollback after {exc_type.__name__}")
                session.rollback()
            else:
                session.commit()
        except Exception:
            logger.exception(f"{self._label}: commit failed, rolling back")
            session.rollback()
            raise
        finally:
            session.close()
            self._session = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("unit of work used outside of its context")
        return self._session


@contextmanager
def unit_of_work_scope(factory: SessionFactory, label: str = "uow") -> Iterator[Session]:
    with SqlAlchemyUnitOfWork(factory, label=label) as uow:
        yield uow.session
