# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Demo account seeding for local and test environments."""

from __future__ import annotations

from collections.abc import Iterable

from cms.application.use_cases.users.register_user import RegisterUserUseCase
from cms.domain.users.exceptions import UserAlreadyExistsError
from cms.domain.users.repositories import PasswordHasher, UserRepository
from cms.shared.logging import logger

DEFAULT_ACCOUNTS: tuple[tuple[str, str], ...] = (
    ("admin", "admin123"),
    ("user1", "password123"),
    ("user2", "password123"),
    ("testuser", "test123"),
)


def seed_users(
    users: UserRepository,
    hasher: PasswordHasher,
    accounts: Iterable[tuple[str, str]] = DEFAULT_ACCOUNTS,
) -> list[str]:
    """Create every missing account and return the usernames that were added."""
    register = RegisterUserUseCase(users=users, password_hasher=hasher)
    created: list[str] = []

    for username, password in accounts:
        try:
            user = register.execute(username, password)
        except UserAlreadyExistsError:
            logger.info(f"seeder: user '{username}' already exists, skipping")
            continue
        created.append(user.username)
        logger.info(f"seeder: created user '{username}' id={user.id}")

    logger.info(f"seeder: done, {len(created)} user(s) created")
    return created


__all__ = ["DEFAULT_ACCOUNTS", "seed_users"]
