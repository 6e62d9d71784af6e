from __future__ import annotations

import pytest
from fakes import DeterministicHasher, InMemoryUserRepository

from cms.domain.users.entities import User
from cms.infrastructure.seeder import DEFAULT_ACCOUNTS, seed_users


def test_seeds_default_accounts() -> None:
    users = InMemoryUserRepository()

    created = seed_users(users, DeterministicHasher())

    assert created == ["admin", "user1", "user2", "testuser"]
    assert users.find_by_username("admin").password_hash == "hashed:admin123"
    assert len(DEFAULT_ACCOUNTS) == 4


def test_existing_accounts_are_skipped() -> None:
    users = InMemoryUserRepository()
    users.add(User(id="x", username="admin", password_hash="keep-me"))

    created = seed_users(users, DeterministicHasher())

    assert "admin" not in created
    assert users.find_by_username("admin").password_hash == "keep-me"


def test_seeding_twice_is_idempotent() -> None:
    users = InMemoryUserRepository()
    seed_users(users, DeterministicHasher())

    assert seed_users(users, DeterministicHasher()) == []


def test_other_errors_propagate() -> None:
    class BrokenHasher(DeterministicHasher):
        def hash(self, password: str) -> str:
            raise RuntimeError("hashing backend down")

    with pytest.raises(RuntimeError):
        seed_users(InMemoryUserRepository(), BrokenHasher(), [("admin", "admin123")])
