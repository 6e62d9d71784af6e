from __future__ import annotations

import pytest

from cms.application.services.password_hashing import BcryptPasswordHasher
from cms.domain.users.exceptions import PasswordHashError


@pytest.fixture()
def hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


def test_hash_is_salted_bcrypt(hasher: BcryptPasswordHasher) -> None:
    first = hasher.hash("admin123")
    second = hasher.hash("admin123")

    assert first.startswith("$2")
    assert first != second
    assert "admin123" not in first


def test_verify_matches_and_mismatches(hasher: BcryptPasswordHasher) -> None:
    hashed = hasher.hash("admin123")

    assert hasher.verify("admin123", hashed) is True
    assert hasher.verify("wrong", hashed) is False


@pytest.mark.parametrize("stored", ["", "not-a-bcrypt-hash"])
def test_broken_stored_hash_raises(hasher: BcryptPasswordHasher, stored: str) -> None:
    with pytest.raises(PasswordHashError):
        hasher.verify("admin123", stored)


def test_overlong_password(hasher: BcryptPasswordHasher) -> None:
    hashed = hasher.hash("short")

    with pytest.raises(PasswordHashError):
        hasher.hash("x" * 73)
    assert hasher.verify("x" * 73, hashed) is False
