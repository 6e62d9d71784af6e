from __future__ import annotations

import os
import tempfile

# Settings are read once through the cached load_config(), so the test
# database and secrets have to be in place before any cms module is imported.
_DB_DIR = tempfile.mkdtemp(prefix="cms-tests-")

os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'cms.sqlite3')}"
os.environ["ACCESS_TOKEN_SECRET_KEY"] = "test-access-secret-0123456789abcdef"
os.environ["REFRESH_TOKEN_SECRET_KEY"] = "test-refresh-secret-0123456789abcdef"
os.environ["ACCESS_TOKEN_TTL"] = "15m"
os.environ["REFRESH_TOKEN_TTL"] = "24h"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SEED_USERS"] = "false"
os.environ.pop("LOG_FILE", None)

import pytest  # noqa: E402

from cms.shared.config import JwtConfig  # noqa: E402


@pytest.fixture()
def jwt_config() -> JwtConfig:
    return JwtConfig(
        access_token_secret_key="unit-access-secret",
        refresh_token_secret_key="unit-refresh-secret",
        access_token_ttl="15m",
        refresh_token_ttl="24h",
    )
