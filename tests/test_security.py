# tests/test_security.py

from datetime import datetime, timedelta, timezone

import pytest

from blogapp.core.config import Settings
from blogapp.core.errors import ForbiddenError
from blogapp.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


@pytest.fixture
def cfg() -> Settings:
    return Settings(DATABASE_URL="sqlite://", JWT_SECRET="unit-secret-0123456789abcdef0123456789")


def test_password_hash_is_one_way_and_verifies() -> None:
    hashed = hash_password("secret1")
    assert hashed != "secret1"
    assert verify_password("secret1", hashed)
    assert not verify_password("secret2", hashed)


def test_verify_password_rejects_garbage_hash() -> None:
    assert not verify_password("secret1", "not-a-bcrypt-hash")


def test_token_round_trip_recovers_identity(cfg) -> None:
    token = create_access_token(42, "alice@x.com", cfg)
    identity = decode_access_token(token, cfg)
    assert identity.user_id == 42
    assert identity.email == "alice@x.com"


def test_token_expires_after_seven_days(cfg) -> None:
    issued = datetime.now(timezone.utc) - timedelta(days=7, minutes=1)
    token = create_access_token(1, "a@x.com", cfg, now=issued)
    with pytest.raises(ForbiddenError):
        decode_access_token(token, cfg)


def test_token_still_valid_within_seven_days(cfg) -> None:
    issued = datetime.now(timezone.utc) - timedelta(days=6)
    token = create_access_token(1, "a@x.com", cfg, now=issued)
    assert decode_access_token(token, cfg).user_id == 1


def test_token_signed_with_other_secret_is_rejected(cfg) -> None:
    other = Settings(DATABASE_URL="sqlite://", JWT_SECRET="another-secret-0123456789abcdef012345")
    token = create_access_token(1, "a@x.com", other)
    with pytest.raises(ForbiddenError):
        decode_access_token(token, cfg)
