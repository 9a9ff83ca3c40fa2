"""Credentials — token round trip and rejection of bad tokens.

Tests cover:
    - A freshly minted token decodes to the same email
    - Tampered, foreign-key and expired tokens raise AuthenticationError
    - Password hashes verify only the original password
"""

import pytest

from expense_tracker.config import Settings
from expense_tracker.core.errors import AuthenticationError
from expense_tracker.infrastructure.credentials import (
    create_access_token, decode_access_token, hash_password, verify_password,
)


@pytest.fixture
def settings():
    return Settings(jwt_secret_key="unit-test-secret")


def test_token_round_trip(settings):
    token = create_access_token("a@x.com", settings)
    assert decode_access_token(token, settings) == "a@x.com"


def test_tampered_token_rejected(settings):
    header, _, signature = create_access_token("a@x.com", settings).split(".")
    _, forged_payload, _ = create_access_token("b@x.com", settings).split(".")
    with pytest.raises(AuthenticationError):
        decode_access_token(f"{header}.{forged_payload}.{signature}", settings)


def test_token_signed_with_other_key_rejected(settings):
    other = Settings(jwt_secret_key="someone-elses-secret")
    token = create_access_token("a@x.com", other)
    with pytest.raises(AuthenticationError):
        decode_access_token(token, settings)


def test_expired_token_rejected():
    expired = Settings(
        jwt_secret_key="unit-test-secret", access_token_expire_minutes=-1,
    )
    token = create_access_token("a@x.com", expired)
    with pytest.raises(AuthenticationError) as exc_info:
        decode_access_token(token, expired)
    assert exc_info.value.message == "Token has expired"


def test_password_hash_verifies_only_original():
    hashed = hash_password("correct horse")
    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)
