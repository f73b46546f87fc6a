from datetime import timedelta

import pytest

from app.core.exceptions import InvalidTokenError, TokenExpiredError
from app.core.security import (
    JWTSettings,
    create_access_token,
    decode_token,
    describe_expiration,
    hash_password,
    verify_password,
)


class TestPasswords:
    def test_hash_and_verify(self):
        hashed = hash_password("s3cret-pass")

        assert hashed != "s3cret-pass"
        assert verify_password("s3cret-pass", hashed)
        assert not verify_password("other-pass", hashed)

    def test_long_password(self):
        password = "x" * 100

        assert verify_password(password, hash_password(password))

    def test_empty_password_rejected(self):
        with pytest.raises(ValueError):
            hash_password("")

    def test_malformed_hash_does_not_verify(self):
        assert not verify_password("s3cret-pass", "not-a-bcrypt-hash")


class TestTokens:
    def test_round_trip_claims(self):
        token = create_access_token(subject="kim@example.com", user_id=3, role="ADMIN")

        payload = decode_token(token)

        assert payload["sub"] == "kim@example.com"
        assert payload["uid"] == 3
        assert payload["role"] == "ADMIN"
        assert payload["exp"] - payload["iat"] == 7 * 24 * 3600

    def test_expired_token(self):
        token = create_access_token(
            subject="kim@example.com", user_id=3, role="USER", expires_delta=timedelta(seconds=-1)
        )

        with pytest.raises(TokenExpiredError):
            decode_token(token)

    def test_wrong_signature(self):
        other = JWTSettings(secret_key="another-secret")
        token = create_access_token(subject="kim@example.com", user_id=3, role="USER", jwt_settings=other)

        with pytest.raises(InvalidTokenError):
            decode_token(token)

    def test_garbage_token(self):
        with pytest.raises(InvalidTokenError):
            decode_token("not.a.token")

    def test_jwt_settings_validation(self):
        with pytest.raises(ValueError):
            JWTSettings(secret_key="")
        with pytest.raises(ValueError):
            JWTSettings(secret_key="k", access_token_expires_days=0)


def test_describe_expiration():
    assert describe_expiration() == "7 Days"
    assert describe_expiration(JWTSettings(secret_key="k", access_token_expires_days=1)) == "1 Day"
