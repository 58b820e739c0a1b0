"""Unit tests for session token verification."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from agora.config import AuthSettings
from agora.domain.service import JWTService
from agora.util.jwt import JWTError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="test-secret")


class TestVerifyToken:
    """Tests for verify_token()."""

    def test_round_trip_claims(self):
        token = create_token("user_abc", "abc@example.org", "Ada", SETTINGS)

        payload = verify_token(token, SETTINGS)

        assert payload.sub == "user_abc"
        assert payload.email == "abc@example.org"
        assert payload.name == "Ada"

    def test_wrong_secret_is_rejected(self):
        token = create_token("user_abc", "abc@example.org", None, SETTINGS)

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, AuthSettings(jwt_secret="other-secret"))

    def test_expired_token_is_rejected(self):
        token = jwt.encode(
            {
                "sub": "user_abc",
                "email": "abc@example.org",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=5),
            },
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_missing_email_claim_is_rejected(self):
        token = jwt.encode(
            {"sub": "user_abc", "exp": datetime.now(timezone.utc) + timedelta(days=1)},
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        with pytest.raises(JWTError):
            verify_token(token, SETTINGS)


class TestJWTService:
    """Tests for JWTService.get_identity_from_token()."""

    def test_identity_from_valid_token(self):
        service = JWTService(auth_settings=SETTINGS)
        token = create_token("user_abc", "abc@example.org", "Ada", SETTINGS)

        identity = service.get_identity_from_token(token)

        assert identity is not None
        assert identity.external_id == "user_abc"
        assert identity.email == "abc@example.org"

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_garbage_token_is_anonymous(self, token):
        service = JWTService(auth_settings=SETTINGS)

        assert service.get_identity_from_token(token) is None
