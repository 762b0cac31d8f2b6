"""Session verification Tests."""

import time

import pytest
from jose import jwt

from apps.scan.application.common.exceptions import InvalidSessionError
from apps.scan.infrastructure.security import JwtSessionVerifier
from apps.scan.setup.config import Settings
from apps.scan.setup.dependencies import get_session_user_id

SECRET = "secret"


@pytest.fixture
def verifier():
    return JwtSessionVerifier(secret_key=SECRET)


class TestJwtSessionVerifier:
    """JwtSessionVerifier 테스트."""

    def test_valid(self, verifier):
        token = jwt.encode({"sub": "user-1", "aud": "authenticated"}, SECRET, algorithm="HS256")

        assert verifier.verify(token) == "user-1"

    @pytest.mark.parametrize(
        "claims",
        [
            {"sub": "user-1", "aud": "anon"},
            {"sub": "user-1", "aud": "authenticated", "exp": int(time.time()) - 60},
            {"aud": "authenticated"},
        ],
    )
    def test_invalid_claims(self, verifier, claims):
        token = jwt.encode(claims, SECRET, algorithm="HS256")

        with pytest.raises(InvalidSessionError):
            verifier.verify(token)

    def test_bad_signature(self, verifier):
        token = jwt.encode({"sub": "user-1", "aud": "authenticated"}, "other", algorithm="HS256")

        with pytest.raises(InvalidSessionError):
            verifier.verify(token)

    def test_garbage(self, verifier):
        with pytest.raises(InvalidSessionError):
            verifier.verify("not-a-jwt")


class TestGetSessionUserId:
    """Authorization 헤더 처리."""

    def test_no_header(self, verifier):
        assert get_session_user_id(Settings(auth_disabled=False), verifier, None) is None

    def test_non_bearer(self, verifier):
        assert get_session_user_id(Settings(auth_disabled=False), verifier, "Basic abc") is None

    def test_auth_disabled(self, verifier):
        assert get_session_user_id(Settings(auth_disabled=True), verifier, "Bearer junk") is None

    def test_bearer(self, verifier):
        token = jwt.encode({"sub": "user-1", "aud": "authenticated"}, SECRET, algorithm="HS256")

        assert get_session_user_id(Settings(auth_disabled=False), verifier, f"Bearer {token}") == "user-1"

    def test_verifier_not_configured(self):
        with pytest.raises(InvalidSessionError):
            get_session_user_id(Settings(auth_disabled=False), None, "Bearer token")
