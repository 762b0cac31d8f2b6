"""Session token verifier.

Supabase 세션 access token (HS256 JWT)을 검증하고 사용자 ID(sub)를 반환합니다.
"""

from __future__ import annotations

from jose import JWTError, jwt

from apps.scan.application.common.exceptions import InvalidSessionError


class JwtSessionVerifier:
    """JWT 세션 검증기."""

    def __init__(
        self,
        *,
        secret_key: str,
        audience: str = "authenticated",
        algorithm: str = "HS256",
    ) -> None:
        self._secret_key = secret_key
        self._audience = audience
        self._algorithm = algorithm

    def verify(self, token: str) -> str:
        """토큰을 검증하고 세션 사용자 ID를 반환합니다.

        Raises:
            InvalidSessionError: 서명/만료/audience 오류 또는 sub 누락
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                audience=self._audience,
            )
        except JWTError as e:
            raise InvalidSessionError() from e

        user_id = payload.get("sub")
        if not user_id:
            raise InvalidSessionError("Session token has no subject")
        return str(user_id)
