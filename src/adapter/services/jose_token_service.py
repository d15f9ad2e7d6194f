from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt

from src.app.services.token_service import (
    ITokenService,
    TokenClaims,
    TokenConfigError,
    TokenExpiredError,
    TokenInvalidError,
)

TOKEN_ISSUER = "Admin"
TOKEN_TTL = timedelta(minutes=59)
ALGORITHM = "HS256"


class JoseTokenService(ITokenService):
    """
    JWT token service backed by python-jose (HS256).

    Tokens carry no payload beyond the registered claims:
    iss (fixed issuer), aud (subject user id), exp and iat.
    """

    def __init__(
        self,
        secret: str,
        issuer: str = TOKEN_ISSUER,
        ttl: timedelta = TOKEN_TTL,
    ):
        self._secret = secret
        self.issuer = issuer
        self.ttl = ttl

    def __repr__(self) -> str:
        return f"JoseTokenService(issuer={self.issuer!r}, ttl={self.ttl!r})"

    @property
    def is_configured(self) -> bool:
        return bool(self._secret)

    def issue(self, subject_id: str) -> str:
        if not self.is_configured:
            raise TokenConfigError("Token signing secret is not configured")

        now = datetime.now(UTC)
        payload = {
            "iss": self.issuer,
            "aud": subject_id,
            "exp": now + self.ttl,
            "iat": now,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        if not self.is_configured:
            raise TokenConfigError("Token signing secret is not configured")

        try:
            # Audience is checked by the caller against the expected user id
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                issuer=self.issuer,
                options={"verify_aud": False},
            )
        except ExpiredSignatureError as exc:
            raise TokenExpiredError("Token has expired") from exc
        except JWTError as exc:
            raise TokenInvalidError("Token is invalid") from exc

        subject_id = payload.get("aud")
        expires_at = payload.get("exp")
        if not isinstance(subject_id, str) or not subject_id or expires_at is None:
            raise TokenInvalidError("Token is missing required claims")

        return TokenClaims(
            subject_id=subject_id,
            expires_at=datetime.fromtimestamp(expires_at, UTC),
        )
