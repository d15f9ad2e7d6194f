"""
Token Service port.

Issues and verifies signed, time-limited identity tokens whose audience is
the subject user id.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from pydantic import BaseModel


class TokenError(Exception):
    """Base class for token verification failures"""


class TokenInvalidError(TokenError):
    """Malformed token, bad signature, wrong issuer or missing audience"""


class TokenExpiredError(TokenError):
    """Signature is valid but the expiry has passed"""


class TokenConfigError(Exception):
    """Signing secret is not configured"""


class TokenClaims(BaseModel):
    """Verified token contents"""

    subject_id: str
    expires_at: datetime


class ITokenService(ABC):
    """Token service interface - application layer"""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """True when a signing secret is available"""
        pass

    @abstractmethod
    def issue(self, subject_id: str) -> str:
        """
        Issue a token for a subject.

        Raises:
            TokenConfigError: signing secret is missing
        """
        pass

    @abstractmethod
    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token and return its claims.

        Raises:
            TokenExpiredError: token expired
            TokenInvalidError: token cannot be trusted
            TokenConfigError: signing secret is missing
        """
        pass
