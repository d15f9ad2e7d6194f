"""
Forget Password Use Case

Builds a password reset link carrying an identity token for the user.
The link is returned to the caller; nothing is sent out of band.
"""

import logging
from typing import Optional

from libs.result import Error, Result, Return
from src.app import errors
from src.app.services.token_service import ITokenService, TokenConfigError
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ForgetPasswordResponse

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Something went wrong, please try again"


class ForgetPasswordUseCase:
    """
    Use case for requesting a password reset link.

    Business Rules:
    - Unknown email is reported as not found, naming the email
      (unlike login, this endpoint reveals whether an account exists)
    - Link format: {reset_url_base}/{user_id}/{token}
    - Token audience is the user id; it stays valid until it expires
    """

    def __init__(
        self, uow: UnitOfWork, token_service: ITokenService, reset_url_base: str
    ):
        self.uow = uow
        self.token_service = token_service
        self.reset_url_base = reset_url_base

    async def execute(self, email: Optional[str]) -> Result[ForgetPasswordResponse]:
        """
        Execute forget password use case.

        Args:
            email: User's email address

        Returns:
            Result with the reset link, or Error
        """
        if not email:
            logger.warning("forgetPassword: Missing email")
            return Return.err(Error(errors.MISSING_FIELDS, "Email is required"))

        try:
            async with self.uow:
                user = await self.uow.users.get_by_email(email)
                user_id = str(user.id) if user is not None else None
        except Exception:
            logger.exception("forgetPassword: Store lookup failed (email=%s)", email)
            return Return.err(Error(errors.UNKNOWN_ERROR, SERVER_ERROR_MESSAGE))

        if user_id is None:
            logger.error("forgetPassword: User not found (email=%s)", email)
            return Return.err(
                Error(errors.USER_NOT_FOUND, f"User not found with this email {email}")
            )

        if not self.reset_url_base:
            logger.error("forgetPassword: Reset URL is not configured")
            return Return.err(
                Error(errors.SERVER_CONFIG_ERROR, "Server configuration error")
            )

        try:
            token = self.token_service.issue(user_id)
        except TokenConfigError:
            logger.error("forgetPassword: Token signing secret is not configured")
            return Return.err(
                Error(errors.SERVER_CONFIG_ERROR, "Server configuration error")
            )
        except Exception:
            logger.exception(
                "forgetPassword: Token issuance failed (user_id=%s)", user_id
            )
            return Return.err(Error(errors.UNKNOWN_ERROR, SERVER_ERROR_MESSAGE))

        link = f"{self.reset_url_base.rstrip('/')}/{user_id}/{token}"

        logger.info("forgetPassword: Reset link generated (user_id=%s)", user_id)

        return Return.ok(
            ForgetPasswordResponse(
                message="Password reset link generated",
                reset_password_link=link,
            )
        )
