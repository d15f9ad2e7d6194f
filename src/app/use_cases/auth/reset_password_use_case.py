"""
Reset Password Use Case

Replaces a user's password hash after verifying a reset token bound to
that user.
"""

import logging
from datetime import datetime
from typing import Optional

from libs.result import Error, Result, Return
from src.app import errors
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.token_service import (
    ITokenService,
    TokenConfigError,
    TokenError,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import parse_uuid
from .dtos import ResetPasswordResponse

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Something went wrong, please try again"


class ResetPasswordUseCase:
    """
    Use case for resetting a password with a token from forget-password.

    Business Rules:
    - User id and token are required
    - Password and confirmation are required and must match exactly
    - Invalid and expired tokens produce the same error
    - Token audience must equal the user id exactly
    - New password hashed with the cost factor configured at call time
    - No optimistic locking: concurrent resets are last-write-wins
    - Caller must log in again; no token is returned
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_service: ITokenService,
        password_hasher: IPasswordHasher,
    ):
        self.uow = uow
        self.token_service = token_service
        self.password_hasher = password_hasher

    def _validate_input(
        self,
        user_id: Optional[str],
        token: Optional[str],
        password: Optional[str],
        confirm_password: Optional[str],
    ) -> Result[None]:
        if not user_id or not token:
            logger.warning(
                "resetPassword: Missing id or token in params (user_id=%s)",
                user_id,
            )
            return Return.err(
                Error(errors.MISSING_PARAMS, "User ID and token are required")
            )

        if not password or not confirm_password:
            logger.warning(
                "resetPassword: Missing password or confirmPassword (user_id=%s)",
                user_id,
            )
            return Return.err(
                Error(
                    errors.MISSING_FIELDS,
                    "Password and confirm password are required",
                )
            )

        if password != confirm_password:
            logger.warning(
                "resetPassword: Passwords do not match (user_id=%s)", user_id
            )
            return Return.err(
                Error(errors.PASSWORD_MISMATCH, "Passwords do not match")
            )

        return Return.ok(None)

    async def execute(
        self,
        user_id: Optional[str],
        token: Optional[str],
        password: Optional[str],
        confirm_password: Optional[str],
    ) -> Result[ResetPasswordResponse]:
        """
        Execute reset password use case.

        Args:
            user_id: User id from the reset link
            token: Token from the reset link
            password: New password
            confirm_password: Confirmation of the new password

        Returns:
            Result with an acknowledgement, or Error

        Errors:
            - MISSING_PARAMS, MISSING_FIELDS, PASSWORD_MISMATCH: bad input
            - USER_NOT_FOUND: no user with this id
            - INVALID_TOKEN: token invalid or expired
            - TOKEN_USER_MISMATCH: token was issued for another user
            - SERVER_CONFIG_ERROR: signing secret missing
        """
        validation = self._validate_input(user_id, token, password, confirm_password)
        if validation.is_err():
            return Return.err(validation.error)

        try:
            async with self.uow:
                user_uuid = parse_uuid(user_id)
                user = (
                    await self.uow.users.get_by_id(user_uuid)
                    if user_uuid is not None
                    else None
                )
                if user is None:
                    logger.error(
                        "resetPassword: User not found (user_id=%s)", user_id
                    )
                    return Return.err(Error(errors.USER_NOT_FOUND, "User not found"))

                try:
                    claims = self.token_service.verify(token)
                except TokenConfigError:
                    logger.error(
                        "resetPassword: Token signing secret is not configured"
                    )
                    return Return.err(
                        Error(errors.SERVER_CONFIG_ERROR, "Server configuration error")
                    )
                except TokenError as exc:
                    logger.error(
                        "resetPassword: Invalid or expired token (user_id=%s, reason=%s)",
                        user_id, type(exc).__name__,
                    )
                    return Return.err(
                        Error(errors.INVALID_TOKEN, "Invalid or expired token")
                    )

                if claims.subject_id != user_id:
                    logger.error(
                        "resetPassword: Token userId mismatch (token_user_id=%s, request_user_id=%s)",
                        claims.subject_id, user_id,
                    )
                    return Return.err(
                        Error(errors.TOKEN_USER_MISMATCH, "Invalid token for this user")
                    )

                user.password_hash = await self.password_hasher.hash(password)
                user.updated_at = datetime.utcnow()
                await self.uow.users.update(user)

                await self.uow.commit()
        except Exception:
            logger.exception("resetPassword: Unexpected error (user_id=%s)", user_id)
            return Return.err(Error(errors.UNKNOWN_ERROR, SERVER_ERROR_MESSAGE))

        logger.info(
            "resetPassword: Password updated successfully (user_id=%s)", user_id
        )

        return Return.ok(ResetPasswordResponse(message="Password updated successfully"))
