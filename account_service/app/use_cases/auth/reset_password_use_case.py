"""
Reset Password Use Case

Consumes a reset token and sets a new password.
"""

import logging

from account_service.libs.result import Error, Result, Return
from account_service.app.services.password_hasher import IPasswordHasher
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain.base import utcnow
from .dtos import ResetPasswordResponse
from .errors import ErrorCode

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """
    Use case for confirming a password reset.

    Business Rules:
    - Token must match an account and expire strictly after now
    - Wrong and expired tokens are the same error (INVALID_TOKEN)
    - Token and expiry are cleared on success, so a token works once
    """

    def __init__(self, uow: UnitOfWork, password_hasher: IPasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    async def execute(self, token: str, new_password: str) -> Result[ResetPasswordResponse]:
        """
        Execute reset password use case.

        Args:
            token: Reset token from the emailed link
            new_password: New password to set

        Returns:
            Result with ResetPasswordResponse, or Error
            (VALIDATION_ERROR, INVALID_TOKEN)
        """
        if not token or not new_password:
            return Return.err(
                Error(ErrorCode.VALIDATION_ERROR, "Token and new password are required.")
            )

        async with self.uow:
            account = await self.uow.accounts.get_by_reset_token(token, utcnow())
            if account is None:
                return Return.err(
                    Error(ErrorCode.INVALID_TOKEN, "Invalid or expired token.")
                )

            account.password_hash = self.password_hasher.hash(new_password)
            account.clear_reset_token()
            await self.uow.accounts.update(account)
            await self.uow.commit()

            logger.info("Password reset for %s", account.username)
            return Return.ok(ResetPasswordResponse(message="Password reset successful."))
