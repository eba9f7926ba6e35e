"""
Forgot Password Use Case

Issues a password reset token and emails the reset link.
"""

import logging
from datetime import timedelta
from urllib.parse import urlencode

from account_service.libs.result import Error, Result, Return
from account_service.app.services.notifier import INotifier, NotificationError
from account_service.app.services.token_generator import ITokenGenerator
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain.base import utcnow
from .dtos import ForgotPasswordResponse
from .errors import ErrorCode

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_TTL = timedelta(minutes=30)
RESET_EMAIL_SUBJECT = "Password Reset"


def build_reset_link(base_url: str, token: str) -> str:
    return f"{base_url.rstrip('/')}/reset-password?{urlencode({'token': token})}"


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - Unknown email fails with USER_NOT_FOUND
    - Token is random (see ITokenGenerator) and expires after token_ttl
    - A new request replaces any pending token
    - The token is committed before the email is sent; a delivery failure
      returns NOTIFICATION_FAILED but leaves the token in place
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_generator: ITokenGenerator,
        notifier: INotifier,
        reset_link_base_url: str,
        token_ttl: timedelta = DEFAULT_TOKEN_TTL,
    ):
        self.uow = uow
        self.token_generator = token_generator
        self.notifier = notifier
        self.reset_link_base_url = reset_link_base_url
        self.token_ttl = token_ttl

    async def execute(self, email: str) -> Result[ForgotPasswordResponse]:
        """
        Execute forgot password use case.

        Args:
            email: Account email address

        Returns:
            Result with ForgotPasswordResponse, or Error
            (VALIDATION_ERROR, USER_NOT_FOUND, NOTIFICATION_FAILED)
        """
        if not email:
            return Return.err(Error(ErrorCode.VALIDATION_ERROR, "Email is required."))

        async with self.uow:
            account = await self.uow.accounts.get_by_email(email)
            if account is None:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND, "User not found."))

            token = self.token_generator.generate()
            account.issue_reset_token(token, utcnow() + self.token_ttl)
            await self.uow.accounts.update(account)
            await self.uow.commit()

            recipient = account.email

        reset_link = build_reset_link(self.reset_link_base_url, token)
        html_body = f'<p>Click <a href="{reset_link}">here</a> to reset your password.</p>'

        try:
            await self.notifier.send(recipient, RESET_EMAIL_SUBJECT, html_body)
        except NotificationError:
            logger.exception("Failed to send reset email to %s", recipient)
            return Return.err(
                Error(ErrorCode.NOTIFICATION_FAILED, "Failed to send reset email.")
            )

        logger.info("Reset email sent to %s", recipient)
        return Return.ok(
            ForgotPasswordResponse(message="Reset link sent to your email.")
        )
