"""
Login Use Case

Verifies a username/password pair. No session or token is issued.
"""

from account_service.libs.result import Error, Result, Return
from account_service.app.services.password_hasher import IPasswordHasher
from account_service.app.services.unit_of_work import UnitOfWork
from .dtos import LoginResponse
from .errors import ErrorCode


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Username and password are both required
    - Unknown username and wrong password are reported as distinct errors
    - Password comparison is delegated to the hasher (bcrypt checkpw)
    """

    def __init__(self, uow: UnitOfWork, password_hasher: IPasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    async def execute(self, username: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            username: Account username
            password: Plain text password

        Returns:
            Result with LoginResponse, or Error
            (VALIDATION_ERROR, USER_NOT_FOUND, INCORRECT_PASSWORD)
        """
        if not username or not password:
            return Return.err(
                Error(ErrorCode.VALIDATION_ERROR, "All fields are required.")
            )

        async with self.uow:
            account = await self.uow.accounts.get_by_username(username)
            if account is None:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND, "User not found."))

            if not self.password_hasher.verify(password, account.password_hash):
                return Return.err(
                    Error(ErrorCode.INCORRECT_PASSWORD, "Incorrect password.")
                )

            return Return.ok(
                LoginResponse(message="Login successful!", username=account.username)
            )
