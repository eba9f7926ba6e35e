import logging
import secrets

from account_service.libs.result import Error, Result, Return
from account_service.app.repositories.account_repository import DuplicateAccountError
from account_service.app.services.password_hasher import IPasswordHasher
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain.entities import Account
from .errors import ErrorCode
from .signup_dto import SignupCommand, SignupResponse

logger = logging.getLogger(__name__)

DEFAULT_MAX_SUFFIX_ATTEMPTS = 100


class SignupUseCase:
    """
    Signup Use Case - normal and Google signups

    Command/Response Pattern:
    - Input: SignupCommand
    - Output: Result[SignupResponse]

    Business Logic:
    1. Reject missing username, email or password
    2. Existing email: Google flow logs the user in (no password check),
       normal flow fails with EMAIL_ALREADY_EXISTS
    3. Taken username: Google flow appends the smallest free _N suffix,
       normal flow fails with USERNAME_ALREADY_EXISTS
    4. Hash password and persist the account
    5. A unique constraint hit on insert (concurrent signup) is resolved
       like the pre-checks above; the Google flow retries once with the
       next free suffix
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: IPasswordHasher,
        max_suffix_attempts: int = DEFAULT_MAX_SUFFIX_ATTEMPTS,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.max_suffix_attempts = max_suffix_attempts

    async def execute(self, command: SignupCommand) -> Result[SignupResponse]:
        """
        Execute signup use case

        Args:
            command: SignupCommand with username, email, password, is_google

        Returns:
            Result[SignupResponse] with the final username, or Error
            (VALIDATION_ERROR, EMAIL_ALREADY_EXISTS, USERNAME_ALREADY_EXISTS)
        """
        if not command.username or not command.email or not command.password:
            return Return.err(
                Error(ErrorCode.VALIDATION_ERROR, "All fields are required.")
            )

        async with self.uow:
            existing_account = await self.uow.accounts.get_by_email(command.email)
            if existing_account:
                return self._existing_email(existing_account, command.is_google)

            username = command.username
            if await self.uow.accounts.get_by_username(username):
                if not command.is_google:
                    return self._username_taken()
                username = await self._generate_unique_username(command.username)

            password_hash = self.password_hasher.hash(command.password)

            try:
                account = await self._persist(username, command.email, password_hash)
            except DuplicateAccountError:
                # Lost the race against a concurrent signup
                await self.uow.rollback()
                existing_account = await self.uow.accounts.get_by_email(command.email)
                if existing_account:
                    return self._existing_email(existing_account, command.is_google)
                if not command.is_google:
                    return self._username_taken()

                # Google flow: pick the next free suffix once more
                username = await self._generate_unique_username(command.username)
                try:
                    account = await self._persist(username, command.email, password_hash)
                except DuplicateAccountError:
                    await self.uow.rollback()
                    return self._username_taken()

            logger.info(
                "Account created: username=%s google=%s", account.username, command.is_google
            )
            return Return.ok(
                SignupResponse(message="Signup successful!", username=account.username)
            )

    async def _persist(self, username: str, email: str, password_hash: str) -> Account:
        account = Account(username=username, email=email, password_hash=password_hash)
        account = await self.uow.accounts.create(account)
        await self.uow.commit()
        return account

    def _existing_email(self, account: Account, is_google: bool) -> Result[SignupResponse]:
        if is_google:
            return Return.ok(
                SignupResponse(
                    message="User already exists, logged in",
                    username=account.username,
                    created=False,
                )
            )
        return Return.err(Error(ErrorCode.EMAIL_ALREADY_EXISTS, "Email already exists."))

    def _username_taken(self) -> Result[SignupResponse]:
        return Return.err(
            Error(ErrorCode.USERNAME_ALREADY_EXISTS, "Username already exists.")
        )

    async def _generate_unique_username(self, base_username: str) -> str:
        """First free base_1, base_2, ...; random suffix once attempts run out."""
        for counter in range(1, self.max_suffix_attempts + 1):
            candidate = f"{base_username}_{counter}"
            if await self.uow.accounts.get_by_username(candidate) is None:
                return candidate

        logger.warning(
            "No free numeric suffix for %s after %d attempts, using random suffix",
            base_username,
            self.max_suffix_attempts,
        )
        return f"{base_username}_{secrets.token_hex(3)}"
