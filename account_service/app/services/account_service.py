from datetime import timedelta

from account_service.libs.result import Result
from account_service.app.services.notifier import INotifier
from account_service.app.services.password_hasher import IPasswordHasher
from account_service.app.services.token_generator import ITokenGenerator
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth import (
    ForgotPasswordResponse,
    ForgotPasswordUseCase,
    LoginResponse,
    LoginUseCase,
    ResetPasswordResponse,
    ResetPasswordUseCase,
    SignupCommand,
    SignupResponse,
    SignupUseCase,
)
from account_service.app.use_cases.auth.forgot_password_use_case import DEFAULT_TOKEN_TTL
from account_service.app.use_cases.auth.signup_use_case import DEFAULT_MAX_SUFFIX_ATTEMPTS


class AccountService:
    """
    Entry point for the account operations.

    Holds the injected collaborators (unit of work, hasher, token generator,
    notifier) and builds the matching use case per call. Keeps no state of
    its own between calls.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: IPasswordHasher,
        token_generator: ITokenGenerator,
        notifier: INotifier,
        reset_link_base_url: str,
        reset_token_ttl: timedelta = DEFAULT_TOKEN_TTL,
        max_suffix_attempts: int = DEFAULT_MAX_SUFFIX_ATTEMPTS,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_generator = token_generator
        self.notifier = notifier
        self.reset_link_base_url = reset_link_base_url
        self.reset_token_ttl = reset_token_ttl
        self.max_suffix_attempts = max_suffix_attempts

    async def signup(
        self, username: str, email: str, password: str, is_google: bool = False
    ) -> Result[SignupResponse]:
        command = SignupCommand(
            username=username or "",
            email=email or "",
            password=password or "",
            is_google=is_google,
        )
        use_case = SignupUseCase(self.uow, self.password_hasher, self.max_suffix_attempts)
        return await use_case.execute(command)

    async def login(self, username: str, password: str) -> Result[LoginResponse]:
        use_case = LoginUseCase(self.uow, self.password_hasher)
        return await use_case.execute(username, password)

    async def forgot_password(self, email: str) -> Result[ForgotPasswordResponse]:
        use_case = ForgotPasswordUseCase(
            self.uow,
            self.token_generator,
            self.notifier,
            self.reset_link_base_url,
            self.reset_token_ttl,
        )
        return await use_case.execute(email)

    async def reset_password(self, token: str, new_password: str) -> Result[ResetPasswordResponse]:
        use_case = ResetPasswordUseCase(self.uow, self.password_hasher)
        return await use_case.execute(token, new_password)
