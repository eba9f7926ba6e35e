from datetime import timedelta

from fastapi import Depends
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from account_service.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from account_service.adapter.services.email_notifier import EmailNotifier
from account_service.adapter.services.secure_token_generator import SecureTokenGenerator
from account_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from account_service.app.services.account_service import AccountService
from account_service.app.services.notifier import INotifier
from account_service.app.services.password_hasher import IPasswordHasher
from account_service.app.services.token_generator import ITokenGenerator
from account_service.app.services.unit_of_work import UnitOfWork

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_password_hasher() -> IPasswordHasher:
    return BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)


def get_token_generator() -> ITokenGenerator:
    return SecureTokenGenerator()


def get_notifier() -> INotifier:
    return EmailNotifier(ApplicationConfig)


def get_account_service(
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    token_generator: ITokenGenerator = Depends(get_token_generator),
    notifier: INotifier = Depends(get_notifier),
) -> AccountService:
    """Build an AccountService with per-request collaborators."""
    return AccountService(
        uow,
        password_hasher,
        token_generator,
        notifier,
        reset_link_base_url=ApplicationConfig.FRONTEND_BASE_URL,
        reset_token_ttl=timedelta(minutes=ApplicationConfig.RESET_TOKEN_TTL_MINUTES),
        max_suffix_attempts=ApplicationConfig.USERNAME_SUFFIX_MAX_ATTEMPTS,
    )
