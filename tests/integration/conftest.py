import re

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from account_service.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from account_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from account_service.app.services.notifier import INotifier, NotificationError
from account_service.depends import get_notifier, get_password_hasher, get_unit_of_work


class RecordingNotifier(INotifier):
    """Keeps sent messages in memory; set fail=True to simulate an SMTP outage"""

    def __init__(self):
        self.sent = []
        self.fail = False

    async def send(self, to_address: str, subject: str, html_body: str) -> None:
        if self.fail:
            raise NotificationError("SMTP unavailable")
        self.sent.append((to_address, subject, html_body))

    def last_token(self) -> str:
        _, _, html_body = self.sent[-1]
        return re.search(r"token=([0-9a-f]+)", html_body).group(1)


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session, notifier):
    from httpx import ASGITransport
    from account_service.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_hasher] = lambda: BcryptPasswordHasher(rounds=4)
    app.dependency_overrides[get_notifier] = lambda: notifier

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
