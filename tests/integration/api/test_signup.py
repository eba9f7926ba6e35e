import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from account_service.domain.entities import Account
from tests.utils.json_compare import without_keys


async def count_accounts(db_session: AsyncSession) -> int:
    result = await db_session.exec(select(Account))
    return len(result.all())


@pytest.mark.asyncio
async def test_successful_signup(client: AsyncClient, db_session: AsyncSession, test_data):
    """New username and email

    Given no account exists for alice / a@x.com
    When I sign up
    Then I get 201 with my username
    And one Account is stored with a bcrypt hash, no reset token
    """
    response = await client.post("/signup", json=test_data.get_copy("signup_alice"))

    assert response.status_code == 201
    data = response.json()
    assert without_keys(data, "message") == {"username": "alice"}
    assert data["message"] == "Signup successful!"

    result = await db_session.exec(select(Account).where(Account.username == "alice"))
    account = result.one()
    assert account.email == "a@x.com"
    assert account.password_hash != "pw1"
    assert account.password_hash.startswith("$2b$")
    assert account.reset_token is None
    assert account.reset_token_expires_at is None


@pytest.mark.asyncio
async def test_signup_existing_email(client: AsyncClient, db_session: AsyncSession, test_data):
    """Same email, normal flow: 400 EMAIL_ALREADY_EXISTS, no second account"""
    await client.post("/signup", json=test_data.get_copy("signup_alice"))

    payload = test_data.get_copy("signup_alice")
    payload["username"] = "alice2"
    response = await client.post("/signup", json=payload)

    assert response.status_code == 400
    data = response.json()
    assert data["error"]["code"] == "EMAIL_ALREADY_EXISTS"
    assert "message" in data["error"]
    assert await count_accounts(db_session) == 1


@pytest.mark.asyncio
async def test_signup_existing_username(client: AsyncClient, db_session: AsyncSession, test_data):
    """Same username, normal flow: 400 USERNAME_ALREADY_EXISTS"""
    await client.post("/signup", json=test_data.get_copy("signup_alice"))

    payload = test_data.get_copy("signup_alice")
    payload["email"] = "other@x.com"
    response = await client.post("/signup", json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "USERNAME_ALREADY_EXISTS"
    assert await count_accounts(db_session) == 1


@pytest.mark.asyncio
async def test_google_signup_existing_email(client: AsyncClient, db_session: AsyncSession, test_data):
    """Same email, Google flow: 200 with the existing username, nothing created"""
    await client.post("/signup", json=test_data.get_copy("signup_alice"))

    response = await client.post("/signup", json={
        "username": "whoever",
        "email": "a@x.com",
        "password": "not-the-same",
        "isGoogle": True,
    })

    assert response.status_code == 200
    data = response.json()
    assert data == {"message": "User already exists, logged in", "username": "alice"}
    assert await count_accounts(db_session) == 1


@pytest.mark.asyncio
async def test_google_signup_taken_username(client: AsyncClient, db_session: AsyncSession, test_data):
    """signup(alice) then Google signup(alice, other email) -> alice_1"""
    first = await client.post("/signup", json=test_data.get_copy("signup_alice"))
    assert first.json()["username"] == "alice"

    response = await client.post("/signup", json=test_data.get_copy("signup_alice_google"))

    assert response.status_code == 201
    assert response.json()["username"] == "alice_1"

    third = await client.post("/signup", json={
        "username": "alice",
        "email": "c@z.com",
        "password": "pw3",
        "isGoogle": True,
    })
    assert third.json()["username"] == "alice_2"
    assert await count_accounts(db_session) == 3


@pytest.mark.asyncio
async def test_signup_missing_fields(client: AsyncClient, db_session: AsyncSession):
    """Missing or empty fields: 400 VALIDATION_ERROR"""
    response = await client.post("/signup", json={"username": "alice", "email": "a@x.com"})

    assert response.status_code == 400
    data = response.json()
    assert data["error"]["code"] == "VALIDATION_ERROR"
    assert "password" in data["error"]["message"]

    response = await client.post("/signup", json={
        "username": "",
        "email": "a@x.com",
        "password": "pw",
    })
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    assert await count_accounts(db_session) == 0


@pytest.mark.asyncio
async def test_signup_invalid_email(client: AsyncClient):
    response = await client.post("/signup", json={
        "username": "alice",
        "email": "not-an-email",
        "password": "pw",
    })

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
