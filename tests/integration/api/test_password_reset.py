"""
Integration tests for the password reset flow

Request a link, then confirm it, against a real SQLite database.
"""
from datetime import timedelta
from uuid import UUID

import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.identity_provider import verify_password
from src.app.use_cases.auth.request_password_reset_use_case import hash_reset_token
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, PasswordResetToken, User
from tests.fixtures.players import DEFAULT_PASSWORD, create_player

REQUEST_URL = "/api/user/request-password-reset"
CONFIRM_URL = "/api/user/confirm-password-reset"
NEW_PASSWORD = "BrandNewPass123"


def token_from_email(email_sender) -> str:
    assert len(email_sender.sent) == 1
    return email_sender.sent[0].text.split("token=")[1].split()[0]


async def get_tokens(db_session: AsyncSession, user_id: str):
    stmt = select(PasswordResetToken).where(PasswordResetToken.user_id == UUID(user_id))
    result = await db_session.exec(stmt.execution_options(populate_existing=True))
    return result.all()


async def get_user(db_session: AsyncSession, user_id: str) -> User:
    stmt = select(User).where(User.id == UUID(user_id))
    result = await db_session.exec(stmt.execution_options(populate_existing=True))
    return result.one()


async def request_reset(client: AsyncClient, email_sender) -> str:
    response = await client.post(
        REQUEST_URL, json={"userId": "player1", "recoveryEmail": "player1@example.com"}
    )
    assert response.status_code == 200
    return token_from_email(email_sender)


@pytest.mark.asyncio
async def test_request_stores_hashed_token_and_emails_link(
    client: AsyncClient, db_session: AsyncSession, email_sender
):
    user_id = await create_player(db_session)

    response = await client.post(
        REQUEST_URL, json={"userId": "player1", "recoveryEmail": " PLAYER1@example.com "}
    )

    assert response.status_code == 200
    assert response.json() == {"ok": True}

    raw_token = token_from_email(email_sender)
    assert email_sender.sent[0].to == "player1@example.com"
    assert "/user/reset-password?token=" in email_sender.sent[0].text

    tokens = await get_tokens(db_session, user_id)
    assert len(tokens) == 1
    assert tokens[0].token_hash == hash_reset_token(raw_token)
    assert tokens[0].used_at is None
    remaining = tokens[0].expires_at - utcnow()
    assert timedelta(minutes=29) < remaining <= timedelta(minutes=30)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"userId": "player1", "recoveryEmail": "wrong@example.com"},
        {"userId": "nobody", "recoveryEmail": "player1@example.com"},
        {"userId": "player1@example.com", "recoveryEmail": "player1@example.com"},
        {"userId": 42, "recoveryEmail": "player1@example.com"},
        {"userId": "player1"},
        {},
    ],
)
async def test_request_never_reveals_account_state(
    client: AsyncClient, db_session: AsyncSession, email_sender, payload
):
    user_id = await create_player(db_session)

    response = await client.post(REQUEST_URL, json=payload)

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert email_sender.sent == []
    assert await get_tokens(db_session, user_id) == []


DEEPLY_NESTED = b"[" * 100000 + b"]" * 100000
MALFORMED_BODIES = [b"not json", b"\xff\xfe\x00", b"", DEEPLY_NESTED, b'["a list"]']


@pytest.mark.asyncio
@pytest.mark.parametrize("body", MALFORMED_BODIES, ids=["text", "binary", "empty", "nested", "list"])
async def test_request_with_malformed_body(client: AsyncClient, email_sender, body):
    response = await client.post(
        REQUEST_URL, content=body, headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert email_sender.sent == []


@pytest.mark.asyncio
@pytest.mark.parametrize("body", MALFORMED_BODIES, ids=["text", "binary", "empty", "nested", "list"])
async def test_confirm_with_malformed_body(client: AsyncClient, body):
    response = await client.post(
        CONFIRM_URL, content=body, headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Input is missing."


@pytest.mark.asyncio
async def test_confirm_changes_password_once(
    client: AsyncClient, db_session: AsyncSession, email_sender
):
    user_id = await create_player(db_session)
    raw_token = await request_reset(client, email_sender)

    response = await client.post(CONFIRM_URL, json={"token": raw_token, "newPassword": NEW_PASSWORD})

    assert response.status_code == 200
    assert response.json() == {"ok": True}

    user = await get_user(db_session, user_id)
    assert verify_password(NEW_PASSWORD, user.password_hash)
    assert not verify_password(DEFAULT_PASSWORD, user.password_hash)

    tokens = await get_tokens(db_session, user_id)
    assert tokens[0].used_at is not None

    # Second use of the same link
    response = await client.post(
        CONFIRM_URL, json={"token": raw_token, "newPassword": "AnotherPass1234"}
    )

    assert response.status_code == 400
    body = response.json()
    assert body["ok"] is False
    assert body["code"] == "TOKEN_ALREADY_USED"
    assert body["message"] == "This link has already been used."

    user = await get_user(db_session, user_id)
    assert verify_password(NEW_PASSWORD, user.password_hash)


@pytest.mark.asyncio
async def test_confirm_writes_audit_events(
    client: AsyncClient, db_session: AsyncSession, email_sender
):
    await create_player(db_session)
    raw_token = await request_reset(client, email_sender)
    await client.post(CONFIRM_URL, json={"token": raw_token, "newPassword": NEW_PASSWORD})

    result = await db_session.exec(select(AuditEvent.action))
    actions = result.all()
    assert "password_reset_requested" in actions
    assert "password_reset_confirmed" in actions


@pytest.mark.asyncio
async def test_confirm_expired_token(client: AsyncClient, db_session: AsyncSession, email_sender):
    user_id = await create_player(db_session)
    raw_token = await request_reset(client, email_sender)

    token = (await get_tokens(db_session, user_id))[0]
    token.expires_at = utcnow() - timedelta(seconds=1)
    db_session.add(token)
    await db_session.commit()

    response = await client.post(CONFIRM_URL, json={"token": raw_token, "newPassword": NEW_PASSWORD})

    assert response.status_code == 400
    assert response.json()["code"] == "TOKEN_EXPIRED"
    assert response.json()["message"] == "This link has expired."

    user = await get_user(db_session, user_id)
    assert verify_password(DEFAULT_PASSWORD, user.password_hash)


@pytest.mark.asyncio
async def test_confirm_unknown_token(client: AsyncClient, db_session: AsyncSession):
    await create_player(db_session)

    response = await client.post(
        CONFIRM_URL, json={"token": "f" * 64, "newPassword": NEW_PASSWORD}
    )

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_TOKEN"
    assert response.json()["message"] == "The link is invalid or has expired."


@pytest.mark.asyncio
async def test_weak_password_does_not_consume_token(
    client: AsyncClient, db_session: AsyncSession, email_sender
):
    user_id = await create_player(db_session)
    raw_token = await request_reset(client, email_sender)

    response = await client.post(CONFIRM_URL, json={"token": raw_token, "newPassword": "weakpass"})

    assert response.status_code == 400
    assert response.json()["code"] == "WEAK_PASSWORD"
    tokens = await get_tokens(db_session, user_id)
    assert tokens[0].used_at is None


@pytest.mark.asyncio
async def test_same_password_leaves_token_usable(
    client: AsyncClient, db_session: AsyncSession, email_sender
):
    user_id = await create_player(db_session)
    raw_token = await request_reset(client, email_sender)

    response = await client.post(
        CONFIRM_URL, json={"token": raw_token, "newPassword": DEFAULT_PASSWORD}
    )

    assert response.status_code == 400
    assert response.json()["code"] == "SAME_PASSWORD"
    tokens = await get_tokens(db_session, user_id)
    assert tokens[0].used_at is None

    response = await client.post(CONFIRM_URL, json={"token": raw_token, "newPassword": NEW_PASSWORD})
    assert response.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload, code",
    [
        ({}, "INPUT_MISSING"),
        ({"token": "abc"}, "INPUT_MISSING"),
        ({"token": 123, "newPassword": NEW_PASSWORD}, "INPUT_INVALID"),
    ],
)
async def test_confirm_input_errors(client: AsyncClient, payload, code):
    response = await client.post(CONFIRM_URL, json=payload)

    assert response.status_code == 400
    assert response.json()["code"] == code
