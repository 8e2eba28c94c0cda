"""
Integration tests for the reset token purge endpoint
"""
from datetime import timedelta
from uuid import UUID

import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.domain.base import utcnow
from src.domain.entities import PasswordResetToken
from tests.fixtures.players import create_player

PURGE_URL = "/api/admin/password-reset-tokens/purge"


@pytest.mark.asyncio
async def test_purge_requires_admin_key(client: AsyncClient):
    response = await client.post(PURGE_URL)
    assert response.status_code == 401

    response = await client.post(PURGE_URL, headers={"X-Admin-API-Key": "wrong"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_purge_deletes_only_tokens_past_retention(
    client: AsyncClient, db_session: AsyncSession
):
    user_id = UUID(await create_player(db_session))
    now = utcnow()
    db_session.add_all(
        [
            PasswordResetToken(
                user_id=user_id, token_hash="a" * 64, expires_at=now - timedelta(hours=30)
            ),
            PasswordResetToken(
                user_id=user_id,
                token_hash="b" * 64,
                expires_at=now - timedelta(hours=25),
                used_at=now - timedelta(hours=25, minutes=10),
            ),
            PasswordResetToken(
                user_id=user_id, token_hash="c" * 64, expires_at=now - timedelta(hours=2)
            ),
            PasswordResetToken(
                user_id=user_id, token_hash="d" * 64, expires_at=now + timedelta(minutes=20)
            ),
        ]
    )
    await db_session.commit()

    response = await client.post(
        PURGE_URL, headers={"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "purged"
    assert data["deleted"] == 2

    result = await db_session.exec(select(PasswordResetToken.token_hash))
    assert sorted(result.all()) == ["c" * 64, "d" * 64]
