"""
Use Case: Purge Expired Password Reset Tokens

Keeps password_reset_tokens bounded. Meant to be triggered periodically by
an external scheduler through the admin API.
"""

from datetime import timedelta

from pydantic import BaseModel

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent


class PurgeResetTokensResponse(BaseModel):
    """Response DTO for PurgeResetTokensUseCase"""

    status: str
    deleted: int
    expired_before: str


class PurgeResetTokensUseCase:
    """
    Delete reset tokens that expired more than retention_hours ago.

    Business Logic:
    1. Compute cutoff = now - retention
    2. Delete every token with expires_at < cutoff, used or not
    3. Record an audit event with the count
    """

    def __init__(self, uow: UnitOfWork, retention_hours: int = 24):
        self.uow = uow
        self.retention_hours = retention_hours

    async def execute(self) -> Result[PurgeResetTokensResponse]:
        cutoff = utcnow() - timedelta(hours=self.retention_hours)

        async with self.uow:
            deleted = await self.uow.password_reset_tokens.delete_expired(cutoff)

            await self.uow.audit_events.create(
                AuditEvent(
                    user_id=None,
                    action="reset_tokens_purged",
                    event_metadata={"deleted": deleted, "expired_before": cutoff.isoformat()},
                )
            )
            await self.uow.commit()

        return Return.ok(
            PurgeResetTokensResponse(
                status="purged", deleted=deleted, expired_before=cutoff.isoformat()
            )
        )
