"""
Request Password Reset Use Case

Issues a single-use reset token and emails the reset link.
"""

import hashlib
import hmac
import logging
import secrets
from datetime import timedelta
from typing import Any, Callable, Optional

from libs.result import Result, Return
from src.app.services.email_sender import EmailSender, OutgoingEmail
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, PasswordResetToken
from .dtos import OkResponse

logger = logging.getLogger(__name__)

RESET_TOKEN_BYTES = 32


def hash_reset_token(token: str) -> str:
    """SHA-256 hex digest stored in place of the raw secret"""
    return hashlib.sha256(token.encode()).hexdigest()


def generate_reset_token() -> str:
    return secrets.token_hex(RESET_TOKEN_BYTES)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class RequestPasswordResetUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - Lookup is by login handle; the claimed recovery email must match the
      stored one (trimmed, case-insensitive)
    - 32 random bytes, hex encoded; only the SHA-256 digest is stored
    - Token expires after ttl_minutes (30 by default)
    - No account enumeration: every branch, including storage and email
      failures, returns the same OkResponse
    - With a schedule callable the email is sent after the response, so
      response time does not reveal whether a profile matched
    """

    def __init__(
        self,
        uow: UnitOfWork,
        email_sender: EmailSender,
        app_origin: str,
        ttl_minutes: int = 30,
        schedule: Optional[Callable[..., Any]] = None,
    ):
        self.uow = uow
        self.email_sender = email_sender
        self.app_origin = app_origin.rstrip("/")
        self.ttl_minutes = ttl_minutes
        self.schedule = schedule

    async def execute(self, user_id: Any, recovery_email: Any) -> Result[OkResponse]:
        """
        Execute request password reset use case.

        Args:
            user_id: Login handle as submitted (may be any JSON value)
            recovery_email: Claimed recovery email as submitted

        Returns:
            Always Result with OkResponse
        """
        try:
            await self._issue(user_id, recovery_email)
        except Exception:
            logger.exception("Password reset request failed")

        return Return.ok(OkResponse())

    async def _issue(self, user_id: Any, recovery_email: Any) -> None:
        if not user_id or not recovery_email:
            return
        if not isinstance(user_id, str) or not isinstance(recovery_email, str):
            return
        if "@" in user_id:
            return

        async with self.uow:
            profile = await self.uow.profiles.get_by_handle(user_id)
            if profile is None:
                return

            saved_email = normalize_email(profile.recovery_email or "")
            if not saved_email:
                return
            if not hmac.compare_digest(
                normalize_email(recovery_email).encode(), saved_email.encode()
            ):
                return

            profile_id = profile.id
            reset_token = generate_reset_token()
            password_reset_token = PasswordResetToken(
                user_id=profile_id,
                token_hash=hash_reset_token(reset_token),
                expires_at=utcnow() + timedelta(minutes=self.ttl_minutes),
            )
            await self.uow.password_reset_tokens.create(password_reset_token)

            audit_event = AuditEvent(
                user_id=profile_id,
                action="password_reset_requested",
                event_metadata={"token_id": str(password_reset_token.id)},
            )
            await self.uow.audit_events.create(audit_event)

            await self.uow.commit()

        reset_url = f"{self.app_origin}/user/reset-password?token={reset_token}"
        email = self._build_email(saved_email, reset_url)
        if self.schedule is not None:
            self.schedule(self._deliver, email, profile_id)
        else:
            await self._deliver(email, profile_id)

    async def _deliver(self, email: OutgoingEmail, profile_id) -> None:
        try:
            await self.email_sender.send(email)
        except Exception:
            logger.exception(f"Password reset email failed for profile {profile_id}")
            return
        logger.info(f"Password reset link sent for profile {profile_id}")

    def _build_email(self, to: str, reset_url: str) -> OutgoingEmail:
        text = (
            "A password reset was requested for your HimaQ account.\n\n"
            f"Use the link below to choose a new password (valid for {self.ttl_minutes} minutes):\n"
            f"{reset_url}\n\n"
            "If you did not request this, you can ignore this email."
        )
        html = (
            "<p>A password reset was requested for your HimaQ account.</p>"
            f"<p>Use the link below to choose a new password (valid for {self.ttl_minutes} minutes).</p>"
            f'<p><a href="{reset_url}">{reset_url}</a></p>'
            "<p>If you did not request this, you can ignore this email.</p>"
        )
        return OutgoingEmail(
            to=to,
            subject="[HimaQ] Password reset link",
            text=text,
            html=html,
        )
