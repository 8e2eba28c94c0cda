"""
Confirm Password Reset Use Case

Validates a reset token and changes the password exactly once.
"""

import logging
import re
from typing import Any

from libs.result import Error, Result, Return
from src.app.services.identity_provider import IdentityProvider
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent
from .dtos import OkResponse
from .request_password_reset_use_case import hash_reset_token

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 12

PASSWORD_RULES = (
    (re.compile(r"[A-Z]"), "Include at least one upper-case letter."),
    (re.compile(r"[a-z]"), "Include at least one lower-case letter."),
    (re.compile(r"[0-9]"), "Include at least one digit."),
)


def validate_password(password: str) -> Result[None]:
    """
    Validate password strength.

    Rules are checked in order and the first failing rule is reported.
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        return Return.err(
            Error(
                "WEAK_PASSWORD",
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.",
            )
        )
    for pattern, message in PASSWORD_RULES:
        if not pattern.search(password):
            return Return.err(Error("WEAK_PASSWORD", message))
    return Return.ok(None)


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming a password reset.

    Business Rules:
    - Input and password strength are validated before any lookup
    - Token is found by the SHA-256 digest of the submitted secret
    - Checks in order: unknown, already used, expired
    - Consumption is a conditional update on used_at; losing a race reports
      TOKEN_ALREADY_USED
    - The password change and the consumption commit together; a failed
      password change leaves the token unused
    """

    def __init__(self, uow: UnitOfWork, identity_provider: IdentityProvider):
        self.uow = uow
        self.identity_provider = identity_provider

    async def execute(self, token: Any, new_password: Any) -> Result[OkResponse]:
        """
        Execute confirm password reset use case.

        Args:
            token: Raw reset secret from the emailed link
            new_password: New password to set

        Returns:
            Result with OkResponse, or Error

        Errors:
            - INPUT_MISSING / INPUT_INVALID: missing or non-string fields
            - WEAK_PASSWORD: a strength rule failed
            - INVALID_TOKEN: no token with this digest
            - TOKEN_ALREADY_USED: token consumed before (or concurrently)
            - TOKEN_EXPIRED: token past expires_at
            - SAME_PASSWORD: new password equals the current one
            - PASSWORD_UPDATE_FAILED: identity provider rejected the change
        """
        if not token or not new_password:
            return Return.err(Error("INPUT_MISSING", "Input is missing."))
        if not isinstance(token, str) or not isinstance(new_password, str):
            return Return.err(Error("INPUT_INVALID", "Input is invalid."))

        password_validation = validate_password(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        token_hash = hash_reset_token(token)

        async with self.uow:
            reset_token = await self.uow.password_reset_tokens.get_by_token_hash(token_hash)

            if reset_token is None:
                return Return.err(
                    Error("INVALID_TOKEN", "The link is invalid or has expired.")
                )

            if reset_token.is_used():
                return Return.err(
                    Error("TOKEN_ALREADY_USED", "This link has already been used.")
                )

            now = utcnow()
            if reset_token.is_expired(now):
                return Return.err(Error("TOKEN_EXPIRED", "This link has expired."))

            consumed = await self.uow.password_reset_tokens.mark_used(reset_token.id, now)
            if not consumed:
                return Return.err(
                    Error("TOKEN_ALREADY_USED", "This link has already been used.")
                )

            update_result = await self.identity_provider.update_password(
                reset_token.user_id, new_password
            )
            if update_result.is_err():
                error = update_result.error
                logger.error(
                    f"Password update failed for user {reset_token.user_id}: {error.code}"
                )
                if error.code == "SAME_PASSWORD":
                    return Return.err(
                        Error(
                            "SAME_PASSWORD",
                            "The new password must differ from the current password.",
                        )
                    )
                return Return.err(
                    Error("PASSWORD_UPDATE_FAILED", "Failed to update the password.")
                )

            audit_event = AuditEvent(
                user_id=reset_token.user_id,
                action="password_reset_confirmed",
                event_metadata={"token_id": str(reset_token.id)},
            )
            await self.uow.audit_events.create(audit_event)

            await self.uow.commit()

        return Return.ok(OkResponse())
