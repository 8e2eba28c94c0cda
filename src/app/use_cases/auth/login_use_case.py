"""
Login Use Case

Authenticates a player by handle with per-(handle, IP) throttling.
"""

import math
from datetime import timedelta
from typing import Any

from libs.result import Error, Result, Return
from src.app.services.identity_provider import IdentityProvider
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, LoginThrottle
from .dtos import LoginResult

LOCK_STEP = 10


def calc_lock_seconds(failed_count: int) -> int:
    """Lock duration after the given number of consecutive failures"""
    if failed_count >= 30:
        return 5 * 60
    if failed_count >= 20:
        return 2 * 60
    if failed_count >= 10:
        return 30
    return 0


def lock_message(lock_seconds: int) -> str:
    if lock_seconds >= 300:
        return "Too many failed attempts. Please wait 5 minutes and try again."
    if lock_seconds >= 120:
        return "Too many failed attempts. Please wait 2 minutes and try again."
    return "Too many failed attempts. Please wait 30 seconds and try again."


def remaining_attempts_hint(failed_count: int) -> str:
    next_lock_at = math.ceil(failed_count / LOCK_STEP) * LOCK_STEP
    remaining = next_lock_at - failed_count
    if remaining == 1:
        return "The next failure will trigger a wait."
    return f"{remaining} more failures will trigger a wait."


class LoginUseCase:
    """
    Use case for player login.

    Business Rules:
    - Handles never contain "@"; the identity store knows the player as
      "<handle>@<auth_email_domain>"
    - A locked (handle, ip) pair is rejected before credentials are checked
    - Each failure increments failed_count; 10/20/30 failures lock the pair
      for 30s/2min/5min
    - Success resets the counter
    """

    def __init__(
        self,
        uow: UnitOfWork,
        identity_provider: IdentityProvider,
        auth_email_domain: str,
    ):
        self.uow = uow
        self.identity_provider = identity_provider
        self.auth_email_domain = auth_email_domain

    async def execute(self, handle: Any, password: Any, ip: str) -> Result[LoginResult]:
        """
        Execute login use case.

        Errors:
            - INPUT_MISSING: handle or password missing
            - INVALID_HANDLE: handle contains "@"
            - LOCKED: too many failures (details.remainingSec)
            - INVALID: wrong credentials (details.hint)
        """
        if not handle or not password or not isinstance(handle, str) or not isinstance(password, str):
            return Return.err(Error("INPUT_MISSING", "Input is missing."))
        if "@" in handle:
            return Return.err(Error("INVALID_HANDLE", "User ID cannot contain '@'."))

        async with self.uow:
            throttle = await self.uow.login_throttles.get(handle, ip)
            now = utcnow()

            locked_until = throttle.locked_until if throttle else None
            if locked_until is not None and locked_until > now:
                remaining_sec = math.ceil((locked_until - now).total_seconds())
                return Return.err(
                    Error(
                        "LOCKED",
                        f"Too many failed attempts. Please wait {remaining_sec} seconds and try again.",
                        details={"remainingSec": remaining_sec},
                    )
                )

            auth_email = f"{handle}@{self.auth_email_domain}"
            sign_in = await self.identity_provider.sign_in(auth_email, password)

            if sign_in.is_err():
                failed_count = (throttle.failed_count if throttle else 0) + 1
                lock_seconds = calc_lock_seconds(failed_count)
                await self.uow.login_throttles.upsert(
                    LoginThrottle(
                        user_id=handle,
                        ip=ip,
                        failed_count=failed_count,
                        locked_until=now + timedelta(seconds=lock_seconds) if lock_seconds else None,
                        updated_at=now,
                    )
                )
                await self.uow.commit()

                if lock_seconds > 0:
                    return Return.err(
                        Error(
                            "LOCKED",
                            lock_message(lock_seconds),
                            details={"remainingSec": lock_seconds},
                        )
                    )
                return Return.err(
                    Error(
                        "INVALID",
                        "Invalid user ID or password.",
                        details={"hint": remaining_attempts_hint(failed_count)},
                    )
                )

            user = sign_in.value
            user_id = user.id
            await self.uow.login_throttles.upsert(
                LoginThrottle(
                    user_id=handle,
                    ip=ip,
                    failed_count=0,
                    locked_until=None,
                    updated_at=now,
                )
            )
            await self.uow.audit_events.create(
                AuditEvent(user_id=user_id, action="login", event_metadata={"ip": ip})
            )
            await self.uow.commit()

        return Return.ok(LoginResult(user_id=str(user_id), handle=handle))
