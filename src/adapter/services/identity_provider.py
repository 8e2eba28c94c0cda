"""
Bcrypt-backed identity provider over the users table.
"""

from functools import lru_cache
from uuid import UUID

import bcrypt

from libs.result import Error, Result, Return
from src.app.services.identity_provider import IdentityProvider
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import User

BCRYPT_ROUNDS = 12
# bcrypt only looks at the first 72 bytes and newer releases reject longer input
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode()[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(BCRYPT_ROUNDS)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode())
    except ValueError:
        return False


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password("dummy-password-for-timing")


class BcryptIdentityProvider(IdentityProvider):
    """
    Identity provider storing bcrypt hashes (cost factor 12) in users.

    Works inside the caller's unit of work, so a password change commits or
    rolls back together with the rest of the use case.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def sign_in(self, email: str, password: str) -> Result[User]:
        user = await self.uow.users.get_by_email(email)

        if user is None:
            # Hash anyway so unknown accounts take as long as wrong passwords
            verify_password(password, _dummy_hash())
            return Return.err(Error("INVALID_CREDENTIALS", "Invalid user ID or password"))

        if not verify_password(password, user.password_hash):
            return Return.err(Error("INVALID_CREDENTIALS", "Invalid user ID or password"))

        return Return.ok(user)

    async def update_password(self, user_id: UUID, new_password: str) -> Result[None]:
        user = await self.uow.users.get_by_id(user_id)
        if user is None:
            return Return.err(Error("USER_NOT_FOUND", "User not found"))

        if verify_password(new_password, user.password_hash):
            return Return.err(
                Error(
                    "SAME_PASSWORD",
                    "New password should be different from the old password",
                )
            )

        user.password_hash = hash_password(new_password)
        user.updated_at = utcnow()
        await self.uow.users.update(user)
        return Return.ok(None)
