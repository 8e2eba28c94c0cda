"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from pydantic import BaseModel


# ============================================================================
# Response DTOs
# ============================================================================


class OkResponse(BaseModel):
    """Success-shaped body shared by password reset and logout"""

    ok: bool = True


class LoginResult(BaseModel):
    """Authenticated identity returned by the login use case"""

    user_id: str
    handle: str
