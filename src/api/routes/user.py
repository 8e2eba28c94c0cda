"""
User API Routes

Password reset endpoints.
"""

from typing import Any, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Request, status
from pydantic import BaseModel, ConfigDict, Field

from config import ApplicationConfig
from src.adapter.services.identity_provider import BcryptIdentityProvider
from src.api.error import ClientError, ServerError
from src.api.utils.body import read_json_object
from src.app.services.email_sender import EmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    ConfirmPasswordResetUseCase,
    OkResponse,
    RequestPasswordResetUseCase,
)
from src.depends import get_email_sender, get_unit_of_work

router = APIRouter(prefix="/user", tags=["User"])


class RequestPasswordResetRequest(BaseModel):
    """
    Request password reset HTTP request payload

    Fields accept any JSON value; malformed input gets the same response as
    a valid request.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[Any] = Field(None, alias="userId", description="Login handle")
    recovery_email: Optional[Any] = Field(
        None, alias="recoveryEmail", description="Recovery email registered on the profile"
    )


@router.post(
    "/request-password-reset",
    status_code=status.HTTP_200_OK,
    response_model=OkResponse,
)
async def request_password_reset(
    request: Request,
    background_tasks: BackgroundTasks,
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: EmailSender = Depends(get_email_sender),
):
    """
    Request Password Reset

    Emails a single-use reset link valid for 30 minutes when the handle and
    recovery email match a profile.

    Security:
        - No account enumeration: always 200 {"ok": true}
        - The email goes out as a background task after the response
        - Only the SHA-256 digest of the token is stored

    Returns:
        - 200 OK: Always
    """
    payload = RequestPasswordResetRequest.model_validate(await read_json_object(request))

    use_case = RequestPasswordResetUseCase(
        uow,
        email_sender,
        app_origin=ApplicationConfig.APP_ORIGIN,
        ttl_minutes=ApplicationConfig.RESET_TOKEN_TTL_MINUTES,
        schedule=background_tasks.add_task,
    )
    result = await use_case.execute(payload.user_id, payload.recovery_email)

    return result.value


class ConfirmPasswordResetRequest(BaseModel):
    """
    Confirm password reset HTTP request payload

    Type checks happen in the use case so every failure gets its own message.
    """

    model_config = ConfigDict(populate_by_name=True)

    token: Optional[Any] = Field(None, description="Password reset token from email")
    new_password: Optional[Any] = Field(None, alias="newPassword", description="New password")


@router.post(
    "/confirm-password-reset",
    status_code=status.HTTP_200_OK,
    response_model=OkResponse,
)
async def confirm_password_reset(
    request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Confirm Password Reset

    Validates the reset token, consumes it and updates the password.

    Raises:
        - 400 Bad Request: missing/invalid input, weak password, invalid,
          used or expired token, password unchanged
        - 500 Internal Server Error: identity provider or store failure
    """
    payload = ConfirmPasswordResetRequest.model_validate(await read_json_object(request))

    use_case = ConfirmPasswordResetUseCase(uow, BcryptIdentityProvider(uow))
    result = await use_case.execute(payload.token, payload.new_password)

    # Handle errors
    if result.is_err():
        error = result.error
        if error.code in (
            "INPUT_MISSING",
            "INPUT_INVALID",
            "WEAK_PASSWORD",
            "INVALID_TOKEN",
            "TOKEN_ALREADY_USED",
            "TOKEN_EXPIRED",
            "SAME_PASSWORD",
        ):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        if error.code == "PASSWORD_UPDATE_FAILED":
            raise ServerError(error, public_message=error.message)
        raise ServerError(error)

    return result.value
