from typing import Any, Optional

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel, ConfigDict, Field

from config import ApplicationConfig
from src.adapter.services.identity_provider import BcryptIdentityProvider
from src.api.error import ClientError, ServerError
from src.api.utils.body import read_json_object
from src.api.utils.jwt import create_access_token
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import LoginUseCase, OkResponse
from src.depends import get_client_ip, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[Any] = Field(None, alias="userId", description="Login handle")
    password: Optional[Any] = Field(None, description="Password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=OkResponse)
async def login(
    request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    ip: str = Depends(get_client_ip),
):
    """
    Player Login

    Authenticates by handle and sets the access token cookie.

    Raises:
        - 400 Bad Request: missing input or handle containing "@"
        - 401 Unauthorized: invalid credentials (with hint)
        - 429 Too Many Requests: locked after repeated failures (with remainingSec)
        - 500 Internal Server Error: Server error
    """
    payload = LoginRequest.model_validate(await read_json_object(request))

    use_case = LoginUseCase(
        uow,
        BcryptIdentityProvider(uow),
        auth_email_domain=ApplicationConfig.AUTH_EMAIL_DOMAIN,
    )
    result = await use_case.execute(payload.user_id, payload.password, ip)

    # Handle errors
    if result.is_err():
        error = result.error
        if error.code in ("INPUT_MISSING", "INVALID_HANDLE"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "INVALID":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "LOCKED":
            raise ClientError(error, status_code=status.HTTP_429_TOO_MANY_REQUESTS)
        raise ServerError(error)

    identity = result.value
    access_token = create_access_token(identity.user_id, identity.handle)
    response.set_cookie(
        key=ApplicationConfig.AUTH_COOKIE_NAME,
        value=access_token,
        max_age=ApplicationConfig.JWT_EXPIRE_DAYS * 24 * 60 * 60,
        httponly=True,
        secure=ApplicationConfig.AUTH_COOKIE_SECURE,
        samesite="lax",
    )

    return OkResponse()


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=OkResponse)
async def logout(response: Response):
    """
    Logout

    Clears the access token cookie.
    """
    response.delete_cookie(
        key=ApplicationConfig.AUTH_COOKIE_NAME,
        httponly=True,
        secure=ApplicationConfig.AUTH_COOKIE_SECURE,
        samesite="lax",
    )
    return OkResponse()
