from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.repositories.article_repository import IArticleRepository
from src.app.services.email_sender import EmailSender
from src.api.utils.jwt import verify_jwt

security = HTTPBearer(auto_error=False)


async def get_unit_of_work(request: Request):
    async with request.app.state.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_email_sender(request: Request) -> EmailSender:
    return request.app.state.email_sender


def get_article_repository(request: Request) -> IArticleRepository:
    return request.app.state.articles


def get_client_ip(request: Request) -> str:
    """First X-Forwarded-For hop, then X-Real-IP, then the socket peer"""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first
    real_ip = request.headers.get("x-real-ip")
    if real_ip and real_ip.strip():
        return real_ip.strip()
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Dependency to extract and verify the JWT from the auth cookie or the
    Authorization header.

    Returns:
        Decoded JWT payload containing sub (user id) and handle

    Raises:
        HTTPException: 401 if token is missing, invalid or expired
    """
    token = credentials.credentials if credentials else None
    if token is None:
        token = request.cookies.get(ApplicationConfig.AUTH_COOKIE_NAME)

    payload = verify_jwt(token) if token else None

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return payload
