from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.article_repository import MarkdownArticleRepository
from src.adapter.services.email_senders import LogEmailSender, ResendEmailSender
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "A server error occurred."


async def handle_client_error(request: Request, exc: ClientError):
    error = exc.base_error
    body = {"ok": False, "code": error.code, "message": error.message, **error.details}
    logger.warning(f"Client error: {error.code} {error.message}")
    return JSONResponse(status_code=exc.status_code, content=body)


async def handle_server_error(request: Request, exc: ServerError):
    message = exc.public_message or GENERIC_SERVER_ERROR
    logger.error(f"Server error: {exc.base_error.code} {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"ok": False, "code": exc.base_error.code, "message": message},
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "ok": False,
            "code": "VALIDATION_ERROR",
            "message": "Input is invalid.",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"ok": False, "code": "INTERNAL_ERROR", "message": GENERIC_SERVER_ERROR},
    )


def build_email_sender(ApplicationConfig):
    if ApplicationConfig.EMAIL_BACKEND == "resend":
        client = httpx.AsyncClient(
            base_url=ApplicationConfig.RESEND_API_URL,
            timeout=ApplicationConfig.EMAIL_TIMEOUT_SECONDS,
        )
        sender = ResendEmailSender(
            client,
            api_key=ApplicationConfig.RESEND_API_KEY,
            from_email=ApplicationConfig.RESEND_FROM_EMAIL,
        )
        return sender, client
    return LogEmailSender(), None


def create_app(ApplicationConfig) -> FastAPI:
    # Clients are built once here and shared through app.state
    engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
    session_factory = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    email_sender, http_client = build_email_sender(ApplicationConfig)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.CREATE_TABLES:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        logger.info(f"Email backend: {ApplicationConfig.EMAIL_BACKEND}")
        yield
        if http_client is not None:
            await http_client.aclose()
        await engine.dispose()

    app = FastAPI(title="HimaQ API", version="0.1.0", lifespan=lifespan)

    app.state.config = ApplicationConfig
    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.email_sender = email_sender
    app.state.articles = MarkdownArticleRepository(ApplicationConfig.ARTICLES_DIR)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import admin, articles, auth, contact, games, health_check, rankings, user

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router)
    app.include_router(auth.router, prefix=prefix)
    app.include_router(user.router, prefix=prefix)
    app.include_router(games.router, prefix=prefix)
    app.include_router(rankings.router, prefix=prefix)
    app.include_router(articles.router, prefix=prefix)
    app.include_router(contact.router, prefix=prefix)
    app.include_router(admin.router, prefix=prefix)

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
