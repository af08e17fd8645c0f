"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.domain.entities import ALL_PERMISSIONS, Account
from app.infrastructure.database import Base, engine
from app.infrastructure.database.repositories import SQLAlchemyAccountRepository
from app.infrastructure.database.session import async_session_factory
from app.infrastructure.logging.log_config import setup_logging
from app.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)

ADMIN_ACCOUNT_NAME = "admin"


async def _ensure_database_exists() -> None:
    """Create the PostgreSQL database if it does not yet exist.

    Connects to the default ``postgres`` maintenance database, checks for the
    target database name, and issues ``CREATE DATABASE`` when missing.
    Other backends are left alone.
    """
    from urllib.parse import urlparse

    settings = get_settings()
    parsed = urlparse(settings.database_url)
    if parsed.scheme not in ("postgresql", "postgres"):
        return
    db_name = parsed.path.lstrip("/")
    if not db_name:
        return

    import asyncpg

    maintenance_url = settings.database_url.rsplit("/", 1)[0] + "/postgres"

    try:
        conn = await asyncpg.connect(maintenance_url)
        try:
            exists = await conn.fetchval(
                "SELECT 1 FROM pg_database WHERE datname = $1", db_name
            )
            if not exists:
                # CREATE DATABASE cannot run inside a transaction block
                await conn.execute(f'CREATE DATABASE "{db_name}"')
                logger.info("Created database '%s'", db_name)
        finally:
            await conn.close()
    except Exception as exc:
        logger.warning("Could not auto-create database '%s': %s", db_name, exc)


async def _seed_admin_account() -> None:
    """Create the 'admin' account for ADMIN_API_TOKEN if it is configured and missing."""
    settings = get_settings()
    token = settings.admin_api_token.strip()
    if not token:
        return

    async with async_session_factory() as session:
        accounts = SQLAlchemyAccountRepository(session)
        if await accounts.get_by_name(ADMIN_ACCOUNT_NAME) is not None:
            logger.debug("Admin account already exists")
            return
        await accounts.create(
            Account(id=0, name=ADMIN_ACCOUNT_NAME, permissions=ALL_PERMISSIONS),
            api_token=token,
        )
        await session.commit()
        logger.info("Seeded '%s' account", ADMIN_ACCOUNT_NAME)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create tables, seed accounts."""
    setup_logging()

    await _ensure_database_exists()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    await _seed_admin_account()

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
