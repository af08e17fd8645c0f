"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import (
    AccessControlHandler,
    AccountRepository,
    ArticleRepository,
    ArticleValidator,
)
from app.application.services import (
    ArticleConstraintValidator,
    ArticleResourceService,
    ClientAddressPolicy,
)
from app.config import get_settings
from app.domain.entities import Account
from app.infrastructure.access import PermissionAccessControlHandler
from app.infrastructure.database.repositories import (
    SQLAlchemyAccountRepository,
    SQLAlchemyArticleRepository,
)
from app.infrastructure.database.session import get_db_session


async def get_article_repository(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleRepository, None]:
    yield SQLAlchemyArticleRepository(session)


async def get_account_repository(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AccountRepository, None]:
    yield SQLAlchemyAccountRepository(session)


def get_access_control() -> AccessControlHandler:
    return PermissionAccessControlHandler()


def get_article_validator() -> ArticleValidator:
    return ArticleConstraintValidator()


async def get_article_resource_service(
    repository: ArticleRepository = Depends(get_article_repository),
    access_control: AccessControlHandler = Depends(get_access_control),
    validator: ArticleValidator = Depends(get_article_validator),
) -> AsyncGenerator[ArticleResourceService, None]:
    """Provides an ArticleResourceService with its collaborators wired up."""
    settings = get_settings()
    yield ArticleResourceService(
        repository,
        access_control,
        validator,
        client_policy=ClientAddressPolicy(
            allowed_first_octet=settings.delete_allowed_first_octet,
            required_port=settings.delete_required_port,
        ),
        default_limit=settings.article_list_default_limit,
        default_langcode=settings.default_langcode,
    )


def _bearer_token(request: Request) -> str | None:
    header = request.headers.get("Authorization")
    if header is None:
        return None
    if not header.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Expected Authorization: Bearer <token>",
        )
    token = header.removeprefix("Bearer ").strip()
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Empty bearer token")
    return token


async def get_current_account(
    request: Request,
    accounts: AccountRepository = Depends(get_account_repository),
) -> Account:
    """Resolve the caller from the bearer token; no header means anonymous."""
    token = _bearer_token(request)
    if token is None:
        return Account.anonymous(get_settings().anonymous_permissions)

    account = await accounts.get_by_token(token)
    if account is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API token")
    return account
