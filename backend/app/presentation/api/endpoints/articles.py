"""Article REST resource — list, create, patch and delete."""

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from app.application.schemas import ArticleListResponse, ArticlePayload, ArticleResponse
from app.application.services import ArticleResourceService
from app.domain.entities import Account
from app.domain.results import (
    BadRequest,
    Forbidden,
    Ok,
    ResourceResult,
    ServerError,
    Unprocessable,
)
from app.infrastructure.dependencies import get_article_resource_service, get_current_account

router = APIRouter(prefix="/articles", tags=["Articles"])


def _unwrap(result: ResourceResult):
    """Return the value of an Ok result; raise the matching HTTP error otherwise."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, BadRequest):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.message)
    if isinstance(result, Forbidden):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail=result.message or "Access denied."
        )
    if isinstance(result, Unprocessable):
        raise HTTPException(status_code=422, detail=result.message)
    if isinstance(result, ServerError):
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=result.message)
    raise TypeError(f"Unexpected result {result!r}")


def _request_port(request: Request) -> int:
    """The port the request was addressed to, defaulting from the scheme."""
    if request.url.port is not None:
        return request.url.port
    return 443 if request.url.scheme == "https" else 80


@router.get("", response_model=ArticleListResponse)
async def list_articles(
    limit: str | None = None,
    page: str | None = None,
    account: Account = Depends(get_current_account),
    service: ArticleResourceService = Depends(get_article_resource_service),
) -> ArticleListResponse:
    """List articles, newest first. ``page`` is 1-based."""
    return _unwrap(await service.list_articles(account, limit=limit, page=page))


@router.post("/add", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    payload: ArticlePayload | None = Body(None),
    account: Account = Depends(get_current_account),
    service: ArticleResourceService = Depends(get_article_resource_service),
) -> ArticleResponse:
    """Create a new article."""
    article = _unwrap(await service.create_article(account, payload))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.patch("/{article_uuid}", response_model=ArticleResponse)
async def patch_article(
    article_uuid: str,
    payload: ArticlePayload | None = Body(None),
    account: Account = Depends(get_current_account),
    service: ArticleResourceService = Depends(get_article_resource_service),
) -> ArticleResponse:
    """Apply the submitted fields to an existing article."""
    article = _unwrap(await service.patch_article(account, article_uuid, payload))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("/{article_uuid}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_uuid: str,
    request: Request,
    account: Account = Depends(get_current_account),
    service: ArticleResourceService = Depends(get_article_resource_service),
) -> Response:
    """Delete an article. Only reachable from allow-listed client addresses."""
    client_ip = request.client.host if request.client else None
    _unwrap(await service.delete_article(account, article_uuid, client_ip, _request_port(request)))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
