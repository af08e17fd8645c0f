"""Application service (use case) for the article REST resource.

Every operation returns a ResourceResult; nothing here raises HTTP errors.
"""

import logging
import math
import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone

from app.application.interfaces import (
    AccessControlHandler,
    ArticleRepository,
    ArticleValidator,
    Violation,
)
from app.application.schemas import ArticleListItem, ArticleListResponse, ArticlePayload
from app.application.services.field_access import (
    FieldCapabilities,
    check_create_field_access,
    check_patch_field_access,
)
from app.domain.access import AccessResult
from app.domain.entities import (
    ACCESS_CONTENT,
    ADMINISTER_NODES,
    ARTICLE_BUNDLE,
    BYPASS_NODE_ACCESS,
    CREATE_ARTICLE_CONTENT,
    LANGCODE_FIELD,
    Account,
    Article,
)
from app.domain.exceptions import EntityStorageError
from app.domain.results import (
    BadRequest,
    Forbidden,
    Ok,
    ResourceResult,
    ServerError,
    Unprocessable,
)

logger = logging.getLogger(__name__)

STORAGE_TIMEZONE = timezone.utc
CREATED_FORMAT = "%Y-%m-%d %H:%M"
DEFAULT_PAGE_SIZE = 10

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def lenient_int(value: str | int | None) -> int:
    """Parse the leading integer of ``value``; anything unparsable is 0."""
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else 0


def resolve_pager(
    limit: str | int | None,
    page: str | int | None,
    default_limit: int = DEFAULT_PAGE_SIZE,
) -> tuple[int, int]:
    """Turn the ``limit`` and 1-based ``page`` query values into (page size, zero-based page).

    A page of zero or less is dropped, which serves the first page.
    """
    size = lenient_int(limit)
    if size <= 0:
        size = default_limit
    requested = lenient_int(page)
    page_index = requested - 1 if requested > 0 else 0
    return size, page_index


def format_created(created_at: datetime) -> str:
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return created_at.astimezone(STORAGE_TIMEZONE).strftime(CREATED_FORMAT)


@dataclass(frozen=True)
class ClientAddressPolicy:
    """Allow-list applied to DELETE requests.

    Only the first octet of the client-reported address and the request port
    are compared, so this is a compatibility check and not a trust boundary.
    """

    allowed_first_octet: int = 198
    required_port: int = 443

    def permits(self, client_ip: str | None, client_port: int | str | None) -> bool:
        if client_ip is None:
            return False
        if lenient_int(client_ip.split(".")[0]) != self.allowed_first_octet:
            return False
        return lenient_int(client_port) == self.required_port


class _ArticleFieldCapabilities:
    """Binds the access-control port to one caller and one article."""

    def __init__(self, access_control: AccessControlHandler, account: Account, article: Article):
        self._access_control = access_control
        self._account = account
        self._article = article

    def can_view(self, field_name: str) -> bool:
        return self._access_control.field_access(
            "view", field_name, self._account, self._article
        ).allowed

    def edit_access(self, field_name: str) -> AccessResult:
        return self._access_control.field_access("edit", field_name, self._account, self._article)


class ArticleResourceService:
    """Orchestrates list/create/patch/delete for articles.

    All collaborators are passed in; the service holds no request state.
    """

    def __init__(
        self,
        repository: ArticleRepository,
        access_control: AccessControlHandler,
        validator: ArticleValidator,
        *,
        client_policy: ClientAddressPolicy | None = None,
        default_limit: int = DEFAULT_PAGE_SIZE,
        default_langcode: str = "en",
    ):
        self._repository = repository
        self._access_control = access_control
        self._validator = validator
        self._client_policy = client_policy or ClientAddressPolicy()
        self._default_limit = default_limit
        self._default_langcode = default_langcode

    # ── List ─────────────────────────────────────────────────────────

    async def list_articles(
        self,
        account: Account,
        limit: str | int | None = None,
        page: str | int | None = None,
    ) -> ResourceResult:
        if not account.has_permission(ACCESS_CONTENT):
            return Forbidden()

        size, page_index = resolve_pager(limit, page, self._default_limit)
        published_only = not (
            account.has_permission(BYPASS_NODE_ACCESS) or account.has_permission(ADMINISTER_NODES)
        )

        total = await self._repository.count(ARTICLE_BUNDLE, published_only=published_only)
        # A page never needs to be larger than the whole result set.
        size = min(size, max(total, 1))
        last_page = max(math.ceil(total / size) - 1, 0)
        page_index = min(page_index, last_page)

        ids = await self._repository.query_ids(
            ARTICLE_BUNDLE,
            limit=size,
            offset=page_index * size,
            published_only=published_only,
        )
        articles = await self._repository.load_multiple(ids)

        items = [
            ArticleListItem(uuid=a.uuid, label=a.label, created=format_created(a.created_at))
            for a in articles
            if a.type == ARTICLE_BUNDLE
        ]
        return Ok(ArticleListResponse(items=items))

    # ── Create ───────────────────────────────────────────────────────

    async def create_article(self, account: Account, payload: ArticlePayload | None) -> ResourceResult:
        if payload is None:
            return BadRequest("No entity content received.")

        if not account.has_permission(CREATE_ARTICLE_CONTENT):
            return Forbidden()

        article = self._build_candidate(account, payload)

        entity_access = self._access_control.entity_access("create", account, article)
        if not entity_access.allowed:
            return Forbidden(
                entity_access.reason
                or f"You are not authorized to create this {ARTICLE_BUNDLE} entity."
            )

        if article.type != ARTICLE_BUNDLE:
            return BadRequest("Unexpected entity bundle.")

        # The store assigns both identifiers; a client-supplied one is never accepted.
        if not article.is_new or article.uuid is not None:
            return BadRequest("Only new entities can be created")

        capabilities = _ArticleFieldCapabilities(self._access_control, account, article)
        for field_name in payload.submitted_fields():
            decision = check_create_field_access(article.field(field_name), capabilities)
            if decision.denied:
                return Forbidden(decision.message)

        failure = self._validate(article, capabilities)
        if failure is not None:
            return failure

        try:
            saved = await self._repository.save(article)
        except EntityStorageError:
            logger.exception("Saving new %s failed", article.type)
            return ServerError()

        logger.info("Created %s with ID %s.", saved.type, saved.id)
        return Ok(saved, status_code=201)

    # ── Patch ────────────────────────────────────────────────────────

    async def patch_article(
        self,
        account: Account,
        article_uuid: str | None,
        payload: ArticlePayload | None,
    ) -> ResourceResult:
        if not article_uuid:
            return BadRequest("UUID not provided.")

        original = await self._load_article(article_uuid)
        if original is None:
            return BadRequest("Article not found.")

        if payload is None:
            return BadRequest("No entity content received.")

        received = Article(**payload.submitted_values())
        if received.type != ARTICLE_BUNDLE:
            return BadRequest("Unexpected entity bundle.")

        capabilities = _ArticleFieldCapabilities(self._access_control, account, original)
        changed_fields: list[str] = []

        for field_name in payload.submitted_fields():
            received_field = received.field(field_name)
            # The language can never be cleared.
            if field_name == LANGCODE_FIELD and received_field.is_empty():
                continue
            decision = check_patch_field_access(
                original.field(field_name), received_field, capabilities
            )
            if decision.denied:
                return Forbidden(decision.message)
            if decision.should_apply:
                changed_fields.append(field_name)
                original.set(field_name, received_field.value)

        if not changed_fields:
            return Ok(original)

        original.touch()
        failure = self._validate(original, capabilities, changed_fields)
        if failure is not None:
            return failure

        try:
            saved = await self._repository.save(original)
        except EntityStorageError:
            logger.exception("Saving %s %s failed", original.type, original.id)
            return ServerError()

        logger.info("Updated %s with ID %s.", saved.type, saved.id)
        return Ok(saved)

    # ── Delete ───────────────────────────────────────────────────────

    async def delete_article(
        self,
        account: Account,
        article_uuid: str | None,
        client_ip: str | None,
        client_port: int | str | None,
    ) -> ResourceResult:
        if not self._client_policy.permits(client_ip, client_port):
            return Forbidden()

        if not article_uuid:
            return BadRequest("UUID not provided.")

        article = await self._load_article(article_uuid)
        if article is None:
            return BadRequest("Article not found.")

        entity_access = self._access_control.entity_access("delete", account, article)
        if not entity_access.allowed:
            return Forbidden(entity_access.reason or "")

        try:
            await self._repository.delete(article)
        except EntityStorageError:
            logger.exception("Deleting %s %s failed", article.type, article.id)
            return ServerError()

        logger.info("Deleted %s with ID %s.", article.type, article.id)
        return Ok(None, status_code=204)

    # ── Helpers ──────────────────────────────────────────────────────

    def _build_candidate(self, account: Account, payload: ArticlePayload) -> Article:
        article = Article(langcode=self._default_langcode, author_id=account.id)
        for name, value in payload.submitted_values().items():
            article.set(name, value)
        return article

    async def _load_article(self, article_uuid: str) -> Article | None:
        matches = await self._repository.load_by_properties(uuid=article_uuid, type=ARTICLE_BUNDLE)
        return matches[0] if matches else None

    def _validate(
        self,
        article: Article,
        capabilities: FieldCapabilities,
        fields: Sequence[str] | None = None,
    ) -> Unprocessable | None:
        """Validate, ignoring violations the caller could not have caused.

        Violations on fields the caller cannot edit are dropped, and when
        ``fields`` is given only violations on those fields are kept.
        Entity-level violations always count.
        """
        violations: list[Violation] = [
            v
            for v in self._validator.validate(article)
            if not v.field or capabilities.edit_access(v.field).allowed
        ]
        if fields is not None:
            violations = [v for v in violations if not v.field or v.field in fields]

        if not violations:
            return None

        message = "Unprocessable Entity: validation failed.\n"
        for violation in violations:
            prefix = f"{violation.field}: " if violation.field else ""
            message += f"{prefix}{violation.message}\n"
        return Unprocessable(message)
