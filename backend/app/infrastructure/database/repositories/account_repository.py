"""Concrete account repository backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import AccountRepository
from app.domain.entities import Account
from app.infrastructure.database.models import AccountModel


class SQLAlchemyAccountRepository(AccountRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: AccountModel) -> Account:
        return Account(id=model.id, name=model.name, permissions=frozenset(model.permissions or ()))

    async def get_by_token(self, api_token: str) -> Account | None:
        result = await self._session.execute(
            select(AccountModel).where(AccountModel.api_token == api_token)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_name(self, name: str) -> Account | None:
        result = await self._session.execute(select(AccountModel).where(AccountModel.name == name))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, account: Account, api_token: str) -> Account:
        model = AccountModel(
            name=account.name,
            api_token=api_token,
            permissions=sorted(account.permissions),
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
