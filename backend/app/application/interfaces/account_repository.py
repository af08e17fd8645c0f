"""Abstract repository interface (port) for caller accounts."""

from abc import ABC, abstractmethod

from app.domain.entities import Account


class AccountRepository(ABC):
    """Port for resolving API tokens to accounts."""

    @abstractmethod
    async def get_by_token(self, api_token: str) -> Account | None:
        """Return the account owning ``api_token``, if any."""
        ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Account | None:
        ...

    @abstractmethod
    async def create(self, account: Account, api_token: str) -> Account:
        """Persist a new account and return it with the generated ID."""
        ...
