from functools import lru_cache
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.port.account_repository import AccountRepository
from infra.db.models import AccountModel
from infra.db.session import get_session_factory


class PostgresAccountRepository(AccountRepository):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        self._session_factory = session_factory

    async def get_plan(self, account_id: int) -> Optional[str]:
        async with self._session_factory() as session:
            statement = select(AccountModel.plan).where(AccountModel.id == account_id)

            return (await session.execute(statement)).scalar_one_or_none()


@lru_cache
def get_account_repository() -> AccountRepository:
    session_factory = get_session_factory()

    return PostgresAccountRepository(session_factory=session_factory)
