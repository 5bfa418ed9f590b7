from functools import lru_cache
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.status_page import StatusPage
from core.domain.theme import ThemeChoice
from core.exceptions.status_page_not_found_error import StatusPageNotFoundError
from core.port.status_page_repository import StatusPageRepository
from infra.db.models import StatusPageModel
from infra.db.session import get_session_factory


class PostgresStatusPageRepository(StatusPageRepository):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        self._session_factory = session_factory

    async def find_by_slug(self, slug: str) -> Optional[StatusPage]:
        async with self._session_factory() as session:
            statement = select(StatusPageModel).where(StatusPageModel.slug == slug)
            model = (await session.execute(statement)).scalar_one_or_none()

            if model is None:
                return None

            return self._to_domain(model)

    async def update_theme(self, status_page_id: int, theme: ThemeChoice) -> StatusPage:
        async with self._session_factory() as session:
            model = await session.get(StatusPageModel, status_page_id)

            if model is None:
                raise StatusPageNotFoundError(str(status_page_id))

            model.theme = ThemeChoice(theme)

            await session.commit()
            await session.refresh(model)

            return self._to_domain(model)

    async def count_by_owner(self, owner_account_id: int) -> int:
        async with self._session_factory() as session:
            statement = (
                select(func.count(StatusPageModel.id))
                .where(StatusPageModel.owner_account_id == owner_account_id)
            )

            return int((await session.execute(statement)).scalar_one())

    def _to_domain(self, model: StatusPageModel) -> StatusPage:
        return StatusPage(
            id=model.id,
            slug=model.slug,
            app_name=model.app_name,
            owner_account_id=model.owner_account_id,
            homepage=model.homepage,
            theme=model.theme,
            last_status_code=model.last_status_code,
            ssl_days_until_expiry=model.ssl_days_until_expiry,
        )


@lru_cache
def get_status_page_repository() -> StatusPageRepository:
    session_factory = get_session_factory()

    return PostgresStatusPageRepository(session_factory=session_factory)
