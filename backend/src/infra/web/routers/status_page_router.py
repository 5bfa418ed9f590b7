from datetime import date, datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from core.exceptions.not_status_page_owner_error import NotStatusPageOwnerError
from core.exceptions.status_page_not_found_error import StatusPageNotFoundError
from infra.adapter.dict_theme_override_store import get_theme_override_store
from infra.adapter.postgres_account_repository import get_account_repository
from infra.adapter.postgres_history_repository import get_history_repository
from infra.adapter.postgres_status_page_repository import get_status_page_repository
from infra.web.deps import get_account_id, get_viewer_id, require_viewer_id
from infra.web.routers.schemas.status_page import StatusPageViewResponseDTO
from infra.web.routers.schemas.theme import ThemeResponseDTO, ThemeUpdateDTO
from use_cases.status_page.get_status_page_view_use_case import GetStatusPageViewUseCase
from use_cases.theme.clear_viewer_theme_override_use_case import ClearViewerThemeOverrideUseCase
from use_cases.theme.resolve_viewer_theme_use_case import ResolveViewerThemeUseCase, ThemeResolution
from use_cases.theme.set_owner_default_theme_use_case import SetOwnerDefaultThemeUseCase
from use_cases.theme.set_viewer_theme_override_use_case import SetViewerThemeOverrideUseCase

router = APIRouter(prefix="/status-page", tags=["Status Page"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Status page not found")


@router.get(
    "/{slug}",
    response_model=StatusPageViewResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_status_page(
    slug: str,
    today: Optional[date] = Query(default=None),
    viewer_id: Optional[str] = Depends(get_viewer_id),
) -> StatusPageViewResponseDTO:
    use_case = GetStatusPageViewUseCase(
        status_page_repository=get_status_page_repository(),
        account_repository=get_account_repository(),
        history_repository=get_history_repository(),
    )

    override_store = get_theme_override_store(viewer_id) if viewer_id else None
    now = None if today else datetime.now(timezone.utc)

    try:
        view = await use_case.execute(
            slug=slug,
            today=today or now.date(),
            theme_override_store=override_store,
            now=now,
        )
    except StatusPageNotFoundError:
        raise _not_found()

    return StatusPageViewResponseDTO.from_view(view)


@router.get(
    "/{slug}/theme",
    response_model=ThemeResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_theme(slug: str, viewer_id: str = Depends(require_viewer_id)) -> ThemeResolution:
    use_case = ResolveViewerThemeUseCase(get_status_page_repository(), get_theme_override_store(viewer_id))

    try:
        return await use_case.execute(slug)
    except StatusPageNotFoundError:
        raise _not_found()


@router.put(
    "/{slug}/theme/override",
    response_model=ThemeResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def set_theme_override(
    slug: str,
    payload: ThemeUpdateDTO,
    viewer_id: str = Depends(require_viewer_id),
) -> ThemeResolution:
    status_page_repository = get_status_page_repository()
    override_store = get_theme_override_store(viewer_id)

    try:
        await SetViewerThemeOverrideUseCase(status_page_repository, override_store).execute(slug, payload.theme)
        return await ResolveViewerThemeUseCase(status_page_repository, override_store).execute(slug)
    except StatusPageNotFoundError:
        raise _not_found()


@router.delete(
    "/{slug}/theme/override",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def clear_theme_override(slug: str, viewer_id: str = Depends(require_viewer_id)) -> None:
    use_case = ClearViewerThemeOverrideUseCase(get_theme_override_store(viewer_id))
    await use_case.execute(slug)


@router.put(
    "/{slug}/theme/default",
    response_model=ThemeResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def set_owner_default_theme(
    slug: str,
    payload: ThemeUpdateDTO,
    viewer_id: str = Depends(require_viewer_id),
    account_id: Optional[int] = Depends(get_account_id),
) -> ThemeResolution:
    status_page_repository = get_status_page_repository()
    override_store = get_theme_override_store(viewer_id)

    try:
        await SetOwnerDefaultThemeUseCase(status_page_repository, override_store).execute(
            slug=slug,
            account_id=account_id,
            theme=payload.theme,
        )
        return await ResolveViewerThemeUseCase(status_page_repository, override_store).execute(slug)
    except StatusPageNotFoundError:
        raise _not_found()
    except NotStatusPageOwnerError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the status page owner can change the default theme",
        )
