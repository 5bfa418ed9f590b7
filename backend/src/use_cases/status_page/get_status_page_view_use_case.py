from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

from core.domain.display_day import DisplayDay
from core.domain.live_status import LiveStatus
from core.domain.plan_policy import PlanPolicy
from core.domain.severity import (
    CertificateSeverity,
    UptimeSeverity,
    classify_certificate_expiry,
    classify_uptime,
)
from core.domain.status_page import StatusPage
from core.domain.theme import ThemeChoice, resolve_theme
from core.domain.uptime_series import SeriesSummary, densify, summarize
from core.exceptions.status_page_not_found_error import StatusPageNotFoundError
from core.port.account_repository import AccountRepository
from core.port.history_repository import HistoryRepository
from core.port.status_page_repository import StatusPageRepository
from core.port.theme_override_store import ThemeOverrideStore
from use_cases.plan.resolve_account_policy_use_case import ResolveAccountPolicyUseCase

ROLLING_WINDOW = timedelta(hours=24)


@dataclass(frozen=True)
class StatusPageView:
    status_page: StatusPage
    policy: PlanPolicy
    theme: ThemeChoice
    live_status: LiveStatus
    days: list[DisplayDay]
    summary: SeriesSummary
    uptime_severity: Optional[UptimeSeverity]
    today_uptime: Optional[float]
    uptime_24h: Optional[float]
    uptime_24h_severity: Optional[UptimeSeverity]
    last_checked_at: Optional[datetime]
    last_response_time_ms: Optional[int]
    ssl_days_until_expiry: Optional[int]
    certificate_severity: Optional[CertificateSeverity]


class GetStatusPageViewUseCase:
    def __init__(
        self,
        status_page_repository: StatusPageRepository,
        account_repository: AccountRepository,
        history_repository: HistoryRepository,
    ) -> None:
        self.status_page_repository = status_page_repository
        self.history_repository = history_repository
        self.resolve_policy_use_case = ResolveAccountPolicyUseCase(account_repository)

    async def execute(
        self,
        slug: str,
        today: date,
        theme_override_store: Optional[ThemeOverrideStore] = None,
        now: Optional[datetime] = None,
    ) -> StatusPageView:
        """Build the public view of a status page as of ``today``.

        ``now`` anchors the rolling 24h figures; without it they end at the close of ``today`` (UTC).
        """
        status_page = await self.status_page_repository.find_by_slug(slug)

        if not status_page:
            raise StatusPageNotFoundError(slug)

        policy = await self.resolve_policy_use_case.execute(status_page.owner_account_id)

        since = today - timedelta(days=policy.retention_days - 1)
        aggregates = await self.history_repository.get_daily_aggregates(
            status_page_id=status_page.id,
            since=since,
            until=today,
        )

        days = densify(aggregates, policy.retention_days, today)
        summary = summarize(days)

        until = now or datetime.combine(today + timedelta(days=1), time.min, tzinfo=timezone.utc)
        activity = await self.history_repository.get_recent_activity(
            status_page_id=status_page.id,
            since=until - ROLLING_WINDOW,
            until=until,
        )
        uptime_24h = activity.uptime_percentage

        viewer_override = None
        if theme_override_store is not None:
            viewer_override = await theme_override_store.get(status_page.slug)

        today_entry = days[-1] if days else None
        today_uptime = today_entry.uptime_percentage if today_entry and today_entry.is_monitored else None

        ssl_days = status_page.ssl_days_until_expiry if policy.ssl_monitoring_enabled else None

        return StatusPageView(
            status_page=status_page,
            policy=policy,
            theme=resolve_theme(status_page.theme, viewer_override),
            live_status=LiveStatus.from_status_code(status_page.last_status_code),
            days=days,
            summary=summary,
            uptime_severity=classify_uptime(summary.average_uptime) if summary.monitored_days else None,
            today_uptime=today_uptime,
            uptime_24h=uptime_24h,
            uptime_24h_severity=classify_uptime(uptime_24h) if uptime_24h is not None else None,
            last_checked_at=activity.last_checked_at,
            last_response_time_ms=activity.last_response_time_ms,
            ssl_days_until_expiry=ssl_days,
            certificate_severity=classify_certificate_expiry(ssl_days),
        )
