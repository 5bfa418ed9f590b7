from datetime import date, datetime
from typing import Optional

from pydantic import Field

from core.domain.live_status import LiveStatus
from core.domain.plan_policy import BadgePeriod, PlanTier
from core.domain.severity import CertificateSeverity, UptimeSeverity
from core.domain.theme import ThemeChoice
from infra.utils.formatters import format_percentage
from infra.web.routers.schemas import CamelModel
from use_cases.status_page.get_status_page_view_use_case import StatusPageView


class DisplayDayResponseDTO(CamelModel):
    date: date
    is_monitored: bool
    uptime_percentage: float
    total_checks: int
    successful_checks: int
    severity: Optional[UptimeSeverity] = None
    severity_label: Optional[str] = None


class SeriesSummaryResponseDTO(CamelModel):
    window_days: int
    monitored_days: int
    total_checks: int
    successful_checks: int
    average_uptime: float
    average_uptime_label: str


class StatusPageViewResponseDTO(CamelModel):
    slug: str
    app_name: str
    homepage: Optional[str] = None
    plan: PlanTier
    theme: ThemeChoice
    live_status: LiveStatus
    live_status_headline: str
    retention_days: int
    badge_periods: list[BadgePeriod] = Field(default_factory=list)
    days: list[DisplayDayResponseDTO] = Field(default_factory=list)
    summary: SeriesSummaryResponseDTO
    uptime_severity: Optional[UptimeSeverity] = None
    uptime_severity_label: Optional[str] = None
    today_uptime: Optional[float] = None
    uptime_24h: Optional[float] = Field(default=None, alias="uptime24h")
    uptime_24h_severity: Optional[UptimeSeverity] = Field(default=None, alias="uptime24hSeverity")
    last_checked_at: Optional[datetime] = None
    last_response_time_ms: Optional[int] = None
    ssl_days_until_expiry: Optional[int] = None
    certificate_severity: Optional[CertificateSeverity] = None
    certificate_severity_label: Optional[str] = None

    @classmethod
    def from_view(cls, view: StatusPageView) -> "StatusPageViewResponseDTO":
        return cls(
            slug=view.status_page.slug,
            app_name=view.status_page.app_name,
            homepage=view.status_page.homepage,
            plan=view.policy.tier,
            theme=view.theme,
            live_status=view.live_status,
            live_status_headline=view.live_status.headline,
            retention_days=view.policy.retention_days,
            badge_periods=list(view.policy.badge_periods),
            days=[DisplayDayResponseDTO.model_validate(day) for day in view.days],
            summary=SeriesSummaryResponseDTO(
                window_days=view.summary.window_days,
                monitored_days=view.summary.monitored_days,
                total_checks=view.summary.total_checks,
                successful_checks=view.summary.successful_checks,
                average_uptime=view.summary.average_uptime,
                average_uptime_label=format_percentage(view.summary.average_uptime),
            ),
            uptime_severity=view.uptime_severity,
            uptime_severity_label=view.uptime_severity.label if view.uptime_severity else None,
            today_uptime=view.today_uptime,
            uptime_24h=view.uptime_24h,
            uptime_24h_severity=view.uptime_24h_severity,
            last_checked_at=view.last_checked_at,
            last_response_time_ms=view.last_response_time_ms,
            ssl_days_until_expiry=view.ssl_days_until_expiry,
            certificate_severity=view.certificate_severity,
            certificate_severity_label=view.certificate_severity.label if view.certificate_severity else None,
        )
