from dataclasses import dataclass
from html import escape
from typing import Iterable
from urllib.parse import quote

from core.domain.plan_policy import BadgePeriod
from core.exceptions.invalid_period_error import InvalidPeriodError


@dataclass(frozen=True)
class BadgeArtifact:
    image_url: str
    markdown_snippet: str
    html_snippet: str
    period: BadgePeriod


def build_badge(
    origin: str,
    slug: str,
    period: BadgePeriod | str,
    allowed_periods: Iterable[BadgePeriod],
) -> BadgeArtifact:
    allowed = tuple(allowed_periods)

    try:
        badge_period = BadgePeriod(period)
    except ValueError:
        raise InvalidPeriodError(period=str(period), allowed_periods=[p.value for p in allowed])

    if badge_period not in allowed:
        raise InvalidPeriodError(period=badge_period.value, allowed_periods=[p.value for p in allowed])

    base = origin.rstrip("/")
    encoded_slug = quote(slug, safe="")

    image_url = f"{base}/api/badge/{encoded_slug}?period={badge_period.value}"
    page_url = f"{base}/status/{encoded_slug}"
    alt_text = f"Uptime {badge_period.value}"

    return BadgeArtifact(
        image_url=image_url,
        markdown_snippet=f"[![{alt_text}]({image_url})]({page_url})",
        html_snippet=(
            f'<a href="{escape(page_url, quote=True)}">'
            f'<img src="{escape(image_url, quote=True)}" alt="{escape(alt_text, quote=True)}" /></a>'
        ),
        period=badge_period,
    )
