from datetime import date

from core.domain.display_day import DisplayDay
from core.domain.severity import UptimeSeverity
from core.domain.status_page import StatusPage
from tests.support.fakes import make_aggregate


def test_status_page_ownership() -> None:
    page = StatusPage(id=1, slug="acme", app_name="Acme", owner_account_id=7)

    assert page.is_owned_by(7) is True
    assert page.is_owned_by(8) is False
    assert page.is_owned_by(None) is False
    assert page.theme is None


def test_display_day_severity_only_for_monitored_days() -> None:
    monitored = DisplayDay.monitored(make_aggregate(date(2024, 1, 1), total_checks=100, successful_checks=96))
    unmonitored = DisplayDay.unmonitored(date(2024, 1, 2))

    assert monitored.severity is UptimeSeverity.GOOD
    assert unmonitored.severity is None
    assert unmonitored.total_checks == 0
