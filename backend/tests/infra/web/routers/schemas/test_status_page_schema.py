from datetime import date

from core.domain.display_day import DisplayDay
from infra.web.routers.schemas.status_page import DisplayDayResponseDTO
from infra.web.routers.schemas.theme import ThemeUpdateDTO
from tests.support.fakes import make_aggregate


def test_display_day_dto_reads_domain_attributes() -> None:
    monitored = DisplayDayResponseDTO.model_validate(DisplayDay.monitored(make_aggregate(date(2024, 1, 1), 100, 89)))
    unmonitored = DisplayDayResponseDTO.model_validate(DisplayDay.unmonitored(date(2024, 1, 2)))

    assert monitored.model_dump(by_alias=True, mode="json") == {
        "date": "2024-01-01",
        "isMonitored": True,
        "uptimePercentage": 89.0,
        "totalChecks": 100,
        "successfulChecks": 89,
        "severity": "CRITICAL",
        "severityLabel": "Critical",
    }
    assert unmonitored.severity is None
    assert unmonitored.severity_label is None
    assert unmonitored.uptime_percentage == 0.0


def test_theme_update_dto_parses_theme_values() -> None:
    assert ThemeUpdateDTO.model_validate({"theme": "retro"}).theme.value == "retro"
