from datetime import datetime, timedelta, timezone

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite

from infra.db.models import HealthcheckLogModel
from infra.db.types import UTCDateTime, utc_day


def test_utc_datetime_normalises_bound_values_to_utc() -> None:
    column_type = UTCDateTime()
    dialect = sqlite.dialect()

    assert column_type.process_bind_param(None, dialect) is None
    assert column_type.process_bind_param(
        datetime(2024, 6, 30, 1, 0, tzinfo=timezone(timedelta(hours=5))), dialect
    ) == datetime(2024, 6, 29, 20, 0, tzinfo=timezone.utc)
    assert column_type.process_bind_param(datetime(2024, 6, 30, 1, 0), dialect) == datetime(
        2024, 6, 30, 1, 0, tzinfo=timezone.utc
    )


def test_utc_datetime_returns_aware_utc_values() -> None:
    column_type = UTCDateTime()
    dialect = postgresql.dialect()

    naive = column_type.process_result_value(datetime(2024, 6, 30, 1, 0), dialect)
    minus_three = timezone(timedelta(hours=-3))
    shifted = column_type.process_result_value(datetime(2024, 6, 30, 1, 0, tzinfo=minus_three), dialect)

    assert naive == datetime(2024, 6, 30, 1, 0, tzinfo=timezone.utc)
    assert naive.tzinfo is timezone.utc
    assert shifted == datetime(2024, 6, 30, 4, 0, tzinfo=timezone.utc)
    assert shifted.tzinfo is timezone.utc


def test_utc_day_pins_postgres_grouping_to_utc() -> None:
    statement = select(utc_day(HealthcheckLogModel.checked_at))

    compiled = str(statement.compile(dialect=postgresql.dialect()))

    assert "date(timezone('UTC', health_checks.checked_at))" in compiled


def test_utc_day_uses_plain_date_elsewhere() -> None:
    statement = select(utc_day(HealthcheckLogModel.checked_at))

    compiled = str(statement.compile(dialect=sqlite.dialect()))

    assert "date(health_checks.checked_at)" in compiled
    assert "timezone" not in compiled
