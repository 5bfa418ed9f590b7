from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import Date, DateTime
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement
from sqlalchemy.types import TypeDecorator


class UTCDateTime(TypeDecorator):
    """Timestamp column that always stores and returns aware UTC values.

    Naive values are taken as UTC. SQLite keeps no offset, so normalising on the way in
    is what keeps day grouping consistent across drivers.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect: Any) -> Optional[datetime]:
        if value is None:
            return None

        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)

        return value.astimezone(timezone.utc)

    def process_result_value(self, value: Optional[datetime], dialect: Any) -> Optional[datetime]:
        if value is None:
            return None

        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)

        return value.astimezone(timezone.utc)


class utc_day(FunctionElement):
    """Calendar day of a UTC timestamp column, independent of the session time zone."""

    type = Date()
    name = "utc_day"
    inherit_cache = True


@compiles(utc_day)
def _compile_utc_day(element: utc_day, compiler, **kw) -> str:
    return "date(%s)" % compiler.process(element.clauses, **kw)


@compiles(utc_day, "postgresql")
def _compile_utc_day_postgresql(element: utc_day, compiler, **kw) -> str:
    return "date(timezone('UTC', %s))" % compiler.process(element.clauses, **kw)
