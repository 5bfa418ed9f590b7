from infra.db.models import AccountModel, Base, HealthcheckLogModel, StatusPageModel
from infra.db.session import (
    close_engine,
    create_database_schema,
    get_engine,
    get_session_factory,
)

__all__ = [
    "AccountModel",
    "Base",
    "HealthcheckLogModel",
    "StatusPageModel",
    "close_engine",
    "create_database_schema",
    "get_engine",
    "get_session_factory",
]
