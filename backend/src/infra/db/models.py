from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, Enum, ForeignKey, Integer, String, func
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    MappedAsDataclass,
    mapped_column,
    relationship,
)

from core.domain.plan_policy import PlanTier
from core.domain.theme import ThemeChoice
from infra.db.types import UTCDateTime


class Base(MappedAsDataclass, DeclarativeBase):
    pass


class AccountModel(Base):
    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, init=False)

    # Stored as free text; unknown tiers fall back to the free policy when read.
    plan: Mapped[str] = mapped_column(String(32), default=PlanTier.FREE.value)

    status_pages: Mapped[list["StatusPageModel"]] = relationship(
        back_populates="owner",
        cascade="all, delete-orphan",
        default_factory=list,
    )


class StatusPageModel(Base):
    __tablename__ = "status_pages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, init=False)
    owner_account_id: Mapped[int] = mapped_column(ForeignKey("accounts.id", ondelete="CASCADE"), index=True)

    slug: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    app_name: Mapped[str] = mapped_column(String(255))
    homepage: Mapped[Optional[str]] = mapped_column(String(1024), default=None)

    theme: Mapped[Optional[ThemeChoice]] = mapped_column(
        Enum(ThemeChoice, native_enum=False, name="theme_choice", values_callable=lambda e: [m.value for m in e]),
        default=None,
    )

    last_status_code: Mapped[Optional[int]] = mapped_column(Integer, default=None)
    ssl_days_until_expiry: Mapped[Optional[int]] = mapped_column(Integer, default=None)

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default_factory=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        init=False,
    )

    owner: Mapped[AccountModel] = relationship(back_populates="status_pages", init=False)
    healthcheck_logs: Mapped[list["HealthcheckLogModel"]] = relationship(
        back_populates="status_page",
        cascade="all, delete-orphan",
        default_factory=list,
    )


class HealthcheckLogModel(Base):
    """Raw probe samples written by the external prober; this service only reads them."""

    __tablename__ = "health_checks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, init=False)
    status_page_id: Mapped[int] = mapped_column(ForeignKey("status_pages.id", ondelete="CASCADE"), index=True)

    is_successful: Mapped[bool] = mapped_column(Boolean)
    checked_at: Mapped[datetime] = mapped_column(UTCDateTime(), index=True)

    status_code: Mapped[Optional[int]] = mapped_column(Integer, default=None)
    response_time_ms: Mapped[Optional[int]] = mapped_column(Integer, default=None)

    status_page: Mapped[StatusPageModel] = relationship(back_populates="healthcheck_logs", init=False)
