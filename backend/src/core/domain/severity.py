from enum import Enum
from typing import Optional


class UptimeSeverity(str, Enum):
    CRITICAL = "CRITICAL"
    WARNING = "WARNING"
    GOOD = "GOOD"
    EXCELLENT = "EXCELLENT"

    @property
    def severity(self) -> int:
        mapping = {
            UptimeSeverity.CRITICAL: 3,
            UptimeSeverity.WARNING: 2,
            UptimeSeverity.GOOD: 1,
            UptimeSeverity.EXCELLENT: 0,
        }

        return mapping[self]

    @property
    def label(self) -> str:
        mapping = {
            UptimeSeverity.CRITICAL: "Critical",
            UptimeSeverity.WARNING: "Fair",
            UptimeSeverity.GOOD: "Good",
            UptimeSeverity.EXCELLENT: "Excellent",
        }

        return mapping[self]


class CertificateSeverity(str, Enum):
    EXPIRED = "EXPIRED"
    URGENT = "URGENT"
    SOON = "SOON"
    VALID = "VALID"

    @property
    def severity(self) -> int:
        mapping = {
            CertificateSeverity.EXPIRED: 3,
            CertificateSeverity.URGENT: 2,
            CertificateSeverity.SOON: 1,
            CertificateSeverity.VALID: 0,
        }

        return mapping[self]

    @property
    def label(self) -> str:
        mapping = {
            CertificateSeverity.EXPIRED: "Expired",
            CertificateSeverity.URGENT: "Expires within a week",
            CertificateSeverity.SOON: "Expires within a month",
            CertificateSeverity.VALID: "Valid",
        }

        return mapping[self]


# Inclusive lower bounds, highest first.
UPTIME_THRESHOLDS: tuple[tuple[float, UptimeSeverity], ...] = (
    (99.0, UptimeSeverity.EXCELLENT),
    (95.0, UptimeSeverity.GOOD),
    (90.0, UptimeSeverity.WARNING),
)

# Inclusive upper bounds, lowest first.
CERTIFICATE_THRESHOLDS: tuple[tuple[int, CertificateSeverity], ...] = (
    (0, CertificateSeverity.EXPIRED),
    (7, CertificateSeverity.URGENT),
    (30, CertificateSeverity.SOON),
)


def classify_uptime(percentage: float) -> UptimeSeverity:
    for lower_bound, band in UPTIME_THRESHOLDS:
        if percentage >= lower_bound:
            return band

    return UptimeSeverity.CRITICAL


def classify_certificate_expiry(days_remaining: Optional[int]) -> Optional[CertificateSeverity]:
    if days_remaining is None:
        return None

    for upper_bound, band in CERTIFICATE_THRESHOLDS:
        if days_remaining <= upper_bound:
            return band

    return CertificateSeverity.VALID
