import pytest

from core.domain.live_status import LiveStatus


@pytest.mark.parametrize(
    ("status_code", "expected"),
    [
        (None, LiveStatus.UNKNOWN),
        (200, LiveStatus.OPERATIONAL),
        (204, LiveStatus.OPERATIONAL),
        (301, LiveStatus.DEGRADED),
        (404, LiveStatus.DOWN),
        (503, LiveStatus.DOWN),
        (0, LiveStatus.DOWN),
    ],
)
def test_live_status_from_status_code(status_code: int | None, expected: LiveStatus) -> None:
    assert LiveStatus.from_status_code(status_code) is expected


def test_live_status_headlines() -> None:
    assert LiveStatus.OPERATIONAL.headline == "All Systems Operational"
    assert LiveStatus.UNKNOWN.headline == "Awaiting First Check"
    assert LiveStatus.DOWN.headline == "Service Down"
