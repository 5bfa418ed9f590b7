class InvalidPeriodError(Exception):
    def __init__(self, period: str, allowed_periods: list[str]):
        self.period = period
        self.allowed_periods = allowed_periods
        super().__init__(f"Badge period '{period}' is not available, allowed periods: {', '.join(allowed_periods)}")
