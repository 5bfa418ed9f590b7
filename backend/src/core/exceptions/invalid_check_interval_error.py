class InvalidCheckIntervalError(Exception):
    def __init__(self, tier: str, requested_seconds: int, minimum_seconds: int):
        self.tier = tier
        self.requested_seconds = requested_seconds
        self.minimum_seconds = minimum_seconds
        super().__init__(f"Your {tier} plan allows minimum {minimum_seconds} second intervals, got {requested_seconds}")
