class MonitorQuotaExceededError(Exception):
    def __init__(self, tier: str, max_monitors: int):
        self.tier = tier
        self.max_monitors = max_monitors
        super().__init__(f"Your {tier} plan allows at most {max_monitors} monitors")
