def format_interval(seconds: int) -> str:
    if seconds < 0:
        raise ValueError("Interval must be non-negative")

    if seconds >= 60 and seconds % 60 == 0:
        minutes = seconds // 60
        return f"{minutes} minute{'s' if minutes != 1 else ''}"

    return f"{seconds} second{'s' if seconds != 1 else ''}"


def format_percentage(value: float, decimals: int = 2) -> str:
    return f"{value:.{decimals}f}%"
