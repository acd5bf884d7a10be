from datetime import datetime

FULL_REFUND_HOURS = 48
HALF_REFUND_HOURS = 24


def hours_until(start_time: datetime, evaluation_time: datetime) -> float:
    return (start_time - evaluation_time).total_seconds() / 3600


def refund(price: float, start_time: datetime, evaluation_time: datetime) -> float:
    """
    Refund tiers by hours left before the stay starts:
    more than 48 -> full price, more than 24 up to 48 -> half, otherwise nothing.
    """
    hours_left = hours_until(start_time, evaluation_time)
    if hours_left > FULL_REFUND_HOURS:
        return price
    if hours_left > HALF_REFUND_HOURS:
        return price / 2
    return 0.0
