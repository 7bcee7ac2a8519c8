"""
Reporting period helpers shared by the dashboards
"""
from datetime import datetime, timedelta
from typing import Optional


def months_ago(moment: datetime, months: int) -> datetime:
    month_index = moment.month - 1 - months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    # Clamp the day so 31 March minus a month lands on the last day of February
    for day in (moment.day, 30, 29, 28):
        try:
            return moment.replace(year=year, month=month, day=day)
        except ValueError:
            continue
    raise ValueError(f"Cannot shift {moment} by {months} months")


def years_ago(moment: datetime, years: int) -> datetime:
    try:
        return moment.replace(year=moment.year - years)
    except ValueError:
        # 29 February
        return moment.replace(year=moment.year - years, day=28)


def analytics_period_start(period: str, now: datetime) -> datetime:
    if period == "day":
        return datetime.combine(now.date(), datetime.min.time())
    if period == "month":
        return months_ago(now, 1)
    if period == "year":
        return years_ago(now, 1)
    # "week" and anything unrecognised
    return now - timedelta(days=7)


def earnings_period_start(period: str, now: Optional[datetime] = None) -> datetime:
    # Same periods as analytics except there is no "day" and unknown means all-time
    now = now or datetime.now()
    if period in ("week", "month", "year"):
        return analytics_period_start(period, now)
    return datetime.min
