import re

DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
_NUM = re.compile(r"^\d+$")
_STEP = re.compile(r"^\*/(\d+)$")


def _clock(hour: int, minute: int) -> str:
    """24h -> '9:05 AM' style."""
    suffix = "AM" if hour < 12 else "PM"
    h = hour % 12 or 12
    return f"{h}:{minute:02d} {suffix}"


def _ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        return f"{n}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def _days(field: str) -> str | None:
    if field == "1-5":
        return "weekday"
    parts = field.split(",")
    if not all(_NUM.match(p) and int(p) <= 7 for p in parts):
        return None
    names = [DAY_NAMES[int(p) % 7] for p in parts]
    if len(names) == 1:
        return names[0]
    return ", ".join(names[:-1]) + " and " + names[-1]


def cron_to_human(expr: str) -> str:
    """
    Describe a 5-field cron expression in plain English.
    Anything it doesn't recognise is returned unchanged.
    """
    fields = (expr or "").split()
    if len(fields) != 5:
        return expr
    minute, hour, dom, month, dow = fields

    if fields == ["*"] * 5:
        return "Every minute"
    if month != "*":
        return expr

    m_step = _STEP.match(minute)
    if m_step and hour == "*" and dom == "*" and dow == "*":
        n = int(m_step.group(1))
        return "Every minute" if n == 1 else f"Every {n} minutes"

    if not _NUM.match(minute):
        return expr
    mm = int(minute)

    h_step = _STEP.match(hour)
    if dom == "*" and dow == "*":
        if hour == "*":
            return f"Every hour at minute {mm}"
        if h_step:
            n = int(h_step.group(1))
            return "Every hour" if n == 1 else f"Every {n} hours"

    if not _NUM.match(hour) or int(hour) > 23 or mm > 59:
        return expr
    at = _clock(int(hour), mm)

    if dom == "*" and dow == "*":
        return f"Every day at {at}"
    if dom == "*":
        days = _days(dow)
        return f"Every {days} at {at}" if days else expr
    if dow == "*" and _NUM.match(dom):
        return f"On the {_ordinal(int(dom))} of every month at {at}"
    return expr
