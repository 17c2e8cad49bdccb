"""
Date expressions accepted in front of a subject name.

    yesterday     the day before today
    -N            N days before today, at most five digits
    MMDD          that month and day of the current year
    20YYMMDD      that exact date
    (nothing)     today

MMDD is glued onto the year as-is, so 0231 gives a 31st of February.
"""
import re
import pendulum

from dataclasses import dataclass
from typing import List, Sequence, Tuple

DAYS_OFFSET_PATTERN = re.compile(r"-[0-9]{1,5}")
MMDD_PATTERN = re.compile(r"[0-9]{4}")
YMD_PATTERN = re.compile(r"20[0-9]{6}")


def date_string(date: pendulum.Date) -> str:
    return date.format("YYYYMMDD")


@dataclass(frozen=True)
class DateArgument:
    value: str
    explicit: bool

    def __str__(self) -> str:
        return self.value


def parse_date_token(token: str, today: pendulum.Date) -> str | None:
    """
    Return the YYYYMMDD string for a single date token, or None if the token
    isn't a date expression.
    """
    if token == "yesterday":
        return date_string(today.subtract(days=1))
    if DAYS_OFFSET_PATTERN.fullmatch(token):
        return date_string(today.add(days=int(token)))
    if MMDD_PATTERN.fullmatch(token):
        return f"{today.year:04d}{token}"
    if YMD_PATTERN.fullmatch(token):
        return token
    return None


def resolve_date(tokens: Sequence[str], today: pendulum.Date) -> Tuple[DateArgument, List[str]]:
    """
    Look at the first token only. If it is a date expression it is consumed,
    otherwise the date defaults to today and every token is handed back.
    """
    remaining = list(tokens)
    if remaining:
        value = parse_date_token(remaining[0], today)
        if value is not None:
            return DateArgument(value, explicit=True), remaining[1:]
    return DateArgument(date_string(today), explicit=False), remaining
