# SPDX-License-Identifier: MIT

from typing import Optional, TypeAlias

import pendulum

Milliseconds: TypeAlias = int


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_ms(datetime: pendulum.DateTime) -> Milliseconds:
    return datetime.int_timestamp * 1000 + datetime.microsecond // 1000


def datetime_from_ms(milliseconds: Milliseconds) -> pendulum.DateTime:
    seconds, remainder = divmod(milliseconds, 1000)
    return pendulum.from_timestamp(seconds, tz="UTC").add(microseconds=remainder * 1000)


def now_ms() -> Milliseconds:
    return datetime_to_ms(now_utc())


def ms_to_display_local_datetime_str(milliseconds: Milliseconds) -> str:
    return datetime_from_ms(milliseconds).in_tz("local").format("MMM D, YYYY HH:mm")


def ms_to_display_local_datetime_str_optional(
    milliseconds: Optional[Milliseconds],
) -> Optional[str]:
    if milliseconds is None:
        return None
    return ms_to_display_local_datetime_str(milliseconds)


def datetime_to_local_date_str(datetime: pendulum.DateTime) -> str:
    """Convert a pendulum.DateTime to a local date string in 'YYYY-MM-DD' format."""
    return datetime.in_tz("local").format("YYYY-MM-DD")
