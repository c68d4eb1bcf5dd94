"""Race durations: integer milliseconds and the MM:SS:cc display format.

Durations are stored and compared as whole milliseconds. Users read and
type them as ``MM:SS:cc`` where ``cc`` is centiseconds (1 cs = 10 ms).

Converting milliseconds to the display format truncates: the 1-9 ms below
one centisecond are dropped, never rounded up.

    >>> format_time(83459)
    '01:23:45'
    >>> parse_time("01:23:45")
    83450
"""

import re

from pydantic import BaseModel, Field

MS_PER_MINUTE = 60_000
MS_PER_SECOND = 1_000
MS_PER_CENTISECOND = 10

# What forms and request bodies accept: M or MM, then SS, then cc.
TIME_INPUT_PATTERN = re.compile(r"^\d{1,2}:\d{2}:\d{2}$")


class TimeFormatError(ValueError):
    """Raised when duration text is not three colon-separated integers."""


class DisplayTime(BaseModel):
    """A duration split into minutes, seconds and centiseconds.

    Seconds are conventionally 0-59 and centiseconds 0-99, but this is not
    enforced: out-of-range values still convert arithmetically.
    """

    minutes: int = Field(ge=0)
    seconds: int = Field(ge=0)
    centiseconds: int = Field(ge=0)

    def __str__(self) -> str:
        return f"{self.minutes:02d}:{self.seconds:02d}:{self.centiseconds:02d}"


def to_milliseconds(time: DisplayTime) -> int:
    """Convert a display time to total milliseconds."""
    return (
        time.minutes * MS_PER_MINUTE
        + time.seconds * MS_PER_SECOND
        + time.centiseconds * MS_PER_CENTISECOND
    )


def from_milliseconds(ms: int) -> DisplayTime:
    """Split total milliseconds into minutes, seconds and centiseconds.

    Truncates to centiseconds, so ``to_milliseconds(from_milliseconds(ms))``
    can be up to 9 ms below ``ms``.
    """
    if ms < 0:
        raise ValueError(f"Duration cannot be negative: {ms}")

    minutes, remainder = divmod(ms, MS_PER_MINUTE)
    seconds, remainder = divmod(remainder, MS_PER_SECOND)
    return DisplayTime(
        minutes=minutes,
        seconds=seconds,
        centiseconds=remainder // MS_PER_CENTISECOND,
    )


def format_time(ms: int) -> str:
    """Format milliseconds as zero-padded ``MM:SS:cc``.

    Examples:
        83459 -> "01:23:45"
        30999 -> "00:30:99"
        6000000 -> "100:00:00" (minutes are padded to two digits, never cut)
    """
    return str(from_milliseconds(ms))


def parse_time(time_str: str) -> int:
    """Parse ``MM:SS:cc`` text into milliseconds.

    Only the shape is checked here: three colon-separated non-negative
    integers. Digit counts are checked by ``validate_time_input``.

    Raises:
        TimeFormatError: If there are not exactly three segments or a
            segment is not an integer
    """
    parts = time_str.strip().split(":")
    if len(parts) != 3:
        raise TimeFormatError(
            f"Invalid time format: '{time_str}'. Expected MM:SS:cc"
        )

    values = []
    for part in parts:
        part = part.strip()
        if not (part.isascii() and part.isdigit()):
            raise TimeFormatError(
                f"Invalid time value '{part}' in '{time_str}'. "
                "Minutes, seconds and centiseconds must be whole numbers"
            )
        values.append(int(part))

    minutes, seconds, centiseconds = values
    return to_milliseconds(
        DisplayTime(minutes=minutes, seconds=seconds, centiseconds=centiseconds)
    )


def validate_time_input(time_str: str) -> int:
    """Validate user-typed time text and parse it.

    Stricter than ``parse_time``: requires 1-2 minute digits, 2 second
    digits (00-59) and 2 centisecond digits.

    Raises:
        TimeFormatError: If the text does not match ``MM:SS:cc``
    """
    time_str = time_str.strip()
    if not TIME_INPUT_PATTERN.match(time_str):
        raise TimeFormatError(
            f"Invalid time format: '{time_str}'. Expected MM:SS:cc (e.g. 01:05:32)"
        )

    seconds = int(time_str.split(":")[1])
    if seconds >= 60:
        raise TimeFormatError(f"Invalid seconds value: {seconds} (must be < 60)")

    return parse_time(time_str)
