"""Request body helpers shared by the race and barrier routes."""

from swimbarriers.models.duration import validate_time_input


def resolve_milliseconds(time: str | None, milliseconds: int | None) -> int | None:
    """Pick the duration from either ``MM:SS:cc`` text or raw milliseconds.

    Returns None when neither is given.

    Raises:
        ValueError: If both are given, or the text is not a valid time
    """
    if time is not None and milliseconds is not None:
        raise ValueError("Provide either a time string or milliseconds, not both")
    if time is not None:
        return validate_time_input(time)
    return milliseconds
