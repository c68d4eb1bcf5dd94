"""Race time tracking and barrier (qualification time) evaluation for swim clubs."""

__version__ = "0.1.0"

from swimbarriers.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
