"""Observability package."""
from euplatesc.observability.logging import (
    get_logger,
    setup_logging,
    with_operation_context,
)

__all__ = ["get_logger", "setup_logging", "with_operation_context"]
