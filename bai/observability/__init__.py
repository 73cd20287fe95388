"""Observability for the policy compiler."""

from bai.observability.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
