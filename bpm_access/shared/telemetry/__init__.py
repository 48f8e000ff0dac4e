"""Logging helpers."""

from bpm_access.shared.telemetry.logging import get_logger, save_log, setup_logging

__all__ = ["get_logger", "save_log", "setup_logging"]
