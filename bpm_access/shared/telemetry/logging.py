"""Logging configuration and structured operation logs."""

import json
import logging
import sys
from typing import Any, Literal

from bpm_access.core.config import get_settings
from bpm_access.domain.exceptions import BpmAccessException
from bpm_access.shared.utils.serialization import escape_special_chars, safe_stringify

LogLevel = Literal["ERROR", "INFO", "SERVER"]

_operation_logger = logging.getLogger("bpm_access.operations")


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO. Operation
    logs from save_log go through the same handlers.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def build_log_record(
    level: LogLevel,
    details: Any,
    fn_name: str,
    tenant_prefix: str = "generic",
) -> dict[str, Any]:
    """Build the structured record written by save_log.

    ERROR records carry the error message stripped of special characters;
    domain exceptions add their error code and details. Other levels carry
    the JSON-stringified details as event.
    """
    record: dict[str, Any] = {
        "level": level,
        "companyPrefix": tenant_prefix,
        "app": get_settings().app_name,
        "fn": fn_name,
    }
    if level == "ERROR" and isinstance(details, BpmAccessException):
        error = details.to_dict()
        record["message"] = escape_special_chars(error["message"])
        record["errorCode"] = error["error"]
        record["details"] = safe_stringify(error["details"])
    elif level == "ERROR":
        record["message"] = escape_special_chars(str(details))
    else:
        record["event"] = safe_stringify(details)
    return record


def save_log(
    level: LogLevel,
    details: Any,
    fn_name: str,
    tenant_prefix: str = "generic",
) -> None:
    """Write a structured operation log.

    Args:
        level: ERROR and INFO are written; SERVER is accepted and dropped.
        details: Exception (ERROR) or any JSON-like value (INFO).
        fn_name: Operation name, e.g. RoleService_getItem.
        tenant_prefix: Tenant the operation ran for.
    """
    if level == "SERVER":
        return
    record = build_log_record(level, details, fn_name, tenant_prefix)
    payload = json.dumps(record, indent=2)
    if level == "ERROR":
        _operation_logger.error("ERROR: %s", payload)
    else:
        _operation_logger.info("LOGS: %s", payload)
