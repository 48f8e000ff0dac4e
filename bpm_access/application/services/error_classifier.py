"""Map store status and domain exceptions to the uniform result envelope.

Outcomes: success (store result passed through), not-found (empty get-by-id
result, overriding the store status), conflict (uniqueness violation raised
locally) and internal-error (store internal error or any unexpected error).
"""

from __future__ import annotations

from bpm_access.application.dtos.response import ServiceResponse
from bpm_access.application.dtos.search import StoreResult
from bpm_access.core.constants import (
    HTTP_CONFLICT,
    HTTP_INTERNAL_SERVER_ERROR,
    HTTP_NOT_FOUND,
)
from bpm_access.domain.exceptions import BpmAccessException, StoreInternalError
from bpm_access.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

# Map domain error_code to envelope status; anything else is an internal error
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": HTTP_NOT_FOUND,
    "ROLE_ALREADY_EXISTS": HTTP_CONFLICT,
    "PERMISSION_ALREADY_EXISTS": HTTP_CONFLICT,
}


def raise_for_store_status(result: StoreResult) -> StoreResult:
    """Return result unchanged unless the store reported an internal error.

    Raises:
        StoreInternalError: carrying the store-provided message.
    """
    if result.is_internal_error:
        raise StoreInternalError(result.body)
    return result


def classify(
    result: StoreResult,
    *,
    not_found_on_empty: bool = False,
    with_total: bool = False,
) -> ServiceResponse:
    """Envelope for a store result.

    With not_found_on_empty, an empty body yields 404 whatever status the
    store reported (unless it reported an internal error). total_count is
    only carried for paginated listings (with_total).
    """
    raise_for_store_status(result)
    if not_found_on_empty and not result.body:
        return ServiceResponse(result.body, HTTP_NOT_FOUND)
    total = result.total_count if with_total else None
    return ServiceResponse(result.body, result.status, total_count=total)


def status_for(exc: Exception) -> int:
    if isinstance(exc, BpmAccessException):
        return _ERROR_CODE_STATUS.get(exc.error_code, HTTP_INTERNAL_SERVER_ERROR)
    return HTTP_INTERNAL_SERVER_ERROR


def error_response(exc: Exception) -> ServiceResponse:
    """Error envelope: result is the human-readable message."""
    if not isinstance(exc, BpmAccessException):
        logger.error("Unexpected error: %s", exc, exc_info=exc)
    message = exc.message if isinstance(exc, BpmAccessException) else str(exc)
    return ServiceResponse(message, status_for(exc))
