"""Project-wide DRF exception handler.

Renders every ``APIException`` (unparseable JSON, unsupported media
type, method not allowed, ...) with the same envelope the domain errors
use: ``{"error": "<message>"}``.  Anything DRF does not handle is left to
Django, which answers with its default 500.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


def _flatten(detail: Any) -> str:
    if isinstance(detail, dict):
        if "detail" in detail:
            return _flatten(detail["detail"])
        return "; ".join(f"{key}: {_flatten(value)}" for key, value in detail.items())
    if isinstance(detail, list):
        return "; ".join(_flatten(item) for item in detail)
    return str(detail)


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    response = exception_handler(exc, context)
    if response is None:
        return None

    message = _flatten(response.data)
    logger.warning(
        "api.request_rejected",
        status_code=response.status_code,
        error=message,
    )
    response.data = {"error": message}
    return response
