"""
DRF exception handler

Translates domain errors into HTTP responses. Registered through
``REST_FRAMEWORK["EXCEPTION_HANDLER"]``; everything DRF already knows
how to render is passed through to the default handler.
"""

from __future__ import annotations

import logging

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler as drf_exception_handler  # type: ignore

from shared.domain.exceptions import DomainError, DuplicateNameError, NotFoundError

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateNameError: status.HTTP_409_CONFLICT,
}


def status_for(error: DomainError) -> int:
    for error_type, http_status in STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return http_status
    return status.HTTP_400_BAD_REQUEST


def domain_exception_handler(exc, context):  # type: ignore
    if isinstance(exc, DomainError):
        http_status = status_for(exc)
        view = context.get("view")
        logger.warning(
            f"{exc.__class__.__name__} in {view.__class__.__name__ if view else 'unknown view'}: {exc}"
        )
        return Response({"detail": str(exc), "code": exc.code}, status=http_status)
    return drf_exception_handler(exc, context)
