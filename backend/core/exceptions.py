import logging
import traceback

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """
    DRF exception handler that turns uncaught errors into JSON 500s.

    API exceptions keep DRF's default rendering. Anything else is logged and
    answered with a generic message; with DEBUG on, the traceback is included
    under `stack`.
    """
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.error(
        "Unhandled error in %s",
        view.__class__.__name__ if view is not None else "API view",
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    body = {"detail": "Something went wrong!"}
    if settings.DEBUG:
        body["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
