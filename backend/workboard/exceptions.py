import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong. Please try again."


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.error("Unhandled error in %s", type(view).__name__ if view else "API", exc_info=exc)
    return Response({"error": GENERIC_ERROR}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
