import logging

from rest_framework import status
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class RecordNotFound(NotFound):
    default_detail = 'Record not found.'


class MissingFields(ValidationError):
    """A create request left out (or sent empty) one of the required fields."""

    default_detail = 'Required fields are missing.'

    def __init__(self, detail=None, fields=None):
        super().__init__(detail or self.default_detail)
        self.fields = list(fields or [])


def _message(data):
    if isinstance(data, dict):
        data = data.get('detail', data)
    if isinstance(data, list) and len(data) == 1:
        data = data[0]
    return str(data) if not isinstance(data, (dict, list)) else data


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        request = context.get('request')
        logger.exception('unhandled error on %s %s',
                         getattr(request, 'method', '?'), getattr(request, 'path', '?'))
        return Response({'error': 'Internal server error.'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    # normalize response
    body = {'error': _message(resp.data)}
    if isinstance(exc, MissingFields) and exc.fields:
        body['fields'] = exc.fields
    resp.data = body
    return resp
