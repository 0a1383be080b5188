from __future__ import annotations

from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from frontdesk.exceptions import MissingFields
from frontdesk.serializers.appointment import AppointmentCreateSerializer
from frontdesk.services.appointments import (
    list_appointments,
    book_appointment,
    set_appointment_status,
    cancel_appointment,
)
from .utils import request_body


@api_view(['GET', 'POST'])
def appointments(request):
    if request.method == 'GET':
        return Response(list_appointments())
    # POST
    serializer = AppointmentCreateSerializer(data=request_body(request))
    missing = serializer.missing_fields()
    if missing:
        raise MissingFields('All fields are required to book an appointment.', fields=missing)
    appointment = book_appointment(**serializer.validated_data)
    return Response(appointment, status=status.HTTP_201_CREATED)


@api_view(['PUT', 'DELETE'])
def appointment_detail(request, pk: str):
    """Set an appointment's status, or cancel (delete) it.

    PUT always writes ``status``; a body without it stores ``null``.
    """
    if request.method == 'PUT':
        appointment = set_appointment_status(pk, request_body(request).get('status'))
        return Response(appointment)
    cancel_appointment(pk)
    return Response(status=status.HTTP_204_NO_CONTENT)
