"""
Patient queue endpoints.

Patients join the queue through ``POST /api/patients`` and are read back
through ``GET /api/queue``, which lists urgent patients first.  Front-desk
staff move patients along by updating ``status`` and ``priority``.
"""
from __future__ import annotations

from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from frontdesk.exceptions import MissingFields
from frontdesk.serializers.patient import PatientCreateSerializer
from frontdesk.services.patients import queue, create_patient, update_patient, delete_patient
from .utils import request_body


@api_view(['GET'])
def patient_queue(request):
    return Response(queue())


@api_view(['POST'])
def patient_register(request):
    serializer = PatientCreateSerializer(data=request_body(request))
    missing = serializer.missing_fields()
    if missing:
        raise MissingFields('Patient name is required.', fields=missing)
    patient = create_patient(**serializer.validated_data)
    return Response(patient, status=status.HTTP_201_CREATED)


@api_view(['PUT', 'DELETE'])
def patient_detail(request, pk: str):
    """Update a queued patient's ``status``/``priority`` or take them off the queue.

    Both fields are optional; an empty value is ignored rather than stored.
    """
    if request.method == 'PUT':
        body = request_body(request)
        patient = update_patient(pk, status=body.get('status'), priority=body.get('priority'))
        return Response(patient)
    delete_patient(pk)
    return Response(status=status.HTTP_204_NO_CONTENT)
