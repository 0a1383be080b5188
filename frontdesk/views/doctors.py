"""
Doctor roster endpoints.

``/api/doctors`` lists and creates doctors; ``/api/doctors/<id>`` reads,
merge-updates and deletes a single profile.
"""
from __future__ import annotations

from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from frontdesk.exceptions import MissingFields
from frontdesk.serializers.doctor import DoctorCreateSerializer
from frontdesk.services.doctors import list_doctors, get_doctor, create_doctor, update_doctor, delete_doctor
from .utils import request_body


@api_view(['GET', 'POST'])
def doctors(request):
    if request.method == 'GET':
        return Response(list_doctors())
    # POST
    serializer = DoctorCreateSerializer(data=request_body(request))
    missing = serializer.missing_fields()
    if missing:
        raise MissingFields('All fields are required for a new doctor.', fields=missing)
    doctor = create_doctor(**serializer.validated_data)
    return Response(doctor, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
def doctor_detail(request, pk: str):
    """Single doctor profile.

    PUT is a merge: only the keys present in the body change, whatever
    their value.
    """
    if request.method == 'GET':
        return Response(get_doctor(pk))
    if request.method == 'PUT':
        return Response(update_doctor(pk, request_body(request)))
    delete_doctor(pk)
    return Response(status=status.HTTP_204_NO_CONTENT)
