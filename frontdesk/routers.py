"""
URL mappings for the clinic front-desk API.

This module registers all API endpoints with their corresponding view
functions.  Note that trailing slashes are deliberately omitted; record
ids are opaque strings, so the id segment is matched as ``str``.
"""
from django.urls import path, include

from .views import health
from .views.appointments import appointments, appointment_detail
from .views.doctors import doctors, doctor_detail
from .views.patients import patient_queue, patient_register, patient_detail


urlpatterns = [
    # Prometheus exposition at /metrics
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz, name='healthz'),
    # Patient queue
    path('api/queue', patient_queue, name='patient-queue'),
    path('api/patients', patient_register, name='patient-register'),
    path('api/patients/<str:pk>', patient_detail, name='patient-detail'),
    # Doctors
    path('api/doctors', doctors, name='doctors'),
    path('api/doctors/<str:pk>', doctor_detail, name='doctor-detail'),
    # Appointments
    path('api/appointments', appointments, name='appointments'),
    path('api/appointments/<str:pk>', appointment_detail, name='appointment-detail'),
]
