from .fields import PresenceSerializer, PresentField


class AppointmentCreateSerializer(PresenceSerializer):
    patientName = PresentField()
    doctorId = PresentField()
    time = PresentField()
    date = PresentField()
