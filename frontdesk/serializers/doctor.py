from .fields import PresenceSerializer, PresentField


class DoctorCreateSerializer(PresenceSerializer):
    name = PresentField()
    specialization = PresentField()
    gender = PresentField()
    location = PresentField()
