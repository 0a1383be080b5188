from .fields import PresenceSerializer, PresentField


class PatientCreateSerializer(PresenceSerializer):
    name = PresentField()
