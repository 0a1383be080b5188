from rest_framework import serializers


class PresentField(serializers.Field):
    """Accept any truthy JSON value unchanged; reject missing, null, empty or false.

    Create bodies are checked for presence only, so values are stored
    exactly as the client sent them (no string coercion, no trimming).
    """

    default_error_messages = {
        'blank': 'This field may not be empty.',
    }

    def __init__(self, **kwargs):
        kwargs.setdefault('required', True)
        kwargs.setdefault('allow_null', False)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if not data:
            self.fail('blank')
        return data

    def to_representation(self, value):
        return value


class PresenceSerializer(serializers.Serializer):
    """Base for create bodies: ``missing_fields()`` lists what failed the check."""

    def missing_fields(self) -> list[str]:
        self.is_valid()
        return [name for name in self.fields if name in self.errors]
