from rest_framework import serializers

from .models import ContactMessage
from .validators import FIELDS, validate_field, validate_submission


class ContactMessageSerializer(serializers.ModelSerializer):
    """Прийом форми. Рядки обрізаються, перевірка як при відправці форми."""
    name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    email = serializers.CharField(max_length=254, required=False, allow_blank=True)
    subject = serializers.CharField(max_length=150, required=False, allow_blank=True)
    message = serializers.CharField(required=False, allow_blank=True)

    class Meta:
        model = ContactMessage
        fields = ['id', 'name', 'email', 'subject', 'message', 'created_at']
        read_only_fields = ['id', 'created_at']

    def to_internal_value(self, data):
        # Помилки полів (max_length, null) не повинні ховати решту:
        # додаємо перевірку всієї форми, її повідомлення мають пріоритет
        try:
            return super().to_internal_value(data)
        except serializers.ValidationError as exc:
            if not hasattr(data, "get") or not isinstance(exc.detail, dict):
                raise
            errors = dict(exc.detail)
            errors.update({field: [msg] for field, msg in validate_submission(data).items()})
            raise serializers.ValidationError(errors)

    def validate(self, attrs):
        errors = validate_submission(attrs)
        if errors:
            raise serializers.ValidationError(errors)
        return attrs


class ContactMessageAdminSerializer(serializers.ModelSerializer):
    class Meta:
        model = ContactMessage
        fields = ['id', 'name', 'email', 'subject', 'message', 'created_at']
        read_only_fields = fields


class FieldCheckSerializer(serializers.Serializer):
    field = serializers.ChoiceField(choices=FIELDS)
    value = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False, default="",
    )

    def check(self) -> dict:
        field = self.validated_data["field"]
        ok, error = validate_field(field, self.validated_data.get("value", ""))
        return {"field": field, "valid": ok, "error": error}
