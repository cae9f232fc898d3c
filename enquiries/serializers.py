import re

from rest_framework import serializers

from .links import parse_links
from .models import Enquiry

PHONE_PATTERN = re.compile(r"^[0-9]{10,15}$")


def required(message):
    return {"required": message, "blank": message, "null": message}


class NumberField(serializers.FloatField):
    """FloatField that refuses JSON booleans instead of reading them as 0 or 1."""

    def to_internal_value(self, data):
        if isinstance(data, bool):
            self.fail("invalid")
        return super().to_internal_value(data)


class EnquirySerializer(serializers.ModelSerializer):
    clientName = serializers.CharField(
        source="client_name",
        max_length=255,
        error_messages=required("Client name is required"),
    )
    projectName = serializers.CharField(
        source="project_name",
        max_length=255,
        error_messages=required("Project name is required"),
    )
    phone = serializers.CharField(
        error_messages=required("Phone number must be valid (10 digits)"),
    )
    description = serializers.CharField(
        error_messages=required("Description is required"),
    )
    budget = NumberField(
        error_messages={
            **required("Budget must be a number"),
            "invalid": "Budget must be a number",
        },
    )
    links = serializers.ListField(
        child=serializers.CharField(allow_blank=True),
        required=False,
        error_messages={
            "not_a_list": "Must be valid URLs if provided",
            "null": "Must be valid URLs if provided",
        },
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    def validate_phone(self, value):
        if not PHONE_PATTERN.match(value):
            raise serializers.ValidationError("Phone number must be valid (10 digits)")
        return value

    def validate_links(self, value):
        return parse_links(value)

    def create(self, validated_data):
        return Enquiry.objects.create(**validated_data)

    def update(self, instance, validated_data):
        for key, value in validated_data.items():
            setattr(instance, key, value)
        instance.save()
        return instance

    class Meta:
        model = Enquiry
        fields = (
            "id",
            "clientName",
            "projectName",
            "phone",
            "description",
            "budget",
            "links",
            "createdAt",
        )
        read_only_fields = ("id",)
