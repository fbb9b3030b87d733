from rest_framework import serializers

from .models import TeamMember


class TeamMemberSerializer(serializers.ModelSerializer):
    is_manager = serializers.BooleanField(read_only=True)

    class Meta:
        model = TeamMember
        fields = [
            "id",
            "username",
            "email",
            "full_name",
            "role",
            "title",
            "hourly_rate",
            "is_manager",
        ]
        read_only_fields = ["id", "is_manager"]

    def validate_hourly_rate(self, value):
        if value is not None and value < 0:
            raise serializers.ValidationError("hourly_rate must be non-negative")
        return value
