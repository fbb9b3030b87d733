from rest_framework import serializers

from team.models import TeamMember

from .models import Requirement, Rfp


class RfpSerializer(serializers.ModelSerializer):
    keywords = serializers.ListField(child=serializers.CharField(max_length=100), required=False)
    assigned_pm = serializers.PrimaryKeyRelatedField(
        queryset=TeamMember.objects.all(), allow_null=True, required=False
    )
    assigned_pm_name = serializers.CharField(source='assigned_pm.full_name', read_only=True, default=None)

    class Meta:
        model = Rfp
        fields = [
            "id",
            "title",
            "source",
            "agency",
            "document_url",
            "document_content",
            "status",
            "due_date",
            "keywords",
            "state",
            "assigned_pm",
            "assigned_pm_name",
            "submitted_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "submitted_at", "created_at", "updated_at"]

    def validate_keywords(self, value):
        seen = []
        for kw in value:
            kw = kw.strip()
            if kw and kw not in seen:
                seen.append(kw)
        return seen


class RfpListSerializer(RfpSerializer):
    """List payloads omit the (potentially large) document text."""

    class Meta(RfpSerializer.Meta):
        fields = [f for f in RfpSerializer.Meta.fields if f != "document_content"]


class RequirementSerializer(serializers.ModelSerializer):
    class Meta:
        model = Requirement
        fields = [
            "id",
            "rfp",
            "text",
            "section",
            "priority",
            "highlight_start",
            "highlight_end",
            "status",
            "created_at",
        ]
        read_only_fields = ["id", "rfp", "highlight_start", "highlight_end", "created_at"]
