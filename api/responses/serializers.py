from rest_framework import serializers

from .assignment import can_edit
from .models import Insight, ProposalResponse, ResponseSection


class ResponseSectionSerializer(serializers.ModelSerializer):
    assigned_to_name = serializers.CharField(source='assigned_to.full_name', read_only=True, default=None)
    locked_by_name = serializers.CharField(source='locked_by.full_name', read_only=True, default=None)
    can_edit = serializers.SerializerMethodField()

    class Meta:
        model = ResponseSection
        fields = [
            "id",
            "response",
            "title",
            "content",
            "order_index",
            "assigned_to",
            "assigned_to_name",
            "is_locked",
            "locked_by",
            "locked_by_name",
            "version",
            "can_edit",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_can_edit(self, obj) -> bool:
        return can_edit(obj.state, self.context.get('actor'))


class ProposalResponseSerializer(serializers.ModelSerializer):
    sections = serializers.SerializerMethodField()

    class Meta:
        model = ProposalResponse
        fields = ["id", "rfp", "content", "last_saved_at", "created_at", "sections"]
        read_only_fields = fields

    def get_sections(self, obj):
        qs = obj.sections.select_related('assigned_to', 'locked_by')
        return ResponseSectionSerializer(qs, many=True, context=self.context).data


class SectionPatchSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=300, required=False)
    content = serializers.CharField(required=False, allow_blank=True)
    order_index = serializers.IntegerField(min_value=0, required=False)
    version = serializers.IntegerField(min_value=1, required=False)


class BulkSectionPatchSerializer(SectionPatchSerializer):
    id = serializers.IntegerField()


class ResponsePatchSerializer(serializers.Serializer):
    sections = BulkSectionPatchSerializer(many=True, required=False)


class SectionCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=300, required=False, allow_blank=True)
    order_index = serializers.IntegerField(min_value=0, required=False)
    template_id = serializers.IntegerField(required=False, allow_null=True)


class AssignSerializer(serializers.Serializer):
    person_id = serializers.CharField(allow_null=True)
    version = serializers.IntegerField(min_value=1, required=False)


class InsightSerializer(serializers.ModelSerializer):
    class Meta:
        model = Insight
        fields = ["id", "response", "section", "type", "text", "suggestion", "is_resolved", "created_at"]
        read_only_fields = ["id", "response", "section", "type", "text", "suggestion", "created_at"]


class TaskSerializer(serializers.ModelSerializer):
    rfp_id = serializers.IntegerField(source='response.rfp_id', read_only=True)
    rfp_title = serializers.CharField(source='response.rfp.title', read_only=True)
    rfp_status = serializers.CharField(source='response.rfp.status', read_only=True)
    due_date = serializers.DateTimeField(source='response.rfp.due_date', read_only=True)
    assigned_user_name = serializers.CharField(source='assigned_to.full_name', read_only=True, default=None)

    class Meta:
        model = ResponseSection
        fields = [
            "id",
            "title",
            "order_index",
            "assigned_to",
            "assigned_user_name",
            "is_locked",
            "version",
            "rfp_id",
            "rfp_title",
            "rfp_status",
            "due_date",
            "updated_at",
        ]
        read_only_fields = fields
