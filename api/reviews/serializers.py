from rest_framework import serializers

from .models import Review


class ReviewSerializer(serializers.ModelSerializer):
    rfp_title = serializers.CharField(source='rfp.title', read_only=True)
    reviewer_name = serializers.CharField(source='reviewer.full_name', read_only=True, default=None)

    class Meta:
        model = Review
        fields = [
            "id",
            "rfp",
            "rfp_title",
            "type",
            "status",
            "reviewer",
            "reviewer_name",
            "comments",
            "submitted_at",
            "reviewed_at",
        ]
        read_only_fields = fields


class ReviewCreateSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=Review.TYPE_CHOICES)


class ReviewUpdateSerializer(serializers.Serializer):
    status = serializers.CharField(required=False)
    comments = serializers.CharField(required=False, allow_blank=True)
