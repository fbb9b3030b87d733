from rest_framework import serializers

from .models import Template


class TemplateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Template
        fields = ["id", "name", "description", "content", "category", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]
