import logging

from django.conf import settings
from django.shortcuts import get_object_or_404
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from ai.ratelimit import rate_limit_check
from library.models import Template
from rfps.models import Rfp
from team.actor import require_actor, resolve_actor
from team.directory import get_member

from . import store
from .insights import generate_insights
from .models import Insight, ResponseSection
from .serializers import (
    AssignSerializer,
    InsightSerializer,
    ProposalResponseSerializer,
    ResponsePatchSerializer,
    ResponseSectionSerializer,
    SectionCreateSerializer,
    SectionPatchSerializer,
    TaskSerializer,
)

logger = logging.getLogger(__name__)


class DebugOrAuthView(APIView):
    def get_permissions(self):
        return [permissions.IsAuthenticated()] if not settings.DEBUG else [permissions.AllowAny()]


class ResponseView(DebugOrAuthView):
    """The response for an RFP with its ordered sections (created on first access)."""

    def get(self, request, rfp_id: int):
        rfp = get_object_or_404(Rfp, pk=rfp_id)
        response = store.response_for_rfp(rfp)
        return Response(ProposalResponseSerializer(response, context={'actor': resolve_actor(request)}).data)

    def patch(self, request, rfp_id: int):
        rfp = get_object_or_404(Rfp, pk=rfp_id)
        actor = require_actor(request)
        ser = ResponsePatchSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        response = store.update_sections(rfp, ser.validated_data.get('sections') or [], actor=actor)
        response.refresh_from_db()
        return Response(ProposalResponseSerializer(response, context={'actor': actor}).data)


class SectionCreateView(DebugOrAuthView):
    def post(self, request, rfp_id: int):
        rfp = get_object_or_404(Rfp, pk=rfp_id)
        ser = SectionCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data
        title, content = data.get('title') or '', ''
        if data.get('template_id'):
            template = get_object_or_404(Template, pk=data['template_id'])
            title, content = template.name, template.content
        section = store.create_section(rfp, title=title, content=content, order_index=data.get('order_index'))
        logger.info("section created id=%s rfp=%s", section.pk, rfp.pk)
        ctx = {'actor': resolve_actor(request)}
        return Response(ResponseSectionSerializer(section, context=ctx).data, status=status.HTTP_201_CREATED)


class SectionDetailView(DebugOrAuthView):
    def patch(self, request, section_id: int):
        actor = require_actor(request)
        ser = SectionPatchSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        patch = dict(ser.validated_data)
        version = patch.pop('version', None)
        section = store.update_section(section_id, patch, actor=actor, expected_version=version)
        return Response(ResponseSectionSerializer(section, context={'actor': actor}).data)

    def delete(self, request, section_id: int):
        store.delete_section(section_id, actor=require_actor(request))
        return Response(status=status.HTTP_204_NO_CONTENT)


class SectionAssignView(DebugOrAuthView):
    def post(self, request, section_id: int):
        actor = require_actor(request)
        ser = AssignSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        person_id = ser.validated_data['person_id']
        version = ser.validated_data.get('version')
        if person_id:
            section = store.transition(section_id, 'assign', actor, person_id=person_id, expected_version=version)
        else:
            section = store.transition(section_id, 'unassign', actor, expected_version=version)
        return Response(ResponseSectionSerializer(section, context={'actor': actor}).data)


class SectionLockView(DebugOrAuthView):
    """POST locks, DELETE unlocks. Managers only."""

    def post(self, request, section_id: int):
        actor = require_actor(request)
        section = store.transition(section_id, 'lock', actor)
        return Response(ResponseSectionSerializer(section, context={'actor': actor}).data)

    def delete(self, request, section_id: int):
        actor = require_actor(request)
        section = store.transition(section_id, 'unlock', actor)
        return Response(ResponseSectionSerializer(section, context={'actor': actor}).data)


class TaskListView(DebugOrAuthView):
    """Every section across all RFPs, viewed as a work item."""

    def get(self, request):
        qs = ResponseSection.objects.select_related('response__rfp', 'assigned_to').order_by(
            '-response__rfp__created_at', 'order_index', 'id'
        )
        assignee = request.query_params.get('assignee')
        if assignee:
            member = get_member(assignee)
            qs = qs.filter(assigned_to=member) if member else qs.none()
        return Response(TaskSerializer(qs, many=True).data)


class InsightListView(DebugOrAuthView):
    def get(self, request, rfp_id: int):
        rfp = get_object_or_404(Rfp, pk=rfp_id)
        qs = Insight.objects.filter(response__rfp=rfp)
        return Response(InsightSerializer(qs, many=True).data)

    def post(self, request, rfp_id: int):
        rfp = get_object_or_404(Rfp, pk=rfp_id)
        limited = rate_limit_check(request, 'insights')
        if limited is not None:
            return limited
        user = request.user if request.user.is_authenticated else None
        generate_insights(rfp, user=user)
        qs = Insight.objects.filter(response__rfp=rfp)
        return Response(InsightSerializer(qs, many=True).data)


class InsightDetailView(DebugOrAuthView):
    def patch(self, request, insight_id: int):
        insight = get_object_or_404(Insight, pk=insight_id)
        ser = InsightSerializer(insight, data=request.data, partial=True)
        ser.is_valid(raise_exception=True)
        ser.save()
        return Response(ser.data)
