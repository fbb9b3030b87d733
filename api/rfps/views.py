import logging

from django.conf import settings
from rest_framework import mixins, permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response

from ai.ratelimit import rate_limit_check
from app.errors import error_response

from .analysis import analyze_rfp
from .ingestion import extract_document_text
from .models import Requirement, Rfp
from .search import SearchFilters, search_rfps
from .serializers import RequirementSerializer, RfpListSerializer, RfpSerializer
from .tasks import analyze_rfp_task

logger = logging.getLogger(__name__)


def _debug_or_auth():
    return [permissions.IsAuthenticated()] if not settings.DEBUG else [permissions.AllowAny()]


class RfpViewSet(viewsets.ModelViewSet):
    queryset = Rfp.objects.select_related('assigned_pm').all()
    serializer_class = RfpSerializer
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def get_permissions(self):
        return _debug_or_auth()

    def get_serializer_class(self):
        if self.action in ('list', 'search'):
            return RfpListSerializer
        return super().get_serializer_class()

    def get_queryset(self):
        qs = super().get_queryset()
        state = self.request.query_params.get('status')
        if state:
            qs = qs.filter(status=state)
        return qs

    def perform_create(self, serializer):
        rfp = serializer.save()
        logger.info("rfp created id=%s source=%s", rfp.pk, rfp.source)

    def perform_destroy(self, instance):
        logger.info("rfp deleted id=%s", instance.pk)
        instance.delete()

    @action(detail=False, methods=['get'])
    def search(self, request):
        results = search_rfps(SearchFilters.from_query(request.query_params))
        return Response(self.get_serializer(results, many=True).data)

    @action(detail=True, methods=['post'])
    def analyze(self, request, pk=None):
        rfp = self.get_object()
        limited = rate_limit_check(request, 'analyze')
        if limited is not None:
            return limited
        user = request.user if request.user.is_authenticated else None
        if getattr(settings, 'AI_ASYNC', False) and settings.CELERY_BROKER_URL:
            analyze_rfp_task.delay(rfp.pk, getattr(user, 'id', None))
            return Response({'rfp_id': rfp.pk, 'status': 'analyzing'}, status=status.HTTP_202_ACCEPTED)
        requirements = analyze_rfp(rfp.pk, user=user)
        return Response({'success': True, 'requirements': RequirementSerializer(requirements, many=True).data})

    @action(detail=True, methods=['post'], parser_classes=[MultiPartParser, FormParser])
    def document(self, request, pk=None):
        rfp = self.get_object()
        upload = request.FILES.get('file')
        if not upload:
            return error_response('missing_file', 'file is required', status=400)
        data = upload.read(settings.FILE_UPLOAD_MAX_BYTES + 1)
        rfp.document_content = extract_document_text(upload.name or '', data)
        rfp.save(update_fields=['document_content', 'updated_at'])
        logger.info("rfp document ingested id=%s chars=%d", rfp.pk, len(rfp.document_content))
        return Response(RfpSerializer(rfp).data)

    @action(detail=True, methods=['get'])
    def requirements(self, request, pk=None):
        rfp = self.get_object()
        return Response(RequirementSerializer(rfp.requirements.all(), many=True).data)


class RequirementViewSet(mixins.RetrieveModelMixin, mixins.UpdateModelMixin, viewsets.GenericViewSet):
    queryset = Requirement.objects.all()
    serializer_class = RequirementSerializer

    def get_permissions(self):
        return _debug_or_auth()
