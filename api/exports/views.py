import logging

from django.conf import settings
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from rfps.models import Rfp

from .models import ExportJob
from .render import check_format
from .tasks import perform_export

logger = logging.getLogger(__name__)


def _job_payload(job: ExportJob) -> dict:
    return {
        "id": job.id,
        "rfp_id": job.rfp_id,
        "kind": job.kind,
        "format": job.format,
        "status": job.status,
        "url": job.url,
        "checksum": job.checksum,
        "error": job.error,
    }


@api_view(["POST"])
@permission_classes([AllowAny if settings.DEBUG else IsAuthenticated])
def create_export(request):
    rfp = get_object_or_404(Rfp, pk=request.data.get("rfp_id") or 0)
    kind = (request.data.get("kind") or "response").lower()
    fmt = (request.data.get("format") or ("md" if kind == "response" else "csv")).lower()
    check_format(kind, fmt)

    job = ExportJob.objects.create(rfp=rfp, kind=kind, format=fmt, status='pending')

    if settings.EXPORTS_ASYNC and settings.CELERY_BROKER_URL:
        perform_export.delay(job.id)
        return Response(_job_payload(job), status=status.HTTP_202_ACCEPTED)

    perform_export(job.id)
    job.refresh_from_db()
    return Response(_job_payload(job))


@api_view(["GET"])
@permission_classes([AllowAny if settings.DEBUG else IsAuthenticated])
def get_export(request, job_id: int):
    job = get_object_or_404(ExportJob, pk=job_id)
    return Response(_job_payload(job))
