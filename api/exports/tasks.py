import logging

from celery import shared_task
from django.conf import settings
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage

from .models import ExportJob
from .render import render

logger = logging.getLogger(__name__)


@shared_task
def perform_export(job_id: int):
    job = ExportJob.objects.select_related('rfp').get(id=job_id)
    try:
        out = render(job.rfp, job.kind, job.format)
    except Exception as exc:
        logger.exception("export failed job=%s rfp=%s", job.id, job.rfp_id)
        job.status = 'error'
        job.error = str(exc)[:2000]
        job.save(update_fields=['status', 'error', 'updated_at'])
        raise
    path = default_storage.save(f'exports/rfp-{job.rfp_id}-{job.kind}-{job.id}.{out.extension}', ContentFile(out.data))
    job.status = 'done'
    job.url = f'{settings.MEDIA_URL}{path}'
    job.checksum = out.checksum
    job.save(update_fields=['status', 'url', 'checksum', 'updated_at'])
    logger.info("export done job=%s kind=%s format=%s", job.id, job.kind, job.format)
    return job.id
