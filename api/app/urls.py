import os

from django.conf import settings
from django.conf.urls.static import static
from django.http import HttpResponse
from django.urls import include, path
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenRefreshView

from ai import views as ai_views
from app.errors import error_response
from budget.views import BudgetView
from exports import views as export_views
from library.views import TemplateViewSet
from responses import views as response_views
from reviews import views as review_views
from rfps.views import RequirementViewSet, RfpViewSet
from team.views import MeView, TeamMemberViewSet, ThrottledTokenObtainPairView


def healthz(_request):
    return HttpResponse('ok')


@api_view(['GET'])
@permission_classes([AllowAny])
def api_health(_request):
    """Lightweight liveness probe (no DB)."""
    return Response({'status': 'ok'})


@api_view(['GET'])
@permission_classes([AllowAny])
def api_ready(_request):
    """Readiness probe: checks DB and cache connectivity.

    Returns shape:
    {"status":"ok|error","db":bool,"cache":bool,"details":{...}}
    """
    from django.core.cache import cache
    from django.db import DatabaseError, connections

    db_ok = False
    cache_ok = False
    details = {}
    try:
        with connections['default'].cursor() as cur:
            cur.execute('SELECT 1')
            cur.fetchone()
        db_ok = True
    except DatabaseError as exc:
        details['db_error'] = str(exc)[:200]
    try:
        cache.set('ready_probe', '1', 5)
        cache_ok = cache.get('ready_probe') == '1'
    except Exception as exc:  # pragma: no cover - backend-specific connection errors
        details['cache_error'] = str(exc)[:200]
    status = 'ok' if db_ok else 'error'
    payload = {'status': status, 'db': db_ok, 'cache': cache_ok, 'details': details}
    if status == 'error':
        return error_response('ready_check_failed', 'One or more readiness checks failed', status=503, meta=payload)
    return Response(payload)


router = DefaultRouter(trailing_slash=False)
router.register(r'team', TeamMemberViewSet, basename='team-member')
router.register(r'rfps', RfpViewSet, basename='rfp')
router.register(r'requirements', RequirementViewSet, basename='requirement')
router.register(r'templates', TemplateViewSet, basename='template')

urlpatterns = [
    path('healthz', healthz),
    path('api/health', api_health),
    path('api/ready', api_ready),
    path('api/me', MeView.as_view()),
    path('api/token', ThrottledTokenObtainPairView.as_view()),
    path('api/token/refresh', TokenRefreshView.as_view()),
    # Budget
    path('api/rfps/<int:rfp_id>/budget', BudgetView.as_view()),
    # Response sections
    path('api/rfps/<int:rfp_id>/response', response_views.ResponseView.as_view()),
    path('api/rfps/<int:rfp_id>/response/sections', response_views.SectionCreateView.as_view()),
    path('api/response-sections/<int:section_id>', response_views.SectionDetailView.as_view()),
    path('api/response-sections/<int:section_id>/assign', response_views.SectionAssignView.as_view()),
    path('api/response-sections/<int:section_id>/lock', response_views.SectionLockView.as_view()),
    path('api/tasks', response_views.TaskListView.as_view()),
    # Insights
    path('api/rfps/<int:rfp_id>/insights', response_views.InsightListView.as_view()),
    path('api/insights/<int:insight_id>', response_views.InsightDetailView.as_view()),
    # Reviews
    path('api/rfps/<int:rfp_id>/reviews', review_views.RfpReviewsView.as_view()),
    path('api/reviews', review_views.ReviewListView.as_view()),
    path('api/reviews/<int:review_id>', review_views.ReviewDetailView.as_view()),
    # AI assistant
    path('api/ai/chat', ai_views.chat),
    # Exports
    path('api/exports', export_views.create_export),
    path('api/exports/<int:job_id>', export_views.get_export),
    path('api/', include(router.urls)),
]

if settings.DEBUG or os.getenv('SERVE_MEDIA', '0') == '1':
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
