from django.conf import settings
from rest_framework import mixins, permissions, viewsets
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView
from rest_framework_simplejwt.views import TokenObtainPairView

from .actor import actor_for, member_for_request
from .models import TeamMember
from .serializers import TeamMemberSerializer


class TeamMemberViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    mixins.UpdateModelMixin,
    viewsets.GenericViewSet,
):
    """Team directory. Members are never deleted here; budgets and sections reference them."""

    queryset = TeamMember.objects.all()
    serializer_class = TeamMemberSerializer

    def get_permissions(self):
        return [permissions.IsAuthenticated()] if not settings.DEBUG else [permissions.AllowAny()]

    def get_queryset(self):
        qs = super().get_queryset()
        role = self.request.query_params.get('role')
        if role:
            qs = qs.filter(role=role)
        return qs


class MeView(APIView):
    """Authenticated user plus the team member / actor the API acts as."""

    def get_permissions(self):
        if settings.DEBUG:
            return [permissions.AllowAny()]
        return [permissions.IsAuthenticated()]

    def get(self, request):
        user = request.user if getattr(request, 'user', None) and request.user.is_authenticated else None
        member = member_for_request(request)
        actor = actor_for(member) if member else None
        return Response(
            {
                'authenticated': bool(user),
                'user': {'id': user.id, 'username': user.username, 'email': user.email} if user else None,
                'member': TeamMemberSerializer(member).data if member else None,
                'actor': {'id': actor.id, 'is_manager': actor.is_manager} if actor else None,
            }
        )


class ThrottledTokenObtainPairView(TokenObtainPairView):
    """JWT obtain pair view with scoped throttling to deter brute-force attempts."""

    throttle_classes = [ScopedRateThrottle]
    throttle_scope = 'login'
