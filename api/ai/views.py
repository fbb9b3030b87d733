import logging

from django.conf import settings
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, BasePermission, IsAuthenticated
from rest_framework.response import Response

from app.errors import error_response

from .metrics import track
from .providers import get_provider
from .ratelimit import rate_limit_check
from .shield import screen
from .validators import SchemaError, validate_chat_history

logger = logging.getLogger(__name__)

MAX_MESSAGE_CHARS = 8000


class DebugOrAuthPermission(BasePermission):
    """Allow any request in DEBUG, otherwise require authentication."""

    def has_permission(self, request, view):  # type: ignore[override]
        if settings.DEBUG:
            return AllowAny().has_permission(request, view)
        return IsAuthenticated().has_permission(request, view)


@api_view(["POST"])
@permission_classes([DebugOrAuthPermission])
def chat(request):
    """Assistant chat: ``{message, history}`` -> ``{"response": str}``."""
    message = request.data.get("message")
    if not isinstance(message, str) or not message.strip():
        return error_response('invalid_message', 'message is required', status=400)
    try:
        history = validate_chat_history(
            request.data.get("history"), limit=getattr(settings, 'AI_CHAT_HISTORY_LIMIT', 20)
        )
    except SchemaError as exc:
        return error_response('invalid_history', str(exc), status=400)
    limited = rate_limit_check(request, 'chat')
    if limited is not None:
        return limited
    message = screen(message[:MAX_MESSAGE_CHARS], source='chat_message')
    history = [{**turn, 'content': screen(turn['content'], source='chat_history')} for turn in history]
    provider = get_provider()
    with track('chat', user=request.user) as call:
        result = provider.chat(message=message, history=history)
        call.record(result)
    return Response({"response": result.text})
