import json
import re
from django.utils.deprecation import MiddlewareMixin
from django.conf import settings

_CTRL_RE = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')
_INVISIBLE_RE = re.compile(r'[\u200B-\u200F\u202A-\u202E\u2060-\u206F\uFEFF]')


def clean_value(v):
    """Strip control/invisible characters from strings nested in JSON values."""
    if isinstance(v, str):
        s = v.replace('\r\n', '\n').replace('\r', '\n')
        return _INVISIBLE_RE.sub('', _CTRL_RE.sub('', s))
    if isinstance(v, list):
        return [clean_value(x) for x in v]
    if isinstance(v, dict):
        return {k: clean_value(x) for k, x in v.items()}
    return v


class SanitizeJsonBodyMiddleware(MiddlewareMixin):
    """Remove control/invisible characters from JSON request bodies.

    Section content and RFP text are pasted from Word/PDF sources, which
    routinely carry zero-width and bidi marks. Non-JSON and malformed bodies
    are passed through untouched so the view reports the parse error.
    """

    def process_request(self, request):
        if not (request.content_type or '').startswith('application/json'):
            return None
        body = request.body
        if not body:
            return None
        try:
            data = json.loads(body.decode('utf-8'))
        except (UnicodeDecodeError, ValueError):
            return None
        cleaned = clean_value(data)
        if cleaned != data:
            request._body = json.dumps(cleaned).encode('utf-8')
        return None


class SecurityHeadersMiddleware(MiddlewareMixin):
    """Add CSP and related headers outside DEBUG. Existing headers win."""

    def process_response(self, request, response):
        if settings.DEBUG:
            return response
        extra_connect = ' '.join(getattr(settings, 'CSP_CONNECT_SRC', None) or [])
        csp = (
            "default-src 'self'; "
            "img-src 'self' data:; "
            "font-src 'self' data:; "
            f"connect-src 'self'{' ' + extra_connect if extra_connect else ''}; "
            "frame-ancestors 'none'; "
            "base-uri 'self'; "
            "form-action 'self'"
        )
        response.setdefault('Content-Security-Policy', csp)
        response.setdefault('X-Content-Type-Options', 'nosniff')
        response.setdefault('X-Frame-Options', 'DENY')
        response.setdefault('Referrer-Policy', settings.SECURE_REFERRER_POLICY)
        return response
