from typing import Any, Dict, Optional

DEFAULT_VERSION = 'v1'


class DomainError(Exception):
    """Base for validation errors raised by the domain layer.

    Subclasses set ``code`` (stable machine-readable identifier), ``status``
    (HTTP status the API maps it to) and ``key`` (copy key in locales/en.yml).
    Keyword arguments given at raise time are kept as ``meta`` and used to
    format the user-facing message.
    """

    code = 'domain_error'
    status = 400
    key = 'errors.generic'

    def __init__(self, detail: str = '', **meta: Any):
        self.detail = detail
        self.meta = meta
        super().__init__(detail or self.code)

    def user_message(self) -> str:
        from app.common.keys import t

        return t(self.key, **self.meta)


def error_response(error_code: str, message: str, *, status: int = 400, meta: Optional[Dict[str, Any]] = None):
    """Return a standardized error payload structure.

    Shape:
      {"error": {"code": str, "message": str, "meta": {...}, "version": "v1"}}
    """
    from rest_framework.response import Response  # local import to avoid global DRF binding during migrations

    payload = {
        'error': {
            'code': error_code,
            'message': message,
            'version': DEFAULT_VERSION,
        }
    }
    if meta:
        payload['error']['meta'] = meta  # type: ignore[assignment]
    return Response(payload, status=status)


def exception_handler(exc, context):
    """DRF exception handler: DomainError -> standard envelope, else DRF default."""
    from rest_framework.views import exception_handler as drf_exception_handler

    if isinstance(exc, DomainError):
        meta = {k: str(v) for k, v in exc.meta.items() if v is not None} or None
        return error_response(exc.code, exc.user_message(), status=exc.status, meta=meta)
    return drf_exception_handler(exc, context)
