import tempfile

from . import base

for k, v in base.__dict__.items():
    if k.isupper():
        globals()[k] = v

# Test overrides (DJANGO_ENV=test, manage.py test, or pytest-django)
DEBUG = True
CELERY_TASK_ALWAYS_EAGER = True
AI_PROVIDER = 'stub'
AI_ASYNC = False
EXPORTS_ASYNC = False
MEDIA_ROOT = tempfile.mkdtemp(prefix='rfpdesk-media-')
PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']
STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}
REST_FRAMEWORK = {
    **base.REST_FRAMEWORK,
    'DEFAULT_PERMISSION_CLASSES': ['rest_framework.permissions.AllowAny'],
    'DEFAULT_THROTTLE_CLASSES': [],
}
