from django.db import models


class Template(models.Model):
    """Reusable boilerplate that seeds new response sections."""

    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, default='')
    content = models.TextField(blank=True, default='')
    category = models.CharField(max_length=100, blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name', 'id']

    def __str__(self) -> str:  # pragma: no cover
        return self.name
