from django.db import models
from django.utils import timezone


class Rfp(models.Model):
    SOURCE_CHOICES = (
        ('federal', 'Federal'),
        ('state', 'State'),
    )
    STATUS_CHOICES = (
        ('draft', 'Draft'),
        ('analyzing', 'Analyzing'),
        ('in_progress', 'In progress'),
        ('review', 'In review'),
        ('submitted', 'Submitted'),
    )
    title = models.CharField(max_length=300)
    source = models.CharField(max_length=16, choices=SOURCE_CHOICES, default='federal')
    agency = models.CharField(max_length=300, blank=True, default='')
    document_url = models.CharField(max_length=800, blank=True, default='')
    # Plain text of the solicitation; the analysis prompt runs over this.
    document_content = models.TextField(blank=True, default='')
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default='draft')
    due_date = models.DateTimeField(null=True, blank=True)
    keywords = models.JSONField(default=list, blank=True)
    state = models.CharField(max_length=64, blank=True, default='')
    assigned_pm = models.ForeignKey(
        'team.TeamMember',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='managed_rfps',
    )
    submitted_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self) -> str:  # pragma: no cover
        return f"Rfp {self.pk} {self.title!r} ({self.status})"

    def save(self, *args, **kwargs):
        if self.status == 'submitted' and self.submitted_at is None:
            self.submitted_at = timezone.now()
            if 'update_fields' in kwargs and kwargs['update_fields'] is not None:
                kwargs['update_fields'] = list(kwargs['update_fields']) + ['submitted_at']
        super().save(*args, **kwargs)

    def set_status(self, status: str) -> None:
        self.status = status
        self.save(update_fields=['status', 'updated_at'])


class Requirement(models.Model):
    PRIORITY_CHOICES = (
        ('high', 'High'),
        ('medium', 'Medium'),
        ('low', 'Low'),
    )
    STATUS_CHOICES = (
        ('pending', 'Pending'),
        ('addressed', 'Addressed'),
        ('skipped', 'Skipped'),
    )
    rfp = models.ForeignKey(Rfp, on_delete=models.CASCADE, related_name='requirements')
    text = models.TextField()
    section = models.CharField(max_length=200, blank=True, default='')
    priority = models.CharField(max_length=8, choices=PRIORITY_CHOICES, default='medium')
    # Character offsets into Rfp.document_content, when the extractor provided them.
    highlight_start = models.PositiveIntegerField(null=True, blank=True)
    highlight_end = models.PositiveIntegerField(null=True, blank=True)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default='pending')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['rfp_id', 'id']

    def __str__(self) -> str:  # pragma: no cover
        return f"Requirement {self.pk} [{self.priority}] {self.text[:40]}"
