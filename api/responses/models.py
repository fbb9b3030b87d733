from django.db import models

from .assignment import SectionState


class ProposalResponse(models.Model):
    """The response document being written for one RFP."""

    rfp = models.OneToOneField('rfps.Rfp', on_delete=models.CASCADE, related_name='response')
    content = models.TextField(blank=True, default='')
    last_saved_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:  # pragma: no cover
        return f"ProposalResponse rfp={self.rfp_id}"


class ResponseSection(models.Model):
    response = models.ForeignKey(ProposalResponse, on_delete=models.CASCADE, related_name='sections')
    title = models.CharField(max_length=300, default='New Section')
    content = models.TextField(blank=True, default='')
    order_index = models.PositiveIntegerField(default=0)
    assigned_to = models.ForeignKey(
        'team.TeamMember',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assigned_sections',
    )
    is_locked = models.BooleanField(default=False)
    locked_by = models.ForeignKey(
        'team.TeamMember',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='locked_sections',
    )
    # Bumped on every write; writes are conditional on the version read.
    version = models.PositiveIntegerField(default=1)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['response_id', 'order_index', 'id']

    def __str__(self) -> str:  # pragma: no cover
        return f"ResponseSection {self.pk} {self.title!r} v{self.version}"

    @property
    def state(self) -> SectionState:
        return SectionState(
            assigned_to=str(self.assigned_to_id) if self.assigned_to_id else None,
            locked=self.is_locked,
            locked_by=str(self.locked_by_id) if self.locked_by_id else None,
        )


class Insight(models.Model):
    TYPE_CHOICES = (
        ('writing_improvement', 'Writing improvement'),
        ('inconsistency', 'Inconsistency'),
        ('language_match', 'Language match'),
    )
    response = models.ForeignKey(ProposalResponse, on_delete=models.CASCADE, related_name='insights')
    section = models.ForeignKey(
        ResponseSection, on_delete=models.SET_NULL, null=True, blank=True, related_name='insights'
    )
    type = models.CharField(max_length=32, choices=TYPE_CHOICES)
    text = models.TextField()
    suggestion = models.TextField(blank=True, default='')
    is_resolved = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self) -> str:  # pragma: no cover
        return f"Insight {self.pk} {self.type}"
