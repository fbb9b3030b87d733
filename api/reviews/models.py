from django.db import models


class Review(models.Model):
    TYPE_CHOICES = (
        ('copy_editing', 'Copy editing'),
        ('budget', 'Budget'),
        ('final', 'Final'),
    )
    STATUS_CHOICES = (
        ('pending', 'Pending'),
        ('approved', 'Approved'),
        ('rejected', 'Rejected'),
    )
    rfp = models.ForeignKey('rfps.Rfp', on_delete=models.CASCADE, related_name='reviews')
    type = models.CharField(max_length=16, choices=TYPE_CHOICES)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default='pending')
    reviewer = models.ForeignKey(
        'team.TeamMember', on_delete=models.SET_NULL, null=True, blank=True, related_name='reviews'
    )
    comments = models.TextField(blank=True, default='')
    submitted_at = models.DateTimeField(auto_now_add=True)
    reviewed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['-submitted_at', '-id']

    def __str__(self) -> str:  # pragma: no cover
        return f"Review {self.pk} {self.type} ({self.status})"
