import uuid

from django.conf import settings
from django.db import models


class TeamMember(models.Model):
    """A person who can be budgeted on a proposal and assigned sections."""

    ROLE_CHOICES = (
        ('pm', 'Proposal Manager'),
        ('consultant', 'Consultant'),
        ('copy_editor', 'Copy Editor'),
        ('managing_director', 'Managing Director'),
    )
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='team_member',
    )
    username = models.CharField(max_length=150, unique=True)
    email = models.EmailField()
    full_name = models.CharField(max_length=200)
    role = models.CharField(max_length=32, choices=ROLE_CHOICES, default='consultant')
    # Free text, e.g. "Principal", "Senior Copy Editor". Drives default billing rates.
    title = models.CharField(max_length=200, blank=True, default='')
    hourly_rate = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)

    class Meta:
        ordering = ['full_name', 'username']

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.full_name} ({self.role})"

    @property
    def is_manager(self) -> bool:
        return self.role in getattr(settings, 'SECTION_MANAGER_ROLES', ['pm'])

    def as_person(self):
        from budget.ledger import Person

        return Person(
            id=str(self.pk),
            full_name=self.full_name,
            title=self.title or '',
            hourly_rate=self.hourly_rate,
        )
