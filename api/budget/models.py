from django.db import models

from .ledger import DECIMAL_PLACES, MAX_DIGITS


class BudgetItem(models.Model):
    """Hours for one team member in one budget year of an RFP.

    A ledger row is stored as five items (years 1-5); ``title`` and
    ``rate_override`` are repeated on each so a row survives a reload intact.
    Column precision is the ledger's, which rejects anything that would not fit.
    """

    rfp = models.ForeignKey('rfps.Rfp', on_delete=models.CASCADE, related_name='budget_items')
    member = models.ForeignKey('team.TeamMember', on_delete=models.PROTECT, related_name='budget_items')
    year = models.PositiveSmallIntegerField()
    hours = models.DecimalField(max_digits=MAX_DIGITS, decimal_places=DECIMAL_PLACES, default=0)
    title = models.CharField(max_length=200, blank=True, default='')
    rate_override = models.DecimalField(max_digits=MAX_DIGITS, decimal_places=DECIMAL_PLACES, null=True, blank=True)
    # Insertion order of the owning row; rows are rebuilt in this order.
    position = models.PositiveIntegerField(default=0)

    class Meta:
        unique_together = ('rfp', 'member', 'year')
        ordering = ['rfp_id', 'position', 'year']

    def __str__(self) -> str:  # pragma: no cover
        return f"BudgetItem {self.rfp_id}:{self.member_id} y{self.year}={self.hours}"
