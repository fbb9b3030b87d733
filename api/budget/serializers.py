from rest_framework import serializers

from .ledger import YEARS, BudgetLedger


class BudgetRowInputSerializer(serializers.Serializer):
    """Shape check only; values are validated by the ledger itself."""

    person_id = serializers.CharField()
    title = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    rate_override = serializers.JSONField(required=False, allow_null=True)
    hours = serializers.DictField(child=serializers.JSONField(), required=False)


class BudgetInputSerializer(serializers.Serializer):
    rows = BudgetRowInputSerializer(many=True)


def _dec(value) -> str:
    return f"{value:.2f}"


def serialize_ledger(ledger: BudgetLedger) -> dict:
    rows = []
    for row in ledger.rows:
        person = ledger.person_for(row)
        category = ledger.role_category(row)
        rows.append(
            {
                'id': row.id,
                'person_id': row.person_id,
                'person_name': person.full_name,
                'person_title': person.title,
                'title': row.title,
                'rate_override': None if row.rate_override is None else _dec(row.rate_override),
                'effective_rate': _dec(ledger.effective_rate(row)),
                'role_category': category.value,
                'hours': {str(y): _dec(row.hours[y]) for y in YEARS},
                'total': _dec(ledger.row_total(row.id)),
            }
        )
    return {
        'rows': rows,
        'year_totals': {str(y): _dec(ledger.year_total(y)) for y in YEARS},
        'grand_total': _dec(ledger.grand_total()),
        'categories': [{'value': c.value, 'label': c.label} for c in ledger.categories()],
    }
