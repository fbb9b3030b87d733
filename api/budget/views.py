import logging
import uuid

from django.conf import settings
from django.shortcuts import get_object_or_404
from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from rfps.models import Rfp
from team.directory import list_persons

from .errors import PersonNotFoundError
from .ledger import BudgetLedger
from .serializers import BudgetInputSerializer, serialize_ledger
from .store import load_ledger, save_ledger

logger = logging.getLogger(__name__)


def _canonical_id(raw: str) -> str:
    try:
        return str(uuid.UUID(str(raw)))
    except ValueError:
        return str(raw)


def ledger_from_payload(rows) -> BudgetLedger:
    """Build a ledger from PUT rows, applying every edit through the ledger's checks."""
    persons = {p.id: p for p in list_persons()}
    ledger = BudgetLedger(persons.values())
    for entry in rows:
        pid = _canonical_id(entry['person_id'])
        person = persons.get(pid)
        if person is None:
            raise PersonNotFoundError(person_id=entry['person_id'])
        row = ledger.add_row(person)
        if entry.get('title') is not None:
            ledger.set_title(row.id, entry['title'])
        if entry.get('rate_override') is not None:
            ledger.set_rate_override(row.id, entry['rate_override'])
        for year, hours in (entry.get('hours') or {}).items():
            ledger.set_hours(row.id, year, hours)
    return ledger


class BudgetView(APIView):
    """GET / PUT the five-year budget worksheet of an RFP."""

    def get_permissions(self):
        return [permissions.IsAuthenticated()] if not settings.DEBUG else [permissions.AllowAny()]

    def get(self, request, rfp_id: int):
        rfp = get_object_or_404(Rfp, pk=rfp_id)
        payload = serialize_ledger(load_ledger(rfp.pk))
        payload['rfp_id'] = rfp.pk
        return Response(payload)

    def put(self, request, rfp_id: int):
        rfp = get_object_or_404(Rfp, pk=rfp_id)
        ser = BudgetInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        ledger = ledger_from_payload(ser.validated_data['rows'])
        save_ledger(rfp.pk, ledger)
        logger.info("budget replaced rfp=%s rows=%d grand_total=%s", rfp.pk, len(ledger), ledger.grand_total())
        payload = serialize_ledger(load_ledger(rfp.pk))
        payload['rfp_id'] = rfp.pk
        return Response(payload)
