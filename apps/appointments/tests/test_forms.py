from datetime import timedelta
from unittest.mock import Mock

from django.http import QueryDict
from django.utils import timezone

from apps.appointments.forms import AppointmentDraft, AppointmentForm, bookable_professionals
from apps.gateway.context import GatewayContext

SERVICES = [{"id": "sv-1", "name": "Haircut"}]
PROFESSIONALS = [
    {"id": "abc-123", "name": "Ana Souza", "status": "ACTIVE"},
    {"id": "p-sick", "name": "Caio Reis", "status": "SICK_LEAVE"},
]


def _form(data):
    return AppointmentForm(data=data, services=SERVICES, professionals=PROFESSIONALS)


def _valid_data(**overrides):
    tomorrow = timezone.localdate() + timedelta(days=1)
    data = {
        "customer_id": "cu-1",
        "professional_id": "abc-123",
        "service_id": "sv-1",
        "date": tomorrow.isoformat(),
        "time": "14:00",
        "notes": "first visit",
        "send_confirmation": "on",
        "reminder_hours_before": "24",
    }
    data.update(overrides)
    return data


def test_draft_reads_all_params():
    qd = QueryDict("date=2025-01-10&time=14:00&professional_id=abc-123")
    draft = AppointmentDraft.from_query(qd)
    assert draft.as_initial() == {"date": "2025-01-10", "time": "14:00", "professional_id": "abc-123"}


def test_draft_defaults_to_empty_strings():
    assert AppointmentDraft.from_query(QueryDict("")).as_initial() == {
        "date": "",
        "time": "",
        "professional_id": "",
    }
    # Plain dicts with explicit None are fine too.
    assert AppointmentDraft.from_query({"date": None}).date == ""


def test_draft_does_not_parse_values():
    draft = AppointmentDraft.from_query(QueryDict("date=not-a-date&time=25:99"))
    assert draft.date == "not-a-date"
    assert draft.time == "25:99"


def test_required_fields():
    form = _form({})
    assert not form.is_valid()
    for name in ("customer_id", "professional_id", "service_id", "date", "time"):
        assert name in form.errors


def test_past_date_rejected():
    yesterday = timezone.localdate() - timedelta(days=1)
    form = _form(_valid_data(date=yesterday.isoformat()))
    assert not form.is_valid()
    assert form.errors["date"] == ["Date cannot be in the past."]


def test_payload_uses_backend_names():
    form = _form(_valid_data())
    assert form.is_valid(), form.errors
    payload = form.to_payload()
    assert payload["appointment_date"] == form.cleaned_data["date"].isoformat()
    assert payload["appointment_time"] == "14:00"
    assert payload["professional_id"] == "abc-123"
    assert payload["send_confirmation"] is True
    # unchecked box posts nothing
    assert payload["send_reminder"] is False
    assert payload["reminder_hours_before"] == 24


def test_reminder_hours_bounds():
    form = _form(_valid_data(reminder_hours_before="0"))
    assert not form.is_valid()
    assert "reminder_hours_before" in form.errors


def test_submit_delegates_to_client():
    form = _form(_valid_data())
    assert form.is_valid(), form.errors
    client = Mock()
    client.create_appointment.return_value = {"id": "a-1"}
    ctx = GatewayContext(company_id="c-1")

    assert form.submit(client, ctx) == {"id": "a-1"}
    client.create_appointment.assert_called_once_with(form.to_payload(), ctx)


def test_choices_come_from_lookups():
    form = _form(_valid_data(service_id="sv-9"))
    assert not form.is_valid()
    assert "service_id" in form.errors
    assert form.fields["service_id"].choices == [("", "Select a service"), ("sv-1", "Haircut")]


def test_professionals_not_active_are_not_bookable():
    assert [p["id"] for p in bookable_professionals(PROFESSIONALS)] == ["abc-123"]
    # no status reported means no leave to respect
    assert bookable_professionals([{"id": "p-1"}]) == [{"id": "p-1"}]

    form = _form(_valid_data(professional_id="p-sick"))
    assert not form.is_valid()
    assert "professional_id" in form.errors
