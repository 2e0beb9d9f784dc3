# apps/appointments/forms.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from django import forms
from django.urls import reverse_lazy
from django.utils import timezone

from apps.gateway.client import GatewayClient
from apps.gateway.context import GatewayContext

# Tailwind-ish classes reused
_BASE_INPUT = "w-full rounded-2xl border border-white/40 bg-white/60 px-3 py-2.5"
_TEXTAREA = _BASE_INPUT + " min-h-[6rem]"

# Only these professionals take new bookings (vacation / sick leave do not).
BOOKABLE_STATUSES = {"ACTIVE"}


def bookable_professionals(professionals: Iterable[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    # Rows without a status come from backends that do not track it.
    return [p for p in professionals if (p.get("status") or "ACTIVE") in BOOKABLE_STATUSES]


def _choices(rows: Iterable[Mapping[str, Any]], empty_label: str) -> List[Tuple[str, str]]:
    out = [("", empty_label)]
    for row in rows:
        if row.get("id"):
            out.append((str(row["id"]), str(row.get("name") or row["id"])))
    return out


@dataclass(frozen=True)
class AppointmentDraft:
    """Pre-fill values taken from the page's query string."""

    date: str = ""
    time: str = ""
    professional_id: str = ""

    @classmethod
    def from_query(cls, params: Mapping[str, Any]) -> "AppointmentDraft":
        # Absent params are just empty; no parsing happens here.
        return cls(
            date=params.get("date") or "",
            time=params.get("time") or "",
            professional_id=params.get("professional_id") or "",
        )

    def as_initial(self) -> Dict[str, str]:
        return {"date": self.date, "time": self.time, "professional_id": self.professional_id}


class AppointmentForm(forms.Form):
    """
    Booking form. Services and professionals come from the gateway and are
    passed in by the view; customers are picked through the typeahead.
    """

    customer_id = forms.CharField(
        max_length=64,
        label="Customer",
        widget=forms.TextInput(attrs={
            "list": "customer-options",
            "autocomplete": "off",
            "placeholder": "Type at least 2 letters",
            "hx-get": reverse_lazy("appointments_ui:customer_search"),
            "hx-trigger": "keyup changed delay:300ms",
            "hx-target": "#customer-options",
            "hx-swap": "innerHTML",
        }),
    )
    service_id = forms.ChoiceField(label="Service", choices=())
    professional_id = forms.ChoiceField(label="Professional", choices=())
    date = forms.DateField(widget=forms.DateInput(attrs={"type": "date"}))
    time = forms.TimeField(widget=forms.TimeInput(attrs={"type": "time"}, format="%H:%M"))
    notes = forms.CharField(required=False, widget=forms.Textarea(attrs={"rows": 3}))
    send_confirmation = forms.BooleanField(required=False, initial=True)
    send_reminder = forms.BooleanField(required=False, initial=True)
    reminder_hours_before = forms.IntegerField(min_value=1, max_value=168, initial=24)

    def __init__(self, *args, services=(), professionals=(), **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["service_id"].choices = _choices(services, "Select a service")
        self.fields["professional_id"].choices = _choices(
            bookable_professionals(professionals), "Select a professional"
        )
        for field in self.fields.values():
            if isinstance(field.widget, forms.Textarea):
                field.widget.attrs.setdefault("class", _TEXTAREA)
            elif not isinstance(field.widget, forms.CheckboxInput):
                field.widget.attrs.setdefault("class", _BASE_INPUT)

    def clean_date(self):
        day = self.cleaned_data["date"]
        if day < timezone.localdate():
            raise forms.ValidationError("Date cannot be in the past.")
        return day

    def to_payload(self) -> Dict[str, Any]:
        """Body expected by the scheduling backend."""
        data = self.cleaned_data
        return {
            "customer_id": data["customer_id"],
            "professional_id": data["professional_id"],
            "service_id": data["service_id"],
            "appointment_date": data["date"].isoformat(),
            "appointment_time": data["time"].strftime("%H:%M"),
            "notes": data.get("notes") or "",
            "send_confirmation": data.get("send_confirmation", False),
            "send_reminder": data.get("send_reminder", False),
            "reminder_hours_before": data["reminder_hours_before"],
        }

    def submit(self, client: GatewayClient, context: GatewayContext):
        """
        Create the appointment through the gateway. Raises GatewayError;
        the caller decides how to surface it.
        """
        return client.create_appointment(self.to_payload(), context)
