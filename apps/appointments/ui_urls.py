# apps/appointments/ui_urls.py
from django.urls import path
from . import ui_views

app_name = "appointments_ui"

urlpatterns = [
    # /console/appointments/
    path("appointments/", ui_views.appointments_home, name="appointments"),

    # Create page (shell + placeholder)
    # /console/appointments/new?date=2025-01-10&time=14:00&professional_id=abc-123
    path("appointments/new", ui_views.new_appointment_page, name="new_appointment"),

    # HTMX fragment: GET renders the form, POST submits/cancels
    path("appointments/new/form", ui_views.new_appointment_form, name="new_appointment_form"),

    # HTMX typeahead for the customer <datalist>
    path("appointments/customers/search", ui_views.customer_search, name="customer_search"),
]
