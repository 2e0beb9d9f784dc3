# apps/appointments/ui_views.py
from __future__ import annotations

import logging
from urllib.parse import urlparse

from django.contrib import messages
from django.http import HttpResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils.html import format_html_join
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_GET, require_http_methods

from apps.gateway.client import GatewayClient, GatewayError
from apps.gateway.context import GatewayContext

from .forms import AppointmentDraft, AppointmentForm

logger = logging.getLogger(__name__)

CUSTOMER_SEARCH_MIN_CHARS = 2
CUSTOMER_SEARCH_LIMIT = 10


def _list_url() -> str:
    return reverse("appointments_ui:appointments")


def _is_create_page(url: str) -> bool:
    # Going "back" to the shell or its fragment would just reopen the form.
    path = urlparse(url).path
    return path in (
        reverse("appointments_ui:new_appointment"),
        reverse("appointments_ui:new_appointment_form"),
    )


def _safe(request, url: str) -> bool:
    return (
        bool(url)
        and url_has_allowed_host_and_scheme(
            url, allowed_hosts={request.get_host()}, require_https=request.is_secure()
        )
        and not _is_create_page(url)
    )


def _back_url(request) -> str:
    """
    Where "cancel" goes: the page the user came from.
    Order: explicit ?next / POST next, then Referer, then the listing.
    """
    candidate = request.POST.get("next") or request.GET.get("next") or ""
    if _safe(request, candidate):
        return candidate
    referer = request.headers.get("Referer", "")
    if _safe(request, referer):
        return referer
    return _list_url()


def _is_htmx(request) -> bool:
    return bool(request.headers.get("HX-Request"))


def _navigate(request, url: str) -> HttpResponse:
    # HTMX swaps would render the target inside the fragment; ask for a full navigation.
    if _is_htmx(request):
        return HttpResponse(status=204, headers={"HX-Redirect": url})
    return redirect(url)


def _render_form(request, ctx, status: int = 200) -> HttpResponse:
    """
    Errors go back as a swappable fragment to HTMX (htmx 1.x ignores 4xx/5xx
    bodies) and as a full page, with the real status, to plain posts.
    """
    if _is_htmx(request):
        return render(request, "appointments/console/_form.html", ctx)
    return render(request, "appointments/console/form_page.html", ctx, status=status)


def _gateway_context(request) -> GatewayContext:
    return getattr(request, "gateway", None) or GatewayContext.from_headers(request.headers)


def _lookups(client: GatewayClient, context: GatewayContext, service_id: str = ""):
    """Services and bookable professionals for the selects. Raises GatewayError."""
    return {
        "services": client.list_services(context),
        "professionals": client.list_professionals(context, service_id=service_id),
    }


@require_GET
def appointments_home(request):
    """
    Appointments landing page; new appointments land here after saving.
    """
    return render(request, "appointments/console/home.html", {})


@require_GET
def new_appointment_page(request):
    """
    Page shell: shows a placeholder while the form fragment loads (HTMX),
    forwarding the query string so the pre-fill survives.
    """
    params = request.GET.copy()
    if "next" not in params:
        referer = request.headers.get("Referer", "")
        params["next"] = referer if _safe(request, referer) else _list_url()

    fragment_url = f"{reverse('appointments_ui:new_appointment_form')}?{params.urlencode()}"
    return render(request, "appointments/console/new.html", {"fragment_url": fragment_url})


@require_http_methods(["GET", "POST"])
def new_appointment_form(request):
    """
    HTMX fragment with the creation form.
    GET: pre-filled from ?date=&time=&professional_id= (all optional).
    POST: submit through the gateway, or go back when "cancel" was pressed.
    """
    if request.method == "GET":
        draft = AppointmentDraft.from_query(request.GET)
        ctx = {"back_url": request.GET.get("next", "")}
        try:
            choices = _lookups(GatewayClient(), _gateway_context(request))
        except GatewayError as exc:
            # still render the form so the user can cancel
            choices = {}
            ctx["lookup_error"] = exc.message
        ctx["form"] = AppointmentForm(initial=draft.as_initial(), **choices)
        return render(request, "appointments/console/_form.html", ctx)

    if "cancel" in request.POST:
        return _navigate(request, _back_url(request))

    client = GatewayClient()
    context = _gateway_context(request)
    ctx = {"back_url": request.POST.get("next", "")}
    try:
        choices = _lookups(client, context, service_id=request.POST.get("service_id", ""))
    except GatewayError as exc:
        form = AppointmentForm(request.POST)
        form.add_error(None, exc.message)
        ctx["form"] = form
        return _render_form(request, ctx, status=502)

    form = AppointmentForm(request.POST, **choices)
    ctx["form"] = form
    if not form.is_valid():
        return _render_form(request, ctx, status=400)

    try:
        form.submit(client, context)
    except GatewayError as exc:
        form.add_error(None, exc.message)
        return _render_form(request, ctx, status=502)

    logger.info(
        "appointment created",
        extra={
            "professional_id": form.cleaned_data["professional_id"],
            "date": form.cleaned_data["date"].isoformat(),
        },
    )
    messages.success(request, "Appointment created.")
    return _navigate(request, _list_url())


@require_GET
def customer_search(request):
    """
    HTMX typeahead: <option> list for the customer <datalist>.
    The input posts its own name, so the text arrives as ?customer_id= (or ?q=).
    """
    q = (request.GET.get("q") or request.GET.get("customer_id") or "").strip()
    if len(q) < CUSTOMER_SEARCH_MIN_CHARS:
        return HttpResponse("")

    try:
        rows = GatewayClient().search_customers(q, _gateway_context(request), limit=CUSTOMER_SEARCH_LIMIT)
    except GatewayError as exc:
        logger.warning("customer search failed: %s", exc.message)
        return HttpResponse("")

    options = format_html_join(
        "",
        '<option value="{}">{}</option>',
        ((c["id"], c.get("name") or c["id"]) for c in rows if c.get("id")),
    )
    return HttpResponse(options)
