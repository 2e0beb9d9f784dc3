# config/urls.py
from django.http import JsonResponse
from django.urls import include, path
from django.views.generic import RedirectView

from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="appointments_ui:appointments", permanent=False)),

    # Healthcheck
    path("health/", lambda r: JsonResponse({"ok": True}, status=200), name="health"),

    # OpenAPI schema + Swagger UI
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),

    # ---------- v1 APIs ----------
    path("api/v1/", include(("apps.gateway.api_urls", "gateway_api"), namespace="gateway_api")),

    # ---------- Console (UI) ----------
    path("console/", include(("apps.appointments.ui_urls", "appointments_ui"), namespace="appointments_ui")),
]
