from django.urls import path

from .api import GatewayContextView, HeaderContractView

app_name = "gateway_api"

urlpatterns = [
    path("gateway/headers/", HeaderContractView.as_view(), name="headers"),
    path("gateway/context/", GatewayContextView.as_view(), name="context"),
]
