# apps/gateway/api.py
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_spectacular.utils import extend_schema, OpenApiExample

from .context import GatewayContext
from .headers import HTTP_HEADERS
from .serializers import GatewayContextSerializer, HeaderContractSerializer


@extend_schema(
    summary="Gateway header contract",
    description="I list the custom headers used to carry company/user context between services.",
    responses={200: HeaderContractSerializer},
    examples=[
        OpenApiExample(
            "Contract",
            value={"headers": {"COMPANY_ID": "X-Company-ID", "USER_ID": "X-User-ID"}},
            response_only=True,
        )
    ],
)
class HeaderContractView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response(HeaderContractSerializer({"headers": dict(HTTP_HEADERS)}).data)


@extend_schema(
    summary="Echo gateway context",
    description=(
        "I return the identity context this request arrived with. "
        "Handy for checking that the gateway forwards the headers."
    ),
    responses={200: GatewayContextSerializer},
)
class GatewayContextView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        ctx = getattr(request, "gateway", None) or GatewayContext.from_headers(request.headers)
        payload = {**ctx.as_dict(), "is_identified": ctx.is_identified}
        return Response(GatewayContextSerializer(payload).data)
