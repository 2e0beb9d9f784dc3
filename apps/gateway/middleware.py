# apps/gateway/middleware.py
import logging

from .context import GatewayContext

logger = logging.getLogger(__name__)


class GatewayContextMiddleware:
    """
    Attach request.gateway (a GatewayContext) from the incoming headers.
    Missing headers are not an error here; identity checks live in the backend.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.gateway = GatewayContext.from_headers(request.headers)
        logger.debug(
            "gateway context",
            extra={
                "request_id": request.gateway.request_id,
                "company_id": request.gateway.company_id,
                "path": request.path,
            },
        )
        return self.get_response(request)
