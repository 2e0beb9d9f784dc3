# apps/gateway/client.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests
from django.conf import settings

from .context import GatewayContext
from .headers import HTTP_HEADERS

logger = logging.getLogger(__name__)

AGENDAMENTO_PREFIX = "/api/agendamento"
SERVICES_PREFIX = "/api/services"
CRM_PREFIX = "/api/crm"
DEFAULT_ERROR = "The scheduling service did not answer as expected."


class GatewayError(Exception):
    """The backend behind the gateway refused or failed a call."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


def _error_message(body: Any) -> str:
    # Backends answer either {"error": "text"} or {"error": {"message": "text"}}.
    if not isinstance(body, dict):
        return ""
    err = body.get("error")
    if isinstance(err, dict):
        return str(err.get("message") or "")
    return str(err or "")


class GatewayClient:
    """
    Thin requests wrapper for the gateway. Every call carries the identity
    headers of the GatewayContext it is given.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        source: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or settings.GATEWAY_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.GATEWAY_TIMEOUT
        self.source = source or settings.GATEWAY_SOURCE
        self.session = session or requests.Session()

    def _headers(self, context: GatewayContext) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        headers.update(context.forwarded(self.source).to_headers())
        return headers

    def request(self, method: str, path: str, context: GatewayContext, **kwargs) -> Any:
        """
        Send one request and unwrap the {"success", "data", "error"} envelope.
        Raises GatewayError for transport errors, non-2xx answers and
        envelopes with success != true.
        """
        url = f"{self.base_url}{path}"
        headers = self._headers(context)
        try:
            resp = self.session.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.error("gateway %s %s failed: %s", method, url, exc)
            raise GatewayError(DEFAULT_ERROR) from exc

        try:
            body = resp.json()
        except ValueError:
            body = None

        if not resp.ok or not isinstance(body, dict) or body.get("success") is not True:
            message = _error_message(body) or DEFAULT_ERROR
            logger.warning(
                "gateway %s %s -> %s: %s", method, url, resp.status_code, message,
                extra={"request_id": headers.get(HTTP_HEADERS["GATEWAY_REQUEST_ID"], "")},
            )
            raise GatewayError(message, status=resp.status_code)

        return body.get("data")

    def create_appointment(self, payload: Dict[str, Any], context: GatewayContext) -> Any:
        return self.request("POST", f"{AGENDAMENTO_PREFIX}/appointments", context, json=payload)

    def list_services(self, context: GatewayContext) -> list:
        return self.request("GET", f"{SERVICES_PREFIX}/list", context) or []

    def list_professionals(self, context: GatewayContext, service_id: str = "") -> list:
        params = {"service_id": service_id} if service_id else {}
        return self.request("GET", f"{SERVICES_PREFIX}/professionals", context, params=params) or []

    def search_customers(self, query: str, context: GatewayContext, limit: int = 10) -> list:
        return self.request(
            "GET", f"{CRM_PREFIX}/customers/search", context, params={"q": query, "limit": limit}
        ) or []
