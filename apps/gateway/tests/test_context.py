import uuid
from datetime import datetime

from apps.gateway.context import GatewayContext


def test_from_headers_matches_any_casing():
    ctx = GatewayContext.from_headers(
        {
            "x-company-id": "c-1",
            "X-USER-ID": " u-1 ",
            "X-User-Role": "MANAGER",
            "Content-Type": "application/json",
        }
    )
    assert ctx.company_id == "c-1"
    assert ctx.user_id == "u-1"
    assert ctx.user_role == "MANAGER"
    assert ctx.request_id == ""
    assert ctx.is_identified


def test_missing_headers_are_empty():
    ctx = GatewayContext.from_headers({})
    assert ctx == GatewayContext()
    assert not ctx.is_identified
    assert ctx.to_headers() == {}


def test_to_headers_skips_empty_fields():
    ctx = GatewayContext(company_id="c-1", user_role="ADMIN")
    assert ctx.to_headers() == {"X-Company-ID": "c-1", "X-User-Role": "ADMIN"}


def test_forwarded_keeps_request_id():
    ctx = GatewayContext(company_id="c-1", request_id="req-42", source="api-gateway")
    out = ctx.forwarded("agendamento-web")
    assert out.source == "agendamento-web"
    assert out.request_id == "req-42"
    assert out.company_id == "c-1"
    assert datetime.fromisoformat(out.timestamp).tzinfo is not None
    # original untouched
    assert ctx.source == "api-gateway"


def test_forwarded_mints_request_id_when_missing():
    out = GatewayContext().forwarded("agendamento-web")
    assert uuid.UUID(out.request_id).version == 4
    headers = out.to_headers()
    assert headers["X-Gateway-Source"] == "agendamento-web"
    assert headers["X-Gateway-Request-ID"] == out.request_id
    assert "X-Gateway-Timestamp" in headers
