# apps/gateway/headers.py
"""
Custom HTTP headers that carry tenant/user context across the gateway.

This is the single source of truth for the header names. Set them with the
wire value as-is; read them through get_header_key() since servers and
proxies may change the casing.

    headers[HTTP_HEADERS["COMPANY_ID"]] = company_id
    lowered = {get_header_key(k): v for k, v in incoming.items()}
    company_id = lowered[get_header_key(HTTP_HEADERS["COMPANY_ID"])]
"""
from types import MappingProxyType

HTTP_HEADERS = MappingProxyType(
    {
        # tenant (company) in the multi-tenant backend
        "COMPANY_ID": "X-Company-ID",
        "USER_ID": "X-User-ID",
        "USER_ROLE": "X-User-Role",
        # who forwarded the request (gateway or this site)
        "GATEWAY_SOURCE": "X-Gateway-Source",
        "GATEWAY_TIMESTAMP": "X-Gateway-Timestamp",
        "GATEWAY_REQUEST_ID": "X-Gateway-Request-ID",
    }
)


def get_header_key(header_name: str) -> str:
    """I return the lowercase form of a header name for case-insensitive lookups."""
    return header_name.lower()


def meta_key(header_name: str) -> str:
    """Django's request.META key for a header (X-User-ID -> HTTP_X_USER_ID)."""
    return "HTTP_" + header_name.upper().replace("-", "_")


# Same headers keyed the way request.META / the test client expects them.
META_KEYS = MappingProxyType({name: meta_key(value) for name, value in HTTP_HEADERS.items()})
