# apps/gateway/context.py
from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass, replace
from datetime import datetime, timezone
from typing import Dict, Mapping

from .headers import HTTP_HEADERS, get_header_key

# dataclass field -> logical header name
_FIELDS = {
    "company_id": "COMPANY_ID",
    "user_id": "USER_ID",
    "user_role": "USER_ROLE",
    "source": "GATEWAY_SOURCE",
    "timestamp": "GATEWAY_TIMESTAMP",
    "request_id": "GATEWAY_REQUEST_ID",
}


@dataclass(frozen=True)
class GatewayContext:
    """Tenant/user identity as carried by the gateway headers."""

    company_id: str = ""
    user_id: str = ""
    user_role: str = ""
    source: str = ""
    timestamp: str = ""
    request_id: str = ""

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "GatewayContext":
        """
        Build a context from any header mapping. Names are matched
        case-insensitively; absent headers come back as "".
        """
        lowered = {get_header_key(k): v for k, v in headers.items()}
        values = {
            field: (lowered.get(get_header_key(HTTP_HEADERS[name])) or "").strip()
            for field, name in _FIELDS.items()
        }
        return cls(**values)

    @property
    def is_identified(self) -> bool:
        return bool(self.company_id and self.user_id)

    def to_headers(self) -> Dict[str, str]:
        """Wire headers for the non-empty fields only."""
        return {
            HTTP_HEADERS[name]: getattr(self, field)
            for field, name in _FIELDS.items()
            if getattr(self, field)
        }

    def forwarded(self, source: str) -> "GatewayContext":
        """
        I stamp a copy for an outbound call: new source and timestamp, and
        the incoming request id kept so calls can be traced end to end.
        """
        return replace(
            self,
            source=source,
            timestamp=datetime.now(timezone.utc).isoformat(),
            request_id=self.request_id or str(uuid.uuid4()),
        )

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)
