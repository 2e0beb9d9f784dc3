# apps/tokens/diagnostics.py
"""
Throwaway helpers for poking at a JWT seen in the wild: read its claims
and find out which of the usual dev secrets signed it.

Nothing here guards anything. The token and secrets are literals so the
management commands can run with no setup.
"""
from __future__ import annotations

import base64
import binascii
import json
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

import jwt

# HS256, payload: userId, email, firstName, lastName, role, companyId, iat, exp
SAMPLE_TOKEN = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJ1c2VySWQiOiIzNTkwNzU5ZC05NzQ5LTRhYjMtYjVkNC0wMjAzMTJlMmZmNjciLCJlbWFpbCI6Im1hbmFnZXJAbmV4dXMuY29tIiwi"
    "Zmlyc3ROYW1lIjoiTWFuYWdlciIsImxhc3ROYW1lIjoiRGVtbyIsInJvbGUiOiJNQU5BR0VSIiwiY29tcGFueUlkIjoiOWI3ODM2MGMt"
    "ZWJlOS00ZjBhLTk3OWYtNTU5ODY2ZTNjZDA1IiwiaWF0IjoxNzM2NDUxMjc0LCJleHAiOjE3MzY0NTQ4NzR9."
    "F5G-nULcUQf51eTl7XI4O5jLiy-MVOUSvOPgkn7SEkg"
)

PRIMARY_SECRET = "your-super-secret-jwt-key-change-in-production"

CANDIDATE_SECRETS = (
    "nexus-jwt-secret",
    "super-secret-key",
    "development-secret",
    "jwt-secret-key",
)

ALGORITHMS = ["HS256"]


class TokenDecodeError(ValueError):
    """The token's payload segment is not base64url-encoded JSON."""


def _b64url_decode(segment: str) -> bytes:
    padded = segment + "=" * (-len(segment) % 4)
    # urlsafe_b64decode silently drops characters outside the alphabet
    return base64.b64decode(padded.encode("ascii"), altchars=b"-_", validate=True)


def decode_payload(token: str) -> Dict[str, Any]:
    """
    Return the claims of `token` without checking the signature.
    Raises TokenDecodeError when the middle segment is missing or is not
    base64url-encoded JSON object.
    """
    parts = token.strip().split(".")
    if len(parts) < 2 or not parts[1]:
        raise TokenDecodeError("token has no payload segment")

    try:
        raw = _b64url_decode(parts[1])
        claims = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeError) as exc:
        raise TokenDecodeError(f"payload is not valid base64url: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise TokenDecodeError(f"payload is not valid JSON: {exc}") from exc

    if not isinstance(claims, dict):
        raise TokenDecodeError("payload is not a JSON object")
    return claims


@dataclass(frozen=True)
class VerificationAttempt:
    secret: str
    valid: bool
    claims: Dict[str, Any] = field(default_factory=dict)
    error: str = ""
    expired: bool = False


def verify_signature(token: str, secret: str, now: Optional[float] = None) -> VerificationAttempt:
    """
    Check the HS256 signature of `token` with `secret`.

    Expiry is reported, not enforced: an old token still tells us which
    secret signed it.
    """
    try:
        claims = jwt.decode(token, secret, algorithms=ALGORITHMS, options={"verify_exp": False})
    except jwt.InvalidTokenError as exc:
        return VerificationAttempt(secret=secret, valid=False, error=str(exc) or type(exc).__name__)

    exp = claims.get("exp")
    expired = isinstance(exp, (int, float)) and exp < (time.time() if now is None else now)
    return VerificationAttempt(secret=secret, valid=True, claims=claims, expired=expired)


def scan_secrets(
    token: str,
    primary: str = PRIMARY_SECRET,
    candidates: Iterable[str] = CANDIDATE_SECRETS,
) -> List[VerificationAttempt]:
    """
    Try `primary`, then each candidate in order; stop at the first secret
    that verifies. Returns every attempt made.
    """
    attempts: List[VerificationAttempt] = []
    for secret in (primary, *candidates):
        attempt = verify_signature(token, secret)
        attempts.append(attempt)
        if attempt.valid:
            break
    return attempts
