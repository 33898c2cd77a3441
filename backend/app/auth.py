"""
Notes API — Auth Gate
======================

What:  FastAPI dependency that rejects requests without an Authorization
       header and yields the caller's identity for everyone else.
Who:   Every /notes route depends on get_current_user.

Contract:
    - Header absent        → UnauthorizedError (401), handler never runs
    - Header present       → request passes, whatever the value is
    - Identity             → header value with a leading scheme removed
                             ("Bearer alice" → "alice", "alice" → "alice")

The credential is asserted, not verified. Swapping in real token
verification only means replacing extract_identity(); handlers already
receive the identity through this one dependency.
"""

import hashlib
import logging

from fastapi import Request

from app.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"

# Hex chars of the SHA-256 digest kept in log lines
FINGERPRINT_LENGTH = 12


def extract_identity(header_value: str) -> str:
    """Strip surrounding whitespace and an optional `<scheme> ` prefix."""
    value = header_value.strip()
    scheme, sep, rest = value.partition(" ")
    if sep:
        return rest.strip()
    return scheme


def identity_fingerprint(value: str) -> str:
    """
    Log-safe stand-in for an identity or owner name.

    The identity is the credential minus its scheme, so it may be a bearer
    token. Logs only ever see this digest; equal identities still share
    one fingerprint, which keeps log lines correlatable.
    """
    digest = hashlib.sha256(value.encode("utf-8")).hexdigest()
    return "u:" + digest[:FINGERPRINT_LENGTH]


async def get_current_user(request: Request) -> str:
    """
    Auth gate for the notes routes.

    Stores the identity on request.state.user so the access log can
    fingerprint who made the call without ever touching the raw header.
    """
    header_value = request.headers.get(AUTHORIZATION_HEADER)
    if header_value is None:
        logger.info("Rejected %s %s: no Authorization header", request.method, request.url.path)
        raise UnauthorizedError(context={"path": request.url.path})

    identity = extract_identity(header_value)
    request.state.user = identity
    return identity
