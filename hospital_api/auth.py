"""Signed access tokens and the request guard that checks them."""

from __future__ import annotations

import time
from functools import wraps
from typing import Any, Callable

import jwt
from flask import g, jsonify, request

from .models import Staff

TOKEN_LIFETIME_SECONDS = 72 * 60 * 60
_BEARER = "Bearer "
_HMAC_ALGORITHMS = ["HS256", "HS384", "HS512"]


class TokenError(Exception):
    """Raised when a token cannot be verified or lacks its claims."""


def issue_token(staff: Staff, secret: str) -> str:
    """Return an HS256 token naming the staff member and hospital, valid for 72 hours."""
    claims = {
        "sid": staff.id,
        "hid": staff.hospital_id,
        "exp": int(time.time()) + TOKEN_LIFETIME_SECONDS,
    }
    return jwt.encode(claims, secret, algorithm="HS256")


def _numeric_claim(claims: dict[str, Any], name: str) -> int:
    value = claims.get(name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TokenError(f"claim {name!r} missing or not a number")
    return int(value)


def decode_token(token: str, secret: str) -> tuple[int, int]:
    """Verify a token and return its (staff id, hospital id)."""
    try:
        claims = jwt.decode(token, secret, algorithms=_HMAC_ALGORITHMS)
    except jwt.InvalidTokenError as exc:
        raise TokenError(str(exc)) from exc
    return _numeric_claim(claims, "sid"), _numeric_claim(claims, "hid")


def require_auth(secret: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Guard a view with a bearer token; sets ``g.staff_id`` and ``g.hospital_id``."""

    def decorator(view: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view)
        def guarded(*args: Any, **kwargs: Any) -> Any:
            header = request.headers.get("Authorization", "")
            if not header.startswith(_BEARER):
                return jsonify(error="missing token"), 401
            try:
                g.staff_id, g.hospital_id = decode_token(header[len(_BEARER):], secret)
            except TokenError:
                return jsonify(error="invalid token"), 401
            return view(*args, **kwargs)

        return guarded

    return decorator