"""Derive the rate-limit key for an incoming request."""

from fastapi import Request
from slowapi.util import get_remote_address


def get_client_key(request: Request) -> str:
    """Client IP as reported by the proxy chain, else the socket peer."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first

    real_ip = request.headers.get("x-real-ip")
    if real_ip and real_ip.strip():
        return real_ip.strip()

    return get_remote_address(request)
