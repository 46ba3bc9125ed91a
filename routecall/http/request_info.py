"""
Request Info
Reads scheme security and host from request objects

Works with Sanic requests (which expose `scheme` and `host`) and with any
object exposing a boolean `secure` attribute and a `host`.
"""
from typing import Any

from routecall.exceptions import InvalidArgumentException

SECURE_SCHEMES = ('https', 'wss')


def request_is_secure(request: Any) -> bool:
    """
    Determine whether a request arrived over a secure transport

    Args:
        request: Request-like object

    Returns:
        True for https/wss requests

    Raises:
        InvalidArgumentException: If the request carries no security information
    """
    if request is None:
        raise InvalidArgumentException("Request is required to resolve the URL scheme")

    secure = getattr(request, 'secure', None)
    if secure is not None:
        return bool(secure)

    scheme = getattr(request, 'scheme', None)
    if scheme:
        return str(scheme).lower() in SECURE_SCHEMES

    raise InvalidArgumentException(
        f"Cannot determine scheme of {type(request).__name__}: expected 'secure' or 'scheme'"
    )


def request_host(request: Any) -> str:
    """
    Get the host (with optional port) a request was addressed to

    Raises:
        InvalidArgumentException: If the request has no host
    """
    if request is None:
        raise InvalidArgumentException("Request is required to resolve the URL host")

    host = getattr(request, 'host', None)
    if not host:
        raise InvalidArgumentException(f"{type(request).__name__} has no host")

    return host
