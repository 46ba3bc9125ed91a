"""
Response Helpers
Redirect responses built from reverse-routed calls
"""
from typing import Any, Dict, Optional, Union

from sanic.response import HTTPResponse, redirect as sanic_redirect

from routecall.defaults import DEFAULT_REDIRECT_STATUS
from routecall.exceptions import InvalidArgumentException
from routecall.http.call import Call
from routecall.logging import getLogger

logger = getLogger(__name__)


class ResponseHelper:
    """
    Redirect helpers for Sanic handlers

    Example:
        @app.get('/old')
        async def old(request):
            return ResponseHelper.redirect(Call('GET', '/new', 'top'))

        @app.post('/login')
        async def login(request):
            return ResponseHelper.redirect_absolute(dashboard_call, request, status=303)
    """

    @staticmethod
    def redirect(
        target: Union[Call, str],
        status: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> HTTPResponse:
        """
        Redirect to a call's relative path (or a plain URL string)

        Args:
            target: Call rendered with path(), or a URL string used as-is
            status: Redirect status code (defaults to 302)
            headers: Additional response headers

        Returns:
            Sanic HTTPResponse with a Location header
        """
        from routecall.support import Config

        if status is None:
            configured = Config.get('http.REDIRECT_STATUS', DEFAULT_REDIRECT_STATUS)
            try:
                status = int(configured)
            except (TypeError, ValueError):
                raise InvalidArgumentException(
                    f"http.REDIRECT_STATUS must be an integer, got [{configured}]"
                )

        location = target.path() if isinstance(target, Call) else str(target)
        logger.debug("Redirecting", extra={'location': location, 'status': status})
        return sanic_redirect(location, headers=headers, status=status)

    @staticmethod
    def redirect_absolute(
        call: Call,
        request: Any,
        secure: Optional[bool] = None,
        status: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> HTTPResponse:
        """
        Redirect to a call's absolute URL on the request's host

        Args:
            call: Target call
            request: Request providing host and protocol
            secure: Overrides the request's protocol when given
            status: Redirect status code (defaults to 302)
            headers: Additional response headers
        """
        return ResponseHelper.redirect(call.absolute_url_for(request, secure), status, headers)
