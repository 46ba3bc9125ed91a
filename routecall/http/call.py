"""
Call
Describes an HTTP request produced by reverse routing, used to build links,
redirect targets and WebSocket URLs
"""
from typing import Any, Optional

from routecall.exceptions import InvalidArgumentException
from routecall.http.request_info import request_host, request_is_secure
from routecall.http.tokens import TokenSource, uniquify


class Call:
    """
    Immutable (method, url, fragment) triple

    The url is the path plus optional query string; the fragment is kept
    apart from it and has no leading '#'.

    Usage:
        call = Call('GET', '/users/42?active=true', 'profile')
        call.path()                              # /users/42?active=true#profile
        call.absolute_url(True, 'example.com')   # https://example.com/users/42?active=true#profile
        call.web_socket_url(True, 'example.com') # wss://example.com/users/42?active=true
        call.unique()                            # Call('GET', '/users/42?active=true&<token>', 'profile')
    """

    __slots__ = ('_method', '_url', '_fragment')

    def __init__(self, method: str, url: str, fragment: Optional[str] = None):
        """
        Initialize a Call

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Path plus optional query string
            fragment: Fragment without leading '#', or None

        Raises:
            InvalidArgumentException: If method or url is missing
        """
        if not isinstance(method, str):
            raise InvalidArgumentException("Call method must be a string")
        if not isinstance(url, str):
            raise InvalidArgumentException("Call url must be a string")
        if fragment is not None and not isinstance(fragment, str):
            raise InvalidArgumentException("Call fragment must be a string or None")

        object.__setattr__(self, '_method', method)
        object.__setattr__(self, '_url', url)
        object.__setattr__(self, '_fragment', fragment)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # copy and pickle rebuild through the constructor, never through setattr
        return (Call, (self._method, self._url, self._fragment))

    @property
    def method(self) -> str:
        """The request HTTP method"""
        return self._method

    @property
    def url(self) -> str:
        """The request path and query string"""
        return self._url

    @property
    def fragment(self) -> Optional[str]:
        """The URL fragment, without leading '#'"""
        return self._fragment

    def unique(self, token_source: Optional[TokenSource] = None) -> 'Call':
        """
        Append a unique identifier to the URL

        Args:
            token_source: Token source (defaults to the process-wide source)

        Returns:
            A copy of this call with a random token added to its query string
        """
        return Call(self._method, uniquify(self._url, token_source), self._fragment)

    def with_fragment(self, fragment: Optional[str]) -> 'Call':
        """
        Returns a new Call with the given fragment

        Args:
            fragment: The URL fragment, or None to clear it

        Returns:
            A copy of this call that contains the fragment
        """
        return Call(self._method, self._url, fragment)

    def render_fragment(self) -> str:
        """
        Returns the fragment (including the leading '#') if this call has one

        Blank fragments are treated as no fragment.
        """
        if self._fragment is not None and self._fragment.strip():
            return f"#{self._fragment}"
        return ''

    def path(self) -> str:
        """Relative reference: url plus rendered fragment"""
        return self._url + self.render_fragment()

    def absolute_url(self, secure: bool, host: str) -> str:
        """
        Transform this call to an absolute URL

        Args:
            secure: True if the absolute URL should use HTTPS instead of HTTP
            host: The absolute URL's host (with optional port), used verbatim

        Returns:
            The absolute URL string
        """
        _require_host(host)
        return f"http{'s' if secure else ''}://{host}{self.path()}"

    def absolute_url_for(self, request: Any, secure: Optional[bool] = None) -> str:
        """
        Transform this call to an absolute URL based on a request

        Args:
            request: Request used to identify the host and protocol
            secure: Overrides the request's protocol when given

        Returns:
            The absolute URL string
        """
        if secure is None:
            secure = request_is_secure(request)
        return self.absolute_url(secure, request_host(request))

    def web_socket_url(self, secure: bool, host: str) -> str:
        """
        Transform this call to a WebSocket URL

        Fragments are never part of WebSocket URLs.

        Args:
            secure: True if it should be a wss rather than ws URL
            host: The host (with optional port), used verbatim

        Returns:
            The WebSocket URL string
        """
        _require_host(host)
        return f"ws{'s' if secure else ''}://{host}{self._url}"

    def web_socket_url_for(self, request: Any, secure: Optional[bool] = None) -> str:
        """
        Transform this call to a WebSocket URL based on a request

        Args:
            request: Request used to identify the host and protocol
            secure: Overrides the request's protocol when given

        Returns:
            The WebSocket URL string
        """
        if secure is None:
            secure = request_is_secure(request)
        return self.web_socket_url(secure, request_host(request))

    def __str__(self) -> str:
        return self.path()

    def __repr__(self) -> str:
        return f"Call(method={self._method!r}, url={self._url!r}, fragment={self._fragment!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Call):
            return NotImplemented
        return (self._method, self._url, self._fragment) == (other._method, other._url, other._fragment)

    def __hash__(self) -> int:
        return hash((self._method, self._url, self._fragment))


def _require_host(host: Optional[str]):
    if host is None or host == '':
        raise InvalidArgumentException("Host is required to build an absolute URL")
