"""
URL Token Sources
Random tokens appended to URLs to defeat caching (Call.unique)
"""
import random
import secrets
import threading
from abc import ABC, abstractmethod
from typing import Optional

from routecall.defaults import URL_TOKEN_BITS
from routecall.exceptions import InvalidArgumentException
from routecall.logging import getLogger

logger = getLogger(__name__)

# Signed 64-bit range: [-2**63, 2**63 - 1]
TOKEN_OFFSET = 1 << (URL_TOKEN_BITS - 1)


class TokenSource(ABC):
    """
    Source of cache-busting tokens

    Implementations must be safe to call from many threads at once.
    """

    @abstractmethod
    def next_token(self) -> int:
        """Return a signed integer spanning the full 64-bit range"""


class SecureTokenSource(TokenSource):
    """Tokens drawn from OS entropy via the secrets module"""

    def next_token(self) -> int:
        return secrets.randbits(URL_TOKEN_BITS) - TOKEN_OFFSET


class SeededTokenSource(TokenSource):
    """
    Deterministic token source

    Produces a reproducible sequence for a given seed. Access to the
    underlying generator is serialized with a lock.

    Usage:
        source = SeededTokenSource(42)
        call.unique(source)
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)
        self._lock = threading.Lock()

    def next_token(self) -> int:
        with self._lock:
            return self._random.getrandbits(URL_TOKEN_BITS) - TOKEN_OFFSET


_source_lock = threading.Lock()
_default_source: Optional[TokenSource] = None


def make_token_source(name: str, seed: Optional[int] = None) -> TokenSource:
    """
    Build a token source by name

    Args:
        name: 'secure' or 'seeded'
        seed: Seed for the 'seeded' source

    Returns:
        TokenSource instance

    Raises:
        InvalidArgumentException: If the name is unknown
    """
    normalized = str(name).strip().lower()
    if normalized == 'secure':
        return SecureTokenSource()
    if normalized == 'seeded':
        if seed is None:
            return SeededTokenSource()
        try:
            return SeededTokenSource(int(seed))
        except (TypeError, ValueError):
            raise InvalidArgumentException(f"URL token seed must be an integer, got [{seed}]")

    raise InvalidArgumentException(f"Unknown URL token source [{name}]")


def get_token_source() -> TokenSource:
    """
    Get the process-wide token source

    Built on first use from app.URL_TOKEN_SOURCE and app.URL_TOKEN_SEED.
    """
    global _default_source

    if _default_source is not None:
        return _default_source

    with _source_lock:
        if _default_source is None:
            from routecall.support import Config
            from routecall.defaults import DEFAULT_URL_TOKEN_SOURCE, DEFAULT_URL_TOKEN_SEED

            name = Config.get('app.URL_TOKEN_SOURCE', DEFAULT_URL_TOKEN_SOURCE)
            seed = Config.get('app.URL_TOKEN_SEED', DEFAULT_URL_TOKEN_SEED)
            _default_source = make_token_source(name, seed)
            logger.debug("URL token source initialized", extra={'token_source': name})

        return _default_source


def set_token_source(source: TokenSource):
    """Replace the process-wide token source"""
    global _default_source

    if not isinstance(source, TokenSource):
        raise InvalidArgumentException(
            f"Token source must be a TokenSource, got {type(source).__name__}"
        )

    with _source_lock:
        _default_source = source


def reset_token_source():
    """Drop the process-wide token source so it is rebuilt from config"""
    global _default_source

    with _source_lock:
        _default_source = None


def uniquify(url: str, token_source: Optional[TokenSource] = None) -> str:
    """
    Append a random token to a URL

    The separator is '&' when the url already contains a '?' anywhere,
    otherwise '?'. The check is a plain substring scan.

    Args:
        url: Path plus optional query string
        token_source: Token source (defaults to the process-wide source)

    Returns:
        URL with the token appended

    Example:
        uniquify('/assets/app.js')         # /assets/app.js?-4127730537812350261
        uniquify('/search?q=python')       # /search?q=python&8310271134089210037
    """
    if url is None:
        raise InvalidArgumentException("URL is required to append a unique token")

    source = token_source or get_token_source()
    separator = '&' if '?' in url else '?'
    unique_url = f"{url}{separator}{source.next_token()}"

    logger.debug("Uniquified call url", extra={'url': unique_url})
    return unique_url
