"""
HTTP Module
Reverse-routed calls and the URLs built from them
"""
from routecall.http.call import Call
from routecall.http.tokens import (
    TokenSource,
    SecureTokenSource,
    SeededTokenSource,
    get_token_source,
    set_token_source,
    reset_token_source,
    uniquify,
)
from routecall.http.request_info import request_is_secure, request_host
from routecall.http.response_helper import ResponseHelper

__all__ = [
    'Call',
    'TokenSource',
    'SecureTokenSource',
    'SeededTokenSource',
    'get_token_source',
    'set_token_source',
    'reset_token_source',
    'uniquify',
    'request_is_secure',
    'request_host',
    'ResponseHelper',
]
