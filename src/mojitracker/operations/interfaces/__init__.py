"""
Operation interfaces for the tracker client.
"""

from .operation import Operation, parse_error_message
from .request import Request
from .request_handler import RequestHandler
from .response import Response, ResponseStatus

__all__ = [
    "Operation",
    "Request",
    "RequestHandler",
    "Response",
    "ResponseStatus",
    "parse_error_message",
]
