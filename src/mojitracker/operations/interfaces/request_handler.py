from typing import Protocol, runtime_checkable

from .request import Request
from .response import Response


@runtime_checkable
class RequestHandler(Protocol):
    """
    Transport that carries a Request to a tracker and returns its Response.

    A single handler is shared by many operations, possibly across threads,
    so implementations must be safe for concurrent use. Connection, framing
    and timeout failures are reported by raising TransportFault.
    """

    def perform_request(self, request: Request) -> Response: ...
