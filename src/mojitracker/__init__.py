"""
Client-side operation layer for the MogileFS tracker protocol.

Operations turn typed parameters into tracker requests, send them through a
caller-supplied RequestHandler and decode the flat key-value replies into
typed results or typed failures.
"""

from mojitracker.models import Destination, FileMetadata
from mojitracker.operations.errors import (
    KeyExistsFault,
    MalformedResponse,
    OperationNotExecutedError,
    TrackerError,
    TrackerFault,
    TransportFault,
    UnknownKeyFault,
)
from mojitracker.operations.interfaces import (
    Operation,
    Request,
    RequestHandler,
    Response,
    ResponseStatus,
)
from mojitracker.tracker import Tracker

__all__ = [
    "Destination",
    "FileMetadata",
    "KeyExistsFault",
    "MalformedResponse",
    "Operation",
    "OperationNotExecutedError",
    "Request",
    "RequestHandler",
    "Response",
    "ResponseStatus",
    "Tracker",
    "TrackerError",
    "TrackerFault",
    "TransportFault",
    "UnknownKeyFault",
]
