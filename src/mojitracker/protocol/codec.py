"""
Line framing for the tracker protocol.

A request is written as a single line::

    create_open domain=photos&class=thumbs&key=cat.jpg&multi_dest=1\r\n

and the tracker answers with either ``OK <form-encoded values>`` or
``ERR <error_code> <form-encoded text>``. A RequestHandler that owns the
socket uses these helpers to turn Requests into bytes and reply lines back
into Responses.
"""

from typing import Union
from urllib.parse import parse_qsl, unquote_plus, urlencode
import logging

from mojitracker.config.constants import (
    DEFAULT_ENCODING,
    LINE_TERMINATOR,
    RESPONSE_ERROR,
    RESPONSE_OK,
)
from mojitracker.operations.errors import TransportFault
from mojitracker.operations.interfaces.request import Request
from mojitracker.operations.interfaces.response import Response


logger = logging.getLogger(__name__)


def encode_request(request: Request, encoding: str = DEFAULT_ENCODING) -> bytes:
    """
    Encode a Request as a terminated protocol line.

    Args:
        request: Request to encode
        encoding: Character encoding of the connection

    Returns:
        Bytes to write to the tracker connection
    """
    query = urlencode(list(request.arguments.items()))
    return f"{request.command} {query}{LINE_TERMINATOR}".encode(encoding)


def decode_response(
    line: Union[str, bytes], encoding: str = DEFAULT_ENCODING
) -> Response:
    """
    Decode one reply line from the tracker.

    Args:
        line: Reply line, with or without its line terminator
        encoding: Character encoding used when ``line`` is bytes

    Returns:
        An OK Response carrying the decoded values, or an ERROR Response whose
        message is ``"<error_code> <text>"``

    Raises:
        TransportFault: When the line is not a well-formed tracker reply
    """
    if isinstance(line, bytes):
        try:
            line = line.decode(encoding)
        except UnicodeDecodeError as e:
            raise TransportFault(f"Tracker reply is not valid {encoding}", e) from e

    text = line.rstrip(LINE_TERMINATOR)
    status, _, rest = text.partition(" ")

    if status == RESPONSE_OK:
        return Response.ok(dict(parse_qsl(rest, keep_blank_values=True)))

    if status == RESPONSE_ERROR:
        code, _, detail = rest.strip().partition(" ")
        if not code:
            raise TransportFault(f"Tracker error reply carries no error code: {text!r}")
        message = f"{code} {unquote_plus(detail)}" if detail else code
        return Response.error(message)

    logger.error(f"Unrecognised tracker reply: {text!r}")
    raise TransportFault(f"Unrecognised tracker reply: {text!r}")
