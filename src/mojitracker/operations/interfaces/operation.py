from abc import ABC, abstractmethod
from typing import FrozenSet, Optional, Tuple
import logging
import re

from pydantic import AnyUrl, TypeAdapter, ValidationError

from mojitracker.operations.errors import (
    MalformedResponse,
    OperationNotExecutedError,
    TrackerFault,
)
from .request import Request
from .request_handler import RequestHandler
from .response import Response, ResponseStatus


_URL_ADAPTER = TypeAdapter(AnyUrl)

# Decimal integers as the tracker writes them: ASCII digits, optional sign
_INTEGER_PATTERN = re.compile(r"-?[0-9]+")


def parse_error_message(message: Optional[str]) -> Tuple[str, str]:
    """
    Split a tracker error message into its error code and detail text.

    The code is the first whitespace-delimited token; the remainder, if any,
    is free text.

    Args:
        message: Message of an ERROR response, e.g. "unknown_key unknown key"

    Returns:
        Tuple of (code, detail). Both are empty strings for a blank message
        and detail is empty when the message is a bare code.
    """
    if not message:
        return "", ""
    parts = message.strip().split(None, 1)
    if not parts:
        return "", ""
    code = parts[0]
    detail = parts[1] if len(parts) > 1 else ""
    return code, detail


class Operation(ABC):
    """
    Base interface for all tracker operations.

    An operation turns typed parameters into a single Request, performs it
    through a shared RequestHandler and decodes the Response into typed
    results. Each instance is meant to be executed once; result accessors
    raise OperationNotExecutedError until execute() has completed.

    Subclasses implement:
    - get_command_name(): The tracker verb
    - build_request(): Argument encoding for the verb
    - handle_response(): Decoding of an OK response
    - handle_benign_error(): Result for error codes listed in
      benign_error_codes (only needed when that set is non-empty)
    """

    # Error codes that mean "empty result" for this verb rather than a fault
    benign_error_codes: FrozenSet[str] = frozenset()

    def __init__(self, request_handler: RequestHandler):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._request_handler = request_handler
        self._executed = False

    @abstractmethod
    def get_command_name(self) -> str:
        """
        Return the tracker verb this operation sends, e.g. 'create_open'.
        """
        pass

    @abstractmethod
    def build_request(self) -> Request:
        """
        Build the Request for this operation's parameters.

        Optional parameters that do not apply must be omitted from the
        arguments rather than sent empty.
        """
        pass

    @abstractmethod
    def handle_response(self, response: Response) -> None:
        """
        Decode a successful response into this operation's result state.

        Raises:
            MalformedResponse: When a required field is missing or unparsable
        """
        pass

    def handle_benign_error(self, code: str, detail: str) -> None:
        """
        Set the result state for an error code listed in benign_error_codes.

        Args:
            code: The benign error code reported by the tracker
            detail: Free text following the code
        """
        pass

    def execute(self) -> None:
        """
        Perform the request and decode the tracker's answer.

        Exceptions raised by the request handler propagate unchanged. Calling
        execute() again sends a new request.

        Raises:
            TrackerFault: When the tracker answers with a non-benign error code
            MalformedResponse: When a successful response cannot be decoded
        """
        self._executed = False
        request = self.build_request()
        self.logger.debug(f"Performing {request}")

        response = self._request_handler.perform_request(request)

        if response.get_status() is ResponseStatus.OK:
            self.handle_response(response)
        else:
            self._handle_error(response)

        self._executed = True

    def is_executed(self) -> bool:
        """Whether the last call to execute() completed without raising"""
        return self._executed

    def _handle_error(self, response: Response) -> None:
        message = response.get_message() or ""
        code, detail = parse_error_message(message)

        if code in self.benign_error_codes:
            self.logger.debug(
                f"'{self.get_command_name()}' returned benign error '{code}'"
            )
            self.handle_benign_error(code, detail)
            return

        self.logger.warning(
            f"'{self.get_command_name()}' failed with tracker error: {message}"
        )
        raise TrackerFault.from_error(self.get_command_name(), code, message)

    def _require_executed(self) -> None:
        if not self._executed:
            raise OperationNotExecutedError(self.get_command_name())

    def _get_string(self, response: Response, key: str) -> str:
        value = response.get_value(key)
        if value is None:
            raise MalformedResponse(
                self.get_command_name(), key, None, "required field is missing"
            )
        return value

    def _get_int(self, response: Response, key: str) -> int:
        value = self._get_string(response, key)
        if not _INTEGER_PATTERN.fullmatch(value):
            raise MalformedResponse(
                self.get_command_name(), key, value, "not an integer"
            )
        return int(value)

    def _get_count(self, response: Response, key: str) -> int:
        count = self._get_int(response, key)
        if count < 0:
            raise MalformedResponse(
                self.get_command_name(), key, str(count), "count is negative"
            )
        return count

    def _get_url(self, response: Response, key: str) -> AnyUrl:
        value = self._get_string(response, key)
        try:
            return _URL_ADAPTER.validate_python(value)
        except ValidationError as e:
            raise MalformedResponse(
                self.get_command_name(), key, value, "not a valid URL"
            ) from e

    def _check_no_index_beyond(
        self, response: Response, count: int, count_key: str, *key_patterns: str
    ) -> None:
        """Fail when any indexed key exists past the advertised count"""
        for key_pattern in key_patterns:
            extra_key = key_pattern.format(count + 1)
            if response.get_value(extra_key) is not None:
                raise MalformedResponse(
                    self.get_command_name(),
                    count_key,
                    str(count),
                    f"count disagrees with indexed values, found '{extra_key}'",
                )

    def __str__(self) -> str:
        """String representation of the operation"""
        return f"{self.__class__.__name__}(command='{self.get_command_name()}')"

    def __repr__(self) -> str:
        """Detailed string representation of the operation"""
        return (
            f"{self.__class__.__name__}("
            f"command='{self.get_command_name()}', "
            f"benign_error_codes={sorted(self.benign_error_codes)}, "
            f"executed={self._executed}"
            f")"
        )
