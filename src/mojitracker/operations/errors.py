from typing import Optional

from mojitracker.config.constants import KEY_EXISTS, UNKNOWN_KEY


class TrackerError(Exception):
    """Base class for every error raised by the tracker operation layer"""


class TransportFault(TrackerError):
    """
    Raised by a RequestHandler when the tracker could not be reached or
    the reply could not be framed.

    Operations never catch this error; it reaches the caller of execute()
    unchanged.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.original_error = original_error
        super().__init__(message)


class TrackerFault(TrackerError):
    """Exception raised when the tracker answers a request with an error code"""

    def __init__(self, command_name: str, code: str, message: str):
        self.command_name = command_name
        self.code = code
        self.message = message
        super().__init__(
            f"Tracker rejected '{command_name}' with '{code}': {message}"
        )

    @classmethod
    def from_error(cls, command_name: str, code: str, message: str) -> "TrackerFault":
        """Build the most specific fault type known for the given error code"""
        fault_class = _FAULTS_BY_CODE.get(code, cls)
        return fault_class(command_name, code, message)


class UnknownKeyFault(TrackerFault):
    pass


class KeyExistsFault(TrackerFault):
    pass


class MalformedResponse(TrackerError):
    """Exception raised when a successful response is missing or garbles a field"""

    def __init__(
        self,
        command_name: str,
        key: str,
        value: Optional[str],
        reason: str,
    ):
        self.command_name = command_name
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(
            f"Malformed '{command_name}' response field '{key}'={value!r}: {reason}"
        )


class OperationNotExecutedError(TrackerError, RuntimeError):
    """Raised when results are read from an operation that has not completed"""

    def __init__(self, command_name: str):
        self.command_name = command_name
        super().__init__(
            f"Operation '{command_name}' has no result: execute() has not completed"
        )


_FAULTS_BY_CODE = {
    UNKNOWN_KEY: UnknownKeyFault,
    KEY_EXISTS: KeyExistsFault,
}
