from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class ResponseStatus(Enum):
    """Enum for tracker response statuses."""

    OK = "OK"
    ERROR = "ERROR"


@dataclass
class Response:
    """
    Result of performing a Request against the tracker.

    ``values`` is only meaningful when the status is OK and ``message`` only
    when the status is ERROR. An error message has the form
    ``"<error_code> <human readable text>"``.
    """

    status: ResponseStatus
    values: Dict[str, str] = field(default_factory=dict)
    message: Optional[str] = None

    @classmethod
    def ok(cls, values: Optional[Dict[str, str]] = None) -> "Response":
        """Create a successful response"""
        return cls(status=ResponseStatus.OK, values=dict(values or {}))

    @classmethod
    def error(cls, message: str) -> "Response":
        """Create an error response"""
        return cls(status=ResponseStatus.ERROR, message=message)

    def get_status(self) -> ResponseStatus:
        """Whether the tracker answered OK or ERROR"""
        return self.status

    def get_message(self) -> Optional[str]:
        """Error message of an ERROR response, None for OK responses"""
        return self.message

    def get_value(self, key: str) -> Optional[str]:
        """
        Look up a response value.

        Args:
            key: Response key, e.g. ``"fid"`` or ``"path_1"``

        Returns:
            The value, or None when the key is absent. An empty string is a
            present value and is returned as such.
        """
        return self.values.get(key)

    def is_ok(self) -> bool:
        """Shorthand for a status of ResponseStatus.OK"""
        return self.status is ResponseStatus.OK
