from typing import Optional

from mojitracker.config.constants import UNKNOWN_KEY
from mojitracker.models.file_metadata import FileMetadata
from mojitracker.operations.interfaces.operation import Operation
from mojitracker.operations.interfaces.request import Request
from mojitracker.operations.interfaces.request_handler import RequestHandler
from mojitracker.operations.interfaces.response import Response


class FileInfoOperation(Operation):
    """
    Fetch the tracker's metadata for a key.

    An ``unknown_key`` error is not a failure here: the result is None.
    """

    benign_error_codes = frozenset({UNKNOWN_KEY})

    def __init__(self, request_handler: RequestHandler, domain: str, key: str):
        super().__init__(request_handler)
        self.domain = domain
        self.key = key
        self._metadata: Optional[FileMetadata] = None

    def get_command_name(self) -> str:
        return "file_info"

    def build_request(self) -> Request:
        return Request(
            command=self.get_command_name(),
            arguments={"domain": self.domain, "key": self.key},
        )

    def handle_response(self, response: Response) -> None:
        self._metadata = FileMetadata(
            domain=self._get_string(response, "domain"),
            key=self._get_string(response, "key"),
            fid=self._get_int(response, "fid"),
            device_count=self._get_count(response, "devcount"),
            length=self._get_int(response, "length"),
            storage_class=response.get_value("class") or None,
        )

    def handle_benign_error(self, code: str, detail: str) -> None:
        self._metadata = None

    def get_file_metadata(self) -> Optional[FileMetadata]:
        """Metadata for the key, or None when the tracker does not know it"""
        self._require_executed()
        return self._metadata
