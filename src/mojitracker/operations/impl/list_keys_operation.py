from typing import List

from mojitracker.config.constants import NONE_MATCH
from mojitracker.operations.interfaces.operation import Operation
from mojitracker.operations.interfaces.request import Request
from mojitracker.operations.interfaces.request_handler import RequestHandler
from mojitracker.operations.interfaces.response import Response


class ListKeysOperation(Operation):
    """List up to ``limit`` keys of a domain that start with ``prefix``"""

    benign_error_codes = frozenset({NONE_MATCH})

    def __init__(
        self, request_handler: RequestHandler, domain: str, prefix: str, limit: int
    ):
        super().__init__(request_handler)
        self.domain = domain
        self.prefix = prefix
        self.limit = limit
        self._keys: List[str] = []

    def get_command_name(self) -> str:
        return "list_keys"

    def build_request(self) -> Request:
        return Request(
            command=self.get_command_name(),
            arguments={
                "domain": self.domain,
                "prefix": self.prefix,
                "limit": str(self.limit),
            },
        )

    def handle_response(self, response: Response) -> None:
        key_count = self._get_count(response, "key_count")
        keys = [
            self._get_string(response, f"key_{index}")
            for index in range(1, key_count + 1)
        ]
        self._check_no_index_beyond(response, key_count, "key_count", "key_{}")
        self._keys = keys

    def handle_benign_error(self, code: str, detail: str) -> None:
        self._keys = []

    def get_keys(self) -> List[str]:
        self._require_executed()
        return list(self._keys)
