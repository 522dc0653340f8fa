from mojitracker.operations.interfaces.operation import Operation
from mojitracker.operations.interfaces.request import Request
from mojitracker.operations.interfaces.request_handler import RequestHandler
from mojitracker.operations.interfaces.response import Response


class DeleteOperation(Operation):
    """Remove a key from a domain. A missing key raises UnknownKeyFault."""

    def __init__(self, request_handler: RequestHandler, domain: str, key: str):
        super().__init__(request_handler)
        self.domain = domain
        self.key = key

    def get_command_name(self) -> str:
        return "delete"

    def build_request(self) -> Request:
        return Request(
            command=self.get_command_name(),
            arguments={"domain": self.domain, "key": self.key},
        )

    def handle_response(self, response: Response) -> None:
        self.logger.debug(f"Deleted key '{self.key}' from domain '{self.domain}'")
