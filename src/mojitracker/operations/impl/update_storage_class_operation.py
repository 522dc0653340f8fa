from mojitracker.operations.interfaces.operation import Operation
from mojitracker.operations.interfaces.request import Request
from mojitracker.operations.interfaces.request_handler import RequestHandler
from mojitracker.operations.interfaces.response import Response


class UpdateStorageClassOperation(Operation):
    """Move an existing file to another storage class"""

    def __init__(
        self, request_handler: RequestHandler, domain: str, key: str, storage_class: str
    ):
        super().__init__(request_handler)
        self.domain = domain
        self.key = key
        self.storage_class = storage_class

    def get_command_name(self) -> str:
        return "updateclass"

    def build_request(self) -> Request:
        return Request(
            command=self.get_command_name(),
            arguments={
                "domain": self.domain,
                "key": self.key,
                "class": self.storage_class,
            },
        )

    def handle_response(self, response: Response) -> None:
        self.logger.debug(
            f"Key '{self.key}' in domain '{self.domain}' moved to class '{self.storage_class}'"
        )
