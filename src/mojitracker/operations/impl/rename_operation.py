from mojitracker.operations.interfaces.operation import Operation
from mojitracker.operations.interfaces.request import Request
from mojitracker.operations.interfaces.request_handler import RequestHandler
from mojitracker.operations.interfaces.response import Response


class RenameOperation(Operation):
    """
    Move a file to a new key within the same domain.

    Fails with UnknownKeyFault when ``from_key`` does not exist and with
    KeyExistsFault when ``to_key`` is already taken.
    """

    def __init__(
        self, request_handler: RequestHandler, domain: str, from_key: str, to_key: str
    ):
        super().__init__(request_handler)
        self.domain = domain
        self.from_key = from_key
        self.to_key = to_key

    def get_command_name(self) -> str:
        return "rename"

    def build_request(self) -> Request:
        return Request(
            command=self.get_command_name(),
            arguments={
                "domain": self.domain,
                "from_key": self.from_key,
                "to_key": self.to_key,
            },
        )

    def handle_response(self, response: Response) -> None:
        self.logger.debug(
            f"Renamed '{self.from_key}' to '{self.to_key}' in domain '{self.domain}'"
        )
