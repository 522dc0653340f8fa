from mojitracker.models.destination import Destination
from mojitracker.operations.interfaces.operation import Operation
from mojitracker.operations.interfaces.request import Request
from mojitracker.operations.interfaces.request_handler import RequestHandler
from mojitracker.operations.interfaces.response import Response


class CreateCloseOperation(Operation):
    """
    Tell the tracker that a file opened with create_open has been written.

    The destination must be one returned by create_open for the same key;
    ``size`` is the number of bytes written to it.
    """

    def __init__(
        self,
        request_handler: RequestHandler,
        domain: str,
        key: str,
        destination: Destination,
        size: int,
    ):
        super().__init__(request_handler)
        self.domain = domain
        self.key = key
        self.destination = destination
        self.size = size

    def get_command_name(self) -> str:
        return "create_close"

    def build_request(self) -> Request:
        return Request(
            command=self.get_command_name(),
            arguments={
                "domain": self.domain,
                "key": self.key,
                "fid": str(self.destination.fid),
                "devid": str(self.destination.dev_id),
                "path": self.destination.raw_path,
                "size": str(self.size),
            },
        )

    def handle_response(self, response: Response) -> None:
        self.logger.debug(
            f"Closed fid {self.destination.fid} for key '{self.key}' ({self.size} bytes)"
        )
