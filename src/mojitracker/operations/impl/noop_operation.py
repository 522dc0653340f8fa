from mojitracker.operations.interfaces.operation import Operation
from mojitracker.operations.interfaces.request import Request
from mojitracker.operations.interfaces.response import Response


class NoopOperation(Operation):
    """
    Round-trip a no-op command, used to check that a tracker is answering.
    """

    def get_command_name(self) -> str:
        return "noop"

    def build_request(self) -> Request:
        return Request(command=self.get_command_name())

    def handle_response(self, response: Response) -> None:
        pass
