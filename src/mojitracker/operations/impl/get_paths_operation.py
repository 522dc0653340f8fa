from typing import List

from pydantic import AnyUrl

from mojitracker.operations.interfaces.operation import Operation
from mojitracker.operations.interfaces.request import Request
from mojitracker.operations.interfaces.request_handler import RequestHandler
from mojitracker.operations.interfaces.response import Response


class GetPathsOperation(Operation):
    """
    Look up the URLs a stored file can be read from.

    The response carries ``paths`` followed by ``path1``..``pathN``; unlike
    create_open these indexed keys have no underscore.
    """

    def __init__(
        self,
        request_handler: RequestHandler,
        domain: str,
        key: str,
        path_count: int,
        no_verify: bool = False,
    ):
        super().__init__(request_handler)
        self.domain = domain
        self.key = key
        self.path_count = path_count
        self.no_verify = no_verify
        self._paths: List[AnyUrl] = []

    def get_command_name(self) -> str:
        return "get_paths"

    def build_request(self) -> Request:
        return Request(
            command=self.get_command_name(),
            arguments={
                "domain": self.domain,
                "key": self.key,
                "noverify": "1" if self.no_verify else "0",
                "pathcount": str(self.path_count),
            },
        )

    def handle_response(self, response: Response) -> None:
        count = self._get_count(response, "paths")
        paths = [self._get_url(response, f"path{index}") for index in range(1, count + 1)]
        self._check_no_index_beyond(response, count, "paths", "path{}")
        self._paths = paths

    def get_paths(self) -> List[AnyUrl]:
        self._require_executed()
        return list(self._paths)
