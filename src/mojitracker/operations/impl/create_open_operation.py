from typing import Dict, List, Optional

from mojitracker.config.constants import UNKNOWN_KEY
from mojitracker.models.destination import Destination
from mojitracker.operations.interfaces.operation import Operation
from mojitracker.operations.interfaces.request import Request
from mojitracker.operations.interfaces.request_handler import RequestHandler
from mojitracker.operations.interfaces.response import Response


class CreateOpenOperation(Operation):
    """
    Ask the tracker for a file id and the devices a new file may be written to.

    The tracker answers with a file id shared by every destination and a
    ``dev_count`` followed by ``path_<i>``/``devid_<i>`` pairs for i in
    1..dev_count. An ``unknown_key`` error means there is nothing allocated
    for the key and yields an empty destination list.
    """

    benign_error_codes = frozenset({UNKNOWN_KEY})

    def __init__(
        self,
        request_handler: RequestHandler,
        domain: str,
        key: str,
        storage_class: Optional[str],
        multi_destination: bool,
    ):
        super().__init__(request_handler)
        self.domain = domain
        self.key = key
        self.storage_class = storage_class
        self.multi_destination = multi_destination
        self._destinations: List[Destination] = []

    def get_command_name(self) -> str:
        return "create_open"

    def build_request(self) -> Request:
        arguments: Dict[str, str] = {"domain": self.domain}
        if self.storage_class:
            arguments["class"] = self.storage_class
        arguments["key"] = self.key
        arguments["multi_dest"] = "1" if self.multi_destination else "0"
        return Request(command=self.get_command_name(), arguments=arguments)

    def handle_response(self, response: Response) -> None:
        fid = self._get_int(response, "fid")
        dev_count = self._get_count(response, "dev_count")

        destinations: List[Destination] = []
        for index in range(1, dev_count + 1):
            raw_path = self._get_string(response, f"path_{index}")
            path = self._get_url(response, f"path_{index}")
            dev_id = self._get_int(response, f"devid_{index}")
            destinations.append(
                Destination(dev_id=dev_id, fid=fid, path=path, raw_path=raw_path)
            )
        self._check_no_index_beyond(
            response, dev_count, "dev_count", "path_{}", "devid_{}"
        )

        self.logger.debug(
            f"Opened key '{self.key}' in domain '{self.domain}' as fid {fid} "
            f"with {len(destinations)} destination(s)"
        )
        self._destinations = destinations

    def handle_benign_error(self, code: str, detail: str) -> None:
        self._destinations = []

    def get_destinations(self) -> List[Destination]:
        """
        Destinations allocated by the tracker, ordered by response index.

        Raises:
            OperationNotExecutedError: When execute() has not completed
        """
        self._require_executed()
        return list(self._destinations)
