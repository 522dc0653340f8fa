from typing import List, Optional

from pydantic import AnyUrl

from mojitracker.config.logging_config import configure_logging
from mojitracker.config.settings import TrackerSettings, load_settings
from mojitracker.models.destination import Destination
from mojitracker.models.file_metadata import FileMetadata
from mojitracker.operations.executor.operation_executor import OperationExecutor
from mojitracker.operations.impl import (
    CreateCloseOperation,
    CreateOpenOperation,
    DeleteOperation,
    FileInfoOperation,
    GetPathsOperation,
    ListKeysOperation,
    NoopOperation,
    RenameOperation,
    UpdateStorageClassOperation,
)
from mojitracker.operations.interfaces.request_handler import RequestHandler


class Tracker:
    """
    Convenience client exposing one method per tracker verb.

    Every call builds a fresh operation against the shared request handler
    and runs it through the executor. The handler is borrowed, not owned:
    closing its connections is the caller's business.

    Usage:
        tracker = Tracker(handler)
        destinations = tracker.create_open("photos", "cat.jpg", "thumbs")
    """

    def __init__(
        self,
        request_handler: RequestHandler,
        settings: Optional[TrackerSettings] = None,
        executor: Optional[OperationExecutor] = None,
    ):
        self._request_handler = request_handler
        self._settings = settings or TrackerSettings()
        self._executor = executor or OperationExecutor()

    @classmethod
    def from_environment(
        cls, request_handler: RequestHandler, env_path: Optional[str] = None
    ) -> "Tracker":
        """
        Build a Tracker from MOJI_* settings and apply their log level.

        Args:
            request_handler: Shared transport for all operations
            env_path: Optional .env file passed to load_settings()

        Returns:
            Tracker configured with the loaded settings
        """
        settings = load_settings(env_path)
        configure_logging(settings.log_level)
        return cls(request_handler, settings=settings)

    @property
    def settings(self) -> TrackerSettings:
        return self._settings

    @property
    def executor(self) -> OperationExecutor:
        return self._executor

    def create_open(
        self,
        domain: str,
        key: str,
        storage_class: Optional[str] = None,
        multi_destination: Optional[bool] = None,
    ) -> List[Destination]:
        if multi_destination is None:
            multi_destination = self._settings.multi_destination
        operation = CreateOpenOperation(
            self._request_handler, domain, key, storage_class, multi_destination
        )
        self._executor.execute(operation)
        return operation.get_destinations()

    def create_close(
        self, domain: str, key: str, destination: Destination, size: int
    ) -> None:
        operation = CreateCloseOperation(
            self._request_handler, domain, key, destination, size
        )
        self._executor.execute(operation)

    def get_paths(
        self,
        domain: str,
        key: str,
        path_count: Optional[int] = None,
        no_verify: Optional[bool] = None,
    ) -> List[AnyUrl]:
        operation = GetPathsOperation(
            self._request_handler,
            domain,
            key,
            path_count if path_count is not None else self._settings.default_path_count,
            no_verify if no_verify is not None else self._settings.no_verify,
        )
        self._executor.execute(operation)
        return operation.get_paths()

    def delete(self, domain: str, key: str) -> None:
        self._executor.execute(DeleteOperation(self._request_handler, domain, key))

    def rename(self, domain: str, from_key: str, to_key: str) -> None:
        self._executor.execute(
            RenameOperation(self._request_handler, domain, from_key, to_key)
        )

    def list_keys(
        self, domain: str, prefix: str, limit: Optional[int] = None
    ) -> List[str]:
        operation = ListKeysOperation(
            self._request_handler,
            domain,
            prefix,
            limit if limit is not None else self._settings.list_keys_limit,
        )
        self._executor.execute(operation)
        return operation.get_keys()

    def file_info(self, domain: str, key: str) -> Optional[FileMetadata]:
        operation = FileInfoOperation(self._request_handler, domain, key)
        self._executor.execute(operation)
        return operation.get_file_metadata()

    def update_storage_class(self, domain: str, key: str, storage_class: str) -> None:
        self._executor.execute(
            UpdateStorageClassOperation(
                self._request_handler, domain, key, storage_class
            )
        )

    def noop(self) -> None:
        self._executor.execute(NoopOperation(self._request_handler))
