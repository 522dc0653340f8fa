from typing import Callable, Iterator
import logging
from unittest.mock import Mock

import pytest

from mojitracker.config.settings import TrackerSettings
from mojitracker.models.destination import Destination
from mojitracker.operations.errors import TrackerFault, UnknownKeyFault
from mojitracker.operations.executor.operation_executor import OperationExecutor
from mojitracker.operations.interfaces.request import Request
from mojitracker.operations.interfaces.response import Response
from mojitracker.tracker import Tracker


@pytest.fixture
def tracker(mock_request_handler: Mock) -> Tracker:
    return Tracker(
        mock_request_handler,
        settings=TrackerSettings(default_path_count=4, list_keys_limit=50, multi_destination=False),
    )


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """The mojitracker logger, with its level restored afterwards"""
    logger = logging.getLogger("mojitracker")
    level = logger.level
    yield logger
    logger.setLevel(level)


class TestTracker:
    """Test the Tracker facade"""

    def test_create_open(
        self,
        tracker: Tracker,
        mock_request_handler: Mock,
        last_request: Callable[[], Request],
    ) -> None:
        mock_request_handler.perform_request.return_value = Response.ok(
            {"fid": "5", "dev_count": "1", "path_1": "http://www.last.fm/1/", "devid_1": "1"}
        )

        destinations = tracker.create_open("photos", "cat.jpg")

        assert destinations == [Destination(dev_id=1, fid=5, path="http://www.last.fm/1/")]
        assert last_request().arguments == {
            "domain": "photos",
            "key": "cat.jpg",
            "multi_dest": "0",
        }

    def test_create_open_unknown_key(
        self, tracker: Tracker, mock_request_handler: Mock
    ) -> None:
        mock_request_handler.perform_request.return_value = Response.error(
            "unknown_key unknown key"
        )

        assert tracker.create_open("photos", "cat.jpg", "thumbs", True) == []

    def test_get_paths_uses_settings(
        self,
        tracker: Tracker,
        mock_request_handler: Mock,
        last_request: Callable[[], Request],
    ) -> None:
        mock_request_handler.perform_request.return_value = Response.ok(
            {"paths": "1", "path1": "http://store1:7500/dev1/0/000/042.fid"}
        )

        paths = tracker.get_paths("photos", "cat.jpg")

        assert [str(path) for path in paths] == ["http://store1:7500/dev1/0/000/042.fid"]
        assert last_request().arguments["pathcount"] == "4"
        assert last_request().arguments["noverify"] == "0"

    def test_list_keys_explicit_limit(
        self,
        tracker: Tracker,
        mock_request_handler: Mock,
        last_request: Callable[[], Request],
    ) -> None:
        mock_request_handler.perform_request.return_value = Response.ok(
            {"key_count": "1", "key_1": "cat.jpg"}
        )

        assert tracker.list_keys("photos", "c", limit=7) == ["cat.jpg"]
        assert last_request().arguments["limit"] == "7"

    def test_list_keys_default_limit(
        self,
        tracker: Tracker,
        mock_request_handler: Mock,
        last_request: Callable[[], Request],
    ) -> None:
        mock_request_handler.perform_request.return_value = Response.error("none_match")

        assert tracker.list_keys("photos", "z") == []
        assert last_request().arguments["limit"] == "50"

    def test_file_info_unknown_key(
        self, tracker: Tracker, mock_request_handler: Mock
    ) -> None:
        mock_request_handler.perform_request.return_value = Response.error(
            "unknown_key unknown_key"
        )

        assert tracker.file_info("photos", "cat.jpg") is None

    def test_void_verbs(
        self, tracker: Tracker, mock_request_handler: Mock
    ) -> None:
        mock_request_handler.perform_request.return_value = Response.ok()
        destination = Destination(dev_id=1, fid=5, path="http://www.last.fm/1/")

        tracker.create_close("photos", "cat.jpg", destination, 10)
        tracker.rename("photos", "cat.jpg", "dog.jpg")
        tracker.update_storage_class("photos", "dog.jpg", "archive")
        tracker.delete("photos", "dog.jpg")
        tracker.noop()

        commands = [
            call.args[0].command
            for call in mock_request_handler.perform_request.call_args_list
        ]
        assert commands == ["create_close", "rename", "updateclass", "delete", "noop"]
        assert tracker.executor.get_execution_metrics()["successful_executions"] == 5

    def test_faults_reach_caller(
        self, tracker: Tracker, mock_request_handler: Mock
    ) -> None:
        mock_request_handler.perform_request.return_value = Response.error(
            "unknown_key unknown_key"
        )

        with pytest.raises(UnknownKeyFault):
            tracker.delete("photos", "cat.jpg")
        mock_request_handler.perform_request.return_value = Response.error("db_error oops")
        with pytest.raises(TrackerFault):
            tracker.rename("photos", "cat.jpg", "dog.jpg")

        assert tracker.executor.get_execution_metrics()["failed_executions"] == 2

    def test_shared_executor(self, mock_request_handler: Mock) -> None:
        executor = OperationExecutor()
        mock_request_handler.perform_request.return_value = Response.ok()

        Tracker(mock_request_handler, executor=executor).noop()
        Tracker(mock_request_handler, executor=executor).noop()

        assert executor.get_execution_metrics()["total_executions"] == 2

    def test_from_environment(
        self,
        mock_request_handler: Mock,
        monkeypatch: pytest.MonkeyPatch,
        package_logger: logging.Logger,
    ) -> None:
        monkeypatch.setenv("MOJI_PATH_COUNT", "6")
        monkeypatch.setenv("MOJI_LOG_LEVEL", "debug")

        tracker = Tracker.from_environment(mock_request_handler)

        assert tracker.settings.default_path_count == 6
        assert tracker.settings.log_level == "debug"
        assert package_logger.level == logging.DEBUG
