from typing import Callable
from unittest.mock import Mock

import pytest

from mojitracker.operations.interfaces.request import Request
from mojitracker.operations.interfaces.request_handler import RequestHandler


@pytest.fixture
def mock_request_handler() -> Mock:
    """Create a mock request handler; tests set its return value"""
    return Mock(spec=RequestHandler)


@pytest.fixture
def last_request(mock_request_handler: Mock) -> Callable[[], Request]:
    """Return a callable giving the Request last passed to the mock handler"""

    def _last_request() -> Request:
        return mock_request_handler.perform_request.call_args.args[0]

    return _last_request
