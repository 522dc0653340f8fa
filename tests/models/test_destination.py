import pytest
from pydantic import ValidationError

from mojitracker.models.destination import Destination


class TestDestination:
    def test_fields(self) -> None:
        destination = Destination(dev_id=1, fid=5, path="http://www.last.fm/1/")

        assert destination.get_dev_id() == 1
        assert destination.get_fid() == 5
        assert str(destination.get_path()) == "http://www.last.fm/1/"
        assert destination.get_path().host == "www.last.fm"

    def test_equal_fields_are_equal(self) -> None:
        assert Destination(dev_id=1, fid=5, path="http://www.last.fm/1/") == Destination(
            dev_id=1, fid=5, path="http://www.last.fm/1/"
        )
        assert Destination(dev_id=1, fid=5, path="http://www.last.fm/1/") != Destination(
            dev_id=2, fid=5, path="http://www.last.fm/1/"
        )

    def test_immutable(self) -> None:
        destination = Destination(dev_id=1, fid=5, path="http://www.last.fm/1/")

        with pytest.raises(ValidationError):
            destination.fid = 6

    def test_malformed_path(self) -> None:
        with pytest.raises(ValidationError):
            Destination(dev_id=1, fid=5, path="not a url")

    def test_raw_path_defaults_to_path_text(self) -> None:
        destination = Destination(dev_id=1, fid=5, path="http://www.last.fm/1/")

        assert destination.get_raw_path() == "http://www.last.fm/1/"

    def test_raw_path_kept_verbatim(self) -> None:
        destination = Destination(
            dev_id=1, fid=5, path="http://10.0.0.1:7500", raw_path="http://10.0.0.1:7500"
        )

        assert destination.get_raw_path() == "http://10.0.0.1:7500"
        assert str(destination.get_path()) == "http://10.0.0.1:7500/"
