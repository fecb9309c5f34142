# tests/test_resources.py
"""
Unit tests for reading bundled resources into results.
"""

import pytest

from featuredemo import Failure, Success, read_resource, resource_path
from featuredemo.resources import read_text


@pytest.mark.unit
class TestResources:
    """Test resource lookup and capture of read failures."""

    def test_existing_resource(self):
        path = resource_path("test", "txt")

        result = read_resource("test", "txt")

        assert result == Success(path.read_text(encoding="utf-8"))
        assert result.value == "Hello from the bundled resource.\n"

    def test_missing_resource_is_failure(self):
        result = read_resource("test", "pdf")

        assert isinstance(result, Failure)
        assert isinstance(result.error, FileNotFoundError)

    def test_missing_resource_path_is_still_resolved(self):
        path = resource_path("test", "pdf")

        assert path.name == "test.pdf"
        assert not path.exists()

    def test_read_text(self, tmp_path):
        target = tmp_path / "note.txt"
        target.write_text("contents", encoding="utf-8")

        assert read_text(target) == "contents"

    @pytest.mark.parametrize("name", ["../../setup", "data/test", "..\\x"])
    def test_path_separators_are_rejected(self, name):
        with pytest.raises(ValueError):
            resource_path(name, "txt")

    def test_escaping_name_is_failure(self):
        result = read_resource("../../setup", "py")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValueError)
