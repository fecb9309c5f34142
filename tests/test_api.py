# tests/test_api.py
"""
Unit tests for the stubbed fetch.
"""

from unittest.mock import Mock

import httpx
import pytest

from featuredemo import APIError, Failure, Success, build_request, fetch, fetch_result


@pytest.mark.unit
class TestFetch:
    """Test completion handler delivery."""

    def test_build_request_is_not_sent(self):
        request = build_request("https://example.com")

        assert isinstance(request, httpx.Request)
        assert request.method == "GET"
        assert request.url.scheme == "https"
        assert request.url.host == "example.com"

    def test_request_is_printed_before_completion(self, capsys):
        events = []

        def completion(result):
            events.append(capsys.readouterr().out)

        fetch(build_request("https://example.com"), completion)

        assert events == ["urlRequest https://example.com\n"]

    def test_missing_request_prints_nothing(self, capsys):
        fetch(None, lambda result: None)

        assert capsys.readouterr().out == ""

    def test_missing_request_reports_others_once(self):
        completion = Mock()

        assert fetch(None, completion) is None

        completion.assert_called_once_with(Failure(APIError.OTHERS))

    def test_request_reports_success_once(self):
        completion = Mock()

        fetch(build_request("https://example.com"), completion)

        completion.assert_called_once_with(Success(1))

    def test_handler_runs_before_return(self):
        events = []

        fetch(build_request("https://example.com"), lambda result: events.append(result))
        events.append("returned")

        assert events == [Success(1), "returned"]

    def test_custom_success_count(self):
        completion = Mock()

        fetch(build_request("https://example.com"), completion, success_count=7)

        completion.assert_called_once_with(Success(7))

    def test_fetch_result(self):
        assert fetch_result(None) == Failure(APIError.OTHERS)
        assert fetch_result(build_request("https://example.com")) == Success(1)

    def test_no_transport_is_used(self, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("network access attempted")

        monkeypatch.setattr(httpx.Client, "send", fail)

        assert fetch_result(build_request("https://example.com")).is_success
