"""Tests for group definition documents."""

import os
import tempfile

import pytest
import requests

from able.definition import (
    fetch_group_definition,
    load_group_definition,
    save_group_definition,
    validate_group_definition,
)
from able.types import AbleError, ErrorCode


class FakeResponse:
    def __init__(self, status_code=200, body=None, redirect=False):
        self.status_code = status_code
        self.ok = 200 <= status_code < 400
        self.is_redirect = redirect
        self.is_permanent_redirect = False
        self._body = body

    def json(self):
        if self._body is None:
            raise ValueError("No JSON")
        return self._body


class TestValidateGroupDefinition:
    def test_valid(self):
        validate_group_definition({"a": ["b"], "c": "d", "e": None})

    def test_not_an_object(self):
        with pytest.raises(AbleError, match="JSON object"):
            validate_group_definition(["a"])

    def test_bad_members(self):
        with pytest.raises(AbleError) as exc_info:
            validate_group_definition({"a": [1]})
        assert exc_info.value.code == ErrorCode.DEFINITION_INVALID


class TestLoadSave:
    def test_roundtrip(self):
        definition = {"writer": ["article:{articleId}:write"], "admin": "writer"}
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "groups.json")
            save_group_definition(definition, path)
            assert load_group_definition(path) == definition

    def test_invalid_json(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "groups.json")
            with open(path, "w") as f:
                f.write("{not json")
            with pytest.raises(AbleError, match="Invalid JSON"):
                load_group_definition(path)

    def test_invalid_utf8(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "groups.json")
            with open(path, "wb") as f:
                f.write(b'{"a": "\xff"}')
            with pytest.raises(AbleError, match="Invalid JSON") as exc_info:
                load_group_definition(path)
            assert exc_info.value.code == ErrorCode.DEFINITION_INVALID


class TestFetchGroupDefinition:
    def test_ok(self, monkeypatch):
        monkeypatch.setattr(requests, "get", lambda *a, **kw: FakeResponse(body={"a": ["b"]}))
        assert fetch_group_definition("https://example.com/groups.json") == {"a": ["b"]}

    def test_redirect_rejected(self, monkeypatch):
        monkeypatch.setattr(requests, "get", lambda *a, **kw: FakeResponse(301, redirect=True))
        with pytest.raises(AbleError, match="Redirect"):
            fetch_group_definition("https://example.com/groups.json")

    def test_http_error(self, monkeypatch):
        monkeypatch.setattr(requests, "get", lambda *a, **kw: FakeResponse(500))
        with pytest.raises(AbleError, match="HTTP 500") as exc_info:
            fetch_group_definition("https://example.com/groups.json")
        assert exc_info.value.code == ErrorCode.DEFINITION_FETCH_FAILED

    def test_connection_error(self, monkeypatch):
        def fail(*a, **kw):
            raise requests.ConnectionError("refused")

        monkeypatch.setattr(requests, "get", fail)
        with pytest.raises(AbleError, match="refused"):
            fetch_group_definition("https://example.com/groups.json")

    def test_invalid_document(self, monkeypatch):
        monkeypatch.setattr(requests, "get", lambda *a, **kw: FakeResponse(body={"a": 1}))
        with pytest.raises(AbleError) as exc_info:
            fetch_group_definition("https://example.com/groups.json")
        assert exc_info.value.code == ErrorCode.DEFINITION_INVALID
