import json
import logging
from contextlib import contextmanager

import pytest
import requests

from bera_verifier.core.config import VerifierConfig

ADDRESS = "0xAAA0000000000000000000000000000000000001"

FOO_INPUT = {
    "language": "Solidity",
    "sources": {
        "contracts/Foo.sol": {"content": "contract Foo {}"},
    },
    "ContractName": "Foo",
}


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self._payload = payload
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if self._payload is None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


def lookup_record(**overrides):
    record = {
        "SourceCode": "{" + json.dumps(FOO_INPUT) + "}",
        "ABI": "[]",
        "ContractName": "Foo",
        "CompilerVersion": "v0.8.24+commit.e11b9ed9",
        "OptimizationUsed": "1",
        "Runs": "200",
        "ConstructorArguments": "0xabc123",
        "EVMVersion": "paris",
    }
    record.update(overrides)
    return record


@pytest.fixture
def config(tmp_path):
    return VerifierConfig(api_key="test-key", working_dir=tmp_path / "bera")


@pytest.fixture
def http(monkeypatch):
    """Stub requests.get/post with queued FakeResponses and record the calls."""

    class Recorder:
        def __init__(self):
            self.get_response = FakeResponse({"status": "1", "result": [lookup_record()]})
            self.post_response = FakeResponse({"status": "1", "message": "OK", "result": "abc-guid"})
            self.get_calls = []
            self.post_calls = []

        def get(self, url, **kwargs):
            self.get_calls.append((url, kwargs))
            if isinstance(self.get_response, Exception):
                raise self.get_response
            return self.get_response

        def post(self, url, **kwargs):
            self.post_calls.append((url, kwargs))
            if isinstance(self.post_response, Exception):
                raise self.post_response
            return self.post_response

    recorder = Recorder()
    monkeypatch.setattr(requests, "get", recorder.get)
    monkeypatch.setattr(requests, "post", recorder.post)
    return recorder


@contextmanager
def bare_root_logger():
    """Detach pytest's root handlers so logging.basicConfig takes effect."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)
