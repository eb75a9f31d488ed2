import json
import os
import sys

import pytest

# Ensure repository root is on sys.path before importing project modules.
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from nano_rpc.config import NanoConfig  # noqa: E402
from nano_rpc.metrics import default_metrics  # noqa: E402
from nano_rpc.node_api import NanoRpcClient  # noqa: E402


class MockResponse:
    def __init__(self, body, status_code: int = 200):
        self.status_code = status_code
        if isinstance(body, bytes):
            self.content = body
        else:
            self.content = json.dumps(body).encode("utf-8")


class MockHttpClient:
    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []
        self.closed = False

    def post(self, url, json=None, headers=None):
        self.calls.append({"url": url, "json": json})
        if not self.responses:
            raise RuntimeError("No mock responses")
        return self.responses.pop(0)

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def reset_metrics():
    default_metrics.reset()
    yield
    default_metrics.reset()


@pytest.fixture
def rpc():
    """Build a client whose HTTP handle answers with the given JSON bodies in order."""

    def factory(*bodies, config: NanoConfig | None = None):
        http = MockHttpClient([b if isinstance(b, MockResponse) else MockResponse(b) for b in bodies])
        client = NanoRpcClient(config or NanoConfig(base_url="http://node.test:7076"), http_client=http)
        return client, http

    return factory
