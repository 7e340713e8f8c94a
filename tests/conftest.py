from pathlib import Path
from typing import Callable, List

import httpx
import pytest

Handler = Callable[[httpx.Request], httpx.Response]


class _Recorder:
    """Captures requests sent through the patched httpx client."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.handler: Handler = lambda request: httpx.Response(200, json={"IpfsHash": "Qm123"})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def pinata(monkeypatch: pytest.MonkeyPatch) -> _Recorder:
    """Route every httpx.AsyncClient through a MockTransport."""
    recorder = _Recorder()
    real_client = httpx.AsyncClient

    def fake_client(*args: object, **kwargs: object) -> httpx.AsyncClient:
        kwargs["transport"] = httpx.MockTransport(recorder)
        return real_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "AsyncClient", fake_client)
    return recorder


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "metadata.json"
    path.write_bytes(b'{"name": "token"}')
    return path


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run each test without a real PINATA_JWT or .env file in scope."""
    monkeypatch.delenv("PINATA_JWT", raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
