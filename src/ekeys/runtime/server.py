from __future__ import annotations

import contextlib
import os
import socket
import threading
import time
from dataclasses import dataclass

import uvicorn

from ..sdk.client import EKeysClient
from .app import create_app

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


@dataclass(frozen=True)
class EKeysServer:
    host: str
    port: int
    url: str

    def client(self) -> EKeysClient:
        return EKeysClient(self.url.rstrip("/"))


def default_host() -> str:
    return os.getenv("EKEYS_HOST", "").strip() or DEFAULT_HOST


def default_port() -> int:
    raw = os.getenv("EKEYS_PORT", "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError as ex:
        raise ValueError(f"EKEYS_PORT must be an integer, got {raw!r}") from ex


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def run(
    *,
    host: str = DEFAULT_HOST,
    port: int = 0,
    log_level: str = "info",
    access_log: bool = False,
) -> EKeysServer:
    """Start the evaluation API in a background thread and return its address.

    `port=0` picks a free port. The thread is a daemon, so the server stops with
    the calling process.
    """

    if port == 0:
        port = _find_free_port(host)

    config = uvicorn.Config(create_app(), host=host, port=port, log_level=log_level, access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    # Give it a moment so an immediate client request doesn't race with startup.
    time.sleep(0.05)

    return EKeysServer(host=host, port=port, url=f"http://{host}:{port}/")


def serve(*, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT, log_level: str = "info") -> None:
    """Run the evaluation API in the foreground until interrupted."""
    uvicorn.run(create_app(), host=host, port=port, log_level=log_level)
