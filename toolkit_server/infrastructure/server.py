"""Serving — listening socket and uvicorn server lifecycle.

Invariants:
    - The socket is bound before uvicorn starts, so bind failure surfaces as ServerStartupError
    - Idle keep-alive connections are closed after settings.idle_timeout_seconds

Design Decisions:
    - uvicorn.Server over uvicorn.run: accepts a pre-bound socket
    - access_log off: handlers log their own requests
"""

import logging
import socket

import uvicorn
from fastapi import FastAPI

from toolkit_server.config import Settings
from toolkit_server.core.errors import ServerStartupError

logger = logging.getLogger(__name__)


def bind_listener(host: str, port: int) -> socket.socket:
    """Bind a TCP socket for the server, raising ServerStartupError on failure."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as exc:
        sock.close()
        raise ServerStartupError(host, port, str(exc)) from exc
    sock.set_inheritable(True)
    return sock


def build_server(app: FastAPI, settings: Settings, host: str, port: int) -> uvicorn.Server:
    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        timeout_keep_alive=settings.idle_timeout_seconds,
        access_log=False,
        log_level=settings.log_level.lower(),
    )
    return uvicorn.Server(config)


def serve(server: uvicorn.Server, sock: socket.socket) -> None:
    """Run until interrupted; blocks the calling thread."""
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
        logger.info("Server stopped")
