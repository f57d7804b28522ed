"""Serving — socket binding, uvicorn configuration, fatal bind failure."""

import logging
import socket

import pytest

import toolkit_server.__main__ as entry
from toolkit_server.core.errors import ServerStartupError
from toolkit_server.infrastructure.server import bind_listener, build_server


def test_bind_listener_binds_free_port():
    sock = bind_listener("127.0.0.1", 0)
    try:
        assert sock.getsockname()[1] > 0
    finally:
        sock.close()


def test_bind_listener_raises_on_busy_port():
    busy = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    busy.bind(("127.0.0.1", 0))
    busy.listen()
    port = busy.getsockname()[1]
    try:
        with pytest.raises(ServerStartupError) as exc_info:
            bind_listener("127.0.0.1", port)
    finally:
        busy.close()
    assert exc_info.value.code == "BIND_FAILED"
    assert exc_info.value.port == port


def test_build_server_applies_idle_timeout(app, settings):
    server = build_server(app, settings, "127.0.0.1", 8080)
    assert server.config.timeout_keep_alive == 30
    assert server.config.access_log is False
    assert server.config.port == 8080


def test_main_exits_on_bind_failure(monkeypatch, caplog, capsys):
    def fail_bind(host, port):
        raise ServerStartupError(host, port, "Address already in use")

    served = []
    monkeypatch.setattr(entry, "setup_logging", lambda level, fmt: None)
    monkeypatch.setattr(entry, "bind_listener", fail_bind)
    monkeypatch.setattr(entry, "serve", lambda server, sock: served.append(server))
    caplog.set_level(logging.CRITICAL)

    with pytest.raises(SystemExit) as exc_info:
        entry.main()

    assert exc_info.value.code == 1
    assert served == []
    assert "Address already in use" in caplog.text
    assert "Go Beginner Toolkit Server" in capsys.readouterr().out


def test_main_serves_on_fixed_port(monkeypatch):
    calls = {}

    class _Sock:
        pass

    def fake_bind(host, port):
        calls["bind"] = (host, port)
        return _Sock()

    monkeypatch.setattr(entry, "setup_logging", lambda level, fmt: None)
    monkeypatch.setattr(entry, "bind_listener", fake_bind)
    monkeypatch.setattr(entry, "serve", lambda server, sock: calls.setdefault("serve", server))

    entry.main()

    assert calls["bind"] == ("0.0.0.0", 8080)
    assert calls["serve"].config.port == 8080
