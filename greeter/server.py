from __future__ import annotations

import asyncio
import contextlib
import logging
import signal
import sys
import threading
from typing import Optional

import uvicorn
from uvicorn.server import HANDLED_SIGNALS

from .config import Settings
from .main import create_app


logger = logging.getLogger("greeter")


def configure_logging(level: int = logging.INFO) -> None:
    """Plain message lines on stdout, suitable for container log collectors."""
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


class GreeterServer(uvicorn.Server):
    """uvicorn server that reports its own lifecycle.

    Shutdown stops the listener, serves every connection opened before the
    signal without a deadline, and returns from ``run`` instead of
    re-raising the signal, so the process exits with status 0.
    """

    def __init__(self, config: uvicorn.Config, settings: Settings) -> None:
        super().__init__(config)
        self.settings = settings

    @property
    def bound_port(self) -> int:
        for server in getattr(self, "servers", []):
            for sock in server.sockets:
                return sock.getsockname()[1]
        return self.settings.port

    async def startup(self, sockets=None) -> None:
        # Bind errors end in sys.exit(1) inside uvicorn.
        await super().startup(sockets=sockets)
        if self.should_exit:
            return
        logger.info("Server running on port %s", self.bound_port)
        logger.info("Message: %s", self.settings.message)

    def handle_exit(self, sig: int, frame) -> None:
        if not self.should_exit:
            logger.info("%s received, closing server...", signal.Signals(sig).name)
        super().handle_exit(sig, frame)

    async def shutdown(self, sockets=None) -> None:
        """Stop accepting, then serve out every connection already open.

        A connection that has not been answered yet is kept until its request
        arrives and is answered. Keep-alive connections sitting between
        requests are closed.
        """
        for server in self.servers:
            server.close()
        for sock in sockets or []:
            sock.close()

        while self.server_state.connections and not self.force_exit:
            for connection in list(self.server_state.connections):
                wind_down(connection)
            await asyncio.sleep(0.1)
        while self.server_state.tasks and not self.force_exit:
            await asyncio.sleep(0.1)

        if not self.force_exit:
            await self.lifespan.shutdown()

    @contextlib.contextmanager
    def capture_signals(self):
        if threading.current_thread() is not threading.main_thread():
            yield
            return
        original_handlers = {sig: signal.signal(sig, self.handle_exit) for sig in HANDLED_SIGNALS}
        try:
            yield
        finally:
            for sig, handler in original_handlers.items():
                signal.signal(sig, handler)


def wind_down(connection) -> None:
    """Move one h11 connection towards closing without cutting a request."""
    if connection.transport.is_closing():
        return
    cycle = connection.cycle
    if cycle is None:
        # Opened but no request yet: wait for it.
        return
    if not cycle.response_complete:
        cycle.keep_alive = False
        return
    # Between requests: close unless the next one has started arriving.
    buffered, _ = connection.conn.trailing_data
    if not buffered:
        connection.shutdown()


def build_server(settings: Settings) -> GreeterServer:
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        http="h11",
        access_log=False,
    )
    return GreeterServer(config, settings)


def run(settings: Optional[Settings] = None) -> None:
    configure_logging()
    settings = settings or Settings.from_env()
    server = build_server(settings)
    server.run()
    logger.info("Server closed")


def main() -> None:
    run()
