"""Process entry point: run the info server under uvicorn.

The server binds to ``0.0.0.0:$PORT`` and logs one line once the socket is
listening. SIGTERM and SIGINT both log a line and end the process with exit
status 0 straight away; in-flight requests are not drained.
"""

import logging
import os
import signal
import socket
from types import FrameType
from typing import List, Optional

import uvicorn

from webapp.core.config import get_settings
from webapp.core.logging import configure_logging

# Fixed name so the lines keep the "webapp" level when run with python -m
logger = logging.getLogger("webapp.server")


def shutdown(sig: int, frame: Optional[FrameType] = None) -> None:
    """Log the received signal and exit with a success status."""
    name = signal.Signals(sig).name
    logger.info("%s received, shutting down gracefully", name)
    # Flush handlers, then leave without unwinding the event loop
    logging.shutdown()
    os._exit(0)


class InfoServer(uvicorn.Server):
    async def startup(self, sockets: Optional[List[socket.socket]] = None) -> None:
        await super().startup(sockets=sockets)
        # uvicorn exits on bind failure, so reaching here unstarted means a
        # shutdown was requested during startup
        if self.started:
            logger.info("Server running on port %s", self.config.port)

    def handle_exit(self, sig: int, frame: Optional[FrameType]) -> None:
        shutdown(sig, frame)


def build_server(app: str = "webapp.main:app") -> InfoServer:
    settings = get_settings()
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        access_log=False,
    )
    return InfoServer(config)


def serve() -> None:
    configure_logging()
    build_server().run()


if __name__ == "__main__":
    serve()
