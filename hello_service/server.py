"""Process entry point: configure logging, bind the port and run uvicorn."""
from __future__ import annotations

import copy
import logging
import logging.config
import socket
from typing import Any, Dict, Optional

import uvicorn
from prometheus_client import start_http_server
from uvicorn.config import LOGGING_CONFIG

from hello_service.config import Settings, get_settings
from hello_service.errors import StartupError
from hello_service.metrics import REGISTRY

logger = logging.getLogger("hello_service")


def build_log_config(log_level: str = "INFO") -> Dict[str, Any]:
    """uvicorn's logging config with the default handler moved to stdout and
    the ``hello_service`` logger added."""
    log_config = copy.deepcopy(LOGGING_CONFIG)
    log_config["handlers"]["default"]["stream"] = "ext://sys.stdout"
    log_config["loggers"]["hello_service"] = {
        "handlers": ["default"],
        "level": log_level,
        "propagate": False,
    }
    return log_config


def bind_listener(host: str, port: int) -> socket.socket:
    """Bind a TCP socket on *host*:*port* for uvicorn to serve on.

    Raises:
        StartupError: if the address is in use or cannot be bound
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as exc:
        sock.close()
        raise StartupError(f"could not bind {host}:{port}: {exc.strerror or exc}") from exc
    sock.set_inheritable(True)
    return sock


def start_metrics_server(port: int, host: str) -> None:
    try:
        start_http_server(port, addr=host, registry=REGISTRY)
    except OSError as exc:
        raise StartupError(f"could not bind metrics port {port}: {exc.strerror or exc}") from exc
    logger.info("Metrics available on port %d", port)


def serve(settings: Settings) -> None:
    """Bind, announce and run the server until it is stopped."""
    log_config = build_log_config(settings.log_level)
    logging.config.dictConfig(log_config)

    sock = bind_listener(settings.host, settings.port)
    if settings.metrics_port is not None:
        try:
            start_metrics_server(settings.metrics_port, settings.host)
        except StartupError:
            sock.close()
            raise

    config = uvicorn.Config(
        "hello_service.main:app",
        log_config=log_config,
        log_level=settings.uvicorn_log_level,
        access_log=settings.access_log,
    )
    server = uvicorn.Server(config)

    logger.info("App listening on port %d", sock.getsockname()[1])
    server.run(sockets=[sock])


def main(settings: Optional[Settings] = None) -> int:
    """Run the service; return the process exit code."""
    logging.config.dictConfig(build_log_config())
    try:
        if settings is None:
            settings = get_settings()
        serve(settings)
    except StartupError as exc:
        logger.error("Failed to start: %s", exc)
        return 1
    return 0
