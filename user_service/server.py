"""Process entrypoint: logging, startup banner and the uvicorn server."""
from __future__ import annotations

import logging
import signal
import sys
from typing import Optional

import uvicorn

from .config import Settings
from .main import app

logger = logging.getLogger("user_service")

HOST = "0.0.0.0"  # Listen on all interfaces for Docker


def configure_logging(level: int = logging.INFO) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False


def log_banner(settings: Settings) -> None:
    base = f"http://localhost:{settings.port}"
    logger.info("User Service running on port %s", settings.port)
    logger.info("Health check: %s/health", base)
    logger.info("Users API: %s/api/v1/users", base)
    logger.info("Service Info: %s/api/v1/info", base)
    logger.info("Environment: %s", settings.node_env)
    logger.info("Database Host: %s", settings.db_host or "not configured")
    logger.info("Redis Host: %s", settings.redis_host or "not configured")
    logger.info("Kafka Servers: %s", settings.kafka_servers or "not configured")
    logger.info("User Service is ready!")


class Server(uvicorn.Server):
    """uvicorn server that announces itself once listening and stops at once
    on SIGTERM/SIGINT with exit code 0.
    """

    def __init__(self, config: uvicorn.Config, settings: Settings) -> None:
        super().__init__(config)
        self.settings = settings

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        # uvicorn exits before this point when the port cannot be bound.
        if self.started:
            log_banner(self.settings)

    def handle_exit(self, sig: int, frame) -> None:  # type: ignore[override]
        logger.info("%s received, shutting down gracefully", signal.Signals(sig).name)
        # No draining of in-flight connections. The signal is not recorded, so
        # uvicorn does not re-raise it after the loop stops and the exit code stays 0.
        self.should_exit = True
        self.force_exit = True


def build_server(settings: Settings) -> Server:
    # Handlers see this same snapshot through get_settings.
    app.state.settings = settings
    config = uvicorn.Config(app, host=HOST, port=settings.port, access_log=False)
    return Server(config, settings)


def run(settings: Optional[Settings] = None) -> None:
    configure_logging()
    settings = settings or Settings.from_env()
    server = build_server(settings)
    server.run()


if __name__ == "__main__":
    run()
