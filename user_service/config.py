from __future__ import annotations

import os
from typing import Mapping, Optional

from fastapi import Request
from pydantic import BaseModel, ConfigDict


DEFAULT_PORT = 8080
DEFAULT_ENVIRONMENT = "development"


def _env(environ: Mapping[str, str], name: str) -> Optional[str]:
    # Empty strings count as unset.
    return environ.get(name) or None


class Settings(BaseModel):
    """Read-only configuration snapshot taken from the process environment.

    ``server_port`` keeps ``SERVER_PORT`` exactly as given, ``port`` is the
    parsed value the listener binds to.
    """

    model_config = ConfigDict(frozen=True)

    port: int = DEFAULT_PORT
    server_port: Optional[str] = None
    node_env: str = DEFAULT_ENVIRONMENT
    db_host: Optional[str] = None
    redis_host: Optional[str] = None
    kafka_servers: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        environ = os.environ if environ is None else environ
        server_port = _env(environ, "SERVER_PORT")
        return cls(
            port=server_port or DEFAULT_PORT,
            server_port=server_port,
            node_env=_env(environ, "NODE_ENV") or DEFAULT_ENVIRONMENT,
            db_host=_env(environ, "DB_HOST"),
            redis_host=_env(environ, "REDIS_HOST"),
            kafka_servers=_env(environ, "KAFKA_SERVERS"),
        )


def get_settings(request: Request) -> Settings:
    """FastAPI dependency.

    Returns the snapshot bound to the app at startup; without one (an app not
    launched through ``server.run``), a fresh snapshot of the environment.
    """
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else Settings.from_env()
