"""Health, readiness and liveness payloads.

Dependencies are never contacted: each one is reported as ``Connected`` when
its environment variable is set and ``Mock Mode`` otherwise.
"""
from __future__ import annotations

import time
from typing import Optional

from .config import Settings
from .schemas import Health, HealthConfig, HealthDown, Probe


CONNECTED = "Connected"
MOCK_MODE = "Mock Mode"
NOT_SET = "not set"


def now_ms() -> int:
    return int(time.time() * 1000)


def dependency_status(value: Optional[str]) -> str:
    return CONNECTED if value else MOCK_MODE


def build_health(settings: Settings) -> Health:
    return Health(
        database=dependency_status(settings.db_host),
        redis=dependency_status(settings.redis_host),
        kafka=dependency_status(settings.kafka_servers),
        timestamp=now_ms(),
        environment=settings.node_env,
        config=HealthConfig(
            dbHost=settings.db_host or NOT_SET,
            redisHost=settings.redis_host or NOT_SET,
            kafkaServers=settings.kafka_servers or NOT_SET,
        ),
    )


def build_health_down(exc: Exception) -> HealthDown:
    return HealthDown(error=str(exc), timestamp=now_ms())


def ready() -> Probe:
    return Probe(status="READY")


def live() -> Probe:
    return Probe(status="ALIVE")
