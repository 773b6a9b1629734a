from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict


SERVICE_NAME = "user-service"
SERVICE_VERSION = "1.0.0"


# === Health ===


class HealthConfig(BaseModel):
    dbHost: str
    redisHost: str
    kafkaServers: str


class Health(BaseModel):
    status: str = "UP"
    service: str = SERVICE_NAME
    version: str = SERVICE_VERSION
    database: str
    redis: str
    kafka: str
    timestamp: int
    environment: str
    config: HealthConfig


class HealthDown(BaseModel):
    status: str = "DOWN"
    service: str = SERVICE_NAME
    version: str = SERVICE_VERSION
    error: str
    timestamp: int


class Probe(BaseModel):
    status: str
    service: str = SERVICE_NAME


# === Users ===


class UserStatus(str, Enum):
    ACTIVE = "ACTIVE"
    PENDING_VERIFICATION = "PENDING_VERIFICATION"
    SUSPENDED = "SUSPENDED"
    INACTIVE = "INACTIVE"


class MockUser(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    first_name: str
    last_name: str
    status: UserStatus
    created_at: str


class UsersPage(BaseModel):
    success: bool = True
    data: list[MockUser]
    count: int
    message: str


# === Service metadata ===


class InfoEnvironment(BaseModel):
    port: Union[int, str]
    nodeEnv: str
    dbHost: str
    redisHost: str


class ServiceInfo(BaseModel):
    service: str = SERVICE_NAME
    version: str = SERVICE_VERSION
    description: str
    endpoints: list[str]
    environment: InfoEnvironment


# === Errors ===


class NotFound(BaseModel):
    success: bool = False
    error: str = "Not Found"
    path: str
    method: str
    availableEndpoints: list[str]
