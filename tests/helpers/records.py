"""Sample records bound by the unit tests and the check-script tests."""

from __future__ import annotations

from datetime import timedelta
from dataclasses import dataclass

from envconfig import Int16, Nanoseconds, env_field


@dataclass
class ServiceSettings:
    name: str = env_field("SVC_NAME", "envconfig", default="")
    workers: Int16 = env_field("SVC_WORKERS", "4", default=0)
    ratio: float = env_field("SVC_RATIO", "0.5", default=0.0)
    debug: bool = env_field("SVC_DEBUG", "f", default=True)
    secret: bytes = env_field("SVC_SECRET", "c2lsbHkgd2FiYml0", default=b"")
    timeout: Nanoseconds = env_field("SVC_TIMEOUT", "2s", default=0)
    grace: timedelta = env_field("SVC_GRACE", "1500ms", default=timedelta())
    label: str = "unbound"


@dataclass
class RequiredSettings:
    region: str = env_field("SVC_REGION", "eu-west-1", default="")
    api_key: str = env_field("SVC_API_KEY", default="")
    retries: int = env_field("SVC_RETRIES", "3", default=0)


@dataclass(frozen=True)
class FrozenSettings:
    name: str = env_field("SVC_NAME", "envconfig", default="")


@dataclass
class Endpoint:
    host: str = ""


@dataclass
class NestedSettings:
    port: int = env_field("SVC_PORT", "8080", default=0)
    endpoint: Endpoint = env_field("SVC_ENDPOINT", "localhost", default_factory=Endpoint)
    tags: list[str] = env_field("SVC_TAGS", default_factory=list)


class PlainSettings:
    """Non-dataclass record bound through an explicit Schema."""

    def __init__(self) -> None:
        self.host = "unset"
        self.port = 0


class SlottedSettings:
    """Non-dataclass record without a __dict__."""

    __slots__ = ("host", "port")

    def __init__(self) -> None:
        self.host = "unset"
        self.port = 0


SERVICE_ENV_VARS = (
    "SVC_NAME",
    "SVC_WORKERS",
    "SVC_RATIO",
    "SVC_DEBUG",
    "SVC_SECRET",
    "SVC_TIMEOUT",
    "SVC_GRACE",
    "SVC_REGION",
    "SVC_API_KEY",
    "SVC_RETRIES",
    "SVC_PORT",
    "SVC_ENDPOINT",
    "SVC_TAGS",
)
