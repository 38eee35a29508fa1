"""Service configuration loaded from environment variables."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field, fields
from typing import Any, Mapping

TEST_ENV = "test"
DEVELOPMENT_ENV = "development"
STAGING_ENV = "staging"
PRODUCTION_ENV = "production"

_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}
_LEGACY_OCTAL = re.compile(r"[+-]?0[0-7]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class ConfigError(ValueError):
    """Raised when an environment value cannot be converted."""


def _env(name: str | None, default: Any) -> Any:
    """Declare a field read from the variable *name*, or from its upper-cased field name."""
    return field(default=default, metadata={"env": name})


@dataclass(frozen=True)
class ServerConfig:
    env: str = _env("ENVIRONMENT", DEVELOPMENT_ENV)
    server_url: str = _env("SERVER_URL", "0.0.0.0")
    grpc_port: int = _env("USER_GRPC_PORT", 10000)
    http_port: int = _env("PORT", 8081)
    log_level: str = _env("LOG_LEVEL", "debug")
    production: bool = _env("PRODUCTION", False)
    gin_mode: str = _env("GIN_MODE", "debug")
    logger: bool = _env("LOGGER", False)
    cors_production: bool = _env("CORS_PRODUCTION", False)


@dataclass(frozen=True)
class DBConfig:
    pg_host: str = _env("PG_HOST", "db")
    pg_port: str = _env("PG_PORT", "5432")
    pg_user: str = _env("PG_USER", "postgres")
    pg_password: str = _env(None, "password")
    pg_database: str = _env("PG_DATABASE", "postgres")
    pg_pool_size: int = _env("PG_POOL_SIZE", 0)
    pg_idle_conn_timeout: int = _env("PG_IDLE_CONNECTION_TIMEOUT", 30)
    pg_max_conn_age: int = _env("PG_MAX_CONNECTION_AGE", 3000)
    mongo_uri: str = _env("MONGO_URI", "0.0.0.0")


@dataclass(frozen=True)
class ServicesConfig:
    pass


@dataclass(frozen=True)
class CorsConfig:
    google: str = _env("GOOGLE", "https://www.google.com/")
    facebook: str = _env("FACEBOOK", "https://www.facebook.com/")
    client: str = _env("CLIENT", "http://localhost:5173/")


_current: dict[type, Any] = {
    ServerConfig: ServerConfig(),
    ServicesConfig: ServicesConfig(),
    DBConfig: DBConfig(),
    CorsConfig: CorsConfig(),
}


def _parse_bool(name: str, value: str) -> bool:
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name}: invalid boolean {value!r}")


def _parse_int(name: str, value: str) -> int:
    try:
        number = int(value, 0)
    except ValueError:
        if not _LEGACY_OCTAL.fullmatch(value):
            raise ConfigError(f"{name}: invalid integer {value!r}") from None
        number = int(value, 8)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ConfigError(f"{name}: integer {value!r} out of range")
    return number


def _load(cls: type, environ: Mapping[str, str]) -> Any:
    values: dict[str, Any] = {}
    for f in fields(cls):
        name = f.metadata["env"] or f.name.upper()
        if name not in environ:
            values[f.name] = f.default
            continue
        raw = environ[name]
        if isinstance(f.default, bool):
            values[f.name] = _parse_bool(name, raw)
        elif isinstance(f.default, int):
            values[f.name] = _parse_int(name, raw)
        else:
            values[f.name] = raw
    return cls(**values)


def init_config(environ: Mapping[str, str] | None = None) -> None:
    """Load every configuration section from the environment."""
    source = os.environ if environ is None else environ
    loaded = {}
    for cls in (ServerConfig, ServicesConfig, DBConfig, CorsConfig):
        try:
            loaded[cls] = _load(cls, source)
        except ConfigError as exc:
            raise ConfigError(f"unable to init config: {cls.__name__}, err: {exc}") from exc
    _current.update(loaded)


def server_config() -> ServerConfig:
    return _current[ServerConfig]


def service_config() -> ServicesConfig:
    return _current[ServicesConfig]


def db_config() -> DBConfig:
    return _current[DBConfig]


def cors_config() -> CorsConfig:
    return _current[CorsConfig]