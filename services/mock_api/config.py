import logging
import os
import socket
import time
from dataclasses import dataclass, field
from functools import lru_cache

DEFAULT_ENVIRONMENT = 'development'
DEFAULT_VERSION = '1.0.0'
DEFAULT_PORT = 3000
DEFAULT_LANGUAGE = 'en'
DEFAULT_LOG_LEVEL = 'INFO'
MAX_PORT = 65535

SUPPORTED_LANGUAGES = ('en', 'es')


@dataclass(frozen=True)
class ServerConfig:
    """Settings resolved from the environment once per process."""

    environment_name: str = DEFAULT_ENVIRONMENT
    version: str = DEFAULT_VERSION
    port: int = DEFAULT_PORT
    language: str = DEFAULT_LANGUAGE
    log_level: str = DEFAULT_LOG_LEVEL
    hostname: str = field(default_factory=socket.gethostname)
    # time.monotonic() at resolution; uptime is measured from here
    started_at: float = field(default_factory=time.monotonic)


def _read(environ, name, default):
    value = environ.get(name, '').strip()
    return value or default


def _coerce_port(raw):
    try:
        port = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_PORT
    return port if 0 < port <= MAX_PORT else DEFAULT_PORT


def _coerce_log_level(raw):
    level = raw.upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


def load_config(environ=None):
    """Build a ServerConfig from ``environ`` (defaults to os.environ).

    Missing, empty or malformed values fall back to their defaults; this
    never raises.
    """
    if environ is None:
        environ = os.environ

    language = _read(environ, 'LANGUAGE', DEFAULT_LANGUAGE).lower()
    if language not in SUPPORTED_LANGUAGES:
        language = DEFAULT_LANGUAGE

    return ServerConfig(
        environment_name=_read(environ, 'ENVIRONMENT_NAME', DEFAULT_ENVIRONMENT),
        version=_read(environ, 'VERSION', DEFAULT_VERSION),
        port=_coerce_port(_read(environ, 'PORT', DEFAULT_PORT)),
        language=language,
        log_level=_coerce_log_level(_read(environ, 'LOG_LEVEL', DEFAULT_LOG_LEVEL)),
    )


@lru_cache(maxsize=None)
def get_config():
    return load_config()
