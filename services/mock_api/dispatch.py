"""Handler results and the dispatcher that produces them.

A handler is a plain function ``handler(config, request) -> Reply``. The
dispatcher never lets an exception escape: a handler that raises yields a
``Fault`` instead, which ``to_reply`` turns into the fixed 500 payload.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .messages import message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Request:
    method: str
    path: str
    body: Optional[Any] = None


@dataclass(frozen=True)
class Reply:
    status: int
    body: dict = field(default_factory=dict)


@dataclass(frozen=True)
class Fault:
    error: BaseException


Result = Union[Reply, Fault]


def dispatch(handler, config, request) -> Result:
    try:
        return handler(config, request)
    except Exception as e:
        return Fault(e)


def internal_error(config) -> Reply:
    return Reply(500, {
        "error": message(config, 'internal_error'),
        "environment": config.environment_name
    })


def to_reply(result, config, request) -> Reply:
    if isinstance(result, Reply):
        return result

    err = result.error
    logger.error(
        "Unhandled error in %s %s: %s", request.method, request.path, err,
        exc_info=(type(err), err, err.__traceback__)
    )
    return internal_error(config)


def not_found(config, path) -> Reply:
    logger.debug("No route for %s", path)
    return Reply(404, {"error": message(config, 'route_not_found'), "path": path})
