"""
Internal logging module for onetimesecret. Request traces are written to
"logs/internal.log" inside the cache directory, once enabled with the
ONETIMESECRET_ENABLE_INTERNAL_LOG environment variable.

Secret and metadata keys are part of the request path. They are masked in
every trace, so the log file and the console never hold a key that could be
used to read or burn a secret. Credentials and form bodies are never traced.
"""

import os
import re

from loguru import logger

from ..config import LOGS_DIR, _to_bool

_LEVEL = "ONETIMESECRET_INTERNAL"
_LOGFILE_BASE = LOGS_DIR / "internal.log"
_HANDLER_ID = None
_enabled: bool = False

# no = 9 slighly smaller the loguru's default level 10
logger.level(name=_LEVEL, no=9)

# secret/KEY, private/KEY and private/KEY/burn carry a key; private/recent does not.
_KEYED_ROUTE = re.compile(r"^(secret|private)/(?!recent$)[^/]+")
_MASK = "<key>"


def disable():
    """
    Disables internal logging. enable() and disable() can be called multiple times to
    temporarily turn on and off internal logging.
    """
    global _enabled
    global _HANDLER_ID
    if _enabled:
        if _HANDLER_ID is not None:
            logger.remove(_HANDLER_ID)
            _HANDLER_ID = None
        _enabled = False


def enable():
    """
    Enables internal logging. This will write logs to the log file specified in
    onetimesecret.config.LOGS_DIR. enable() and disable() can be called multiple times to
    temporarily turn on and off internal logging.

    Internal logging requires writing to filesystems, so it is only enabled when the
    env variable "ONETIMESECRET_ENABLE_INTERNAL_LOG" is set to a true value. Any other
    value, as well as a log file that cannot be created, leaves it disabled: this is
    called when a client is created, which must not fail.
    """
    global _enabled
    global _HANDLER_ID

    try:
        wanted = _to_bool(os.environ.get("ONETIMESECRET_ENABLE_INTERNAL_LOG", "0"))
    except ValueError:
        wanted = False
    if not wanted or _enabled:
        return

    try:
        _HANDLER_ID = logger.add(
            _LOGFILE_BASE,
            level=_LEVEL,
            colorize=False,
            rotation="10 MB",  # each log file will be max 10 MB
            retention=3,  # max keep 3 log files
            compression="zip",  # compress the log files
        )
    except OSError as e:
        logger.warning(f"Cannot write the internal log to {_LOGFILE_BASE}: {e}")
        return
    _enabled = True


def is_enabled() -> bool:
    return _enabled


def mask_route(route: str) -> str:
    """
    Replaces the secret or metadata key in an api route, e.g. "private/abc/burn"
    becomes "private/<key>/burn".
    """
    return _KEYED_ROUTE.sub(lambda m: f"{m.group(1)}/{_MASK}", route.lstrip("/"))


def trace_request(method: str, route: str, status_code=None):
    """
    Traces an api call with its key masked. The trace goes to loguru at TRACE level,
    which the default console handler does not show, and to the internal log file
    if enabled. status_code is None for a request that is about to be sent.
    """
    masked = mask_route(route)
    if status_code is None:
        logger.trace(f"{method} {masked}")
    else:
        logger.trace(f"{method} {masked} {status_code}")
        log(f"{method} {masked} {status_code}")


def log(*args, **kwargs):
    if not _enabled:
        return
    return logger.opt(depth=1).log(_LEVEL, *args, **kwargs)
