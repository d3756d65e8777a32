"""
Overall configurations and constants for the onetimesecret python library.
"""

import os
from pathlib import Path
import warnings

import pydantic.version


################################################################################
# Configurations you can change to customize the client's behavior.
################################################################################

# The api endpoint that all requests are sent to. Every route of the client is
# relative to this url. Set the environment variable `ONETIMESECRET_API_URL`,
# BEFORE IMPORTING onetimesecret, to point the client at a different server, such
# as a self-hosted instance or a mock server during testing.
ONETIMESECRET_API_URL = os.environ.get(
    "ONETIMESECRET_API_URL", "https://onetimesecret.com/api/v1"
).rstrip("/")

################################################################################
# Automatically generated constants. You do not need to change these.
################################################################################

if pydantic.version.VERSION < "2.0.0":
    PYDANTIC_MAJOR_VERSION = 1

    warnings.warn(
        "You are using pydantic 1.x, which is not fully supported by onetimesecret."
        " We strongly recommend you to upgrade to pydantic 2.x if possible.",
        DeprecationWarning,
    )
else:
    PYDANTIC_MAJOR_VERSION = 2

# Cache directory for local storage, currently only used for logs.
# To change the cache directory, set the environment variable ONETIMESECRET_CACHE_DIR
# before importing onetimesecret.
# User note: cache directory is not directly created. Loguru creates the logs
# directory the first time the internal log is enabled.
CACHE_DIR = Path(
    os.environ.get("ONETIMESECRET_CACHE_DIR", Path.home() / ".cache" / "onetimesecret")
)
LOGS_DIR = CACHE_DIR / "logs"


def _to_bool(s: str) -> bool:
    """
    Convert a string to a boolean value.
    """
    if not isinstance(s, str):
        raise TypeError(f"Expected a string, got {type(s)}")
    true_values = ("yes", "true", "t", "1", "y", "on", "aye", "yea")
    false_values = ("no", "false", "f", "0", "n", "off", "nay", "")
    s = s.lower()
    if s in true_values:
        return True
    elif s in false_values:
        return False
    else:
        raise ValueError(
            f"Invalid boolean value: {s}. Valid true values: {true_values}. Valid false"
            f" values: {false_values}."
        )
