# flake8: noqa
"""
A python client for the OneTimeSecret api.
"""

from ._version import __version__

from .api.v1.client import APIClient
from .api.v1.types.secret import SecretRecord, SecretRecordList
from .api.v1.types.status import HealthStatus, ServiceState
from .api.v1.utils import (
    OneTimeSecretError,
    TransportError,
    ReadError,
    DecodeError,
    ServiceUnavailable,
)
