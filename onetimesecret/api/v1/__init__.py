# flake8: noqa
"""
Bindings of the OneTimeSecret v1 api, https://onetimesecret.com/docs/api
"""

from . import types
from . import client
