# flake8: noqa
"""
Low-level api bindings of the OneTimeSecret service.
"""

from . import v1
