# flake8: noqa
"""
This implements the types returned by the OneTimeSecret api.
"""

# pre-import all modules so we can use them in type hints in editors easily.
from . import secret
from . import status
