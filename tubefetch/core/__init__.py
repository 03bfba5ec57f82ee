"""
Core module containing configuration, constants, enums and exceptions.
"""
from .config import Settings
from .enums import Variant, HealthStatus
from .constants import *
from .exceptions import *

__all__ = [
    "Settings",
    "Variant",
    "HealthStatus",
]
