"""
Storage module initialization.
"""
from .token_store import TokenStore
from .media import MediaStore

__all__ = [
    "TokenStore",
    "MediaStore",
]
