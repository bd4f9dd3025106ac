# Security Infrastructure - session token handling

from .token_store import TokenStore

__all__ = [
    'TokenStore',
]
