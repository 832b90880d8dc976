"""
Authentication Package

Bearer token handling for the LinkedIn API.
"""

from assets.auth.token_manager import AccessTokenManager

__all__ = [
    "AccessTokenManager",
]
