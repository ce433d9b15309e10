"""Security module for API token handling and masking."""

from .token import TokenManager, TokenMaskingFilter

__all__ = ['TokenManager', 'TokenMaskingFilter']
