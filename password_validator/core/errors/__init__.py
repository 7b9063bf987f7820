"""Core errors package.

Usage:
    from password_validator.core.errors import DomainError
"""

from password_validator.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
