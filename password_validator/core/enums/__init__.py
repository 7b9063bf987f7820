"""Core enums package.

Usage:
    from password_validator.core.enums import ErrorCode
"""

from password_validator.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode"]
