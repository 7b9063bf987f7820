"""Domain protocols (ports) package.

Re-exports are ONLY for protocols defined in this package.

Usage:
    from password_validator.domain.protocols import LoggerProtocol, PasswordRule
"""

from password_validator.domain.protocols.logger_protocol import LoggerProtocol
from password_validator.domain.protocols.password_rule_protocol import (
    PasswordRule,
    RuleOutcome,
)

__all__ = ["LoggerProtocol", "PasswordRule", "RuleOutcome"]
