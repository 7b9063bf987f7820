"""Password rule protocol.

A rule is a single, independently testable predicate over a password with a
fixed failure kind. Built-in and caller-defined rules implement this protocol
structurally (no inheritance).

Usage:
    class NoSpacesRule:
        def validate(self, password: str) -> RuleOutcome:
            if " " in password:
                return Failure(error=Custom("Password must not contain spaces"))
            return Success(value=None)

    validator = PasswordValidator.builder().add_rule(NoSpacesRule()).build()
"""

from typing import Protocol, runtime_checkable

from password_validator.core.result import Result
from password_validator.domain.errors import PasswordError

type RuleOutcome = Result[None, PasswordError]


@runtime_checkable
class PasswordRule(Protocol):
    """Single-capability password check.

    Implementations must be stateless after construction so a validator can
    reuse them across calls and threads.
    """

    def validate(self, password: str) -> RuleOutcome:
        """Check one password.

        Args:
            password: Password to check.

        Returns:
            Success(value=None) when the password satisfies the rule,
            Failure(error=PasswordError) otherwise.
        """
        ...
