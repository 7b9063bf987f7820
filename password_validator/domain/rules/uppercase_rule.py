"""Uppercase letter rule."""

from dataclasses import dataclass

from password_validator.core.result import Failure, Success
from password_validator.domain.errors import MissingUppercase
from password_validator.domain.protocols import RuleOutcome


@dataclass(frozen=True, slots=True)
class UppercaseRule:
    """Require at least one uppercase letter.

    Uses ``str.isupper`` per character, which is Unicode-aware: "Ä" and "Ω"
    count, titlecase digraphs such as "ǅ" do not.
    """

    def validate(self, password: str) -> RuleOutcome:
        if any(char.isupper() for char in password):
            return Success(value=None)
        return Failure(error=MissingUppercase())
