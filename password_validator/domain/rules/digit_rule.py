"""Digit rule."""

from dataclasses import dataclass

from password_validator.core.result import Failure, Success
from password_validator.domain.errors import MissingDigit
from password_validator.domain.protocols import RuleOutcome


@dataclass(frozen=True, slots=True)
class DigitRule:
    """Require at least one decimal digit.

    Decimal means Unicode category Nd (``str.isdecimal``): "7" and Arabic-Indic
    "٣" count, superscripts such as "²" do not.
    """

    def validate(self, password: str) -> RuleOutcome:
        if any(char.isdecimal() for char in password):
            return Success(value=None)
        return Failure(error=MissingDigit())
