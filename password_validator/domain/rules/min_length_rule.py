"""Minimum length rule."""

from dataclasses import dataclass

from password_validator.core.constants import DEFAULT_MIN_LENGTH
from password_validator.core.result import Failure, Success
from password_validator.domain.errors import TooShort
from password_validator.domain.protocols import RuleOutcome


@dataclass(frozen=True, slots=True)
class MinLengthRule:
    """Require at least ``min_length`` characters.

    Length is the number of Unicode code points (``len(password)``), so
    "Päßwörd1" counts 8 whatever its encoded size. A non-positive minimum
    accepts every password, including the empty string.

    Attributes:
        min_length: Minimum number of code points.
    """

    min_length: int = DEFAULT_MIN_LENGTH

    def validate(self, password: str) -> RuleOutcome:
        if len(password) >= self.min_length:
            return Success(value=None)
        return Failure(error=TooShort())
