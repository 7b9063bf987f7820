"""Special character rule."""

from dataclasses import dataclass, field

from password_validator.core.constants import DEFAULT_SPECIAL_CHARACTERS
from password_validator.core.result import Failure, Success
from password_validator.domain.errors import MissingSpecialChar
from password_validator.domain.protocols import RuleOutcome


@dataclass(frozen=True, slots=True)
class SpecialCharacterRule:
    """Require at least one character from ``special_chars``.

    Membership is an exact character match, no case folding or
    normalization. An empty set rejects every password.

    Attributes:
        special_chars: Accepted special characters.

    Example:
        >>> rule = SpecialCharacterRule("!@#")
        >>> isinstance(rule.validate("Password1$"), Failure)
        True
    """

    special_chars: str = DEFAULT_SPECIAL_CHARACTERS
    _charset: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_charset", frozenset(self.special_chars))

    def validate(self, password: str) -> RuleOutcome:
        if any(char in self._charset for char in password):
            return Success(value=None)
        return Failure(error=MissingSpecialChar())
