"""Annotated password types for pydantic models.

Usage:
    from pydantic import BaseModel
    from password_validator.domain.types import StrongPassword, password_type

    class RegisterUser(BaseModel):
        password: StrongPassword

    AdminPassword = password_type(
        PasswordValidator.builder().min_length(16).require_digit().build()
    )
"""

from typing import Annotated, Any

from pydantic import AfterValidator, Field

from password_validator.domain.validators import (
    PasswordValidator,
    make_password_check,
    validate_password_strength,
)


def password_type(validator: PasswordValidator) -> Any:
    """Create an Annotated str type validated by ``validator``.

    Args:
        validator: Validator applied after pydantic's str validation.

    Returns:
        ``Annotated[str, ...]`` usable as a pydantic field type.
    """
    return Annotated[
        str,
        Field(description="Password validated against configured rules"),
        AfterValidator(make_password_check(validator)),
    ]


StrongPassword = Annotated[
    str,
    Field(
        description="Password with default strength requirements",
        examples=["Password123!"],
    ),
    AfterValidator(validate_password_strength),
]
"""Password validated against the default policy.

Requirements:
- At least 8 characters
- At least one uppercase letter
- At least one digit
- At least one special character

Examples:
    >>> from pydantic import BaseModel
    >>> class LoginRequest(BaseModel):
    ...     password: StrongPassword
    >>> LoginRequest(password="Password123!").password
    'Password123!'
"""
