"""Test suite for password_validator.

Test structure:
- unit/: Unit tests - rules, errors, validator, builder, registry, settings,
  logging and pydantic integration in isolation
"""
