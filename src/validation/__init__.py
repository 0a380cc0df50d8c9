"""Input validation package."""

from src.validation.validator import InputValidator, InvalidInputError

__all__ = ["InputValidator", "InvalidInputError"]
