"""Numeral conversion errors.

Each error wraps an AppError so it renders through the shared
error handlers, and can also be caught as a plain exception.
"""
from core.errors import AppError, AppErrorException, invalid_type, not_found, out_of_range


class NumeralError(AppErrorException):
    """Base exception for all numeral conversion failures."""


class NotAnIntegerError(NumeralError):
    """The value to convert is not a finite, non-negative integer."""

    def __init__(self, value: object, origin: str = "tokenizer"):
        self.value = value
        super().__init__(
            invalid_type("number", "a non-negative integer", value, origin=origin).error
        )


class CapacityExceededError(NumeralError):
    """The value needs more digit groups than the locale supports."""

    def __init__(self, value: int, locale_id: str, max_digits: int, digits_required: int):
        self.value = value
        self.locale_id = locale_id
        self.max_digits = max_digits
        super().__init__(
            out_of_range(
                "number",
                value,
                min_val=0,
                max_val=10 ** max_digits - 1,
                origin=f"engine.{locale_id}",
                locale=locale_id,
                max_digits=max_digits,
                digits_required=digits_required,
            ).error
        )


class UnknownLocaleError(NumeralError):
    """No grammar engine is registered under the requested locale id."""

    def __init__(self, locale_id: str, available: list[str]):
        self.locale_id = locale_id
        self.available = available
        error: AppError = not_found(
            "Locale",
            locale_id,
            origin="registry",
            available=", ".join(available) or "none",
        ).error
        super().__init__(error)
