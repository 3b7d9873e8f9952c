"""Monadic Error Handling System

Type-safe error handling inspired by Haskell's Either monad and
Rust's Result type.

Key components:
- Result[T, E]: Monadic container for success/failure
- AppError: Base error type with full context
- ErrorCode: Hierarchical error code taxonomy
- Builder functions: Ergonomic error construction
- AppErrorException: raise an AppError through exception-based code

Usage:
    from core.errors import Ok, Err, Result, AppError, not_found

    def find_engine(locale_id: str) -> Result[NumeralEngine, AppError]:
        engine = engines.get(locale_id)
        if engine is None:
            return not_found("Locale", locale_id, origin="registry")
        return Ok(engine)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
)

from .builders import (
    validation_error,
    invalid_type,
    out_of_range,
    not_found,
    internal_error,
)

from .handlers import (
    AppErrorException,
    register_error_handlers,
    result_to_response,
    raise_result,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "validation_error",
    "invalid_type",
    "out_of_range",
    "not_found",
    "internal_error",
    "AppErrorException",
    "register_error_handlers",
    "result_to_response",
    "raise_result",
]
