"""Domain-Specific Error Builders

Ergonomic constructors for typed errors.
Each builder creates AppError with appropriate code and context.
"""
from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def invalid_type(
    field: str, expected: str, value: object, origin: str = ""
) -> Err[AppError]:
    return validation_error(
        f"'{value!r}' is not {expected}",
        code=ErrorCode.E2004_INVALID_TYPE,
        field=field,
        value=repr(value),
        expected=expected,
        origin=origin,
    )


def out_of_range(
    field: str,
    value: int | float,
    min_val: int | float | None = None,
    max_val: int | float | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    bounds = []
    if min_val is not None:
        bounds.append(f">= {min_val}")
    if max_val is not None:
        bounds.append(f"<= {max_val}")
    msg = f"Value {value} for '{field}' out of range ({', '.join(bounds)})"
    return validation_error(
        msg,
        code=ErrorCode.E2003_OUT_OF_RANGE,
        field=field,
        value=str(value),
        min=min_val,
        max=max_val,
        origin=origin,
        **metadata,
    )


# =============================================================================
# Lookup Errors (E4xxx)
# =============================================================================

def not_found(
    entity: str,
    id: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    msg = f"{entity} not found"
    if id:
        msg += f": {id}"
    meta = {"entity": entity, "entity_id": id, **metadata}
    return Err(AppError(
        code=ErrorCode.E4010_NOT_FOUND,
        message=msg,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


# =============================================================================
# Internal Errors (E9xxx)
# =============================================================================

def internal_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E9001_UNEXPECTED_ERROR,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create internal/unexpected error."""
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata=metadata,
        cause=cause,
    ))
