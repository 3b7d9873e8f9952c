"""
Tests for the shared error taxonomy and Result types.
"""

import pytest

from core.errors import ErrorCode, Err, Ok, invalid_type, not_found, out_of_range
from numerals import get_engine


class TestErrorCode:
    @pytest.mark.parametrize(
        "code,status,category",
        [
            (ErrorCode.E2000_VALIDATION_GENERIC, 400, "validation"),
            (ErrorCode.E2003_OUT_OF_RANGE, 400, "validation"),
            (ErrorCode.E2004_INVALID_TYPE, 400, "validation"),
            (ErrorCode.E4010_NOT_FOUND, 404, "lookup"),
            (ErrorCode.E9001_UNEXPECTED_ERROR, 500, "internal"),
        ],
    )
    def test_status_and_category(self, code, status, category):
        assert code.http_status == status
        assert code.category == category


class TestBuilders:
    def test_invalid_type(self):
        error = invalid_type("number", "a non-negative integer", 1.5, origin="tokenizer").unwrap_err()
        assert error.code is ErrorCode.E2004_INVALID_TYPE
        assert error.metadata["value"] == "1.5"
        assert error.context.origin == "tokenizer"

    def test_out_of_range_bounds(self):
        error = out_of_range("number", 10 ** 9, min_val=0, max_val=999_999_999).unwrap_err()
        assert error.metadata["max"] == 999_999_999
        assert ">= 0" in error.message

    def test_not_found_drops_empty_metadata(self):
        error = not_found("Locale", "xx_XX", origin="registry").unwrap_err()
        assert error.metadata == {"entity": "Locale", "entity_id": "xx_XX"}

    def test_to_dict(self):
        body = not_found("Locale", "xx_XX").unwrap_err().to_dict()["error"]
        assert body["code"] == "E4010_NOT_FOUND"
        assert body["code_num"] == 4010
        assert body["category"] == "lookup"

    def test_with_context_keeps_correlation_id(self):
        error = not_found("Locale", "xx_XX").unwrap_err()
        assert error.with_context(correlation_id=None).context.correlation_id == error.context.correlation_id
        assert error.with_context(correlation_id="req-1").context.correlation_id == "req-1"


class TestResult:
    def test_ok_chain(self):
        result = get_engine("en_US").to_words_result(7).map(str.upper)
        assert result == Ok("SEVEN")
        assert result.match(ok=len, err=lambda e: -1) == 5
        assert list(result) == ["SEVEN"]

    def test_err_short_circuits(self):
        result = get_engine("en_US").to_words_result(-1).map(str.upper)
        assert isinstance(result, Err)
        assert result.unwrap_or("n/a") == "n/a"
        assert list(result) == []
        with pytest.raises(ValueError):
            result.unwrap()
