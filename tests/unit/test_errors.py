"""
Error Taxonomy Unit Tests
Tests for commitkit/schemas/errors.py
"""
import pytest
from pydantic import ValidationError

from commitkit.schemas.errors import (
    CommitError,
    CommitKitException,
    EmptyInputError,
    ErrorCodes,
    IndexOutOfRange,
    InvalidBagSize,
    InvalidKeyLength,
)


class TestExceptions:
    """Tests for exception classes."""

    def test_empty_input_is_value_error(self):
        err = EmptyInputError()

        assert isinstance(err, ValueError)
        assert isinstance(err, CommitKitException)
        assert err.code == ErrorCodes.EMPTY_INPUT

    def test_index_out_of_range_is_index_error(self):
        err = IndexOutOfRange(leaf_index=5, leaf_count=3)

        assert isinstance(err, IndexError)
        assert err.leaf_index == 5
        assert err.leaf_count == 3
        assert "5" in str(err) and "3" in str(err)

    def test_invalid_key_length(self):
        err = InvalidKeyLength(expected=16, actual=4)

        assert isinstance(err, ValueError)
        assert err.code == ErrorCodes.INVALID_KEY_LENGTH
        assert err.details == {"expected": 16, "actual": 4}

    def test_invalid_bag_size(self):
        err = InvalidBagSize(1)

        assert err.code == ErrorCodes.INVALID_BAG_SIZE
        assert err.details == {"bag_size": 1}

    def test_repr(self):
        err = EmptyInputError()

        assert repr(err).startswith("EmptyInputError(code='EMPTY_INPUT'")

    @pytest.mark.parametrize(
        "factory",
        [
            lambda details: IndexOutOfRange(leaf_index=1, leaf_count=1, details=details),
            lambda details: InvalidKeyLength(expected=16, actual=3, details=details),
            lambda details: InvalidBagSize(1, details=details),
        ],
    )
    def test_caller_details_not_mutated(self, factory):
        details = {"context": "caller"}

        err = factory(details)

        assert details == {"context": "caller"}
        assert err.details["context"] == "caller"
        assert len(err.details) > 1

    def test_error_codes_are_all_raised_somewhere(self):
        codes = {
            value for name, value in vars(ErrorCodes).items()
            if not name.startswith("_")
        }

        assert codes == {
            EmptyInputError().code,
            IndexOutOfRange(leaf_index=0, leaf_count=0).code,
            InvalidKeyLength(expected=16, actual=0).code,
            InvalidBagSize(0).code,
        }


class TestErrorModels:
    """Tests for conversion between exceptions and CommitError models."""

    def test_exception_to_model(self):
        model = IndexOutOfRange(leaf_index=2, leaf_count=2).to_error_model()

        assert isinstance(model, CommitError)
        assert model.code == ErrorCodes.INDEX_OUT_OF_RANGE
        assert model.details["leaf_index"] == 2

    def test_model_to_exception(self):
        model = CommitError(code=ErrorCodes.EMPTY_INPUT, message="nothing to hash")
        exc = model.to_exception()

        assert isinstance(exc, CommitKitException)
        assert exc.code == ErrorCodes.EMPTY_INPUT
        assert exc.message == "nothing to hash"

    def test_model_forbids_extra_fields(self):
        with pytest.raises(ValidationError):
            CommitError(code="X", message="m", unexpected=True)

    def test_model_serializes(self):
        model = InvalidKeyLength(expected=16, actual=0).to_error_model()

        assert model.model_dump() == {
            "code": ErrorCodes.INVALID_KEY_LENGTH,
            "message": "Key must be exactly 16 bytes, got 0",
            "details": {"expected": 16, "actual": 0},
        }
