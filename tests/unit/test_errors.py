"""
Error Taxonomy Unit Tests
Tests for core/schemas/errors.py
"""
import pytest

from core.schemas.errors import (
    ErrorCodes,
    InvalidArgumentException,
    LeafNotFoundException,
    MerkleError,
    MerkleException,
)


class TestExceptions:
    """Tests for exception classes."""

    def test_invalid_argument_defaults(self):
        exc = InvalidArgumentException("bad input")
        assert exc.code == ErrorCodes.INVALID_ARGUMENT
        assert exc.message == "bad input"
        assert exc.retryable is False
        assert str(exc) == "bad input"

    def test_invalid_argument_is_value_error(self):
        assert isinstance(InvalidArgumentException("x"), ValueError)
        assert isinstance(InvalidArgumentException("x"), MerkleException)

    def test_leaf_not_found_defaults(self):
        exc = LeafNotFoundException(leaf_hash="abc")
        assert exc.code == ErrorCodes.LEAF_NOT_FOUND
        assert exc.message == "Hash not found in leaf nodes"
        assert exc.details == {"leaf_hash": "abc"}

    def test_leaf_not_found_copies_details(self):
        details = {"source": "request"}
        exc = LeafNotFoundException(leaf_hash="abc", details=details)
        assert details == {"source": "request"}
        assert exc.details == {"source": "request", "leaf_hash": "abc"}

    def test_leaf_not_found_is_lookup_error(self):
        with pytest.raises(LookupError):
            raise LeafNotFoundException()

    def test_repr(self):
        exc = InvalidArgumentException("oops")
        assert repr(exc) == "InvalidArgumentException(code='INVALID_ARGUMENT', message='oops')"


class TestErrorModel:
    """Tests for MerkleError round trips."""

    def test_exception_to_model(self):
        model = LeafNotFoundException(leaf_hash="abc").to_error_model()
        assert isinstance(model, MerkleError)
        assert model.code == ErrorCodes.LEAF_NOT_FOUND
        assert model.details["leaf_hash"] == "abc"
        assert model.retryable is False

    def test_model_to_exception_preserves_type(self):
        assert isinstance(
            MerkleError(code=ErrorCodes.LEAF_NOT_FOUND, message="m").to_exception(),
            LeafNotFoundException,
        )
        exc = MerkleError(code=ErrorCodes.UNSUPPORTED_ALGORITHM, message="m").to_exception()
        assert isinstance(exc, InvalidArgumentException)
        assert exc.code == ErrorCodes.UNSUPPORTED_ALGORITHM

    def test_proof_invalid_code_to_invalid_argument(self):
        exc = MerkleError(code=ErrorCodes.MERKLE_PROOF_INVALID, message="m").to_exception()
        assert isinstance(exc, InvalidArgumentException)
        assert exc.code == ErrorCodes.MERKLE_PROOF_INVALID

    def test_unknown_code_to_base_exception(self):
        exc = MerkleError(code=ErrorCodes.ROOT_MISMATCH, message="m").to_exception()
        assert type(exc) is MerkleException
        assert exc.code == ErrorCodes.ROOT_MISMATCH

    def test_extra_fields_forbidden(self):
        with pytest.raises(Exception):
            MerkleError(code="X", message="m", unexpected=True)
