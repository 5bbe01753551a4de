"""Tests for the share intake exception hierarchy."""

import pytest

from share_intake.domain.exceptions import (
    ConfigurationError,
    HandoffStoreError,
    HandoffStoreNotConnectedError,
    MethodNotImplementedError,
    PayloadDecodeError,
    ShareIntakeError,
    UnrecognizedChannelArgumentError,
)


class TestShareIntakeErrors:
    """Test cases for exception classes."""

    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError("bad"),
            PayloadDecodeError("bad"),
            UnrecognizedChannelArgumentError("photos"),
            MethodNotImplementedError("getLatest"),
            HandoffStoreError("bad"),
            HandoffStoreNotConnectedError("get_data"),
        ],
    )
    def test_all_derive_from_base(self, error):
        """Test that every error is a ShareIntakeError."""
        assert isinstance(error, ShareIntakeError)
        assert str(error) == error.message

    def test_base_defaults_details(self):
        """Test that details default to an empty dict."""
        assert ShareIntakeError("oops").details == {}

    def test_payload_decode_error_records_key(self):
        """Test that the lookup key is kept in details."""
        error = PayloadDecodeError("bad blob", lookup_key="ShareKey")

        assert error.lookup_key == "ShareKey"
        assert error.details == {"lookup_key": "ShareKey"}

    def test_unrecognized_channel_argument(self):
        """Test the structured error for unknown feed names."""
        error = UnrecognizedChannelArgumentError(42)

        assert error.code == "NO_SUCH_ARGUMENT"
        assert error.argument == 42
        assert error.details == {"code": "NO_SUCH_ARGUMENT", "argument": "42"}
        assert "42" in error.message

    def test_method_not_implemented(self):
        """Test the error for unknown query methods."""
        error = MethodNotImplementedError("getLatest")

        assert error.method == "getLatest"
        assert "getLatest" in error.message

    def test_not_connected_is_store_error(self):
        """Test the not-connected error carries the operation."""
        error = HandoffStoreNotConnectedError("get_strings")

        assert isinstance(error, HandoffStoreError)
        assert error.operation == "get_strings"
        assert error.details == {"operation": "get_strings"}
        assert error.key is None
