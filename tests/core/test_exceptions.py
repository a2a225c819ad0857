"""Tests for core exceptions.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

from skychart.core.exceptions import (
    ConstellationError,
    ConstellationNotFoundError,
    InvalidSizeError,
    QueryError,
    ScanError,
    SkyChartError,
    classify_error,
)

__all__ = ()


class TestSkyChartError:
    """Tests for the base SkyChartError."""

    def test_basic_creation(self) -> None:
        """Error should be created with message."""
        error = SkyChartError("Test error")

        assert str(error) == "Test error"
        assert error.context == {}
        assert error.recoverable

    def test_inheritance(self) -> None:
        """Should inherit from Exception."""
        error = SkyChartError("Test")

        assert isinstance(error, Exception)


class TestInvalidSizeError:
    """Tests for InvalidSizeError."""

    def test_message_lists_valid_sizes(self) -> None:
        """Message should name the length and the valid sizes."""
        error = InvalidSizeError(7, [2, 6])

        assert str(error) == "A vector with length 7 is not valid. Valid sizes: 2, 6"
        assert error.length == 7
        assert error.valid_sizes == (2, 6)

    def test_not_recoverable(self) -> None:
        """Retrying with the same vector cannot succeed."""
        error = InvalidSizeError(7, [2])

        assert not error.recoverable
        assert isinstance(error, ConstellationError)


class TestConstellationNotFoundError:
    """Tests for ConstellationNotFoundError."""

    def test_creation(self) -> None:
        """Error should include name and length."""
        error = ConstellationNotFoundError("stars", 6)

        assert str(error) == "A constellation with the name stars and size 6 does not exist."
        assert error.context == {"name": "stars", "length": 6}

    def test_inheritance(self) -> None:
        """Should inherit from SkyChartError."""
        assert isinstance(ConstellationNotFoundError("x", 2), SkyChartError)


class TestScanError:
    """Tests for ScanError."""

    def test_records_cause(self) -> None:
        """The original exception is kept for inspection."""
        cause = RuntimeError("boom")
        error = ScanError("boom", cause=cause)

        assert error.cause is cause
        assert error.context["cause_type"] == "RuntimeError"
        assert isinstance(error, QueryError)


class TestClassifyError:
    """Tests for classify_error."""

    def test_invalid_size_aborts(self) -> None:
        assert classify_error(InvalidSizeError(3, [2])) == ("fatal", "abort")

    def test_not_found_skips(self) -> None:
        assert classify_error(ConstellationNotFoundError("x", 2)) == ("fatal", "skip")

    def test_scan_error_retries(self) -> None:
        assert classify_error(ScanError("boom")) == ("recoverable", "retry")

    def test_foreign_error_is_transient(self) -> None:
        assert classify_error(ValueError("x")) == ("transient", "retry")
