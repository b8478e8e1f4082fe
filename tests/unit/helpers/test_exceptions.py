"""Unit tests for kodex.helpers.exceptions module.

Tests the exception hierarchy and the context each error carries.
"""

from pathlib import Path

import pytest

from kodex.helpers.exceptions import (
    ComponentParseError,
    ComponentsDirNotFoundError,
    ComponentStoreError,
    EmptyComponentStoreError,
    KodexError,
    OutputWriteError,
    SelectionCancelledError,
)


class TestComponentStoreErrors:
    """Tests for the load error family."""

    @pytest.mark.unit
    @pytest.mark.parametrize("error_cls", [ComponentsDirNotFoundError, EmptyComponentStoreError])
    def test_directory_errors_are_store_errors(self, error_cls) -> None:
        """Directory-level load errors should be catchable as ComponentStoreError."""
        error = error_cls("/tmp/components")
        assert isinstance(error, ComponentStoreError)
        assert isinstance(error, KodexError)
        assert error.path == Path("/tmp/components")

    @pytest.mark.unit
    def test_parse_error_names_the_file(self) -> None:
        """ComponentParseError message should identify the offending file."""
        error = ComponentParseError(Path("/lib/components/broken.json"), "expected a JSON object")
        assert "broken.json" in str(error)
        assert error.reason == "expected a JSON object"
        assert isinstance(error, ComponentStoreError)


class TestOtherErrors:
    """Tests for cancellation and write errors."""

    @pytest.mark.unit
    def test_cancellation_is_kodex_error(self) -> None:
        """SelectionCancelledError should be raisable and caught as KodexError."""
        with pytest.raises(KodexError):
            raise SelectionCancelledError("cancelled")

    @pytest.mark.unit
    def test_output_write_error_carries_path_and_reason(self) -> None:
        """OutputWriteError should keep the failing path for the user message."""
        error = OutputWriteError("dist/bundle.css", "Permission denied")
        assert error.path == Path("dist/bundle.css")
        assert error.reason == "Permission denied"
        assert "bundle.css" in str(error)
