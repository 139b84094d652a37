"""
Tests for shared types and utilities.
"""

from fastmcp.exceptions import ToolError

from google_docs_editor.types import (
    BackendRejectedError,
    BatchResult,
    DocumentNotFoundError,
    InvalidArgumentError,
)
from google_docs_editor.utils import utf16_len


class TestBatchResult:
    """Tests for reading batch replies."""

    def test_occurrences_changed(self):
        """Should sum replaceAllText replies and ignore the rest."""
        result = BatchResult(
            replies=[{}, {"replaceAllText": {"occurrencesChanged": 3}}, {}]
        )

        assert result.occurrences_changed() == 3

    def test_no_replies(self):
        """Should default to zero."""
        assert BatchResult().occurrences_changed() == 0
        assert BatchResult(replies=[{"replaceAllText": {}}]).occurrences_changed() == 0


class TestErrors:
    """Tests for the error taxonomy."""

    def test_errors_are_tool_errors(self):
        """FastMCP reports ToolError messages to the client verbatim."""
        assert isinstance(DocumentNotFoundError("d1"), ToolError)
        assert isinstance(InvalidArgumentError("bad"), ToolError)
        assert isinstance(BackendRejectedError("no", status=400), ToolError)

    def test_not_found_message_names_document(self):
        """Should include the document ID in the message."""
        assert "d1" in str(DocumentNotFoundError("d1"))


class TestUtf16Len:
    """Tests for UTF-16 length, the unit of document indices."""

    def test_ascii(self):
        """ASCII characters count once."""
        assert utf16_len("Hello\n") == 6

    def test_astral_characters_count_twice(self):
        """Characters outside the BMP are surrogate pairs."""
        assert utf16_len("\U0001F600") == 2
        assert utf16_len("é") == 1
