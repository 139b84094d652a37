"""
Pytest configuration and fixtures for Google Docs Editor MCP Server tests.
"""

import pytest
from unittest.mock import MagicMock

from googleapiclient.errors import HttpError


def make_http_error(status: int, message: bytes = b"error") -> HttpError:
    """Build a googleapiclient HttpError carrying the given status."""
    resp = MagicMock()
    resp.status = status
    resp.reason = "Error"
    return HttpError(resp, message)


def paragraph(text: str, start_index: int, named_style: str = "NORMAL_TEXT") -> dict:
    """A paragraph structural element in Docs API shape."""
    end_index = start_index + len(text)
    return {
        "startIndex": start_index,
        "endIndex": end_index,
        "paragraph": {
            "elements": [
                {
                    "startIndex": start_index,
                    "endIndex": end_index,
                    "textRun": {"content": text},
                }
            ],
            "paragraphStyle": {"namedStyleType": named_style},
        },
    }


def table(rows: list[list[str]], start_index: int = 1, end_index: int = 40) -> dict:
    """A table structural element whose cells each hold one paragraph."""
    return {
        "startIndex": start_index,
        "endIndex": end_index,
        "table": {
            "rows": len(rows),
            "columns": len(rows[0]) if rows else 0,
            "tableRows": [
                {
                    "tableCells": [
                        {"content": [paragraph(cell + "\n", start_index)]}
                        for cell in row
                    ]
                }
                for row in rows
            ],
        },
    }


def document(content: list[dict], title: str = "Test Doc", document_id: str = "doc123") -> dict:
    """A documents().get() response."""
    return {"documentId": document_id, "title": title, "body": {"content": content}}


@pytest.fixture
def mock_docs_client():
    """
    Provide a mock Google Docs API client.
    """
    return MagicMock()


@pytest.fixture
def mock_drive_client():
    """
    Provide a mock Google Drive API client.
    """
    return MagicMock()


@pytest.fixture
def sample_document():
    """
    Provide a document with a section break, one sentence and the trailing newline.
    """
    return document(
        [
            {"endIndex": 1, "sectionBreak": {}},
            paragraph("This is a test sentence.\n", 1),
        ]
    )


@pytest.fixture
def empty_document():
    """
    Provide a freshly created document: a section break and an empty paragraph.
    """
    return document(
        [
            {"endIndex": 1, "sectionBreak": {}},
            paragraph("\n", 1),
        ]
    )
