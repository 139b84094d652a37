"""
Google Drive operations for the Google Docs Editor MCP Server.

Creates new Google Docs and exports existing ones through the Drive API.
"""

import base64
from typing import Any

from googleapiclient.errors import HttpError

from google_docs_editor.api.documents import DocumentEditor
from google_docs_editor.types import (
    BackendRejectedError,
    DocumentNotFoundError,
    InvalidArgumentError,
)
from google_docs_editor.utils import log

DOCS_MIME_TYPE = "application/vnd.google-apps.document"

EXPORT_MIME_TYPES = {
    "pdf": "application/pdf",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "txt": "text/plain",
    "html": "text/html",
    "markdown": "text/markdown",
}

TEXT_EXPORT_FORMATS = ("txt", "html", "markdown")


def create_document(
    drive,
    editor: DocumentEditor,
    title: str,
    content: str | None = None,
    parent_folder_id: str | None = None,
) -> dict:
    """
    Create a new Google Document, optionally with initial content.

    Args:
        drive: Google Drive API client
        editor: Editor used to append the initial content
        title: Title for the new document
        content: Optional text appended after creation
        parent_folder_id: Optional parent folder ID (None for root)

    Returns:
        Dictionary with the new file's id, name and webViewLink

    Raises:
        InvalidArgumentError: Empty title
        BackendRejectedError: Drive refused the creation
    """
    if not title:
        raise InvalidArgumentError("Document title is required.")

    log(f'Creating new Google Doc: "{title}"')
    metadata: dict[str, Any] = {"name": title, "mimeType": DOCS_MIME_TYPE}
    if parent_folder_id:
        metadata["parents"] = [parent_folder_id]

    try:
        response = (
            drive.files()
            .create(body=metadata, fields="id,name,webViewLink")
            .execute()
        )
    except HttpError as e:
        log(f"Error creating Google Doc: {e}")
        if e.resp.status == 404:
            raise BackendRejectedError(
                "Parent folder not found. Check the parent folder ID.", status=404
            ) from e
        raise BackendRejectedError(
            f"Failed to create document: {e}", status=e.resp.status
        ) from e

    if content and response.get("id"):
        editor.append(response["id"], content)

    return {
        "id": response.get("id"),
        "name": response.get("name"),
        "webViewLink": response.get("webViewLink"),
    }


def export_document(drive, document_id: str, format: str = "pdf") -> str:
    """
    Export a Google Document through Drive.

    Args:
        drive: Google Drive API client
        document_id: The ID of the Google Document
        format: One of pdf, docx, txt, html, markdown

    Returns:
        Decoded text for txt/html/markdown, base64 for pdf/docx

    Raises:
        InvalidArgumentError: Unsupported format
        DocumentNotFoundError: Unknown document ID
        BackendRejectedError: Any other API failure
    """
    mime_type = EXPORT_MIME_TYPES.get(format)
    if not mime_type:
        raise InvalidArgumentError(
            f"Unsupported export format '{format}'. "
            f"Expected one of: {', '.join(EXPORT_MIME_TYPES)}."
        )

    log(f"Exporting doc {document_id} as {format}")
    try:
        data = drive.files().export(fileId=document_id, mimeType=mime_type).execute()
    except HttpError as e:
        log(f"Error exporting doc {document_id}: {e}")
        if e.resp.status == 404:
            raise DocumentNotFoundError(document_id) from e
        raise BackendRejectedError(
            f"Failed to export document: {e}", status=e.resp.status
        ) from e

    if isinstance(data, str):
        data = data.encode("utf-8")

    if format in TEXT_EXPORT_FORMATS:
        return data.decode("utf-8")
    return base64.b64encode(data).decode("ascii")
