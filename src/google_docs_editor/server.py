"""
Google Docs Editor MCP Server

Main MCP server entry point with all tool definitions.
Uses FastMCP framework for MCP protocol implementation.

IMPORTANT: All logging must use stderr, never stdout.
The MCP protocol uses stdout for JSON-RPC communication.
"""

from typing import Annotated

from fastmcp import FastMCP

from google_docs_editor.api import drive
from google_docs_editor.api.documents import get_editor
from google_docs_editor.auth import get_drive_client
from google_docs_editor.types import BULLET_PRESETS, DEFAULT_BULLET_PRESET
from google_docs_editor.utils import log


mcp = FastMCP(
    name="Google Docs Editor MCP Server",
    instructions="""
    This MCP server provides tools for reading, creating, editing and exporting
    Google Documents.

    Key capabilities:
    - Create new Google Documents, optionally with initial text
    - Read document content as plain text (tables rendered as [TABLE] blocks)
    - Append, insert, replace, delete and clear text
    - Add headings and bulleted lists at the end of a document
    - Export documents as PDF, DOCX, text, HTML or Markdown

    Document indexing uses 1-based positions (index 1 is start of document).
    update_document clears the document and then appends the new text; if the
    second step fails the document is left empty.
    """,
)


# === READ TOOLS ===


@mcp.tool(annotations={"readOnlyHint": True})
def read_document(
    document_id: Annotated[str, "The ID of the Google Document (from the URL)"],
) -> str:
    """
    Read the title and plain-text content of a Google Document.
    """
    title, content = get_editor().read_text(document_id)
    if not content:
        return f"Title: {title}\n\nDocument found, but appears empty."
    return f"Title: {title}\n\n{content}"


@mcp.tool(annotations={"readOnlyHint": True})
def export_document(
    document_id: Annotated[str, "The ID of the Google Document"],
    format: Annotated[
        str,
        "Export format: 'pdf', 'docx' (returned base64-encoded), 'txt', 'html' or 'markdown'",
    ] = "pdf",
) -> str:
    """
    Export a Google Document in another format.
    """
    data = drive.export_document(get_drive_client(), document_id, format)
    if format in drive.TEXT_EXPORT_FORMATS:
        return data
    return f"Exported document {document_id} as {format} (base64):\n{data}"


# === EDIT TOOLS ===


@mcp.tool()
def create_document(
    title: Annotated[str, "Title for the new document"],
    content: Annotated[str | None, "Optional initial text content"] = None,
    parent_folder_id: Annotated[
        str | None, "ID of the parent folder. If not specified, creates in root."
    ] = None,
) -> str:
    """
    Create a new Google Document, optionally filled with initial text.
    """
    created = drive.create_document(
        get_drive_client(), get_editor(), title, content, parent_folder_id
    )
    return (
        f"Successfully created Google Document \"{created['name']}\"\n"
        f"ID: {created['id']}\n"
        f"Link: {created['webViewLink']}"
    )


@mcp.tool()
def append_to_document(
    document_id: Annotated[str, "The ID of the Google Document"],
    text: Annotated[str, "The text to add to the end of the document"],
) -> str:
    """
    Append text to the very end of a Google Document.
    """
    get_editor().append(document_id, text)
    return f"Text appended to document {document_id}."


@mcp.tool()
def insert_text(
    document_id: Annotated[str, "The ID of the Google Document"],
    text: Annotated[str, "The text to insert"],
    index: Annotated[int, "The index (1-based) where the text should be inserted"],
) -> str:
    """
    Insert text at a specific index within a document.
    """
    get_editor().insert_at(document_id, text, index)
    return f"Successfully inserted text at index {index}."


@mcp.tool()
def replace_in_document(
    document_id: Annotated[str, "The ID of the Google Document"],
    search_text: Annotated[str, "The text to find"],
    replace_text: Annotated[str, "The text to replace it with"],
    match_case: Annotated[bool, "Whether to match case when finding"] = True,
) -> str:
    """
    Find and replace all instances of text in the document.
    """
    count = get_editor().replace_all(document_id, search_text, replace_text, match_case)
    return f"Replaced {count} occurrence(s) in document {document_id}."


@mcp.tool(annotations={"destructiveHint": True})
def delete_range(
    document_id: Annotated[str, "The ID of the Google Document"],
    start_index: Annotated[int, "Starting index of the range (inclusive, 1-based)"],
    end_index: Annotated[int, "Ending index of the range (exclusive)"],
) -> str:
    """
    Delete content within a specified range.
    """
    get_editor().delete_range(document_id, start_index, end_index)
    return f"Successfully deleted content in range {start_index}-{end_index}."


@mcp.tool(annotations={"destructiveHint": True})
def clear_document(
    document_id: Annotated[str, "The ID of the Google Document"],
) -> str:
    """
    Delete all content from a Google Document.
    """
    get_editor().clear(document_id)
    return f"Document {document_id} cleared."


@mcp.tool(annotations={"destructiveHint": True})
def update_document(
    document_id: Annotated[str, "The ID of the Google Document"],
    content: Annotated[str, "The new content that replaces everything in the document"],
) -> str:
    """
    Replace the entire content of a Google Document.

    Not atomic: the document is cleared first, then the new content is appended.
    """
    get_editor().update(document_id, content)
    return f"Document {document_id} updated successfully."


@mcp.tool()
def add_heading(
    document_id: Annotated[str, "The ID of the Google Document"],
    text: Annotated[str, "The heading text"],
    level: Annotated[
        str, "Heading level: 'HEADING_1' through 'HEADING_6', 'TITLE' or 'SUBTITLE'"
    ] = "HEADING_1",
) -> str:
    """
    Add a heading at the end of a Google Document.
    """
    get_editor().add_heading(document_id, text, level)
    return f"Heading added to document {document_id}."


@mcp.tool()
def add_bullet_list(
    document_id: Annotated[str, "The ID of the Google Document"],
    items: Annotated[list[str], "The list items, one paragraph each"],
    preset: Annotated[
        str, f"Bullet style preset, one of: {', '.join(BULLET_PRESETS)}"
    ] = DEFAULT_BULLET_PRESET,
) -> str:
    """
    Add a bulleted list at the end of a Google Document.
    """
    get_editor().add_bullet_list(document_id, items, preset)
    if not items:
        return "No items given; nothing was added."
    return f"Bullet list added to document {document_id}."


def main() -> None:
    """Run the Google Docs Editor MCP Server."""
    log("Starting Google Docs Editor MCP Server...")
    mcp.run()


if __name__ == "__main__":
    main()
