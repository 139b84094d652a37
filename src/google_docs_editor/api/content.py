"""
Content tree parsing and text extraction.

The Docs API returns a document body as nested JSON: structural elements
(paragraphs, tables, section breaks) whose tables hold rows of cells that
themselves hold structural elements. These helpers turn that JSON into the
typed tree from google_docs_editor.types and flatten the tree back into
plain text.
"""

from google_docs_editor.types import (
    Block,
    Document,
    OpaqueBlock,
    Paragraph,
    Run,
    Table,
    TableCell,
)

TABLE_START_MARKER = "[TABLE]"
TABLE_END_MARKER = "[/TABLE]"
CELL_SEPARATOR = " | "


# --- Parsing ---
def parse_document(raw: dict) -> Document:
    """
    Build a Document from a documents().get() response.

    Args:
        raw: The document resource as returned by the Docs API

    Returns:
        Typed Document. A missing title becomes "Untitled".
    """
    body = raw.get("body", {})
    return Document(
        document_id=raw.get("documentId", ""),
        title=raw.get("title") or "Untitled",
        content=parse_content(body.get("content", [])),
    )


def parse_content(elements: list[dict]) -> list[Block]:
    """Parse a list of structural elements into blocks."""
    return [_parse_element(element) for element in elements or []]


def _parse_element(element: dict) -> Block:
    end_index = element.get("endIndex")

    if "paragraph" in element:
        paragraph = element["paragraph"] or {}
        style_name = paragraph.get("paragraphStyle", {}).get("namedStyleType")
        runs = [
            Run(text=pe["textRun"].get("content", ""), style_name=style_name)
            for pe in paragraph.get("elements", [])
            if pe.get("textRun") is not None
        ]
        return Paragraph(runs=runs, end_index=end_index)

    if "table" in element:
        table = element["table"] or {}
        rows = []
        for row in table.get("tableRows", []):
            rows.append(
                [
                    TableCell(content=parse_content(cell.get("content", [])))
                    for cell in row.get("tableCells", [])
                ]
            )
        return Table(rows=rows, end_index=end_index)

    kind = next((key for key in element if key not in ("startIndex", "endIndex")), "unknown")
    return OpaqueBlock(kind=kind, end_index=end_index)


# --- Extraction ---
def extract_text(blocks: list[Block]) -> str:
    """
    Flatten a content tree into plain text.

    Paragraph runs are concatenated as-is. Tables are rendered between
    [TABLE] / [/TABLE] marker lines, one line per row with cells joined
    by " | ".

    Args:
        blocks: Top-level blocks of the document

    Returns:
        The flattened text, stripped of surrounding whitespace
    """
    return _walk(blocks).strip()


def _walk(blocks: list[Block]) -> str:
    parts: list[str] = []
    for block in blocks:
        if isinstance(block, Paragraph):
            parts.append("".join(run.text for run in block.runs))
        elif isinstance(block, Table):
            parts.append(_render_table(block))
        elif isinstance(block, OpaqueBlock):
            continue
        else:
            raise TypeError(f"Unsupported block type: {type(block).__name__}")
    return "".join(parts)


def _render_table(table: Table) -> str:
    lines = [TABLE_START_MARKER]
    for row in table.rows:
        lines.append(CELL_SEPARATOR.join(_walk(cell.content).strip() for cell in row))
    lines.append(TABLE_END_MARKER)
    return "\n".join(lines) + "\n"
