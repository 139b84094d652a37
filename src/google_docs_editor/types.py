"""
Type definitions for the Google Docs Editor MCP Server.

Covers the content tree read back from the Docs API, the edit operations
submitted to it, and the error taxonomy surfaced to MCP clients.
"""

from dataclasses import dataclass, field

from fastmcp.exceptions import ToolError


# --- Style Constants ---
HEADING_LEVELS = (
    "HEADING_1",
    "HEADING_2",
    "HEADING_3",
    "HEADING_4",
    "HEADING_5",
    "HEADING_6",
)

NAMED_STYLES = HEADING_LEVELS + ("TITLE", "SUBTITLE", "NORMAL_TEXT")

DEFAULT_BULLET_PRESET = "BULLET_DISC_CIRCLE_SQUARE"

BULLET_PRESETS = (
    "BULLET_DISC_CIRCLE_SQUARE",
    "BULLET_DIAMONDX_ARROW3D_SQUARE",
    "BULLET_CHECKBOX",
    "BULLET_ARROW_DIAMOND_DISC",
    "BULLET_STAR_CIRCLE_SQUARE",
    "NUMBERED_DECIMAL_ALPHA_ROMAN",
    "NUMBERED_DECIMAL_NESTED",
    "NUMBERED_UPPERALPHA_ALPHA_ROMAN",
    "NUMBERED_UPPERROMAN_UPPERALPHA_DECIMAL",
)


# --- Content Tree ---
@dataclass
class Run:
    """A contiguous span of text sharing one style."""

    text: str = ""
    style_name: str | None = None


@dataclass
class Paragraph:
    """A paragraph block made of text runs."""

    runs: list[Run] = field(default_factory=list)
    end_index: int | None = None


@dataclass
class TableCell:
    """A table cell; holds nested blocks."""

    content: list["Block"] = field(default_factory=list)


@dataclass
class Table:
    """A table block. Each row is an ordered list of cells."""

    rows: list[list[TableCell]] = field(default_factory=list)
    end_index: int | None = None


@dataclass
class OpaqueBlock:
    """A structural element that carries no extractable text (section break, TOC)."""

    kind: str = "unknown"
    end_index: int | None = None


Block = Paragraph | Table | OpaqueBlock


@dataclass
class Document:
    """A Google Document as read back from the Docs API."""

    document_id: str
    title: str = "Untitled"
    content: list[Block] = field(default_factory=list)


@dataclass
class TextRange:
    """Represents a range of text in a document."""

    start_index: int
    end_index: int


# --- Edit Operations ---
@dataclass
class InsertText:
    """Insert text at a specific index."""

    type: str = field(default="insert_text", init=False)
    index: int = 1
    text: str = ""


@dataclass
class DeleteRange:
    """Delete the content between two indices (end exclusive)."""

    type: str = field(default="delete_range", init=False)
    start_index: int = 1
    end_index: int = 1


@dataclass
class SetParagraphStyle:
    """Apply a named paragraph style (e.g. HEADING_1) to a range."""

    type: str = field(default="set_paragraph_style", init=False)
    start_index: int = 1
    end_index: int = 1
    style_name: str = "NORMAL_TEXT"


@dataclass
class SetBullets:
    """Turn the paragraphs of a range into a bulleted list."""

    type: str = field(default="set_bullets", init=False)
    start_index: int = 1
    end_index: int = 1
    preset: str = DEFAULT_BULLET_PRESET


@dataclass
class ReplaceAllText:
    """Find and replace every instance of a string."""

    type: str = field(default="replace_all_text", init=False)
    match_text: str = ""
    replacement: str = ""
    case_sensitive: bool = True


EditOperation = InsertText | DeleteRange | SetParagraphStyle | SetBullets | ReplaceAllText


@dataclass
class BatchResult:
    """Replies of one batchUpdate call, in request order."""

    replies: list[dict] = field(default_factory=list)

    def occurrences_changed(self) -> int:
        """Total occurrences changed by the replaceAllText replies of the batch."""
        total = 0
        for reply in self.replies:
            if reply and "replaceAllText" in reply:
                total += reply["replaceAllText"].get("occurrencesChanged", 0)
        return total


# --- Errors ---
class DocsEditorError(ToolError):
    """Base class for errors raised by the document editor."""


class DocumentNotFoundError(DocsEditorError):
    """Raised when the document ID is unknown to the backend."""

    def __init__(self, document_id: str):
        super().__init__(f"Document not found (ID: {document_id}). Check the ID.")
        self.document_id = document_id


class InvalidArgumentError(DocsEditorError):
    """Raised when an operation is called with arguments it cannot act on."""


class BackendRejectedError(DocsEditorError):
    """Raised when the Docs API rejects a read or a batch."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status
