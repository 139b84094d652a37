"""
Edit batch building for Google Docs batchUpdate.

Builders return ordered lists of edit operations. The backend applies the
members of one batch left to right, each against a coordinate space that
already reflects the earlier members, so a style or bullet operation that
follows an insertion is computed from the known insertion index.
"""

from google_docs_editor.types import (
    BULLET_PRESETS,
    DEFAULT_BULLET_PRESET,
    NAMED_STYLES,
    DeleteRange,
    EditOperation,
    InsertText,
    InvalidArgumentError,
    ReplaceAllText,
    SetBullets,
    SetParagraphStyle,
    TextRange,
)
from google_docs_editor.utils import utf16_len


# --- Builders ---
def build_append(text: str, insertion_index: int) -> list[EditOperation]:
    """Insert text at a resolved index."""
    return [InsertText(index=insertion_index, text=text)]


def build_heading(text: str, level: str, insertion_index: int) -> list[EditOperation]:
    """
    Insert a paragraph and give it a heading style in the same batch.

    Args:
        text: Heading text, without the trailing newline
        level: Named style type (HEADING_1 ... HEADING_6, TITLE, SUBTITLE, NORMAL_TEXT)
        insertion_index: Index the heading paragraph starts at

    Returns:
        [InsertText, SetParagraphStyle], the style range covering the text
        and its newline

    Raises:
        InvalidArgumentError: Empty text or unknown style
    """
    if not text:
        raise InvalidArgumentError("Heading text must not be empty.")
    if level not in NAMED_STYLES:
        raise InvalidArgumentError(
            f"Unknown heading level '{level}'. Expected one of: {', '.join(NAMED_STYLES)}."
        )

    text_with_newline = text + "\n"
    return [
        InsertText(index=insertion_index, text=text_with_newline),
        SetParagraphStyle(
            start_index=insertion_index,
            end_index=insertion_index + utf16_len(text_with_newline),
            style_name=level,
        ),
    ]


def build_bullet_list(
    items: list[str],
    insertion_index: int,
    preset: str = DEFAULT_BULLET_PRESET,
) -> list[EditOperation]:
    """
    Insert one paragraph per item and bullet them in the same batch.

    Raises:
        InvalidArgumentError: Empty item list or unknown preset
    """
    if not items:
        raise InvalidArgumentError("A bullet list needs at least one item.")
    if preset not in BULLET_PRESETS:
        raise InvalidArgumentError(f"Unknown bullet preset '{preset}'.")

    text = "\n".join(items) + "\n"
    return [
        InsertText(index=insertion_index, text=text),
        SetBullets(
            start_index=insertion_index,
            end_index=insertion_index + utf16_len(text),
            preset=preset,
        ),
    ]


def build_replace_all(
    match_text: str, replacement: str, case_sensitive: bool = True
) -> list[EditOperation]:
    """Replace every occurrence of match_text."""
    if not match_text:
        raise InvalidArgumentError("Text to find must not be empty.")
    return [
        ReplaceAllText(
            match_text=match_text,
            replacement=replacement,
            case_sensitive=case_sensitive,
        )
    ]


def build_clear(text_range: TextRange | None) -> list[EditOperation]:
    """Delete a range, or nothing when there is no range to clear."""
    if text_range is None:
        return []
    return build_delete(text_range.start_index, text_range.end_index)


def build_delete(start_index: int, end_index: int) -> list[EditOperation]:
    """Delete [start_index, end_index)."""
    if end_index <= start_index:
        raise InvalidArgumentError(
            "End index must be greater than start index for deletion."
        )
    return [DeleteRange(start_index=start_index, end_index=end_index)]


# --- Serialization ---
def to_request(op: EditOperation) -> dict:
    """
    Convert an edit operation into a Docs API request.

    Args:
        op: The operation to serialize

    Returns:
        Request dictionary for documents().batchUpdate
    """
    if isinstance(op, InsertText):
        return {"insertText": {"location": {"index": op.index}, "text": op.text}}

    if isinstance(op, DeleteRange):
        return {
            "deleteContentRange": {
                "range": {"startIndex": op.start_index, "endIndex": op.end_index}
            }
        }

    if isinstance(op, SetParagraphStyle):
        return {
            "updateParagraphStyle": {
                "range": {"startIndex": op.start_index, "endIndex": op.end_index},
                "paragraphStyle": {"namedStyleType": op.style_name},
                "fields": "namedStyleType",
            }
        }

    if isinstance(op, SetBullets):
        return {
            "createParagraphBullets": {
                "range": {"startIndex": op.start_index, "endIndex": op.end_index},
                "bulletPreset": op.preset,
            }
        }

    if isinstance(op, ReplaceAllText):
        return {
            "replaceAllText": {
                "containsText": {
                    "text": op.match_text,
                    "matchCase": op.case_sensitive,
                },
                "replaceText": op.replacement,
            }
        }

    raise TypeError(f"Unsupported edit operation: {type(op).__name__}")


def to_requests(ops: list[EditOperation]) -> list[dict]:
    """Serialize a batch, preserving order."""
    return [to_request(op) for op in ops]
