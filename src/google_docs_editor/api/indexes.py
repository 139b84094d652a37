"""
Index arithmetic over a document's flat coordinate space.

Document content occupies indices starting at 1. The last top-level block
ends with an implicit trailing newline that is counted in its endIndex, so
the last position text can be inserted at is one before that endIndex.
"""

from google_docs_editor.types import Block, InvalidArgumentError, TextRange

# Index 0 is never addressable; content starts at 1.
CONTENT_START_INDEX = 1


def end_of_document_index(blocks: list[Block]) -> int:
    """Return the endIndex of the last top-level block, or 1 for an empty tree."""
    if not blocks:
        return CONTENT_START_INDEX
    return blocks[-1].end_index or CONTENT_START_INDEX


def append_insertion_index(blocks: list[Block]) -> int:
    """
    Return the index at which appended text lands before the trailing terminator.

    Never lower than the start of content, even for an empty tree.
    """
    return max(end_of_document_index(blocks) - 1, CONTENT_START_INDEX)


def clearable_range(blocks: list[Block]) -> TextRange | None:
    """
    Return the range that deleting all content would cover.

    Returns None when there is nothing to delete; the backend rejects
    empty deletion ranges.
    """
    end_index = end_of_document_index(blocks)
    if end_index - 1 <= CONTENT_START_INDEX:
        return None
    return TextRange(start_index=CONTENT_START_INDEX, end_index=end_index - 1)


def validate_insertion_index(index: int) -> int:
    """Reject indices before the start of content; return the index unchanged otherwise."""
    if index < CONTENT_START_INDEX:
        raise InvalidArgumentError(
            f"Index {index} is out of range; document content starts at index "
            f"{CONTENT_START_INDEX}."
        )
    return index
