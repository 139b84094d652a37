"""
Document operations for the Google Docs Editor MCP Server.

DocumentEditor reads and mutates existing documents. Operations that
depend on where the document ends re-read it first and submit one batch;
nothing is cached between calls, so concurrent callers editing the same
document must serialize themselves.
"""

from google_docs_editor.api import batch, indexes
from google_docs_editor.api.backend import DocsBackend
from google_docs_editor.api.content import extract_text
from google_docs_editor.auth import get_docs_client
from google_docs_editor.types import DEFAULT_BULLET_PRESET
from google_docs_editor.utils import log


class DocumentEditor:
    """Index-aware edit operations on top of a DocsBackend."""

    def __init__(self, backend: DocsBackend):
        self.backend = backend

    def read_text(self, document_id: str) -> tuple[str, str]:
        """Return the document's title and its flattened text."""
        document = self.backend.get_document(document_id)
        return document.title, extract_text(document.content)

    def append(self, document_id: str, text: str) -> None:
        """Append text before the document's trailing newline. Empty text is a no-op."""
        if not text:
            return

        document = self.backend.get_document(document_id)
        index = indexes.append_insertion_index(document.content)
        log(f"Appending {len(text)} character(s) to doc {document_id} at index {index}")
        self.backend.submit_edits(document_id, batch.build_append(text, index))

    def insert_at(self, document_id: str, text: str, index: int) -> None:
        """
        Insert text at a caller-supplied index.

        The index is not re-derived from the document; an out-of-range
        index is rejected by the backend.
        """
        if not text:
            return

        indexes.validate_insertion_index(index)
        self.backend.submit_edits(document_id, batch.build_append(text, index))

    def replace_all(
        self,
        document_id: str,
        find_text: str,
        replace_text: str,
        case_sensitive: bool = True,
    ) -> int:
        """Replace every occurrence of find_text and return how many changed."""
        result = self.backend.submit_edits(
            document_id,
            batch.build_replace_all(find_text, replace_text, case_sensitive),
        )
        return result.occurrences_changed()

    def clear(self, document_id: str) -> None:
        """Delete all content. A document that is already empty is left untouched."""
        document = self.backend.get_document(document_id)
        ops = batch.build_clear(indexes.clearable_range(document.content))
        if not ops:
            log(f"Doc {document_id} is already empty; nothing to clear")
            return
        self.backend.submit_edits(document_id, ops)

    def update(self, document_id: str, text: str) -> None:
        """
        Replace the whole content of the document with text.

        This is two round trips, clear then append. If the append fails the
        document stays cleared and the error is raised to the caller.
        """
        self.clear(document_id)
        if not text:
            return
        try:
            self.append(document_id, text)
        except Exception as e:
            log(
                f"Doc {document_id} was cleared but repopulating it failed; "
                f"the document is now empty: {e}"
            )
            raise

    def add_heading(self, document_id: str, text: str, level: str = "HEADING_1") -> None:
        """Append a heading paragraph; text and style land in one batch."""
        document = self.backend.get_document(document_id)
        index = indexes.append_insertion_index(document.content)
        self.backend.submit_edits(document_id, batch.build_heading(text, level, index))

    def add_bullet_list(
        self,
        document_id: str,
        items: list[str],
        preset: str = DEFAULT_BULLET_PRESET,
    ) -> None:
        """Append a bulleted list, one paragraph per item. No items is a no-op."""
        if not items:
            return

        document = self.backend.get_document(document_id)
        index = indexes.append_insertion_index(document.content)
        self.backend.submit_edits(
            document_id, batch.build_bullet_list(items, index, preset)
        )

    def delete_range(self, document_id: str, start_index: int, end_index: int) -> None:
        """Delete content in [start_index, end_index)."""
        indexes.validate_insertion_index(start_index)
        self.backend.submit_edits(document_id, batch.build_delete(start_index, end_index))


_editor: DocumentEditor | None = None


def get_editor() -> DocumentEditor:
    """Get the process-wide editor bound to the authorized Docs client."""
    global _editor

    if _editor is None:
        _editor = DocumentEditor(DocsBackend(get_docs_client()))
    return _editor
