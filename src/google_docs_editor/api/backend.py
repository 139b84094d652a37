"""
Docs API transport: one atomic document read and one atomic batched write.

Failures are mapped onto the editor's error taxonomy and passed on
unchanged; nothing here retries.
"""

from googleapiclient.errors import HttpError

from google_docs_editor.api import batch
from google_docs_editor.api.content import parse_document
from google_docs_editor.types import (
    BackendRejectedError,
    BatchResult,
    Document,
    DocumentNotFoundError,
    EditOperation,
)
from google_docs_editor.utils import log

MAX_BATCH_UPDATE_REQUESTS = 50


def _http_status(error: Exception) -> int | None:
    if isinstance(error, HttpError):
        return error.resp.status
    return None


def _translate_error(error: Exception, document_id: str, action: str) -> Exception:
    status = _http_status(error)
    if status == 404:
        return DocumentNotFoundError(document_id)
    if status == 403:
        return BackendRejectedError(
            f"Permission denied for document (ID: {document_id}). "
            f"Ensure the authenticated user has edit access.",
            status=status,
        )
    return BackendRejectedError(
        f"Google Docs API rejected {action} for document {document_id}: {error}",
        status=status,
    )


class DocsBackend:
    """Thin wrapper over a googleapiclient Docs v1 resource."""

    def __init__(self, docs):
        self.docs = docs

    def get_document(self, document_id: str) -> Document:
        """
        Read the current structure of a document.

        Raises:
            DocumentNotFoundError: Unknown document ID
            BackendRejectedError: Any other API failure
        """
        log(f"Reading Google Doc: {document_id}")
        try:
            raw = self.docs.documents().get(documentId=document_id).execute()
        except Exception as e:
            log(f"Google API get Error for doc {document_id}: {e}")
            raise _translate_error(e, document_id, "the read") from e

        if not raw or not raw.get("documentId"):
            raise DocumentNotFoundError(document_id)
        return parse_document(raw)

    def submit_edits(self, document_id: str, ops: list[EditOperation]) -> BatchResult:
        """
        Apply an ordered list of edits atomically.

        Args:
            document_id: The document ID
            ops: Edit operations, applied by the backend in list order

        Returns:
            BatchResult holding the per-operation replies

        Raises:
            DocumentNotFoundError: Unknown document ID
            BackendRejectedError: Invalid or stale index/range, permission or transport failure
        """
        if not ops:
            return BatchResult()

        requests = batch.to_requests(ops)
        if len(requests) > MAX_BATCH_UPDATE_REQUESTS:
            log(
                f"Attempting batch update with {len(requests)} requests, "
                f"exceeding typical limits. May fail."
            )

        log(
            f"Submitting {len(requests)} edit(s) to doc {document_id}: "
            f"{', '.join(op.type for op in ops)}"
        )
        try:
            response = (
                self.docs.documents()
                .batchUpdate(documentId=document_id, body={"requests": requests})
                .execute()
            )
        except Exception as e:
            log(f"Google API batchUpdate Error for doc {document_id}: {e}")
            raise _translate_error(e, document_id, "the batch update") from e

        return BatchResult(replies=(response or {}).get("replies", []))
